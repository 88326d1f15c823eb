"""Match and match score data classes."""

# American Format
# Copyright (C) 2025  American Format developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from americanformat.constants import (
    MATCH_STATUS_COMPLETED,
    MATCH_STATUS_IN_PROGRESS,
    MATCH_STATUS_PENDING,
)
from americanformat.exceptions import InvalidMatchDataException, InvalidMatchException
from americanformat.type_hints import PlayerName, Points, Team


class MatchStatus(Enum):
    """Lifecycle state of a scheduled match."""

    PENDING = MATCH_STATUS_PENDING
    IN_PROGRESS = MATCH_STATUS_IN_PROGRESS
    COMPLETED = MATCH_STATUS_COMPLETED


@dataclass(frozen=True)
class ValidatedMatchScore:
    """A submitted score together with the outcome of validating it.

    Attributes
    ----------
    team1_score : int
        Points scored by the first team.
    team2_score : int
        Points scored by the second team.
    total_points : int
        Sum of both scores.
    is_valid : bool
        True only if ``validation_errors`` is empty.
    validation_errors : tuple of str
        Every problem found with the submission.
    """

    team1_score: Points
    team2_score: Points
    total_points: Points
    is_valid: bool
    validation_errors: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize score to dictionary."""
        return {
            "team1Score": self.team1_score,
            "team2Score": self.team2_score,
            "totalPoints": self.total_points,
            "isValid": self.is_valid,
            "validationErrors": list(self.validation_errors),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidatedMatchScore":
        """Deserialize score from dictionary."""
        try:
            team1_score = data["team1Score"]
            team2_score = data["team2Score"]
        except (KeyError, TypeError) as e:
            raise InvalidMatchDataException(f"Score is missing {e}") from e
        return cls(
            team1_score=team1_score,
            team2_score=team2_score,
            total_points=data.get("totalPoints", team1_score + team2_score),
            is_valid=bool(data.get("isValid", False)),
            validation_errors=tuple(data.get("validationErrors", ())),
        )


def _as_team(value: Any, label: str) -> Team:
    team = tuple(value)
    if len(team) != 2:
        raise InvalidMatchException(f"{label} must have exactly 2 players, got {team}")
    return team


@dataclass(frozen=True)
class Match:
    """One 2-vs-2 match of the schedule.

    Matches are immutable; recording a score creates a new match through
    :meth:`with_score`.
    """

    court: int
    team1: Team
    team2: Team
    round_number: int
    game_number: int
    status: MatchStatus = MatchStatus.PENDING
    score: Optional[ValidatedMatchScore] = None

    def __post_init__(self):
        object.__setattr__(self, "team1", _as_team(self.team1, "team1"))
        object.__setattr__(self, "team2", _as_team(self.team2, "team2"))
        if len(set(self.players)) != 4:
            raise InvalidMatchException(
                f"Game {self.game_number}: match players must be distinct, "
                f"got {self.team1} vs {self.team2}"
            )

    @property
    def players(self) -> Tuple[PlayerName, ...]:
        """All four players, team1 first."""
        return self.team1 + self.team2

    @property
    def has_valid_score(self) -> bool:
        return self.score is not None and self.score.is_valid

    def with_score(self, score: ValidatedMatchScore) -> "Match":
        """Return a completed copy of this match carrying ``score``."""
        return replace(self, score=score, status=MatchStatus.COMPLETED)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        data = {
            "court": self.court,
            "team1": list(self.team1),
            "team2": list(self.team2),
            "round": self.round_number,
            "gameNumber": self.game_number,
            "status": self.status.value,
        }
        if self.score is not None:
            data["score"] = self.score.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary.

        Raises:
            InvalidMatchDataException: If required keys are missing or the
                status is not a known value
            InvalidMatchException: If the teams are malformed
        """
        try:
            status = MatchStatus(data.get("status", MATCH_STATUS_PENDING))
        except ValueError as e:
            raise InvalidMatchDataException(
                f"Unknown match status: {data.get('status')!r}"
            ) from e
        score_data = data.get("score")
        try:
            return cls(
                court=int(data["court"]),
                team1=data["team1"],
                team2=data["team2"],
                round_number=int(data["round"]),
                game_number=int(data["gameNumber"]),
                status=status,
                score=(
                    ValidatedMatchScore.from_dict(score_data)
                    if score_data is not None
                    else None
                ),
            )
        except KeyError as e:
            raise InvalidMatchDataException(f"Match is missing {e}") from e
