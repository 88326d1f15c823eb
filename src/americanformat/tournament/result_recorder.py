"""Recording match scores into a schedule."""

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
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from americanformat.constants import DEFAULT_POINTS_PER_MATCH
from americanformat.exceptions import InvalidMatchDataException, MatchNotFoundException
from americanformat.models.tournament import (
    Match,
    MatchStatus,
    Round,
    ValidatedMatchScore,
)
from americanformat.type_hints import Points
from americanformat.utils import setup_logger
from americanformat.utils.validation import validate_match_score

logger = setup_logger(__name__)


@dataclass(frozen=True)
class ScoreSubmission:
    """A score entered for one game of the schedule."""

    game_number: int
    team1_score: Points
    team2_score: Points

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreSubmission":
        """Deserialize submission from dictionary."""
        try:
            return cls(
                game_number=int(data["gameNumber"]),
                team1_score=data["team1Score"],
                team2_score=data["team2Score"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidMatchDataException(f"Malformed score submission: {data!r}") from e


def find_match(rounds: Sequence[Round], game_number: int) -> Tuple[int, Match]:
    """Locate a game in the schedule.

    Returns:
        Tuple of (index of its round in ``rounds``, the match)

    Raises:
        MatchNotFoundException: If no match has ``game_number``
    """
    for index, round_data in enumerate(rounds):
        for match in round_data.matches:
            if match.game_number == game_number:
                return index, match
    raise MatchNotFoundException(f"Game {game_number} is not in the schedule")


def _with_match(rounds: Sequence[Round], index: int, match: Match) -> Tuple[Round, ...]:
    updated = list(rounds)
    updated[index] = rounds[index].replace_match(match)
    return tuple(updated)


class ResultRecorder:
    """Applies score submissions to a schedule.

    The recorder never changes the rounds it is given: every method returns
    a new tuple of rounds in which only the affected match is replaced.
    """

    def __init__(self, points_per_match: int = DEFAULT_POINTS_PER_MATCH):
        self.points_per_match = points_per_match

    def record_match_score(
        self,
        rounds: Sequence[Round],
        game_number: int,
        team1_score: Points,
        team2_score: Points,
    ) -> Tuple[Tuple[Round, ...], ValidatedMatchScore]:
        """Record the score of one game.

        An invalid score leaves the schedule as it was; the returned score
        carries the validation errors to show.

        Returns:
            Tuple of (rounds, validated score)

        Raises:
            MatchNotFoundException: If ``game_number`` is not scheduled
        """
        index, match = find_match(rounds, game_number)
        score = validate_match_score(team1_score, team2_score, self.points_per_match)

        if not score.is_valid:
            logger.warning(
                "Rejected score %s-%s for game %d: %s",
                team1_score,
                team2_score,
                game_number,
                "; ".join(score.validation_errors),
            )
            return tuple(rounds), score

        if match.has_valid_score:
            logger.warning(
                "Game %d already had score %s-%s, replacing it",
                game_number,
                match.score.team1_score,
                match.score.team2_score,
            )

        logger.debug("Recorded %s-%s for game %d", team1_score, team2_score, game_number)
        return _with_match(rounds, index, match.with_score(score)), score

    def record_submissions(
        self, rounds: Sequence[Round], submissions: Iterable[ScoreSubmission]
    ) -> Tuple[Tuple[Round, ...], List[ValidatedMatchScore]]:
        """Record several submissions in order.

        Returns:
            Tuple of (rounds after all valid submissions, one validated
            score per submission)

        Raises:
            MatchNotFoundException: If a submission names an unknown game
        """
        current = tuple(rounds)
        scores: List[ValidatedMatchScore] = []
        for submission in submissions:
            current, score = self.record_match_score(
                current,
                submission.game_number,
                submission.team1_score,
                submission.team2_score,
            )
            scores.append(score)
        return current, scores

    def clear_match_score(
        self, rounds: Sequence[Round], game_number: int
    ) -> Tuple[Round, ...]:
        """Undo the result of one game, putting it back to pending.

        Raises:
            MatchNotFoundException: If ``game_number`` is not scheduled
        """
        index, match = find_match(rounds, game_number)
        if match.score is None:
            logger.warning("Game %d has no score to clear", game_number)
            return tuple(rounds)
        cleared = replace(match, score=None, status=MatchStatus.PENDING)
        logger.info("Cleared result of game %d", game_number)
        return _with_match(rounds, index, cleared)


def record_match_score(
    rounds: Sequence[Round],
    game_number: int,
    team1_score: Points,
    team2_score: Points,
    points_per_match: int = DEFAULT_POINTS_PER_MATCH,
) -> Tuple[Tuple[Round, ...], ValidatedMatchScore]:
    """Record one score with a throwaway :class:`ResultRecorder`."""
    return ResultRecorder(points_per_match).record_match_score(
        rounds, game_number, team1_score, team2_score
    )
