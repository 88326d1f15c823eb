"""Data model for tournament round."""

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

from americanformat.exceptions import InvalidMatchDataException
from americanformat.models.tournament.match import Match
from americanformat.type_hints import PlayerName


@dataclass(frozen=True)
class Round:
    """Container for all matches of a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    matches : tuple of Match
        Matches in court order.
    """

    round_number: int
    matches: Tuple[Match, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "matches", tuple(self.matches))

    @property
    def players(self) -> List[PlayerName]:
        """Players of the round in court order, team1 before team2."""
        return [player for match in self.matches for player in match.players]

    @property
    def is_completed(self) -> bool:
        return bool(self.matches) and all(m.has_valid_score for m in self.matches)

    def replace_match(self, match: Match) -> "Round":
        """Return a copy with the match of the same game number swapped in."""
        return replace(
            self,
            matches=tuple(
                match if m.game_number == match.game_number else m
                for m in self.matches
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round": self.round_number,
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round data from dictionary."""
        try:
            round_number = int(data["round"])
        except KeyError as e:
            raise InvalidMatchDataException(f"Round is missing {e}") from e
        return cls(
            round_number=round_number,
            matches=tuple(Match.from_dict(m) for m in data.get("matches", [])),
        )


def iter_matches(rounds: Iterable[Round]) -> Iterable[Match]:
    """Yield every match of a schedule in round-major, court-minor order."""
    for round_data in rounds:
        yield from round_data.matches


def schedule_players(rounds: Sequence[Round]) -> List[PlayerName]:
    """Distinct players named anywhere in ``rounds``, in first-seen order."""
    seen: Dict[PlayerName, None] = {}
    for match in iter_matches(rounds):
        for player in match.players:
            seen.setdefault(player, None)
    return list(seen)


def rounds_to_dicts(rounds: Sequence[Round]) -> List[Dict[str, Any]]:
    return [r.to_dict() for r in rounds]


def rounds_from_dicts(data: Iterable[Dict[str, Any]]) -> Tuple[Round, ...]:
    return tuple(Round.from_dict(r) for r in data)
