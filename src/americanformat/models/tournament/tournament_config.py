"""TournamentConfiguration data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from americanformat.constants import (
    DEFAULT_COURTS,
    DEFAULT_GAME_DURATION,
    DEFAULT_POINTS_PER_MATCH,
)
from americanformat.exceptions import InvalidConfigurationException


def _optional_int(data: Dict[str, Any], key: str, default: Optional[int]) -> Optional[int]:
    value = data.get(key, default)
    if value is None:
        return None
    if isinstance(value, float) and not value.is_integer():
        raise InvalidConfigurationException(
            f"{key} must be a whole number, got {value!r}"
        )
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationException(f"{key} must be a number, got {value!r}") from e


@dataclass(frozen=True)
class TournamentConfiguration:
    """Tournament configuration settings.

    Attributes
    ----------
    players_count : int or None
        Number of registered players.
    courts_count : int or None
        Courts available for every round.
    points_per_match : int or None
        Points played in each match; both team scores sum to this.
    game_duration_minutes : int or None
        Planned length of one game.

    ``None`` marks a value the organizer has not entered yet; the
    configuration validator reports it as missing.
    """

    players_count: Optional[int] = None
    courts_count: Optional[int] = DEFAULT_COURTS
    points_per_match: Optional[int] = DEFAULT_POINTS_PER_MATCH
    game_duration_minutes: Optional[int] = DEFAULT_GAME_DURATION

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "playersCount": self.players_count,
            "courtsCount": self.courts_count,
            "pointsPerMatch": self.points_per_match,
            "gameDurationMinutes": self.game_duration_minutes,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfiguration":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: If a value is not numeric
        """
        return cls(
            players_count=_optional_int(data, "playersCount", None),
            courts_count=_optional_int(data, "courtsCount", DEFAULT_COURTS),
            points_per_match=_optional_int(
                data, "pointsPerMatch", DEFAULT_POINTS_PER_MATCH
            ),
            game_duration_minutes=_optional_int(
                data, "gameDurationMinutes", DEFAULT_GAME_DURATION
            ),
        )
