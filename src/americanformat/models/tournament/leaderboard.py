"""Player statistics, leaderboard and progress data classes."""

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
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from americanformat.exceptions import InvalidMatchDataException
from americanformat.type_hints import PlayerName


@dataclass(frozen=True)
class PlayerStats:
    """Cumulative statistics of one player.

    Attributes
    ----------
    player : str
        Player name.
    matches_played : int
        Matches with a valid score the player took part in.
    total_points : int
        Points the player's teams scored; always equal to ``points_for``.
    points_for : int
        Points scored by the player's teams.
    points_against : int
        Points conceded by the player's teams.
    wins : int
        Matches the player's team won outright; ties count for nobody.
    win_percentage : float
        ``100 * wins / matches_played``, 0 when nothing was played.
    average_score : float
        ``total_points / matches_played``, 0 when nothing was played.
    rank : int
        Leaderboard position, shared between tied players. 0 until ranked.
    """

    player: PlayerName
    matches_played: int = 0
    total_points: int = 0
    points_for: int = 0
    points_against: int = 0
    wins: int = 0
    win_percentage: float = 0.0
    average_score: float = 0.0
    rank: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player statistics to dictionary."""
        return {
            "player": self.player,
            "matchesPlayed": self.matches_played,
            "totalPoints": self.total_points,
            "pointsFor": self.points_for,
            "pointsAgainst": self.points_against,
            "wins": self.wins,
            "winPercentage": self.win_percentage,
            "averageScore": self.average_score,
            "rank": self.rank,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStats":
        """Deserialize player statistics from dictionary."""
        try:
            player = data["player"]
        except KeyError as e:
            raise InvalidMatchDataException("Player statistics need a player") from e
        return cls(
            player=player,
            matches_played=data.get("matchesPlayed", 0),
            total_points=data.get("totalPoints", 0),
            points_for=data.get("pointsFor", 0),
            points_against=data.get("pointsAgainst", 0),
            wins=data.get("wins", 0),
            win_percentage=data.get("winPercentage", 0.0),
            average_score=data.get("averageScore", 0.0),
            rank=data.get("rank", 0),
        )


@dataclass(frozen=True)
class TournamentLeaderboard:
    """Ranked player statistics plus completion metadata."""

    players: Tuple[PlayerStats, ...]
    last_updated: datetime
    is_complete: bool
    total_matches: int
    completed_matches: int

    def __post_init__(self):
        object.__setattr__(self, "players", tuple(self.players))

    def get_player(self, name: PlayerName) -> Optional[PlayerStats]:
        for stats in self.players:
            if stats.player == name:
                return stats
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize leaderboard to dictionary."""
        return {
            "players": [p.to_dict() for p in self.players],
            "lastUpdated": self.last_updated.isoformat(),
            "isComplete": self.is_complete,
            "totalMatches": self.total_matches,
            "completedMatches": self.completed_matches,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentLeaderboard":
        """Deserialize leaderboard from dictionary."""
        try:
            last_updated = datetime.fromisoformat(data["lastUpdated"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidMatchDataException(
                f"Leaderboard has no usable lastUpdated: {data.get('lastUpdated')!r}"
            ) from e
        return cls(
            players=tuple(PlayerStats.from_dict(p) for p in data.get("players", [])),
            last_updated=last_updated,
            is_complete=bool(data.get("isComplete", False)),
            total_matches=data.get("totalMatches", 0),
            completed_matches=data.get("completedMatches", 0),
        )


@dataclass(frozen=True)
class ProgressStats:
    """How far a schedule has been played."""

    total_matches: int
    completed_matches: int
    progress_percentage: float
    estimated_time_remaining: int  # minutes

    def to_dict(self) -> Dict[str, Any]:
        """Serialize progress to dictionary."""
        return {
            "totalMatches": self.total_matches,
            "completedMatches": self.completed_matches,
            "progressPercentage": self.progress_percentage,
            "estimatedTimeRemaining": self.estimated_time_remaining,
        }
