"""Player statistics and leaderboard calculation.

Statistics are recomputed from the rounds on every call; nothing is cached
between calls.

Scoring rule: a player's total is the sum of their own team's points over
every match with a valid score. There is no bonus for winning a match.
"""

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

from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from americanformat.models.tournament import (
    PlayerStats,
    Round,
    TournamentLeaderboard,
    iter_matches,
    schedule_players,
)
from americanformat.type_hints import PlayerName
from americanformat.utils import setup_logger

logger = setup_logger(__name__)


class _Tally:
    """Running totals of one player while folding matches."""

    __slots__ = ("matches_played", "points_for", "points_against", "wins")

    def __init__(self):
        self.matches_played = 0
        self.points_for = 0
        self.points_against = 0
        self.wins = 0

    def add(self, scored: int, conceded: int) -> None:
        self.matches_played += 1
        self.points_for += scored
        self.points_against += conceded
        if scored > conceded:
            self.wins += 1

    def to_stats(self, player: PlayerName) -> PlayerStats:
        played = self.matches_played
        return PlayerStats(
            player=player,
            matches_played=played,
            total_points=self.points_for,
            points_for=self.points_for,
            points_against=self.points_against,
            wins=self.wins,
            win_percentage=(self.wins / played) * 100 if played else 0.0,
            average_score=self.points_for / played if played else 0.0,
        )


def calculate_player_stats(rounds: Sequence[Round]) -> Tuple[PlayerStats, ...]:
    """Fold every validly scored match into per-player statistics.

    Matches without a valid score are skipped. A tied score counts as played
    for both teams but as a win for neither. Every player named in the rounds
    appears in the result, ranked with :func:`rank_player_stats`.

    Args:
        rounds: Schedule, possibly partially scored

    Returns:
        Ranked player statistics
    """
    tallies: Dict[PlayerName, _Tally] = {
        player: _Tally() for player in schedule_players(rounds)
    }

    for match in iter_matches(rounds):
        if not match.has_valid_score:
            continue
        team1_score = int(match.score.team1_score)
        team2_score = int(match.score.team2_score)
        for player in match.team1:
            tallies[player].add(team1_score, team2_score)
        for player in match.team2:
            tallies[player].add(team2_score, team1_score)

    return rank_player_stats([t.to_stats(p) for p, t in tallies.items()])


def ranking_key(stats: PlayerStats) -> Tuple[int, int, str]:
    """Sort key: total points desc, matches played desc, name asc."""
    return (-stats.total_points, -stats.matches_played, stats.player)


def rank_player_stats(stats: Sequence[PlayerStats]) -> Tuple[PlayerStats, ...]:
    """Order statistics and assign ranks.

    Entries share the rank of their predecessor only when both total points
    and matches played are equal; otherwise the rank is the 1-based position,
    so a tie at the top is followed by rank 3, not 2.
    """
    ranked: List[PlayerStats] = []
    for position, entry in enumerate(sorted(stats, key=ranking_key), start=1):
        rank = position
        if ranked:
            previous = ranked[-1]
            if (
                entry.total_points == previous.total_points
                and entry.matches_played == previous.matches_played
            ):
                rank = previous.rank
        ranked.append(replace(entry, rank=rank))
    return tuple(ranked)


def count_matches(rounds: Sequence[Round]) -> Tuple[int, int]:
    """Return (total matches, matches with a valid score)."""
    total = 0
    completed = 0
    for match in iter_matches(rounds):
        total += 1
        if match.has_valid_score:
            completed += 1
    return total, completed


def generate_tournament_leaderboard(
    rounds: Sequence[Round], now: Optional[datetime] = None
) -> TournamentLeaderboard:
    """Build the leaderboard for the current state of a schedule.

    Args:
        rounds: Schedule, possibly partially scored
        now: Timestamp to record; defaults to the current UTC time

    Returns:
        Ranked statistics with completion metadata
    """
    players = calculate_player_stats(rounds)
    total, completed = count_matches(rounds)
    return TournamentLeaderboard(
        players=players,
        last_updated=now if now is not None else datetime.now(timezone.utc),
        is_complete=total > 0 and completed == total,
        total_matches=total,
        completed_matches=completed,
    )


def validate_leaderboard_integrity(
    leaderboard: TournamentLeaderboard, rounds: Sequence[Round]
) -> bool:
    """Check a leaderboard against the rounds it was derived from.

    The leaderboard must list exactly the players named in the rounds, in
    ranking order.
    """
    round_players = set(schedule_players(rounds))
    board_players = {entry.player for entry in leaderboard.players}
    if round_players != board_players:
        logger.debug(
            "Leaderboard players differ from schedule: missing %s, unknown %s",
            sorted(round_players - board_players),
            sorted(board_players - round_players),
        )
        return False

    entries = leaderboard.players
    for previous, current in zip(entries, entries[1:]):
        if current.total_points > previous.total_points:
            return False
        if current.total_points == previous.total_points:
            if current.matches_played > previous.matches_played:
                return False
            if (
                current.matches_played == previous.matches_played
                and current.player < previous.player
            ):
                return False
    return True
