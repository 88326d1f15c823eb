"""Results and ranking for American format tournaments.

This package turns scored rounds into statistics, leaderboards and progress
figures, and records new scores into a schedule.
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

from americanformat.tournament.leaderboard_calculator import (
    calculate_player_stats,
    count_matches,
    generate_tournament_leaderboard,
    rank_player_stats,
    ranking_key,
    validate_leaderboard_integrity,
)
from americanformat.tournament.progress import calculate_tournament_progress
from americanformat.tournament.result_recorder import (
    ResultRecorder,
    ScoreSubmission,
    find_match,
    record_match_score,
)

__all__ = [
    "calculate_player_stats",
    "rank_player_stats",
    "ranking_key",
    "count_matches",
    "generate_tournament_leaderboard",
    "validate_leaderboard_integrity",
    "calculate_tournament_progress",
    "ResultRecorder",
    "ScoreSubmission",
    "find_match",
    "record_match_score",
]
