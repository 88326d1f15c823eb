"""Tournament progress statistics."""

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

from typing import Sequence

from americanformat.constants import AVERAGE_MINUTES_PER_MATCH
from americanformat.models.tournament import ProgressStats, Round
from americanformat.tournament.leaderboard_calculator import count_matches


def calculate_tournament_progress(rounds: Sequence[Round]) -> ProgressStats:
    """Completion percentage and remaining time of a schedule.

    A match counts as completed once it has a valid score. Remaining time
    assumes 13 minutes per unplayed match.
    """
    total, completed = count_matches(rounds)
    return ProgressStats(
        total_matches=total,
        completed_matches=completed,
        progress_percentage=(completed / total) * 100 if total > 0 else 0.0,
        estimated_time_remaining=(total - completed) * AVERAGE_MINUTES_PER_MATCH,
    )
