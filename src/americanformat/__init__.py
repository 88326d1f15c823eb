"""American Format: pairing and ranking engine for rotating-partner doubles.

The package generates multi-round schedules in which partners and opponents
rotate, validates schedules and scores, and turns scored rounds into a
ranked leaderboard. It performs no I/O; every function takes and returns
plain immutable values.
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

from americanformat.exceptions import (
    AmericanFormatException,
    InvalidMatchDataException,
    MatchNotFoundException,
)
from americanformat.models.pairing import AmericanFormatResult
from americanformat.models.tournament import (
    Match,
    MatchStatus,
    PairingHistory,
    PartnershipTracking,
    PlayerStats,
    ProgressStats,
    Round,
    TournamentConfiguration,
    TournamentLeaderboard,
    ValidatedMatchScore,
)
from americanformat.pairing import (
    CircleStrategy,
    GreedyStrategy,
    PairingStrategy,
    generate_american_format_tournament,
)
from americanformat.tournament import (
    ResultRecorder,
    ScoreSubmission,
    calculate_player_stats,
    calculate_tournament_progress,
    generate_tournament_leaderboard,
    rank_player_stats,
    record_match_score,
    validate_leaderboard_integrity,
)
from americanformat.utils.validation import (
    ValidationResult,
    validate_american_format_config,
    validate_match_score,
    validate_player_names,
    validate_tournament_configuration,
)
from americanformat.validation import validate_american_format_schedule

__version__ = "0.1.0"

__all__ = [
    "AmericanFormatException",
    "InvalidMatchDataException",
    "MatchNotFoundException",
    "AmericanFormatResult",
    "Match",
    "MatchStatus",
    "PairingHistory",
    "PartnershipTracking",
    "PlayerStats",
    "ProgressStats",
    "Round",
    "TournamentConfiguration",
    "TournamentLeaderboard",
    "ValidatedMatchScore",
    "ValidationResult",
    "PairingStrategy",
    "CircleStrategy",
    "GreedyStrategy",
    "ResultRecorder",
    "ScoreSubmission",
    "generate_american_format_tournament",
    "validate_american_format_config",
    "validate_american_format_schedule",
    "validate_tournament_configuration",
    "validate_player_names",
    "validate_match_score",
    "calculate_player_stats",
    "rank_player_stats",
    "generate_tournament_leaderboard",
    "validate_leaderboard_integrity",
    "calculate_tournament_progress",
    "record_match_score",
]
