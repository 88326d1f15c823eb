"""Tournament data models."""

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

from americanformat.models.tournament.leaderboard import (
    PlayerStats,
    ProgressStats,
    TournamentLeaderboard,
)
from americanformat.models.tournament.match import (
    Match,
    MatchStatus,
    ValidatedMatchScore,
)
from americanformat.models.tournament.pairing_history import (
    PairingHistory,
    PartnershipTracking,
)
from americanformat.models.tournament.round_data import (
    Round,
    iter_matches,
    rounds_from_dicts,
    rounds_to_dicts,
    schedule_players,
)
from americanformat.models.tournament.tournament_config import (
    TournamentConfiguration,
)

__all__ = [
    "Match",
    "MatchStatus",
    "ValidatedMatchScore",
    "Round",
    "PairingHistory",
    "PartnershipTracking",
    "PlayerStats",
    "TournamentLeaderboard",
    "ProgressStats",
    "TournamentConfiguration",
    "iter_matches",
    "schedule_players",
    "rounds_to_dicts",
    "rounds_from_dicts",
]
