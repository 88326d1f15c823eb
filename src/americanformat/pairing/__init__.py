"""Schedule generation and pairing strategies."""

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

from americanformat.pairing.base import (
    PairingStrategy,
    matchup_penalty,
    opponent_penalty,
)
from americanformat.pairing.circle import CircleStrategy, circle_pairs
from americanformat.pairing.generator import (
    build_rounds,
    generate_american_format_tournament,
    select_strategy,
)
from americanformat.pairing.greedy import GreedyStrategy, best_matchup, team_splits

__all__ = [
    "PairingStrategy",
    "CircleStrategy",
    "GreedyStrategy",
    "circle_pairs",
    "best_matchup",
    "team_splits",
    "matchup_penalty",
    "opponent_penalty",
    "build_rounds",
    "select_strategy",
    "generate_american_format_tournament",
]
