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

# --- Constants ---
# Player constraints
MIN_PLAYERS = 4
MAX_PLAYERS = 16
OPTIMAL_PLAYERS = 8  # The format is tuned for 8 players on 2 courts
PLAYERS_PER_MATCH = 4

# Court configuration
DEFAULT_COURTS = 2
OPTIMAL_COURTS = 2
MAX_COURTS = 8

# Scoring configuration
DEFAULT_POINTS_PER_MATCH = 16
MIN_POINTS_PER_MATCH = 10
MAX_POINTS_PER_MATCH = 30

# Time configuration (minutes)
DEFAULT_GAME_DURATION = 13
MIN_GAME_DURATION = 10
MAX_GAME_DURATION = 20
AVERAGE_MINUTES_PER_MATCH = 13

# Player name rules
MIN_PLAYER_NAME_LENGTH = 1
MAX_PLAYER_NAME_LENGTH = 50

# Match status values (serialized form)
MATCH_STATUS_PENDING = "pending"
MATCH_STATUS_IN_PROGRESS = "in_progress"
MATCH_STATUS_COMPLETED = "completed"

# Pairing systems
PAIRING_AUTO = "auto"
PAIRING_CIRCLE = "circle"
PAIRING_GREEDY = "greedy"
PAIRING_SYSTEMS = (PAIRING_AUTO, PAIRING_CIRCLE, PAIRING_GREEDY)
DEFAULT_PAIRING_SYSTEM = PAIRING_AUTO

# Greedy search
MAX_GENERAL_ROUNDS = 12
REPEAT_PARTNER_PENALTY = 100
REPEAT_OPPONENT_PENALTY = 10
