"""Exceptions for use in American Format"""

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


# ========== Base Application Exception ==========


class AmericanFormatException(Exception):
    """Base exception for all American Format errors.

    Validators report problems through result objects; these exceptions are
    reserved for lookups that cannot succeed and for malformed data crossing
    the serialization boundary.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(AmericanFormatException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingSystemException(PairingException):
    """Raised when an unknown pairing system is requested."""

    pass


class NoPairingAvailableException(PairingException):
    """Raised when a strategy cannot build a round for the given players."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(AmericanFormatException):
    """Base exception for tournament-related errors."""

    pass


class MatchNotFoundException(TournamentException):
    """Raised when a score is submitted for a game number not in the schedule."""

    pass


class InvalidMatchException(TournamentException):
    """Raised when a match is built with repeated or missing players."""

    pass


class InvalidMatchDataException(TournamentException):
    """Raised when serialized match, round or score data is malformed."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(AmericanFormatException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
