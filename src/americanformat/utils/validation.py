"""Validation utilities for American Format.

Every validator collects all problems in one pass and returns them in a
result object instead of raising, so callers can show everything at once.
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

import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from americanformat.constants import (
    DEFAULT_POINTS_PER_MATCH,
    MAX_COURTS,
    MAX_GAME_DURATION,
    MAX_PLAYER_NAME_LENGTH,
    MAX_PLAYERS,
    MAX_POINTS_PER_MATCH,
    MIN_GAME_DURATION,
    MIN_PLAYER_NAME_LENGTH,
    MIN_PLAYERS,
    MIN_POINTS_PER_MATCH,
    OPTIMAL_PLAYERS,
    PLAYERS_PER_MATCH,
)
from americanformat.models.tournament import (
    TournamentConfiguration,
    ValidatedMatchScore,
)
from americanformat.type_hints import Points


@dataclass(frozen=True)
class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        errors: Every problem that makes the input unusable
        warnings: Problems worth showing that do not block the input
        data: Cleaned/normalized input if valid
    """

    is_valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    data: Optional[Any] = None

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, warnings={list(self.warnings)!r})"
        return f"ValidationResult(INVALID, errors={list(self.errors)!r})"

    @classmethod
    def from_messages(
        cls, errors: List[str], warnings: List[str], data: Optional[Any] = None
    ) -> "ValidationResult":
        """Build a result; ``data`` is only kept when there are no errors."""
        return cls(
            is_valid=not errors,
            errors=tuple(errors),
            warnings=tuple(warnings),
            data=data if not errors else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize validation result to dictionary."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_whole_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return isinstance(value, float) and value.is_integer()


# ========== Tournament Configuration ==========


def validate_tournament_configuration(
    config: TournamentConfiguration,
) -> ValidationResult:
    """Validate tournament parameters before a schedule is generated.

    Args:
        config: Configuration entered by the organizer

    Returns:
        ValidationResult whose ``data`` is ``config`` when valid
    """
    errors: List[str] = []
    warnings: List[str] = []

    players_count = config.players_count
    if not players_count or players_count < MIN_PLAYERS:
        errors.append(f"Minimum {MIN_PLAYERS} players required")
    if players_count and players_count > MAX_PLAYERS:
        errors.append(f"Maximum {MAX_PLAYERS} players allowed")
    if players_count and players_count % PLAYERS_PER_MATCH != 0:
        errors.append("Player count must be divisible by 4 for proper team formation")

    courts_count = config.courts_count
    if not courts_count or courts_count < 1:
        errors.append("At least 1 court is required")
    if courts_count and courts_count > MAX_COURTS:
        errors.append(f"Maximum {MAX_COURTS} courts allowed")

    points = config.points_per_match
    if not points:
        errors.append("Points per match is required")
    elif points < MIN_POINTS_PER_MATCH:
        errors.append(f"Minimum {MIN_POINTS_PER_MATCH} points per match")
    elif points > MAX_POINTS_PER_MATCH:
        errors.append(f"Maximum {MAX_POINTS_PER_MATCH} points per match")

    duration = config.game_duration_minutes
    if not duration:
        errors.append("Game duration is required")
    elif duration < MIN_GAME_DURATION:
        errors.append(f"Minimum {MIN_GAME_DURATION} minutes per game")
    elif duration > MAX_GAME_DURATION:
        errors.append(f"Maximum {MAX_GAME_DURATION} minutes per game")

    if players_count and players_count != OPTIMAL_PLAYERS:
        warnings.append(
            f"Optimal player count is {OPTIMAL_PLAYERS} for balanced American format"
        )

    return ValidationResult.from_messages(errors, warnings, data=config)


# ========== Player Names ==========


def validate_player_names(players: Sequence[str]) -> ValidationResult:
    """Validate and trim a list of player names.

    Names are compared case-insensitively after trimming, so "Ana" and
    " ana " are duplicates.

    Returns:
        ValidationResult whose ``data`` is the tuple of trimmed names
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not players:
        errors.append("Player list cannot be empty")
        return ValidationResult.from_messages(errors, warnings)

    seen = set()
    duplicates: List[str] = []
    for player in players:
        key = player.strip().lower()
        if key in seen and player.strip() not in duplicates:
            duplicates.append(player.strip())
        seen.add(key)

    if duplicates:
        errors.append(f"Duplicate player names: {', '.join(duplicates)}")

    for index, player in enumerate(players, start=1):
        trimmed = player.strip()
        if len(trimmed) < MIN_PLAYER_NAME_LENGTH:
            errors.append(f"Player {index}: Name cannot be empty")
        if len(trimmed) > MAX_PLAYER_NAME_LENGTH:
            errors.append(
                f"Player {index}: Name too long "
                f"(max {MAX_PLAYER_NAME_LENGTH} characters)"
            )

    return ValidationResult.from_messages(
        errors, warnings, data=tuple(p.strip() for p in players)
    )


# ========== Match Scores ==========


def validate_match_score(
    team1_score: Points,
    team2_score: Points,
    max_points: int = DEFAULT_POINTS_PER_MATCH,
) -> ValidatedMatchScore:
    """Validate a submitted match score.

    Both scores must be non-negative whole numbers that add up to exactly
    ``max_points``.

    Example:
        >>> validate_match_score(10, 6).is_valid
        True
        >>> validate_match_score(8, 6).validation_errors
        ('Total points must equal 16 (currently 14)',)
    """
    errors: List[str] = []

    if not (_is_number(team1_score) and _is_number(team2_score)):
        return ValidatedMatchScore(
            team1_score=team1_score,
            team2_score=team2_score,
            total_points=0,
            is_valid=False,
            validation_errors=("Scores must be whole numbers",),
        )

    if not _is_whole_number(team1_score) or not _is_whole_number(team2_score):
        errors.append("Scores must be whole numbers")

    if team1_score < 0 or team2_score < 0:
        errors.append("Scores cannot be negative")

    total_points = team1_score + team2_score
    if total_points != max_points:
        errors.append(f"Total points must equal {max_points} (currently {total_points})")

    if team1_score > max_points or team2_score > max_points:
        errors.append(f"Individual scores cannot exceed {max_points}")

    return ValidatedMatchScore(
        team1_score=team1_score,
        team2_score=team2_score,
        total_points=total_points,
        is_valid=not errors,
        validation_errors=tuple(errors),
    )


# ========== American Format Request ==========


def validate_american_format_config(
    players: Sequence[str],
    courts: int,
    points_per_match: int = DEFAULT_POINTS_PER_MATCH,
) -> ValidationResult:
    """Validate a schedule generation request.

    Besides the player list and the usual limits, the court count must seat
    every player in every round: ``courts * 4 == len(players)``.

    Returns:
        ValidationResult whose ``data`` is the tuple of trimmed names
    """
    names = validate_player_names(players)
    errors: List[str] = list(names.errors)
    warnings: List[str] = list(names.warnings)

    count = len(players)
    if count < MIN_PLAYERS:
        errors.append(f"Minimum {MIN_PLAYERS} players required")
    if count > MAX_PLAYERS:
        errors.append(f"Maximum {MAX_PLAYERS} players allowed")
    if count % PLAYERS_PER_MATCH != 0:
        errors.append("Player count must be divisible by 4 for proper team formation")

    if isinstance(courts, bool) or not isinstance(courts, int):
        errors.append("Court count must be a whole number")
    elif courts < 1:
        errors.append("At least 1 court is required")
    else:
        if courts > MAX_COURTS:
            errors.append(f"Maximum {MAX_COURTS} courts allowed")
        if count < courts * PLAYERS_PER_MATCH:
            errors.append(
                "Too many courts for the number of players "
                "(minimum 4 players per court)"
            )
        elif count % PLAYERS_PER_MATCH == 0 and count > courts * PLAYERS_PER_MATCH:
            errors.append(
                f"Not enough courts: {count} players need "
                f"{count // PLAYERS_PER_MATCH} courts to play every round"
            )

    if not _is_number(points_per_match):
        errors.append("Points per match is required")
    elif points_per_match < MIN_POINTS_PER_MATCH:
        errors.append(f"Minimum {MIN_POINTS_PER_MATCH} points per match")
    elif points_per_match > MAX_POINTS_PER_MATCH:
        errors.append(f"Maximum {MAX_POINTS_PER_MATCH} points per match")

    if count != OPTIMAL_PLAYERS:
        warnings.append(f"American format is optimized for {OPTIMAL_PLAYERS} players")

    return ValidationResult.from_messages(errors, warnings, data=names.data)
