"""AmericanFormatResult data class."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from americanformat.models.tournament import (
    PartnershipTracking,
    Round,
    iter_matches,
)
from americanformat.utils.validation import ValidationResult


@dataclass(frozen=True)
class AmericanFormatResult:
    """Result of generating a complete schedule."""

    rounds: Tuple[Round, ...]
    partnership_tracking: PartnershipTracking = field(
        default_factory=PartnershipTracking.empty
    )
    validation: ValidationResult = field(
        default_factory=lambda: ValidationResult(is_valid=True)
    )

    def __post_init__(self):
        object.__setattr__(self, "rounds", tuple(self.rounds))

    @property
    def total_matches(self) -> int:
        return sum(len(r.matches) for r in self.rounds)

    def game_numbers(self) -> List[int]:
        return [m.game_number for m in iter_matches(self.rounds)]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize generation result to dictionary."""
        return {
            "rounds": [r.to_dict() for r in self.rounds],
            "partnershipTracking": self.partnership_tracking.to_dict(),
            "validation": self.validation.to_dict(),
        }


#  LocalWords:  AmericanFormatResult
