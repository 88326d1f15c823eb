"""American format schedule generation.

Validates the request, picks a pairing strategy, numbers courts and games,
and checks the finished schedule with the schedule validator.
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

from typing import List, Sequence

from americanformat.constants import (
    DEFAULT_PAIRING_SYSTEM,
    DEFAULT_POINTS_PER_MATCH,
    OPTIMAL_COURTS,
    OPTIMAL_PLAYERS,
    PAIRING_AUTO,
    PAIRING_CIRCLE,
    PAIRING_GREEDY,
    PAIRING_SYSTEMS,
)
from americanformat.exceptions import InvalidPairingSystemException
from americanformat.models.pairing import AmericanFormatResult
from americanformat.models.tournament import (
    Match,
    MatchStatus,
    PartnershipTracking,
    Round,
)
from americanformat.pairing.base import PairingStrategy
from americanformat.pairing.circle import CircleStrategy
from americanformat.pairing.greedy import GreedyStrategy
from americanformat.type_hints import PlayerName, RoundPlan
from americanformat.utils import setup_logger
from americanformat.utils.validation import (
    ValidationResult,
    validate_american_format_config,
)
from americanformat.validation import validate_american_format_schedule

logger = setup_logger(__name__)


def select_strategy(
    player_count: int, courts: int, pairing_system: str = DEFAULT_PAIRING_SYSTEM
) -> PairingStrategy:
    """Return the strategy for a request.

    ``"auto"`` uses the circle method for 8 players on 2 courts and the
    greedy search for everything else.

    Raises:
        InvalidPairingSystemException: If ``pairing_system`` is unknown
    """
    if pairing_system not in PAIRING_SYSTEMS:
        raise InvalidPairingSystemException(
            f"Unknown pairing system {pairing_system!r}, "
            f"expected one of {', '.join(PAIRING_SYSTEMS)}"
        )
    if pairing_system == PAIRING_CIRCLE:
        return CircleStrategy()
    if pairing_system == PAIRING_GREEDY:
        return GreedyStrategy()
    if player_count == OPTIMAL_PLAYERS and courts == OPTIMAL_COURTS:
        return CircleStrategy()
    return GreedyStrategy()


def build_rounds(plans: Sequence[RoundPlan]) -> List[Round]:
    """Turn round plans into pending matches.

    Courts are numbered from 1 within each round and game numbers run from 1
    over the whole schedule, round-major and court-minor.
    """
    rounds: List[Round] = []
    game_number = 1
    for round_index, plan in enumerate(plans, start=1):
        matches = []
        for court, (team1, team2) in enumerate(plan, start=1):
            matches.append(
                Match(
                    court=court,
                    team1=team1,
                    team2=team2,
                    round_number=round_index,
                    game_number=game_number,
                    status=MatchStatus.PENDING,
                )
            )
            game_number += 1
        rounds.append(Round(round_number=round_index, matches=tuple(matches)))
    return rounds


def generate_american_format_tournament(
    players: Sequence[PlayerName],
    courts: int,
    points_per_match: int = DEFAULT_POINTS_PER_MATCH,
    pairing_system: str = DEFAULT_PAIRING_SYSTEM,
) -> AmericanFormatResult:
    """Generate an American format schedule.

    Args:
        players: Unique player names in registration order
        courts: Courts available for every round
        points_per_match: Points played per match
        pairing_system: ``"auto"``, ``"circle"`` or ``"greedy"``

    With ``"auto"``, a greedy schedule that stops early is replaced by the
    circle schedule. A schedule that still ends before its full round count
    carries a warning saying how many rounds were generated.

    Returns:
        AmericanFormatResult. When the request is invalid the rounds are
        empty and ``validation`` carries the request errors.

    Raises:
        InvalidPairingSystemException: If ``pairing_system`` is unknown
    """
    config_validation = validate_american_format_config(
        players, courts, points_per_match
    )
    if not config_validation.is_valid:
        logger.info(
            "Rejected schedule request for %d players on %s courts: %s",
            len(players),
            courts,
            "; ".join(config_validation.errors),
        )
        return AmericanFormatResult(
            rounds=(),
            partnership_tracking=PartnershipTracking.empty(),
            validation=config_validation,
        )

    names: Sequence[PlayerName] = config_validation.data
    strategy = select_strategy(len(names), courts, pairing_system)
    plans, _history = strategy.plan_rounds(names, courts)
    wanted = strategy.num_rounds(len(names))

    # The circle method never repeats a partnership, so "auto" can always
    # recover a schedule the greedy search had to cut short.
    if (
        len(plans) < wanted
        and pairing_system == PAIRING_AUTO
        and not isinstance(strategy, CircleStrategy)
    ):
        logger.info(
            "%s pairing produced %d of %d rounds, switching to circle pairing",
            strategy.name,
            len(plans),
            wanted,
        )
        strategy = CircleStrategy()
        plans, _history = strategy.plan_rounds(names, courts)
        wanted = strategy.num_rounds(len(names))

    rounds = build_rounds(plans)

    generation_warnings: List[str] = []
    if len(plans) < wanted:
        generation_warnings.append(
            f"Schedule stopped after {len(plans)} of {wanted} rounds "
            "to avoid repeating partnerships"
        )

    schedule_validation = validate_american_format_schedule(rounds, names)
    validation = ValidationResult.from_messages(
        list(schedule_validation.errors),
        list(config_validation.warnings)
        + generation_warnings
        + list(schedule_validation.warnings),
    )

    logger.info(
        "Generated %d rounds (%d matches) for %d players on %d courts using %s pairing",
        len(rounds),
        sum(len(r.matches) for r in rounds),
        len(names),
        courts,
        strategy.name,
    )

    return AmericanFormatResult(
        rounds=tuple(rounds),
        partnership_tracking=PartnershipTracking.from_rounds(rounds),
        validation=validation,
    )
