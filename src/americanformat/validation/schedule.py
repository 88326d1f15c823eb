"""Fairness checks for American format schedules.

The checks apply equally to generated schedules and to schedules loaded from
storage, so nothing here assumes the rounds came from a pairing strategy.
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

from collections import Counter
from typing import Dict, List, Optional, Sequence, Set

from americanformat.models.tournament import PairingHistory, Round, schedule_players
from americanformat.type_hints import PlayerName
from americanformat.utils import setup_logger
from americanformat.utils.validation import ValidationResult

logger = setup_logger(__name__)


def validate_american_format_schedule(
    rounds: Sequence[Round],
    players: Optional[Sequence[PlayerName]] = None,
) -> ValidationResult:
    """Validate a schedule against the American format rules.

    Errors: an empty schedule, a round in which some player does not play
    or plays twice, and any teammate pair that occurs a second time.
    Warning: the most active player plays more than one match more than the
    least active one.

    Args:
        rounds: The schedule to check
        players: Full player list; defaults to every player named in ``rounds``

    Returns:
        ValidationResult with all errors and warnings found
    """
    errors: List[str] = []
    warnings: List[str] = []

    if not rounds:
        errors.append("Schedule cannot be empty")
        return ValidationResult.from_messages(errors, warnings)

    roster: List[PlayerName] = (
        list(players) if players is not None else schedule_players(rounds)
    )
    expected: Set[PlayerName] = set(roster)
    history = PairingHistory()
    match_counts: Dict[PlayerName, int] = {player: 0 for player in roster}

    for round_data in rounds:
        appearances = Counter(round_data.players)

        for match in round_data.matches:
            for team in (match.team1, match.team2):
                if history.have_partnered(*team):
                    errors.append(
                        f"Round {round_data.round_number}: "
                        f"Repeated partnership {team[0]} & {team[1]}"
                    )
            history = history.record_match(match)
            for player in match.players:
                match_counts[player] = match_counts.get(player, 0) + 1

        doubled = sorted(p for p, n in appearances.items() if n > 1)
        if doubled:
            errors.append(
                f"Round {round_data.round_number}: "
                f"Players scheduled more than once: {', '.join(doubled)}"
            )
        present = set(appearances)
        if present != expected:
            errors.append(
                f"Round {round_data.round_number}: Not all players participate "
                f"({len(present & expected)}/{len(expected)})"
            )
            unknown = sorted(present - expected)
            if unknown:
                errors.append(
                    f"Round {round_data.round_number}: "
                    f"Unknown players: {', '.join(unknown)}"
                )

    if match_counts:
        spread = max(match_counts.values()) - min(match_counts.values())
        if spread > 1:
            warnings.append("Unbalanced match distribution between players")

    if errors:
        logger.debug("Schedule validation found %d error(s)", len(errors))
    return ValidationResult.from_messages(errors, warnings)
