"""Pairing strategy interface shared by all schedule generators."""

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

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

from americanformat.constants import REPEAT_OPPONENT_PENALTY, REPEAT_PARTNER_PENALTY
from americanformat.models.tournament import PairingHistory
from americanformat.type_hints import PlayerName, RoundPlan, Team
from americanformat.utils import setup_logger

logger = setup_logger(__name__)


def opponent_penalty(history: PairingHistory, team1: Team, team2: Team) -> int:
    """Penalty for each cross-team pair that has met before."""
    return REPEAT_OPPONENT_PENALTY * sum(
        1 for a in team1 for b in team2 if history.have_opposed(a, b)
    )


def matchup_penalty(history: PairingHistory, team1: Team, team2: Team) -> int:
    """Score a candidate matchup; lower is better.

    A team that has partnered before costs ``REPEAT_PARTNER_PENALTY``; each
    repeated opponent pairing costs ``REPEAT_OPPONENT_PENALTY``.
    """
    penalty = opponent_penalty(history, team1, team2)
    for team in (team1, team2):
        if history.have_partnered(*team):
            penalty += REPEAT_PARTNER_PENALTY
    return penalty


class PairingStrategy(ABC):
    """Builds the matchups of a schedule round by round.

    Subclasses only decide how one round is paired. The history of teammates
    and opponents is a value passed into :meth:`pair_round` and replaced after
    every round by :meth:`plan_rounds`; strategies never keep state between
    calls, so the same input always produces the same plan.
    """

    name = "base"

    @abstractmethod
    def num_rounds(self, player_count: int) -> int:
        """Number of rounds this strategy schedules for ``player_count`` players."""

    @abstractmethod
    def pair_round(
        self,
        players: Sequence[PlayerName],
        courts: int,
        round_index: int,
        history: PairingHistory,
    ) -> RoundPlan:
        """Pair one round.

        Args:
            players: All players, in registration order
            courts: Courts available this round
            round_index: 0-indexed round number
            history: Teammates and opponents of all earlier rounds

        Returns:
            Matchups in court order
        """

    def plan_rounds(
        self, players: Sequence[PlayerName], courts: int
    ) -> Tuple[List[RoundPlan], PairingHistory]:
        """Pair every round of the schedule.

        Generation stops early, rather than emit it, at the first round that
        would repeat a partnership.

        Returns:
            Tuple of (round plans, final pairing history)
        """
        history = PairingHistory()
        plans: List[RoundPlan] = []

        for round_index in range(self.num_rounds(len(players))):
            plan = self.pair_round(players, courts, round_index, history)
            if not plan:
                break

            repeated = [
                team
                for matchup in plan
                for team in matchup
                if history.have_partnered(*team)
            ]
            if repeated:
                logger.warning(
                    "%s pairing stopped after %d rounds: round %d would repeat "
                    "partnerships %s",
                    self.name,
                    len(plans),
                    round_index + 1,
                    repeated,
                )
                break

            for team1, team2 in plan:
                history = history.record_teams(team1, team2)
            plans.append(plan)
            logger.debug("Round %d paired: %s", round_index + 1, plan)

        return plans, history
