"""Greedy constrained-search pairing for general player counts."""

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

from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from americanformat.constants import MAX_GENERAL_ROUNDS, PLAYERS_PER_MATCH
from americanformat.models.tournament import PairingHistory
from americanformat.pairing.base import PairingStrategy, matchup_penalty
from americanformat.type_hints import Matchup, PlayerName, RoundPlan


def team_splits(quad: Tuple[PlayerName, ...]) -> Tuple[Matchup, ...]:
    """The 3 ways to split four players into two teams of two."""
    a, b, c, d = quad
    return (
        ((a, b), (c, d)),
        ((a, c), (b, d)),
        ((a, d), (b, c)),
    )


def best_matchup(
    available: Sequence[PlayerName], history: PairingHistory
) -> Optional[Matchup]:
    """Lowest-penalty matchup among ``available`` players.

    Quadruples are scanned in lexicographic index order and splits in
    :func:`team_splits` order; the first minimum wins.
    """
    best: Optional[Matchup] = None
    best_penalty = None
    for quad in combinations(available, PLAYERS_PER_MATCH):
        for team1, team2 in team_splits(quad):
            penalty = matchup_penalty(history, team1, team2)
            if best_penalty is None or penalty < best_penalty:
                best, best_penalty = (team1, team2), penalty
                if penalty == 0:
                    return best
    return best


class GreedyStrategy(PairingStrategy):
    """Court-by-court greedy search.

    Exhaustive over quadruples, hence exponential in the number of players;
    fine up to 16 players. Late rounds may be forced into repeated opponents.
    A repeated partnership is only discouraged by weight, so a round that
    needs one ends the schedule (see :meth:`PairingStrategy.plan_rounds`).
    """

    name = "greedy"

    def num_rounds(self, player_count: int) -> int:
        return min(player_count - 1, MAX_GENERAL_ROUNDS)

    def pair_round(
        self,
        players: Sequence[PlayerName],
        courts: int,
        round_index: int,
        history: PairingHistory,
    ) -> RoundPlan:
        available: List[PlayerName] = list(players)
        plan: RoundPlan = []

        for _court in range(courts):
            if len(available) < PLAYERS_PER_MATCH:
                break
            matchup = best_matchup(available, history)
            if matchup is None:
                break
            plan.append(matchup)
            taken = set(matchup[0] + matchup[1])
            available = [p for p in available if p not in taken]

        return plan
