"""Circle method pairing.

Every player partners every other player exactly once: the teammate pairs of
each round form a perfect matching of the players, and the rounds together
form a 1-factorization of the complete graph on the players. With 8 players
on 2 courts this is the optimal American format schedule of 7 rounds.
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

from typing import Iterator, List, Sequence

from americanformat.constants import PLAYERS_PER_MATCH
from americanformat.exceptions import NoPairingAvailableException
from americanformat.models.tournament import PairingHistory
from americanformat.pairing.base import PairingStrategy, opponent_penalty
from americanformat.type_hints import Matchup, PlayerName, RoundPlan, Team


def circle_pairs(players: Sequence[PlayerName], round_index: int) -> List[Team]:
    """Teammate pairs of one round of the circle method.

    The first player is the pivot; the others sit around a circle. In round
    ``r`` the pivot partners circle position ``r`` and the players at
    positions ``r + k`` and ``r - k`` partner each other.

    Args:
        players: An even number of players
        round_index: 0-indexed round, taken modulo ``len(players) - 1``

    Returns:
        ``len(players) // 2`` pairs, the pivot's pair first
    """
    if len(players) < 2 or len(players) % 2 != 0:
        raise NoPairingAvailableException(
            f"Circle method needs an even number of players, got {len(players)}"
        )
    pivot, circle = players[0], list(players[1:])
    size = len(circle)
    r = round_index % size

    pairs = [(pivot, circle[r])]
    for k in range(1, size // 2 + 1):
        pairs.append((circle[(r + k) % size], circle[(r - k) % size]))
    return pairs


def _groupings(pairs: List[Team]) -> Iterator[List[Matchup]]:
    """All ways of splitting ``pairs`` into matchups, in a fixed order."""
    if not pairs:
        yield []
        return
    first, rest = pairs[0], pairs[1:]
    for i, other in enumerate(rest):
        for tail in _groupings(rest[:i] + rest[i + 1 :]):
            yield [(first, other)] + tail


class CircleStrategy(PairingStrategy):
    """1-factorization schedule; needs every player on court every round."""

    name = "circle"

    def num_rounds(self, player_count: int) -> int:
        return player_count - 1

    def pair_round(
        self,
        players: Sequence[PlayerName],
        courts: int,
        round_index: int,
        history: PairingHistory,
    ) -> RoundPlan:
        if len(players) != courts * PLAYERS_PER_MATCH:
            raise NoPairingAvailableException(
                f"Circle method needs {len(players) // PLAYERS_PER_MATCH} courts "
                f"for {len(players)} players, got {courts}"
            )

        pairs = circle_pairs(players, round_index)

        # Opponent repeats are unavoidable over a full schedule; keep the first
        # grouping with the fewest of them.
        best: RoundPlan = []
        best_penalty = None
        for grouping in _groupings(pairs):
            penalty = sum(opponent_penalty(history, t1, t2) for t1, t2 in grouping)
            if best_penalty is None or penalty < best_penalty:
                best, best_penalty = grouping, penalty
                if penalty == 0:
                    break
        return best
