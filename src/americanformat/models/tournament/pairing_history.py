"""Data models for teammate and opponent history."""

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
from typing import Any, Dict, FrozenSet, Iterable, Sequence, Tuple

from americanformat.models.tournament.match import Match
from americanformat.models.tournament.round_data import Round, iter_matches
from americanformat.type_hints import PlayerName, Team


@dataclass(frozen=True)
class PairingHistory:
    """
    Teammate and opponent pairs seen so far during generation.

    The history is a value: recording a match returns a new history and the
    receiver is left untouched, so strategies thread it from round to round.

    Attributes
    ----------
    partnerships : frozenset of frozenset of str
        Unordered pairs of players that have been teammates.
    opponents : frozenset of frozenset of str
        Unordered pairs of players that have faced each other.
    """

    partnerships: FrozenSet[frozenset] = frozenset()
    opponents: FrozenSet[frozenset] = frozenset()

    def have_partnered(self, player1: PlayerName, player2: PlayerName) -> bool:
        """Check if two players have previously been teammates."""
        return frozenset({player1, player2}) in self.partnerships

    def have_opposed(self, player1: PlayerName, player2: PlayerName) -> bool:
        """Check if two players have previously been opponents."""
        return frozenset({player1, player2}) in self.opponents

    def record_teams(self, team1: Team, team2: Team) -> "PairingHistory":
        """Return a history that also contains this matchup."""
        return PairingHistory(
            partnerships=self.partnerships
            | {frozenset(team1), frozenset(team2)},
            opponents=self.opponents
            | {frozenset({a, b}) for a in team1 for b in team2},
        )

    def record_match(self, match: Match) -> "PairingHistory":
        return self.record_teams(match.team1, match.team2)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing history to dictionary."""
        return {
            "partnerships": sorted(sorted(pair) for pair in self.partnerships),
            "opponents": sorted(sorted(pair) for pair in self.opponents),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairingHistory":
        """Deserialize pairing history from dictionary."""
        return cls(
            partnerships=frozenset(
                frozenset(map(str, pair)) for pair in data.get("partnerships", [])
            ),
            opponents=frozenset(
                frozenset(map(str, pair)) for pair in data.get("opponents", [])
            ),
        )


def _bump(counts: Dict[PlayerName, Dict[PlayerName, int]], a: PlayerName, b: PlayerName):
    row = counts.setdefault(a, {})
    row[b] = row.get(b, 0) + 1


@dataclass(frozen=True)
class PartnershipTracking:
    """Who played with and against whom across a finished schedule.

    Attributes
    ----------
    partnerships : dict of str to tuple of str
        Each player's partners, in schedule order.
    partner_counts : dict of str to dict of str to int
        How often each pair of players were teammates.
    opponent_counts : dict of str to dict of str to int
        How often each pair of players were opponents.
    """

    partnerships: Dict[PlayerName, Tuple[PlayerName, ...]] = field(default_factory=dict)
    partner_counts: Dict[PlayerName, Dict[PlayerName, int]] = field(default_factory=dict)
    opponent_counts: Dict[PlayerName, Dict[PlayerName, int]] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "PartnershipTracking":
        return cls()

    @classmethod
    def from_rounds(cls, rounds: Sequence[Round]) -> "PartnershipTracking":
        """Build tracking data from a schedule."""
        partners: Dict[PlayerName, list] = {}
        partner_counts: Dict[PlayerName, Dict[PlayerName, int]] = {}
        opponent_counts: Dict[PlayerName, Dict[PlayerName, int]] = {}

        for match in iter_matches(rounds):
            for team, other in ((match.team1, match.team2), (match.team2, match.team1)):
                first, second = team
                partners.setdefault(first, []).append(second)
                partners.setdefault(second, []).append(first)
                _bump(partner_counts, first, second)
                _bump(partner_counts, second, first)
                for player in team:
                    for opponent in other:
                        _bump(opponent_counts, player, opponent)

        return cls(
            partnerships={p: tuple(ps) for p, ps in partners.items()},
            partner_counts=partner_counts,
            opponent_counts=opponent_counts,
        )

    def partners_of(self, player: PlayerName) -> FrozenSet[PlayerName]:
        """Set of players ever on ``player``'s team."""
        return frozenset(self.partnerships.get(player, ()))

    def opponents_of(self, player: PlayerName) -> FrozenSet[PlayerName]:
        """Set of players ever on the opposing team."""
        return frozenset(self.opponent_counts.get(player, {}))

    def repeated_partnerships(self) -> Iterable[Tuple[PlayerName, PlayerName]]:
        """Yield each teammate pair seen more than once, once per pair."""
        for player, row in self.partner_counts.items():
            for partner, count in row.items():
                if count > 1 and player < partner:
                    yield (player, partner)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tracking to dictionary."""
        return {
            "partnerships": {p: list(ps) for p, ps in self.partnerships.items()},
            "partnerCounts": {p: dict(row) for p, row in self.partner_counts.items()},
            "opponentCounts": {p: dict(row) for p, row in self.opponent_counts.items()},
        }
