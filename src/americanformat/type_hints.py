"""Type hints used in American Format."""

from typing import Dict, FrozenSet, List, Literal, Tuple, Union

# Match status literals (serialized form)
MatchStatusValue = Literal["pending", "in_progress", "completed"]

# Pairing system literals
PairingSystem = Literal["auto", "circle", "greedy"]

# A player is identified by their display name
PlayerName = str
Players = List[PlayerName]
# Two players on the same side of the net
Team = Tuple[PlayerName, PlayerName]
# Two teams sharing a court
Matchup = Tuple[Team, Team]
# All matchups of one round, court order
RoundPlan = List[Matchup]
# Unordered pair of players
PlayerPair = FrozenSet[PlayerName]
# Pair -> number of times seen
PairCounts = Dict[PlayerPair, int]
# Submitted scores are checked for integrality, so floats can reach validators
Points = Union[int, float]

#  LocalWords:  Matchup RoundPlan
