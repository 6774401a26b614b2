"""
Crossing - fastest way to get a group over a narrow bridge at night.

This package contains:
- models: Participant
- state: Bank and CrossingState, the only legal moves between banks
- history: CrossingLog, the recorded snapshots of a run
- solver: Crossing strategies (greedy courier strategy)
- config: Participant document loading
"""

from crossing.errors import (
    BridgeCapacityError,
    ContractViolation,
    EmptyBankError,
    ParticipantNotPresentError,
)
from crossing.history import CrossingLog
from crossing.models import Participant
from crossing.solver import CrossingStrategy, GreedyStrategy, MoveLogger
from crossing.state import BRIDGE_CAPACITY, Bank, CrossingState

__all__ = [
    "BRIDGE_CAPACITY",
    "Bank",
    "BridgeCapacityError",
    "ContractViolation",
    "CrossingLog",
    "CrossingState",
    "CrossingStrategy",
    "EmptyBankError",
    "GreedyStrategy",
    "MoveLogger",
    "Participant",
    "ParticipantNotPresentError",
]
