"""
Crossing Solver - strategies for getting everyone over the bridge.

This package contains:
- CrossingStrategy: Protocol every strategy implements
- GreedyStrategy: Fast courier-based strategy
- MoveLogger: Records the trips a strategy makes
- Log analysis: Post-solve crossing summaries and invariant checks
"""

from .analysis import Crossing, find_invariant_violations, summarize_crossings
from .base import CrossingStrategy
from .greedy import GreedyPhase, GreedyStrategy
from .logging import MoveLogger

__all__ = [
    "CrossingStrategy",
    "GreedyPhase",
    "GreedyStrategy",
    "MoveLogger",
    # Log analysis
    "Crossing",
    "find_invariant_violations",
    "summarize_crossings",
]
