"""
Base types for crossing strategies.

A strategy takes an initial state and returns the full history of how it got
everyone across. Strategies are interchangeable behind this protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from crossing.history import CrossingLog
    from crossing.state import CrossingState


class CrossingStrategy(Protocol):
    """
    Protocol for crossing strategies.

    Implementations must not mutate ``initial_state``; they work on their own
    copy and return a log whose first snapshot equals the initial state.
    """

    def solve(self, initial_state: CrossingState) -> CrossingLog:
        """Move everyone from origin to destination and return the history."""
        ...
