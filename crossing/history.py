"""
Crossing log - the recorded history of one run.

Every snapshot is an independent copy of the state at the time it was
recorded, so later moves on the live state never rewrite history.
"""

from __future__ import annotations

from collections.abc import Iterator

from crossing.state import CrossingState


class CrossingLog:
    """Append-only sequence of CrossingState snapshots."""

    def __init__(self) -> None:
        self._snapshots: list[CrossingState] = []

    def record(self, state: CrossingState) -> None:
        """Append a copy of the current state."""
        self._snapshots.append(state.copy())

    def total_time(self) -> float:
        """Sum of the bridge duration of every snapshot."""
        return sum((snapshot.bridge_duration() for snapshot in self._snapshots), 0.0)

    def cumulative_times(self) -> list[float]:
        """Running total after each snapshot."""
        totals: list[float] = []
        elapsed = 0.0
        for snapshot in self._snapshots:
            elapsed += snapshot.bridge_duration()
            totals.append(elapsed)
        return totals

    def has_occurred(self, state: CrossingState) -> bool:
        """Check whether an identical state was already recorded.

        The greedy strategy never revisits a state; this is for search-based
        strategies that need to avoid cycles.
        """
        return any(snapshot == state for snapshot in self._snapshots)

    def snapshots(self) -> tuple[CrossingState, ...]:
        return tuple(self._snapshots)

    def final_state(self) -> CrossingState | None:
        if not self._snapshots:
            return None
        return self._snapshots[-1]

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[CrossingState]:
        return iter(tuple(self._snapshots))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossingLog):
            return NotImplemented
        return self._snapshots == other._snapshots

    __hash__ = None  # type: ignore[assignment]
