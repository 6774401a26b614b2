"""Log Analysis - Pure functions for inspecting a finished crossing log.

These take a CrossingLog and report on it without changing anything, so they
can check any strategy's output the same way.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from crossing.state import BRIDGE_CAPACITY

if TYPE_CHECKING:
    from crossing.history import CrossingLog
    from crossing.models import Participant


@dataclass(frozen=True)
class Crossing:
    """One trip over the bridge."""

    direction: str  # 'forward' or 'return'
    participants: tuple[Participant, ...]
    duration: float

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.participants]


def summarize_crossings(log: CrossingLog) -> list[Crossing]:
    """Turn every snapshot with people on the bridge into a Crossing.

    Direction comes from where the bridge occupants stood in the previous
    snapshot: the origin bank means a forward trip, anywhere else a return.
    """
    crossings: list[Crossing] = []
    previous = None
    for snapshot in log:
        if not snapshot.bridge.is_empty():
            occupants = snapshot.bridge.members()
            came_from_origin = previous is not None and all(p in previous.origin for p in occupants)
            crossings.append(
                Crossing(
                    direction="forward" if came_from_origin else "return",
                    participants=occupants,
                    duration=snapshot.bridge_duration(),
                )
            )
        previous = snapshot
    return crossings


def find_invariant_violations(log: CrossingLog, expected_ids: Iterable[int]) -> list[str]:
    """Check every snapshot for conservation, overlap and bridge capacity.

    Args:
        log: The log to check
        expected_ids: Ids of everyone who started the crossing

    Returns:
        Human-readable problems, empty when the log is healthy
    """
    expected = frozenset(expected_ids)
    problems: list[str] = []

    for idx, snapshot in enumerate(log):
        banks = (snapshot.origin, snapshot.bridge, snapshot.destination)
        seen: set[int] = set()
        for bank in banks:
            overlap = seen & bank.member_ids()
            if overlap:
                problems.append(f"snapshot {idx}: ids {sorted(overlap)} appear on more than one bank")
            seen |= bank.member_ids()

        if seen != expected:
            missing = sorted(expected - seen)
            extra = sorted(seen - expected)
            problems.append(f"snapshot {idx}: participants not conserved (missing {missing}, unexpected {extra})")

        if snapshot.bridge.size() > BRIDGE_CAPACITY:
            problems.append(f"snapshot {idx}: {snapshot.bridge.size()} people on the bridge")

    return problems
