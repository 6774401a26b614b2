"""Plain-text rendering of crossing states and logs."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crossing.history import CrossingLog
    from crossing.solver.analysis import Crossing
    from crossing.state import Bank, CrossingState


def _names(bank: Bank) -> str:
    return " ".join(p.name for p in bank.members())


def format_time(value: float) -> str:
    return f"{value:g}"


def render_state(state: CrossingState) -> str:
    """Three lines, one per bank, names in speed order."""
    return "\n".join(
        [
            f"ORIGIN: {_names(state.origin)}".rstrip(),
            f"BRIDGE: {_names(state.bridge)}".rstrip(),
            f"DESTINATION: {_names(state.destination)}".rstrip(),
        ]
    )


def render_log(log: CrossingLog) -> str:
    """Every snapshot followed by a blank line, then the total time."""
    blocks = [render_state(snapshot) + "\n" for snapshot in log]
    blocks.append(f"TOTAL TIME {format_time(log.total_time())}")
    return "\n".join(blocks)


def render_crossings(crossings: Iterable[Crossing]) -> str:
    """One line per trip: ``A B -> (2)`` forward, ``<- A (1)`` back."""
    lines = []
    for crossing in crossings:
        names = " ".join(crossing.names)
        duration = format_time(crossing.duration)
        if crossing.direction == "forward":
            lines.append(f"{names} -> ({duration})")
        else:
            lines.append(f"<- {names} ({duration})")
    return "\n".join(lines)
