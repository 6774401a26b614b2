"""Built-in participant set used when no document is given."""

from __future__ import annotations

from crossing.models import Participant

from .loader import assign_ids
from .schema import ParticipantEntry

# The classic puzzle: best possible total is 17
DEFAULT_PARTICIPANTS: list[tuple[str, float]] = [
    ("A", 1),
    ("B", 2),
    ("C", 5),
    ("D", 10),
]


def default_participants() -> list[Participant]:
    """Build fresh participants for the default set, ids 0..3."""
    entries = [ParticipantEntry(name=name, time=time) for name, time in DEFAULT_PARTICIPANTS]
    participants, _ = assign_ids(entries)
    return participants
