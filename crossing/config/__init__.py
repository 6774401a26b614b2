"""
Participant document loading.

Usage:
    from crossing.config import load_participants, DocumentError

    result = load_participants("people.yaml")
    if result.is_degraded:
        ...  # document parsed but nobody is in it
"""

from __future__ import annotations

from .errors import (
    DocumentError,
    DocumentNotFoundError,
    DocumentParseError,
    InvalidEntryError,
)
from .loader import LoadResult, LoadStatus, assign_ids, load_initial_state, load_participants
from .schema import ParticipantDocument, ParticipantEntry
from .defaults import DEFAULT_PARTICIPANTS, default_participants

__all__ = [
    # Loader
    "LoadResult",
    "LoadStatus",
    "assign_ids",
    "load_initial_state",
    "load_participants",
    # Error classes
    "DocumentError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "InvalidEntryError",
    # Schema
    "ParticipantDocument",
    "ParticipantEntry",
    # Defaults
    "DEFAULT_PARTICIPANTS",
    "default_participants",
]
