"""
Participant loader - reads a YAML document into participants.

Documents that cannot be read, do not parse, or contain a bad entry raise a
DocumentError and abort the run. Documents that parse but hold nobody (an
empty file, or no ``people`` list) are logged and yield no participants.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import yaml
from pydantic import ValidationError

from crossing.models import Participant
from crossing.state import CrossingState

from .errors import DocumentNotFoundError, DocumentParseError, InvalidEntryError
from .schema import ParticipantDocument, ParticipantEntry

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    """How a document was read."""

    LOADED = "loaded"
    EMPTY_DOCUMENT = "empty_document"
    MISSING_PEOPLE = "missing_people"


@dataclass
class LoadResult:
    """Participants read from a document, plus how the read went."""

    source: str
    status: LoadStatus
    participants: list[Participant] = field(default_factory=list)

    @property
    def is_degraded(self) -> bool:
        """True when the document parsed but had nobody in it."""
        return self.status is not LoadStatus.LOADED


def assign_ids(entries: Iterable[ParticipantEntry], start: int = 0) -> tuple[list[Participant], int]:
    """
    Create participants with sequential ids in entry order.

    Args:
        entries: Validated document entries
        start: First id to hand out

    Returns:
        The participants and the next unused id
    """
    next_id = start
    participants: list[Participant] = []
    for entry in entries:
        participants.append(Participant(id=next_id, name=entry.name, crossing_time=entry.time))
        next_id += 1
    return participants, next_id


def load_participants(path: str | Path) -> LoadResult:
    """
    Load participants from a YAML document.

    Args:
        path: Path to the document

    Returns:
        LoadResult with the participants and a LoadStatus

    Raises:
        DocumentNotFoundError: If the file is missing or unreadable
        DocumentParseError: If the file is not YAML or its top level is not a mapping
        InvalidEntryError: If an entry has no name, no time, or a non-positive time
    """
    path = Path(path)
    source = str(path)

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise DocumentNotFoundError(f"Participant document not found: {source}") from e
    except OSError as e:
        raise DocumentNotFoundError(f"Cannot read participant document {source}: {e}") from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Participant document {source} is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise DocumentParseError(f"Participant document {source} is not valid YAML: {e}") from e

    if data is None:
        logger.warning(f"Participant document {source} is empty; nobody to cross")
        return LoadResult(source=source, status=LoadStatus.EMPTY_DOCUMENT)

    if not isinstance(data, dict):
        raise DocumentParseError(
            f"Participant document {source} must be a mapping with a 'people' list, got {type(data).__name__}"
        )

    try:
        document = ParticipantDocument.model_validate(data)
    except ValidationError as e:
        raise InvalidEntryError(f"Invalid participant entry in {source}: {e}") from e

    if document.people is None:
        logger.warning(f"No people in participant document {source}; nobody to cross")
        return LoadResult(source=source, status=LoadStatus.MISSING_PEOPLE)

    participants, _ = assign_ids(document.people)
    logger.info(f"Loaded {len(participants)} participants from {source}")
    return LoadResult(source=source, status=LoadStatus.LOADED, participants=participants)


def load_initial_state(path: str | Path) -> CrossingState:
    """Load a document and put everyone in it on the origin bank."""
    return CrossingState.from_participants(load_participants(path).participants)
