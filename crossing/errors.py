"""Contract violation errors for the crossing model.

These signal a bug in the calling strategy, never bad input. They are kept
apart from the document errors in ``crossing.config.errors`` so callers and
tests can tell the two apart.
"""

from __future__ import annotations


class ContractViolation(Exception):
    """Base exception for broken crossing-model invariants."""

    pass


class BridgeCapacityError(ContractViolation):
    """Raised when a move would put more people on the bridge than it holds."""

    pass


class ParticipantNotPresentError(ContractViolation):
    """Raised when moving or removing someone who is not in the bank."""

    pass


class EmptyBankError(ContractViolation):
    """Raised when asking an empty bank for its fastest or slowest member."""

    pass
