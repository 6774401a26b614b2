"""
Participant model - one person waiting to cross the bridge.

Ids are assigned by the loader and are the only identity; two people may
share a name.
"""

from __future__ import annotations

from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field


@total_ordering
class Participant(BaseModel):
    """A person and how long they take to cross alone."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0)
    name: str
    crossing_time: float = Field(gt=0, allow_inf_nan=False)

    @property
    def sort_key(self) -> tuple[float, int]:
        """Speed order: faster first, ties broken by id."""
        return (self.crossing_time, self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return self.name
