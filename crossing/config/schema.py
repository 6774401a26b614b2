"""Participant document schema.

Example document:

    people:
      - name: Alice
        time: 1
      - name: Bob
        time: 2.5
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParticipantEntry(BaseModel):
    """One entry of the ``people`` list."""

    model_config = ConfigDict(extra="ignore")

    name: str
    time: float = Field(gt=0, allow_inf_nan=False)

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> Any:
        """YAML reads names like ``007`` or ``yes`` as non-strings; keep them as text."""
        if isinstance(v, bool | int | float):
            return str(v)
        return v


class ParticipantDocument(BaseModel):
    """Top level of a participant document."""

    model_config = ConfigDict(extra="ignore")

    people: list[ParticipantEntry] | None = None
