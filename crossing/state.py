"""
Crossing state - who is on which side of the bridge.

A CrossingState partitions every participant into three banks: the origin
shore, the bridge itself and the destination shore. The move methods on
CrossingState are the only way people change banks, and each one checks its
preconditions before touching anything.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator

from crossing.errors import BridgeCapacityError, EmptyBankError, ParticipantNotPresentError
from crossing.models import Participant

# At most two people fit on the bridge (and one of them carries the light)
BRIDGE_CAPACITY = 2


def _speed(participant: Participant) -> tuple[float, int]:
    return participant.sort_key


class Bank:
    """An ordered set of participants, fastest first."""

    def __init__(self, name: str, participants: Iterable[Participant] = ()) -> None:
        self.name = name
        self._members: list[Participant] = []
        for participant in participants:
            self.insert(participant)

    def insert(self, participant: Participant) -> None:
        """Add a participant. Adding someone already here does nothing."""
        if participant in self:
            return
        bisect.insort(self._members, participant, key=_speed)

    def remove(self, participant: Participant) -> None:
        """Remove a participant, failing if they are not here."""
        idx = bisect.bisect_left(self._members, participant.sort_key, key=_speed)
        if idx >= len(self._members) or self._members[idx].id != participant.id:
            raise ParticipantNotPresentError(f"{participant.name} (id {participant.id}) is not on the {self.name} bank")
        del self._members[idx]

    def transfer_to(self, participant: Participant, other: Bank) -> None:
        """Move one participant from this bank to another."""
        self.remove(participant)
        other.insert(participant)

    def transfer_all_to(self, other: Bank) -> None:
        """Move everyone to another bank, slowest first."""
        while not self.is_empty():
            self.transfer_to(self.slowest(), other)

    def fastest(self) -> Participant:
        if self.is_empty():
            raise EmptyBankError(f"No fastest participant: the {self.name} bank is empty")
        return self._members[0]

    def slowest(self) -> Participant:
        if self.is_empty():
            raise EmptyBankError(f"No slowest participant: the {self.name} bank is empty")
        return self._members[-1]

    def size(self) -> int:
        return len(self._members)

    def is_empty(self) -> bool:
        return not self._members

    def members(self) -> tuple[Participant, ...]:
        """Read-only snapshot of the members in speed order."""
        return tuple(self._members)

    def member_ids(self) -> frozenset[int]:
        return frozenset(p.id for p in self._members)

    def copy(self) -> Bank:
        clone = Bank(self.name)
        # Participants are immutable, so a new list is a full value copy
        clone._members = list(self._members)
        return clone

    def __contains__(self, participant: object) -> bool:
        if not isinstance(participant, Participant):
            return False
        idx = bisect.bisect_left(self._members, participant.sort_key, key=_speed)
        return idx < len(self._members) and self._members[idx].id == participant.id

    def __iter__(self) -> Iterator[Participant]:
        return iter(tuple(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bank):
            return NotImplemented
        return self.member_ids() == other.member_ids()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        names = " ".join(p.name for p in self._members)
        return f"Bank({self.name}: {names})"


class CrossingState:
    """The origin, bridge and destination banks for one run."""

    def __init__(
        self,
        origin: Bank | None = None,
        bridge: Bank | None = None,
        destination: Bank | None = None,
    ) -> None:
        self.origin = origin if origin is not None else Bank("origin")
        self.bridge = bridge if bridge is not None else Bank("bridge")
        self.destination = destination if destination is not None else Bank("destination")

    @classmethod
    def from_participants(cls, participants: Iterable[Participant]) -> CrossingState:
        """Start a crossing with everyone waiting on the origin bank."""
        return cls(origin=Bank("origin", participants))

    def _check_bridge_has_room(self, participant: Participant) -> None:
        if self.bridge.size() >= BRIDGE_CAPACITY:
            raise BridgeCapacityError(
                f"Cannot put {participant.name} on the bridge: "
                f"it already holds {self.bridge.size()} of {BRIDGE_CAPACITY}"
            )

    # The four primitive moves. Spelling each direction out keeps strategies
    # from mixing up the two shores.

    def move_origin_to_bridge(self, participant: Participant) -> None:
        self._check_bridge_has_room(participant)
        self.origin.transfer_to(participant, self.bridge)

    def move_bridge_to_destination(self, participant: Participant) -> None:
        self.bridge.transfer_to(participant, self.destination)

    def move_destination_to_bridge(self, participant: Participant) -> None:
        self._check_bridge_has_room(participant)
        self.destination.transfer_to(participant, self.bridge)

    def move_bridge_to_origin(self, participant: Participant) -> None:
        self.bridge.transfer_to(participant, self.origin)

    def all_bridge_to_destination(self) -> None:
        self.bridge.transfer_all_to(self.destination)

    def all_bridge_to_origin(self) -> None:
        self.bridge.transfer_all_to(self.origin)

    def bridge_duration(self) -> float:
        """Time charged for the current bridge occupancy (slowest walker)."""
        if self.bridge.is_empty():
            return 0
        return self.bridge.slowest().crossing_time

    def participants(self) -> tuple[Participant, ...]:
        """Everyone in the crossing, in speed order."""
        everyone = [*self.origin, *self.bridge, *self.destination]
        return tuple(sorted(everyone))

    def participant_count(self) -> int:
        return self.origin.size() + self.bridge.size() + self.destination.size()

    def copy(self) -> CrossingState:
        return CrossingState(
            origin=self.origin.copy(),
            bridge=self.bridge.copy(),
            destination=self.destination.copy(),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CrossingState):
            return NotImplemented
        return self.origin == other.origin and self.bridge == other.bridge and self.destination == other.destination

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CrossingState({self.origin!r}, {self.bridge!r}, {self.destination!r})"
