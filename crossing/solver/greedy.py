"""
Greedy crossing strategy.

The two fastest people act as couriers: they cross first, one of them walks
the light back, the two slowest remaining people cross together, and the
other courier walks the light back. Repeating this clears the slowest pair
per round while every return trip is made by the fastest person available.

For four people with times 1, 2, 5 and 10 this gives the known best total
of 17.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from crossing.errors import ContractViolation
from crossing.history import CrossingLog

if TYPE_CHECKING:
    from crossing.solver.logging import MoveLogger
    from crossing.state import CrossingState

logger = logging.getLogger(__name__)

FORWARD = "forward"
RETURN = "return"


class GreedyPhase(Enum):
    """Steps of one greedy round."""

    SEND_COURIERS = "send_couriers"
    CHECK_DONE = "check_done"
    RETRIEVE_COURIER = "retrieve_courier"
    SEND_SLOWEST_PAIR = "send_slowest_pair"
    RETRIEVE_SECOND_COURIER = "retrieve_second_courier"
    DONE = "done"


class GreedyStrategy:
    """Fast courier-based strategy for crossing the bridge."""

    def __init__(self, move_logger: MoveLogger | None = None) -> None:
        self.move_logger = move_logger
        self._state: CrossingState | None = None
        self._log = CrossingLog()
        self._steps: dict[GreedyPhase, Callable[[], GreedyPhase]] = {
            GreedyPhase.SEND_COURIERS: self._send_couriers,
            GreedyPhase.CHECK_DONE: self._check_done,
            GreedyPhase.RETRIEVE_COURIER: self._retrieve_courier,
            GreedyPhase.SEND_SLOWEST_PAIR: self._send_slowest_pair,
            GreedyPhase.RETRIEVE_SECOND_COURIER: self._retrieve_second_courier,
        }

    def solve(self, initial_state: CrossingState) -> CrossingLog:
        """
        Get everyone across and return the recorded history.

        Args:
            initial_state: Everyone on the origin bank, bridge and destination
                empty. It is copied, never modified.

        Returns:
            The complete log, starting with a snapshot of the initial state.

        Raises:
            ContractViolation: If the initial state is not a fresh start or a
                move breaks a crossing invariant. No partial log is returned.
        """
        if not initial_state.bridge.is_empty() or not initial_state.destination.is_empty():
            raise ContractViolation("Greedy strategy needs everyone on the origin bank to start")

        self._state = initial_state.copy()
        self._log = CrossingLog()
        self._snap()

        count = self._state.origin.size()
        logger.debug(f"Solving crossing for {count} participants")
        self._progress(f"Starting with {count} participants on the origin bank")

        if count == 0:
            self._progress("Nothing to cross")
        elif count == 1:
            self._state.move_origin_to_bridge(self._state.origin.fastest())
            self._cross("single", FORWARD)
        else:
            phase = GreedyPhase.SEND_COURIERS
            while phase is not GreedyPhase.DONE:
                logger.debug(f"Greedy phase: {phase.value}")
                phase = self._steps[phase]()

        log = self._log
        logger.info(f"Crossing solved: {len(log)} snapshots, total time {log.total_time():g}")
        self._progress(f"Finished in {log.total_time():g}")
        return log

    # Phases. Each returns the phase that follows it.

    def _send_couriers(self) -> GreedyPhase:
        state = self._working_state()
        # Two separate boardings; the first leaves one free slot for the second
        state.move_origin_to_bridge(state.origin.fastest())
        state.move_origin_to_bridge(state.origin.fastest())
        self._cross(GreedyPhase.SEND_COURIERS.value, FORWARD)
        return GreedyPhase.CHECK_DONE

    def _check_done(self) -> GreedyPhase:
        if self._origin_empty():
            return GreedyPhase.DONE
        return GreedyPhase.RETRIEVE_COURIER

    def _retrieve_courier(self) -> GreedyPhase:
        self._retrieve_fastest(GreedyPhase.RETRIEVE_COURIER)
        return GreedyPhase.SEND_SLOWEST_PAIR

    def _send_slowest_pair(self) -> GreedyPhase:
        state = self._working_state()
        state.move_origin_to_bridge(state.origin.slowest())
        state.move_origin_to_bridge(state.origin.slowest())
        self._cross(GreedyPhase.SEND_SLOWEST_PAIR.value, FORWARD)
        return GreedyPhase.RETRIEVE_SECOND_COURIER

    def _retrieve_second_courier(self) -> GreedyPhase:
        if self._origin_empty():
            return GreedyPhase.DONE
        self._retrieve_fastest(GreedyPhase.RETRIEVE_SECOND_COURIER)
        return GreedyPhase.SEND_COURIERS

    # Helpers

    def _retrieve_fastest(self, phase: GreedyPhase) -> None:
        """Send the fastest person on the destination bank back with the light."""
        state = self._working_state()
        state.move_destination_to_bridge(state.destination.fastest())
        self._cross(phase.value, RETURN)

    def _cross(self, phase: str, direction: str) -> None:
        """Snapshot the loaded bridge, then unload it on the far side and snapshot again."""
        state = self._working_state()
        names = [p.name for p in state.bridge]
        duration = state.bridge_duration()

        self._snap()
        if direction == FORWARD:
            state.all_bridge_to_destination()
        else:
            state.all_bridge_to_origin()
        self._snap()

        logger.debug(f"{phase}: {' '.join(names)} {direction} ({duration:g})")
        if self.move_logger is not None:
            self.move_logger.log_move(phase, direction, names, duration)

    def _snap(self) -> None:
        self._log.record(self._working_state())

    def _origin_empty(self) -> bool:
        return self._working_state().origin.is_empty()

    def _working_state(self) -> CrossingState:
        if self._state is None:
            raise ContractViolation("Greedy strategy has no working state; call solve() first")
        return self._state

    def _progress(self, message: str) -> None:
        if self.move_logger is not None:
            self.move_logger.log_progress(message)
