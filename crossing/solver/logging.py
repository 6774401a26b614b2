"""
Move Logger - records the crossings a strategy makes.

Tracks each bridge trip and solver progress so a run can be inspected or
saved after the fact.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class MoveLogger:
    """Logger for tracking the trips made while solving a crossing."""

    def __init__(self, debug_mode: bool = False) -> None:
        self.debug_mode = debug_mode
        self.moves: list[dict[str, Any]] = []
        self.solver_progress: list[str] = []

    def log_move(self, phase: str, direction: str, names: list[str], duration: float) -> None:
        """Log one bridge trip."""
        self.moves.append(
            {
                "phase": phase,
                "direction": direction,
                "participants": names,
                "duration": duration,
            }
        )
        if self.debug_mode:
            logger.debug(f"[MOVE] {phase} {direction}: {' '.join(names)} ({duration:g})")

    def log_progress(self, message: str) -> None:
        """Log solver progress."""
        self.solver_progress.append(message)
        if self.debug_mode:
            logger.debug(f"[SOLVER] {message}")

    def total_duration(self) -> float:
        return sum((move["duration"] for move in self.moves), 0.0)

    def get_summary(self) -> dict[str, Any]:
        """Get summary of all logged information."""
        return {
            "move_count": len(self.moves),
            "forward_trips": sum(1 for m in self.moves if m["direction"] == "forward"),
            "return_trips": sum(1 for m in self.moves if m["direction"] == "return"),
            "total_time": self.total_duration(),
            "solver_progress": self.solver_progress,
        }

    def save_to_file(self, filepath: str | Path) -> str:
        """Save logs to a JSON file and return the file path."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        log_data = {
            "timestamp": datetime.now().isoformat(),
            "debug_mode": self.debug_mode,
            "summary": self.get_summary(),
            "moves": self.moves,
        }

        with open(filepath, "w") as f:
            json.dump(log_data, f, indent=2, default=str)

        logger.info(f"Move log saved to {filepath}")
        return str(filepath)
