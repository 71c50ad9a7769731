"""GlimmerLedger - the shared glimmer total."""
from __future__ import annotations

import logging
from typing import Any, Protocol

_log = logging.getLogger(__name__)


class Ledger(Protocol):
    def add(self, delta: int) -> int: ...


class GlimmerLedger:
    """Holds the global glimmer value. Events adjust it by signed deltas.

    Bounds are optional; when set, the total is clamped to them after each
    adjustment and the recorded delta is the amount actually applied.
    """

    def __init__(
        self,
        total: int = 0,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> None:
        self._set_bounds(minimum, maximum)
        self._total = self._clamp(total)
        self._history: list[int] = []

    def _set_bounds(self, minimum: int | None, maximum: int | None) -> None:
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValueError(f"minimum ({minimum}) must be <= maximum ({maximum})")
        self._minimum = minimum
        self._maximum = maximum

    @property
    def total(self) -> int:
        return self._total

    def _clamp(self, value: int) -> int:
        if self._minimum is not None and value < self._minimum:
            return self._minimum
        if self._maximum is not None and value > self._maximum:
            return self._maximum
        return value

    def add(self, delta: int) -> int:
        """Apply a signed delta and return the new total."""
        old = self._total
        self._total = self._clamp(old + delta)
        applied = self._total - old
        self._history.append(applied)
        _log.debug("glimmer %d -> %d (requested %+d)", old, self._total, delta)
        return self._total

    def set(self, value: int) -> None:
        self._total = self._clamp(value)

    def history(self) -> list[int]:
        """Deltas applied so far, oldest first."""
        return list(self._history)

    def snapshot(self) -> dict[str, Any]:
        return {
            "total": self._total,
            "minimum": self._minimum,
            "maximum": self._maximum,
            "history": list(self._history),
        }

    def restore(self, data: dict[str, Any]) -> None:
        self._set_bounds(data.get("minimum"), data.get("maximum"))
        self._total = self._clamp(data["total"])
        self._history = list(data.get("history", []))
