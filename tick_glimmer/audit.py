"""AdminLog - audit trail for station events."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Protocol

from tick_glimmer.types import LogImpact, LogType

_log = logging.getLogger(__name__)


@dataclass
class AuditEntry:
    sequence: int
    type: LogType
    impact: LogImpact
    message: str


class AuditLog(Protocol):
    def add(
        self, type: LogType, message: str, impact: LogImpact = LogImpact.MEDIUM
    ) -> None: ...


class AdminLog:
    """Bounded in-memory audit log, mirrored to the ``logging`` module."""

    def __init__(self, max_entries: int = 0) -> None:
        maxlen = max_entries if max_entries > 0 else None
        self._entries: deque[AuditEntry] = deque(maxlen=maxlen)
        self._sequence = 0

    def add(
        self, type: LogType, message: str, impact: LogImpact = LogImpact.MEDIUM
    ) -> None:
        self._sequence += 1
        self._entries.append(
            AuditEntry(sequence=self._sequence, type=type, impact=impact, message=message)
        )
        level = logging.WARNING if impact >= LogImpact.HIGH else logging.INFO
        _log.log(level, "[%s] %s", type.value, message)

    def query(
        self, type: LogType | None = None, impact: LogImpact | None = None
    ) -> list[AuditEntry]:
        """Entries matching all given filters, oldest first."""
        result = list(self._entries)
        if type is not None:
            result = [e for e in result if e.type == type]
        if impact is not None:
            result = [e for e in result if e.impact == impact]
        return result

    def last(self, type: LogType) -> AuditEntry | None:
        for e in reversed(self._entries):
            if e.type == type:
                return e
        return None

    def snapshot(self) -> list[dict]:
        return [
            {
                "sequence": e.sequence,
                "type": e.type.value,
                "impact": int(e.impact),
                "message": e.message,
            }
            for e in self._entries
        ]

    def restore(self, data: list[dict]) -> None:
        self._entries.clear()
        for d in data:
            self._entries.append(
                AuditEntry(
                    sequence=d["sequence"],
                    type=LogType(d["type"]),
                    impact=LogImpact(d["impact"]),
                    message=d["message"],
                )
            )
        self._sequence = max((e.sequence for e in self._entries), default=0)

    def __len__(self) -> int:
        return len(self._entries)
