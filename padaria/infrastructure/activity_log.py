"""Activity log.

Append-only record of what the system did, with the levels used by the
console report (info, success, warning, error). Entries are fanned out
to sinks: the in-memory sink backs the "view system logs" menu entry and
the structlog sink forwards entries to the process log.

Logging never raises. A failing sink is reported through structlog and
skipped so the error being logged is never masked.
"""

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

import structlog

from padaria.domain.base import utcnow

logger = structlog.get_logger()


class LogLevel(str, Enum):
    """Activity log severity."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class LogEntry:
    """A single activity log record.

    Attributes:
        level: Severity.
        message: Human-readable message.
        context: Extra key/value data.
        timestamp: When the entry was created (UTC).
    """

    level: LogLevel
    message: str
    context: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=utcnow)

    def format(self) -> str:
        """Render the entry as a single console line."""
        line = f"[{self.timestamp.isoformat(timespec='seconds')}] {self.level.value.upper()}: {self.message}"
        if self.context:
            extra = " ".join(f"{key}={value}" for key, value in self.context.items())
            line = f"{line} ({extra})"
        return line

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "message": self.message,
            "context": self.context,
        }


# ============================================================================
# Sinks
# ============================================================================


class LogSink(ABC):
    """Destination for activity log entries."""

    @abstractmethod
    async def write(self, entry: LogEntry) -> None:
        """Persist one entry."""


class MemoryLogSink(LogSink):
    """Keeps the most recent entries in memory."""

    def __init__(self, max_entries: int | None = None) -> None:
        """Initialize sink.

        Args:
            max_entries: Oldest entries are dropped beyond this size.
                None keeps everything.
        """
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)

    async def write(self, entry: LogEntry) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> list[LogEntry]:
        """Snapshot of stored entries, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        """Drop all stored entries."""
        self._entries.clear()


class StructlogSink(LogSink):
    """Forwards entries to a structlog logger.

    ``success`` has no stdlib counterpart; it is emitted at info level
    with ``outcome="success"``. Context keys that would clash with the
    event name or the outcome marker are prefixed with ``context_``.
    """

    RESERVED_KEYS = frozenset({"event", "outcome"})

    def __init__(self, log: Any = None) -> None:
        self.log = log or structlog.get_logger("padaria.activity")

    async def write(self, entry: LogEntry) -> None:
        fields = {
            f"context_{key}" if key in self.RESERVED_KEYS else key: value
            for key, value in entry.context.items()
        }
        if entry.level is LogLevel.ERROR:
            self.log.error(entry.message, **fields)
        elif entry.level is LogLevel.WARNING:
            self.log.warning(entry.message, **fields)
        elif entry.level is LogLevel.SUCCESS:
            self.log.info(entry.message, outcome="success", **fields)
        else:
            self.log.info(entry.message, **fields)


# ============================================================================
# Activity Logger
# ============================================================================


class ActivityLogger:
    """Leveled, append-only activity logger.

    Example usage:
        activity = ActivityLogger()
        await activity.success("Categoria criada: Pães")
        for entry in activity.entries():
            print(entry.format())
    """

    def __init__(self, sinks: Sequence[LogSink] | None = None, max_entries: int | None = None) -> None:
        """Initialize logger.

        Args:
            sinks: Destinations for entries. Defaults to an in-memory sink
                plus a structlog sink.
            max_entries: Size of the default in-memory sink.
        """
        if sinks is None:
            sinks = [MemoryLogSink(max_entries), StructlogSink()]
        self.sinks = list(sinks)
        self._memory = next((s for s in self.sinks if isinstance(s, MemoryLogSink)), None)

    async def info(self, message: str, context: dict[str, Any] | None = None) -> LogEntry:
        """Record an informational entry."""
        return await self._emit(LogLevel.INFO, message, context)

    async def success(self, message: str, context: dict[str, Any] | None = None) -> LogEntry:
        """Record a successful outcome."""
        return await self._emit(LogLevel.SUCCESS, message, context)

    async def warning(self, message: str, context: dict[str, Any] | None = None) -> LogEntry:
        """Record an expected, recovered problem."""
        return await self._emit(LogLevel.WARNING, message, context)

    async def error(self, message: str, context: dict[str, Any] | None = None) -> LogEntry:
        """Record a failure."""
        return await self._emit(LogLevel.ERROR, message, context)

    def entries(self, level: LogLevel | None = None) -> list[LogEntry]:
        """Get recorded entries, oldest first.

        Args:
            level: Only return entries of this level.

        Returns:
            Entries held by the in-memory sink; empty without one.
        """
        if self._memory is None:
            return []
        entries = self._memory.entries
        if level is not None:
            entries = [e for e in entries if e.level is level]
        return entries

    async def _emit(self, level: LogLevel, message: str, context: dict[str, Any] | None) -> LogEntry:
        entry = LogEntry(level=level, message=message, context=dict(context or {}))
        for sink in self.sinks:
            try:
                await sink.write(entry)
            except Exception as exc:
                logger.warning(
                    "Activity log sink failed",
                    sink=type(sink).__name__,
                    error=str(exc),
                )
        return entry
