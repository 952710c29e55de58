"""Audit log for registration and parsing.

The registry records structured log entries for what it did: which
variables were registered, which ones were set from the environment,
and how many a parse pass handled.  Callers can inspect the log after
startup to explain where a configuration value came from.

- **LogLevel** — severity levels ordered for filtering (DEBUG < INFO).
- **LogEntry** — a single structured record (level, message, source, variable).
- **Logger** — an append-only log with filtering and clearing.

Only successful events are recorded.  Failures are raised to the
caller, never written here.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Severity levels for log entries.

    Using IntEnum means levels compare with ``<`` / ``>`` naturally,
    which makes minimum-level filtering trivial.
    """

    DEBUG = 0
    INFO = 1


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The stage that generated the event ("registry" or "parse").
        variable: The environment variable concerned, if any.

    """

    level: LogLevel
    message: str
    source: str
    variable: str | None = None

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        variable: str | None = None,
    ) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Stage that generated the event.
            variable: Environment variable associated with the event.

        """
        self._entries.append(
            LogEntry(level=level, message=message, source=source, variable=variable)
        )

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        variable: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching all of the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.
            variable: If set, only return entries about this variable.

        Returns:
            A filtered list of log entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        if variable is not None:
            result = [e for e in result if e.variable == variable]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
