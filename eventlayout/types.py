"""
Type definitions for eventlayout

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Hashable, Literal, Optional, Protocol, TypedDict, Union, runtime_checkable
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

Instant = Any
"""Totally ordered time value (timezone-aware datetime, or a number in tests)"""

TieBreak = Literal['id', 'input']
"""Secondary sort key for events sharing a start instant"""


# Event capability

@runtime_checkable
class TimedEvent(Protocol):
    """
    Anything the layout engine can place in a column

    The engine only needs a stable identity and a half-open [start, end)
    interval. Objects are used as mapping keys, so they must be hashable
    and must not change while a layout is being computed.
    """
    id: Hashable
    start: Instant
    end: Instant


@dataclass(frozen=True)
class CalendarEvent:
    """
    Calendar event occupying [start, end) in a day column

    Attributes:
        id: Stable event identifier
        start: Start instant (inclusive)
        end: End instant (exclusive)
        title: Optional display title
    """
    id: str
    start: datetime
    end: datetime
    title: Optional[str] = None

    @property
    def duration_minutes(self) -> float:
        """Length of the event in minutes"""
        return (self.end - self.start).total_seconds() / 60.0


# Structured data types

class LayoutRecord(TypedDict):
    """Single row of a layouts file"""
    id: str
    title: str
    start: str
    end: str
    overlap_group: int
    base_column: int
    column_span: int
    total_columns: int
    width_fraction: float
    offset_fraction: float


# Errors

class InvalidIntervalError(ValueError):
    """Raised for events whose end is not strictly after their start"""

    def __init__(self, event_id: Hashable, start: Instant, end: Instant) -> None:
        self.event_id = event_id
        self.start = start
        self.end = end
        super().__init__(
            f"Event {event_id!r} has an empty or inverted interval: "
            f"start={start}, end={end} (end must be after start)"
        )


class DuplicateEventError(ValueError):
    """Raised when two input events share the same identity"""

    def __init__(self, event_id: Hashable) -> None:
        self.event_id = event_id
        super().__init__(f"Duplicate event id {event_id!r} in layout input")
