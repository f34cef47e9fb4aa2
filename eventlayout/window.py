"""
Visible day window

Selects the events visible in one day column and clips them to the
window's time range. Everything is computed on instants so day
boundaries and timezone offsets need no special handling.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional, Tuple
from zoneinfo import ZoneInfo
import logging

from .config import WindowConfig
from .types import TimedEvent
from .utils import intervals_overlap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerticalSegment:
    """
    Visible part of an event inside a day window

    Attributes:
        offset_minutes: Minutes from the window start to the segment start
        duration_minutes: Length of the clipped segment in minutes
    """
    offset_minutes: float
    duration_minutes: float

    @property
    def is_empty(self) -> bool:
        """Whether nothing of the event is visible"""
        return self.duration_minutes <= 0


def window_bounds(day: date, config: Optional[WindowConfig] = None) -> Tuple[datetime, datetime]:
    """
    Build the half-open visible window [start, end) for a day

    Args:
        day: Calendar day of the column
        config: Window configuration (uses defaults if None)

    Returns:
        Tuple of timezone-aware (window_start, window_end)
    """
    config = config or WindowConfig()
    tz = ZoneInfo(config.timezone)
    window_start = datetime.combine(day, config.day_start, tzinfo=tz)
    if config.day_end is None or config.day_end == time(0, 0):
        window_end = datetime.combine(day + timedelta(days=1), time(0, 0), tzinfo=tz)
    else:
        window_end = datetime.combine(day, config.day_end, tzinfo=tz)
    if window_end <= window_start:
        raise ValueError(
            f"Empty visible window on {day}: {config.day_start} - {config.day_end}"
        )
    return window_start, window_end


def filter_visible_events(
    events: Iterable[TimedEvent],
    day: date,
    config: Optional[WindowConfig] = None
) -> List[TimedEvent]:
    """
    Keep the events intersecting the day's visible window

    Args:
        events: Candidate events
        day: Calendar day of the column
        config: Window configuration (uses defaults if None)

    Returns:
        Visible events, in input order
    """
    window_start, window_end = window_bounds(day, config)
    visible = [
        event for event in events
        if intervals_overlap(event.start, event.end, window_start, window_end)
    ]
    logger.debug(f"{len(visible)} events visible on {day} ({window_start} - {window_end})")
    return visible


def vertical_segment(
    event: TimedEvent,
    day: date,
    config: Optional[WindowConfig] = None
) -> VerticalSegment:
    """
    Clip an event to the day window and measure it in minutes

    Events starting before the window or running past its end (for
    example across midnight) are cut at the window edges. An event with
    no visible part gets an empty segment at the window top.

    Args:
        event: Event to clip
        day: Calendar day of the column
        config: Window configuration (uses defaults if None)

    Returns:
        VerticalSegment for the visible portion
    """
    window_start, window_end = window_bounds(day, config)
    segment_start = max(event.start, window_start)
    segment_end = min(event.end, window_end)

    if segment_end <= segment_start:
        return VerticalSegment(offset_minutes=0.0, duration_minutes=0.0)

    return VerticalSegment(
        offset_minutes=(segment_start - window_start).total_seconds() / 60.0,
        duration_minutes=(segment_end - segment_start).total_seconds() / 60.0,
    )
