"""
Utility functions

General-purpose interval helpers used across eventlayout modules.
"""

from __future__ import annotations
from typing import Any, Callable, List, Sequence, Tuple

from .types import Instant, TieBreak, TimedEvent


def intervals_overlap(
    start1: Instant,
    end1: Instant,
    start2: Instant,
    end2: Instant
) -> bool:
    """
    Check whether two half-open intervals [start1, end1) and [start2, end2) intersect

    Intervals that only touch at a boundary do not overlap.

    Args:
        start1: First interval start (inclusive)
        end1: First interval end (exclusive)
        start2: Second interval start (inclusive)
        end2: Second interval end (exclusive)

    Returns:
        True if the intersection is non-empty, False otherwise
    """
    return start1 < end2 and end1 > start2


def events_overlap(event1: TimedEvent, event2: TimedEvent) -> bool:
    """Temporal overlap of two events"""
    return intervals_overlap(event1.start, event1.end, event2.start, event2.end)


def sort_key(tie_break: TieBreak) -> Callable[[Tuple[int, TimedEvent]], Any]:
    """
    Build a sort key for (input_position, event) pairs

    Events are ordered by start instant. Ties are broken by the id (type
    name, then text) or by input position depending on tie_break. Ids that
    print alike but differ in type, such as 1 and "1", still sort the same
    way regardless of input order.
    """
    if tie_break == 'id':
        return lambda item: (
            item[1].start, type(item[1].id).__name__, str(item[1].id), item[0]
        )
    if tie_break == 'input':
        return lambda item: (item[1].start, item[0])
    raise ValueError(f"Unknown tie_break: {tie_break!r} (expected 'id' or 'input')")


def sort_events(events: Sequence[TimedEvent], tie_break: TieBreak = 'id') -> List[TimedEvent]:
    """Return events ascending by start instant with a deterministic tie-break"""
    return [event for _, event in sorted(enumerate(events), key=sort_key(tie_break))]
