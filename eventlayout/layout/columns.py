"""
Column packing within an overlap cluster

Greedy column assignment, rightward span expansion and conversion of
discrete columns into width/offset fractions.
"""

from __future__ import annotations
from typing import Dict, List, Sequence, Tuple

from ..types import Instant, TimedEvent
from ..utils import events_overlap


def assign_columns(
    sorted_events: Sequence[TimedEvent],
    cluster: Sequence[int]
) -> Tuple[Dict[int, int], int]:
    """
    Assign each event of a cluster its leftmost free column

    Events are visited in start order. A column is free when its last
    occupant ends at or before the event's start. When no column is free
    a new one is opened on the right.

    Args:
        sorted_events: Events ascending by start instant
        cluster: Indices into sorted_events, ascending

    Returns:
        Tuple of (base column per event index, total columns)
    """
    column_last_end: List[Instant] = []
    base_columns: Dict[int, int] = {}

    for index in cluster:
        event = sorted_events[index]
        column = _first_free_column(column_last_end, event.start)
        if column == len(column_last_end):
            column_last_end.append(event.end)
        else:
            column_last_end[column] = event.end
        base_columns[index] = column

    return base_columns, len(column_last_end)


def _first_free_column(column_last_end: Sequence[Instant], start: Instant) -> int:
    for column, last_end in enumerate(column_last_end):
        if last_end <= start:
            return column
    return len(column_last_end)


def right_boundary(
    sorted_events: Sequence[TimedEvent],
    cluster: Sequence[int],
    base_columns: Dict[int, int],
    event_index: int,
    total_columns: int
) -> int:
    """
    First column right of the event's base column that is blocked

    A column blocks the event when any other cluster member based in
    that column overlaps it in time.

    Args:
        sorted_events: Events ascending by start instant
        cluster: Indices of the event's cluster
        base_columns: Base column per event index (from assign_columns)
        event_index: Event to expand
        total_columns: Columns used by the cluster

    Returns:
        Exclusive column boundary, total_columns when nothing blocks
    """
    event = sorted_events[event_index]
    for column in range(base_columns[event_index] + 1, total_columns):
        for other in cluster:
            if other == event_index or base_columns[other] != column:
                continue
            if events_overlap(event, sorted_events[other]):
                return column
    return total_columns


def to_fractions(base_column: int, column_span: int, total_columns: int) -> Tuple[float, float]:
    """Convert a column range into (width_fraction, offset_fraction)"""
    return column_span / total_columns, base_column / total_columns
