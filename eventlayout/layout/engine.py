"""
Layout Engine for eventlayout
Side-by-side placement of overlapping events in a single day column

Steps, each consuming the previous one's output:
1. Sort events by start (deterministic tie-break)
2. Split into overlap clusters
3. Greedy column assignment per cluster
4. Rightward span expansion into unblocked neighbour columns
5. Conversion of columns into width/offset fractions
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional
import logging

from ..config import LayoutConfig
from ..types import DuplicateEventError, InvalidIntervalError, TimedEvent
from ..utils import sort_events
from .clustering import cluster_events
from .columns import assign_columns, right_boundary, to_fractions
from .types import ClusterLayout, LayoutInfo, LayoutResult

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Column layout engine for one day column

    Algorithm:
    1. Events connected by a chain of overlaps form a cluster
    2. Within a cluster each event takes the leftmost column whose
       previous occupant has ended (half-open intervals)
    3. Each event then widens to the right until a column holds an
       event that overlaps it
    4. Widths and offsets are column counts divided by the cluster's
       total columns

    The engine keeps no state between calls.
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Layout configuration (uses defaults if None)
        """
        self.config = config or LayoutConfig()

    def calculate_layout(self, events: Iterable[TimedEvent]) -> LayoutResult:
        """
        Calculate layout for all events of a day column

        Args:
            events: Events sharing the column, in any order

        Returns:
            LayoutResult with one LayoutInfo per distinct event

        Raises:
            InvalidIntervalError: An event ends at or before its start
                (when config.validate_intervals is set)
            DuplicateEventError: Two events share an id
                (when config.reject_duplicates is set)
        """
        unique_events = self._prepare_events(list(events))
        if not unique_events:
            return self._create_empty_layout()

        sorted_events = sort_events(unique_events, self.config.tie_break)
        clusters = cluster_events(sorted_events)

        layouts: Dict[TimedEvent, LayoutInfo] = {}
        cluster_layouts: List[ClusterLayout] = []
        expanded_events = 0

        for group_index, cluster in enumerate(clusters):
            base_columns, total_columns = assign_columns(sorted_events, cluster)

            for index in cluster:
                base_column = base_columns[index]
                column_span = right_boundary(
                    sorted_events, cluster, base_columns, index, total_columns
                ) - base_column
                width, offset = to_fractions(base_column, column_span, total_columns)
                layouts[sorted_events[index]] = LayoutInfo(
                    width_fraction=width,
                    offset_fraction=offset,
                    overlap_group=group_index,
                    base_column_index=base_column,
                    column_span=column_span,
                    total_columns=total_columns,
                )
                if column_span > 1:
                    expanded_events += 1

            members = [sorted_events[index] for index in cluster]
            cluster_layouts.append(ClusterLayout(
                group_index=group_index,
                events=members,
                total_columns=total_columns,
                start=members[0].start,
                end=max(event.end for event in members),
            ))
            logger.debug(f"Cluster {group_index}: {len(cluster)} events, {total_columns} columns")

        logger.info(f"Laid out {len(layouts)} events in {len(clusters)} clusters")

        return LayoutResult(
            layouts=layouts,
            clusters=cluster_layouts,
            layout_stats={
                'n_events': len(layouts),
                'n_clusters': len(clusters),
                'max_columns': max(c.total_columns for c in cluster_layouts),
                'expanded_events': expanded_events,
                'tie_break': self.config.tie_break,
            }
        )

    def _prepare_events(self, events: List[TimedEvent]) -> List[TimedEvent]:
        """
        Validate intervals and drop or reject duplicates

        An event is a duplicate when its id was seen before, or when it
        compares equal to an earlier event and would share its mapping key.

        Args:
            events: Raw input events

        Returns:
            Events with unique ids and keys, first occurrence kept
        """
        seen_ids = set()
        seen_events = set()
        unique_events: List[TimedEvent] = []
        for event in events:
            if self.config.validate_intervals and not event.start < event.end:
                raise InvalidIntervalError(event.id, event.start, event.end)
            if event.id in seen_ids or event in seen_events:
                if self.config.reject_duplicates:
                    raise DuplicateEventError(event.id)
                logger.warning(f"Dropping duplicate event id {event.id!r}")
                continue
            seen_ids.add(event.id)
            seen_events.add(event)
            unique_events.append(event)
        return unique_events

    def _create_empty_layout(self) -> LayoutResult:
        """Layout for a column without events"""
        logger.debug("No events to lay out")
        return LayoutResult(
            layouts={},
            clusters=[],
            layout_stats={
                'n_events': 0,
                'n_clusters': 0,
                'max_columns': 0,
                'expanded_events': 0,
                'tie_break': self.config.tie_break,
            }
        )


def calculate_event_layouts(
    events: Iterable[TimedEvent],
    config: Optional[LayoutConfig] = None
) -> Dict[TimedEvent, LayoutInfo]:
    """
    Calculate horizontal layout for events rendered in the same day column

    Args:
        events: Events of one column, in any order
        config: Layout configuration (uses defaults if None)

    Returns:
        Mapping from each distinct event to its LayoutInfo
    """
    return LayoutEngine(config).calculate_layout(events).layouts
