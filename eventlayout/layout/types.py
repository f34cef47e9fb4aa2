"""
Layout types for eventlayout
Data structures for layout engine results

Per-event and per-cluster results are immutable (frozen) for safety and testability.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..types import Instant, TimedEvent


@dataclass(frozen=True)
class LayoutInfo:
    """
    Horizontal placement of one event inside its day column

    Attributes:
        width_fraction: Fraction of the column width to render, in (0, 1]
        offset_fraction: Left offset as a fraction of the column width, in [0, 1)
        overlap_group: Index of the event's cluster, in temporal order
        base_column_index: Leftmost discrete column occupied
        column_span: Number of discrete columns occupied (>= 1)
        total_columns: Columns used by the event's cluster
    """
    width_fraction: float
    offset_fraction: float
    overlap_group: int
    base_column_index: int
    column_span: int
    total_columns: int

    @property
    def end_column_index(self) -> int:
        """Exclusive right column boundary"""
        return self.base_column_index + self.column_span

    @property
    def is_expanded(self) -> bool:
        """Whether the event grew past its base column"""
        return self.column_span > 1


@dataclass(frozen=True)
class ClusterLayout:
    """
    Summary of one overlap cluster

    Attributes:
        group_index: Cluster index (0-based, temporal order)
        events: Member events in processing order
        total_columns: Discrete columns used by the cluster
        start: Earliest start instant in the cluster
        end: Latest end instant in the cluster
    """
    group_index: int
    events: List[TimedEvent]
    total_columns: int
    start: Instant
    end: Instant

    @property
    def n_events(self) -> int:
        """Number of events in the cluster"""
        return len(self.events)

    @property
    def is_singleton(self) -> bool:
        """Whether the cluster holds a single event"""
        return len(self.events) == 1


@dataclass
class LayoutResult:
    """
    Complete layout solution for one day column

    This is the output of LayoutEngine and the input of LayoutWriter
    and LayoutValidator.

    Attributes:
        layouts: LayoutInfo per distinct input event
        clusters: Cluster summaries in temporal order
        layout_stats: Statistics about the layout
    """
    layouts: Dict[TimedEvent, LayoutInfo]
    clusters: List[ClusterLayout]
    layout_stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def n_events(self) -> int:
        """Number of laid out events"""
        return len(self.layouts)

    @property
    def n_clusters(self) -> int:
        """Number of overlap clusters"""
        return len(self.clusters)

    @property
    def max_columns(self) -> int:
        """Widest cluster, in columns (0 for an empty column)"""
        return max((c.total_columns for c in self.clusters), default=0)

    def get_layout(self, event: TimedEvent) -> LayoutInfo:
        """Get layout for an event"""
        return self.layouts[event]

    def get_cluster(self, event: TimedEvent) -> ClusterLayout:
        """Get the cluster an event belongs to"""
        return self.clusters[self.layouts[event].overlap_group]
