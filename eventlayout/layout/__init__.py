"""
Layout Module for eventlayout
Column layout engine for overlapping events in a day column

Public API:
    - LayoutEngine: Main layout calculation engine
    - calculate_event_layouts: Event -> LayoutInfo mapping in one call
    - LayoutResult: Complete layout solution
    - LayoutInfo: Per-event width/offset fractions
    - ClusterLayout: Per-cluster summary
"""

from .engine import LayoutEngine, calculate_event_layouts
from .clustering import cluster_events
from .columns import assign_columns, right_boundary, to_fractions
from .types import (
    LayoutResult,
    LayoutInfo,
    ClusterLayout,
)

__all__ = [
    'LayoutEngine',
    'calculate_event_layouts',
    'cluster_events',
    'assign_columns',
    'right_boundary',
    'to_fractions',
    'LayoutResult',
    'LayoutInfo',
    'ClusterLayout',
]
