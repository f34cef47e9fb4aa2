"""eventlayout: Side-by-side layout of overlapping calendar events"""

from .config import LayoutConfig, WindowConfig
from .types import CalendarEvent, TimedEvent, InvalidIntervalError, DuplicateEventError
from .layout import LayoutEngine, LayoutInfo, LayoutResult, ClusterLayout, calculate_event_layouts
from .validation import LayoutValidator, LayoutViolation, LayoutInvariantError, assert_valid_layout
from .window import filter_visible_events, vertical_segment, window_bounds
from . import utils

__version__ = "0.1.0"
__all__ = [
    "LayoutConfig", "WindowConfig",
    "CalendarEvent", "TimedEvent", "InvalidIntervalError", "DuplicateEventError",
    "LayoutEngine", "LayoutInfo", "LayoutResult", "ClusterLayout", "calculate_event_layouts",
    "LayoutValidator", "LayoutViolation", "LayoutInvariantError", "assert_valid_layout",
    "filter_visible_events", "vertical_segment", "window_bounds",
    "utils"]
