"""
eventlayout Configuration
Layout engine options and visible day window settings
"""
from dataclasses import dataclass
from datetime import time
from typing import Optional

from .types import TieBreak

TIE_BREAKS = ('id', 'input')


@dataclass
class LayoutConfig:
    """
    Options for the column layout engine

    Defaults reject malformed input and give layouts that do not depend
    on the order events were passed in.
    """

    # ============================================================
    # INPUT CHECKS
    # ============================================================
    validate_intervals: bool = True
    """Raise InvalidIntervalError for events with end <= start"""

    reject_duplicates: bool = True
    """Raise DuplicateEventError for repeated ids (False: keep the first, warn)"""

    # ============================================================
    # ORDERING
    # ============================================================
    tie_break: TieBreak = 'id'
    """Secondary sort key for equal start instants ('id' or 'input' order)"""

    # ============================================================
    # INVARIANT CHECKS
    # ============================================================
    fraction_tolerance: float = 1e-9
    """Epsilon used when comparing width/offset fractions"""

    def __post_init__(self):
        if self.tie_break not in TIE_BREAKS:
            raise ValueError(
                f"Unknown tie_break: {self.tie_break!r} (expected 'id' or 'input')"
            )

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def strict(cls) -> 'LayoutConfig':
        """
        All input checks enabled, deterministic id tie-break

        Example:
            >>> engine = LayoutEngine(LayoutConfig.strict())
        """
        return cls(validate_intervals=True, reject_duplicates=True, tie_break='id')

    @classmethod
    def lenient(cls) -> 'LayoutConfig':
        """
        Trust the caller: no interval validation, duplicates dropped

        Intervals with end <= start give unspecified layouts in this mode.
        """
        return cls(validate_intervals=False, reject_duplicates=False)


@dataclass
class WindowConfig:
    """
    Visible time window of a single day column
    """

    day_start: time = time(0, 0)
    """Inclusive start of the visible window (local time)"""

    day_end: Optional[time] = None
    """Exclusive end of the visible window; None or 00:00 means next midnight"""

    timezone: str = 'UTC'
    """IANA timezone the day and times are expressed in"""

    @classmethod
    def working_hours(cls, timezone: str = 'UTC') -> 'WindowConfig':
        """Window from 08:00 to 20:00"""
        return cls(day_start=time(8, 0), day_end=time(20, 0), timezone=timezone)
