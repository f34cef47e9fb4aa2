"""
Layout invariant checker

Verifies a computed layout against the properties every valid layout
must have: coverage of the input, no shared columns between
overlapping events, consistent fractions and bounded geometry.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Optional, Tuple
import logging

import numpy as np

from .config import LayoutConfig
from .layout.types import LayoutInfo
from .types import TimedEvent
from .utils import events_overlap, sort_events

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutViolation:
    """
    One broken layout invariant

    Attributes:
        rule: Invariant name ('coverage', 'cluster', 'overlap', 'fraction', 'bounds')
        event_ids: Ids of the events involved
        message: Human-readable description
    """
    rule: str
    event_ids: Tuple[Hashable, ...]
    message: str


class LayoutInvariantError(AssertionError):
    """Raised by assert_valid_layout when a layout breaks an invariant"""

    def __init__(self, violations: List[LayoutViolation]) -> None:
        self.violations = violations
        lines = [f"  [{v.rule}] {v.message}" for v in violations]
        super().__init__(f"{len(violations)} layout violation(s):\n" + "\n".join(lines))


class LayoutValidator:
    """Checks LayoutInfo mappings produced by LayoutEngine"""

    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        self.config: LayoutConfig = config or LayoutConfig()

    def check(
        self,
        events: Iterable[TimedEvent],
        layouts: Dict[TimedEvent, LayoutInfo]
    ) -> List[LayoutViolation]:
        """
        Run all invariant checks

        Args:
            events: Events the layout was computed for
            layouts: Engine output for those events

        Returns:
            List of violations, empty for a valid layout
        """
        events = list(events)
        violations: List[LayoutViolation] = []
        violations.extend(self._check_coverage(events, layouts))

        laid_out = sort_events(list(layouts), self.config.tie_break)
        violations.extend(self._check_pairs(laid_out, layouts))
        violations.extend(self._check_geometry(laid_out, layouts))

        if violations:
            logger.warning(f"Layout has {len(violations)} invariant violation(s)")
        else:
            logger.debug(f"Layout of {len(laid_out)} events passed all checks")
        return violations

    def _check_coverage(
        self,
        events: List[TimedEvent],
        layouts: Dict[TimedEvent, LayoutInfo]
    ) -> List[LayoutViolation]:
        """Every distinct input event has exactly one layout and nothing else does"""
        expected_ids = {e.id for e in events}
        actual_ids = [e.id for e in layouts]
        violations = []

        missing = expected_ids - set(actual_ids)
        if missing:
            violations.append(LayoutViolation(
                'coverage', tuple(sorted(missing, key=str)),
                f"Events without layout: {sorted(missing, key=str)}"
            ))
        extra = set(actual_ids) - expected_ids
        if extra:
            violations.append(LayoutViolation(
                'coverage', tuple(sorted(extra, key=str)),
                f"Layouts for unknown events: {sorted(extra, key=str)}"
            ))
        repeated = {i for i in actual_ids if actual_ids.count(i) > 1}
        if repeated:
            violations.append(LayoutViolation(
                'coverage', tuple(sorted(repeated, key=str)),
                f"Event ids laid out more than once: {sorted(repeated, key=str)}"
            ))
        return violations

    def _check_pairs(
        self,
        events: List[TimedEvent],
        layouts: Dict[TimedEvent, LayoutInfo]
    ) -> List[LayoutViolation]:
        """Overlapping events share a cluster and never share a column"""
        violations = []
        for i, a in enumerate(events):
            for b in events[i + 1:]:
                if b.start >= a.end:
                    # sorted by start: no later event can overlap a
                    break
                if not events_overlap(a, b):
                    continue
                la, lb = layouts[a], layouts[b]
                if la.overlap_group != lb.overlap_group:
                    violations.append(LayoutViolation(
                        'cluster', (a.id, b.id),
                        f"Overlapping events {a.id!r} and {b.id!r} are in groups "
                        f"{la.overlap_group} and {lb.overlap_group}"
                    ))
                elif (la.base_column_index < lb.end_column_index
                      and lb.base_column_index < la.end_column_index):
                    violations.append(LayoutViolation(
                        'overlap', (a.id, b.id),
                        f"Overlapping events {a.id!r} and {b.id!r} share columns "
                        f"[{la.base_column_index}, {la.end_column_index}) and "
                        f"[{lb.base_column_index}, {lb.end_column_index})"
                    ))
        return violations

    def _check_geometry(
        self,
        events: List[TimedEvent],
        layouts: Dict[TimedEvent, LayoutInfo]
    ) -> List[LayoutViolation]:
        """Fractions match the column triple and stay inside the column"""
        if not events:
            return []

        tol = self.config.fraction_tolerance
        infos = [layouts[e] for e in events]
        width = np.array([l.width_fraction for l in infos], dtype=float)
        offset = np.array([l.offset_fraction for l in infos], dtype=float)
        base = np.array([l.base_column_index for l in infos], dtype=float)
        span = np.array([l.column_span for l in infos], dtype=float)
        total = np.array([l.total_columns for l in infos], dtype=float)

        fraction_ok = (
            np.isclose(width * total, span, rtol=0.0, atol=tol)
            & np.isclose(offset * total, base, rtol=0.0, atol=tol)
        )
        bounds_ok = (
            (width > 0) & (width <= 1 + tol)
            & (offset >= 0) & (offset < 1)
            & (offset + width <= 1 + tol)
            & (span >= 1) & (total >= 1)
        )

        violations = []
        for index in np.flatnonzero(~fraction_ok):
            event, info = events[index], infos[index]
            violations.append(LayoutViolation(
                'fraction', (event.id,),
                f"Event {event.id!r}: width={info.width_fraction}, offset={info.offset_fraction} "
                f"do not match span={info.column_span}, base={info.base_column_index}, "
                f"total={info.total_columns}"
            ))
        for index in np.flatnonzero(~bounds_ok):
            event, info = events[index], infos[index]
            violations.append(LayoutViolation(
                'bounds', (event.id,),
                f"Event {event.id!r}: width={info.width_fraction}, offset={info.offset_fraction} "
                f"fall outside the column"
            ))
        return violations


def assert_valid_layout(
    events: Iterable[TimedEvent],
    layouts: Dict[TimedEvent, LayoutInfo],
    config: Optional[LayoutConfig] = None
) -> None:
    """
    Raise LayoutInvariantError if the layout breaks any invariant

    Args:
        events: Events the layout was computed for
        layouts: Engine output for those events
        config: Layout configuration (uses defaults if None)
    """
    violations = LayoutValidator(config).check(events, layouts)
    if violations:
        raise LayoutInvariantError(violations)
