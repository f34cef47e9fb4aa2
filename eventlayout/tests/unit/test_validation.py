"""
Unit tests for LayoutValidator

Each test breaks one invariant of an otherwise valid layout.
"""
from dataclasses import replace

import pytest
from eventlayout import (
    LayoutInfo,
    LayoutInvariantError,
    LayoutValidator,
    assert_valid_layout,
    calculate_event_layouts,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def pair(make_event):
    """Two overlapping events and their valid layout"""
    a = make_event("a", "09:00", "10:00")
    b = make_event("b", "09:30", "10:30")
    return [a, b], calculate_event_layouts([a, b])


def rules(violations):
    return sorted(v.rule for v in violations)


class TestLayoutValidator:
    """Tests for LayoutValidator.check"""

    def test_valid_layout_passes(self, pair):
        """Engine output has no violations"""
        events, layouts = pair
        assert LayoutValidator().check(events, layouts) == []

    def test_empty_layout_passes(self):
        """Nothing to check"""
        assert LayoutValidator().check([], {}) == []

    def test_missing_event(self, pair):
        """An input event without layout breaks coverage"""
        events, layouts = pair
        del layouts[events[1]]
        violations = LayoutValidator().check(events, layouts)
        assert rules(violations) == ['coverage']
        assert violations[0].event_ids == ('b',)

    def test_unknown_event(self, pair, make_event):
        """A layout for an event not in the input breaks coverage"""
        events, layouts = pair
        stray = make_event("z", "15:00", "16:00")
        layouts[stray] = LayoutInfo(1.0, 0.0, 1, 0, 1, 1)
        assert rules(LayoutValidator().check(events, layouts)) == ['coverage']

    def test_shared_column(self, pair):
        """Overlapping events in the same column break the overlap rule"""
        events, layouts = pair
        a, b = events
        layouts[b] = layouts[a]
        violations = LayoutValidator().check(events, layouts)
        assert rules(violations) == ['overlap']
        assert violations[0].event_ids == ('a', 'b')

    def test_split_cluster(self, pair):
        """Overlapping events in different groups break the cluster rule"""
        events, layouts = pair
        b = events[1]
        layouts[b] = replace(layouts[b], overlap_group=1)
        assert rules(LayoutValidator().check(events, layouts)) == ['cluster']

    def test_inconsistent_fraction(self, pair):
        """Width not matching span / total breaks the fraction rule"""
        events, layouts = pair
        a = events[0]
        layouts[a] = replace(layouts[a], width_fraction=0.7)
        assert rules(LayoutValidator().check(events, layouts)) == ['fraction']

    def test_out_of_bounds(self, make_event):
        """Offset at the right edge breaks the bounds rule"""
        a = make_event("a", "09:00", "10:00")
        layouts = {a: LayoutInfo(
            width_fraction=0.5, offset_fraction=1.0, overlap_group=0,
            base_column_index=2, column_span=1, total_columns=2,
        )}
        assert rules(LayoutValidator().check([a], layouts)) == ['bounds']


class TestAssertValidLayout:
    """Tests for assert_valid_layout"""

    def test_valid_layout(self, pair):
        """No exception for engine output"""
        events, layouts = pair
        assert_valid_layout(events, layouts)

    def test_invalid_layout_raises(self, pair):
        """Violations are reported in one AssertionError"""
        events, layouts = pair
        a, b = events
        layouts[b] = layouts[a]
        with pytest.raises(LayoutInvariantError) as excinfo:
            assert_valid_layout(events, layouts)
        assert isinstance(excinfo.value, AssertionError)
        assert "[overlap]" in str(excinfo.value)
