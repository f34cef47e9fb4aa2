"""
Unit tests for temporal clustering

Events are passed pre-sorted by start, as the engine does.
"""
import pytest
from eventlayout.layout.clustering import cluster_events


pytestmark = pytest.mark.unit


class TestClusterEvents:
    """Tests for cluster_events"""

    def test_empty_input(self):
        """No events should give no clusters"""
        assert cluster_events([]) == []

    def test_single_event(self, make_event):
        """A single event is a singleton cluster"""
        assert cluster_events([make_event("a", "09:00", "10:00")]) == [[0]]

    def test_touching_events_are_separate(self, make_event):
        """Boundary touch is not an overlap"""
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "10:00", "11:00"),
        ]
        assert cluster_events(events) == [[0], [1]]

    def test_chained_overlaps_form_one_cluster(self, make_event):
        """A overlaps B, B overlaps C: one cluster even though A and C do not overlap"""
        events = [
            make_event("a", "09:00", "10:00"),
            make_event("b", "09:30", "11:00"),
            make_event("c", "10:45", "12:00"),
            make_event("d", "12:00", "13:00"),
        ]
        assert cluster_events(events) == [[0, 1, 2], [3]]

    def test_cluster_end_tracks_longest_event(self, make_event):
        """A long early event keeps the cluster open past shorter ones"""
        events = [
            make_event("a", "09:00", "17:00"),
            make_event("b", "10:00", "11:00"),
            make_event("c", "15:00", "16:00"),
            make_event("d", "17:00", "18:00"),
        ]
        assert cluster_events(events) == [[0, 1, 2], [3]]

    def test_clusters_partition_input(self, make_event):
        """Every index appears exactly once"""
        events = [
            make_event("a", "08:00", "09:00"),
            make_event("b", "08:30", "09:30"),
            make_event("c", "10:00", "10:30"),
            make_event("d", "11:00", "12:00"),
            make_event("e", "11:15", "11:45"),
        ]
        clusters = cluster_events(events)
        flat = [i for cluster in clusters for i in cluster]
        assert sorted(flat) == list(range(len(events)))
        assert clusters == [[0, 1], [2], [3, 4]]
