"""
Temporal clustering

Partitions time-sorted events into maximal groups connected by overlap.
"""

from __future__ import annotations
from typing import List, Sequence

from ..types import TimedEvent


def cluster_events(sorted_events: Sequence[TimedEvent]) -> List[List[int]]:
    """
    Split sorted events into overlap clusters

    Single left-to-right scan tracking the latest end seen in the open
    cluster. An event starting at or after that end closes the cluster,
    so touching events ([9:00, 10:00) then [10:00, 11:00)) land in
    different clusters.

    Args:
        sorted_events: Events ascending by start instant

    Returns:
        Clusters as lists of indices into sorted_events, in temporal order
    """
    clusters: List[List[int]] = []
    if not sorted_events:
        return clusters

    current: List[int] = [0]
    cluster_end = sorted_events[0].end

    for index in range(1, len(sorted_events)):
        event = sorted_events[index]
        if event.start < cluster_end:
            current.append(index)
            if event.end > cluster_end:
                cluster_end = event.end
        else:
            clusters.append(current)
            current = [index]
            cluster_end = event.end

    clusters.append(current)
    return clusters
