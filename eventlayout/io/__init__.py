"""I/O utilities for eventlayout"""

from .readers import EventReader, read_events
from .writers import LayoutWriter, write_layouts

__all__ = [
    'EventReader', 'read_events',
    'LayoutWriter', 'write_layouts']
