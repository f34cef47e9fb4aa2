"""
I/O Readers

Handles reading of event files.
"""

from __future__ import annotations
from typing import List, Optional
from pathlib import Path
import logging

import pandas as pd

from ..types import CalendarEvent, PathLike

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ('id', 'start', 'end')


class EventReader:
    """Reads calendar events from TSV/CSV files"""

    @staticmethod
    def separator_for(filepath: PathLike) -> str:
        """Tab for .tsv/.txt files, comma otherwise"""
        return '\t' if Path(filepath).suffix.lower() in ('.tsv', '.txt') else ','

    @staticmethod
    def read(filepath: PathLike) -> List[CalendarEvent]:
        """
        Read events with id, start, end and optional title columns

        Lines starting with '#' are ignored. Timestamps are ISO 8601;
        values without an offset are taken as UTC.

        Args:
            filepath: Path to events file

        Returns:
            List of CalendarEvent in file order

        Raises:
            FileNotFoundError: The file does not exist
            ValueError: Required columns are missing or timestamps do not parse
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Events file not found: {path}")

        df: pd.DataFrame = pd.read_csv(
            path,
            sep=EventReader.separator_for(path),
            comment='#',
            dtype=str,
            skipinitialspace=True,
        )

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(
                f"Events file {path} is missing required column(s): {', '.join(missing)}"
            )

        if df.empty:
            logger.warning(f"No events in {path}")
            return []

        if df['id'].isna().any():
            raise ValueError(f"Events file {path} has rows without an id")

        try:
            starts = pd.to_datetime(df['start'], utc=True, format='ISO8601')
            ends = pd.to_datetime(df['end'], utc=True, format='ISO8601')
        except (ValueError, TypeError) as e:
            raise ValueError(f"Could not parse timestamps in {path}: {e}") from e

        titles = df['title'] if 'title' in df.columns else pd.Series([None] * len(df))

        events = [
            CalendarEvent(
                id=str(event_id),
                start=start.to_pydatetime(),
                end=end.to_pydatetime(),
                title=_clean_title(title),
            )
            for event_id, start, end, title in zip(df['id'], starts, ends, titles)
        ]
        logger.debug(f"Read {len(events)} events from {path}")
        return events


def _clean_title(title: object) -> Optional[str]:
    if title is None or pd.isna(title):
        return None
    return str(title)


def read_events(filepath: PathLike) -> List[CalendarEvent]:
    """
    Convenience function to read an events file

    Args:
        filepath: Path to TSV/CSV events file

    Returns:
        List of CalendarEvent
    """
    return EventReader.read(filepath)
