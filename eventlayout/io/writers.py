"""
I/O Writers

Handles writing of layout results.
"""

from typing import List
from pathlib import Path
import logging

import pandas as pd

from ..layout.types import LayoutResult
from ..types import LayoutRecord
from ..utils import sort_events

logger = logging.getLogger(__name__)

LAYOUT_COLUMNS = [
    'id', 'title', 'start', 'end',
    'overlap_group', 'base_column', 'column_span', 'total_columns',
    'width_fraction', 'offset_fraction',
]


class LayoutWriter:
    """Writes layout results in TSV format"""

    def to_dataframe(self, result: LayoutResult) -> pd.DataFrame:
        """
        One row per event, ordered by start then id

        Args:
            result: LayoutResult from LayoutEngine

        Returns:
            DataFrame with LAYOUT_COLUMNS
        """
        rows: List[LayoutRecord] = []
        for event in sort_events(list(result.layouts), 'id'):
            info = result.layouts[event]
            rows.append({
                'id': event.id,
                'title': getattr(event, 'title', None) or '',
                'start': _format_instant(event.start),
                'end': _format_instant(event.end),
                'overlap_group': info.overlap_group,
                'base_column': info.base_column_index,
                'column_span': info.column_span,
                'total_columns': info.total_columns,
                'width_fraction': info.width_fraction,
                'offset_fraction': info.offset_fraction,
            })
        return pd.DataFrame(rows, columns=LAYOUT_COLUMNS)

    def write(self, result: LayoutResult, output_file):
        """
        Write layouts to a TSV file with a '# clusters=<n>' header line

        Args:
            result: LayoutResult from LayoutEngine
            output_file: Path to output TSV file
        """
        if result.n_events == 0:
            logger.warning("No layouts to save")

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        df = self.to_dataframe(result)

        with open(output_file, 'w', newline='') as f:
            f.write(f"# clusters={result.n_clusters}\n")
            df.to_csv(f, sep='\t', index=False)

        logger.debug(f"Wrote {len(df)} layouts to {output_file}")


def _format_instant(instant):
    return instant.isoformat() if hasattr(instant, 'isoformat') else str(instant)


def write_layouts(result: LayoutResult, output_file):
    """
    Convenience function to write layouts

    Args:
        result: LayoutResult from LayoutEngine
        output_file: Path to output TSV file
    """
    LayoutWriter().write(result, output_file)
