"""
Strand key parsing.

A strand key is a TSV file listing named strands for batch runs.
"""

from pathlib import Path
from typing import Dict, List
from dataclasses import dataclass, field
import pandas as pd
import logging

from ..core.strand import Strand

logger = logging.getLogger(__name__)


@dataclass
class StrandRecord:
    """A named strand from a strand key.

    Attributes:
        strand_id: Unique identifier
        strand: The parsed strand
        metadata: Additional columns from the strand key
    """
    strand_id: str
    strand: Strand
    metadata: Dict = field(default_factory=dict)


def load_strand_key(path: Path) -> List[StrandRecord]:
    """
    Load strands from a strand key TSV file.

    Required columns:
    - strand_id: Unique strand identifier
    - strand: Strand letters (case-insensitive)

    Additional columns are stored as metadata.

    Args:
        path: Path to strand key TSV

    Returns:
        List of StrandRecord objects in file order
    """
    df = pd.read_csv(path, sep='\t', dtype=str, keep_default_na=False)

    for column in ('strand_id', 'strand'):
        if column not in df.columns:
            raise ValueError(f"Strand key must have '{column}' column")

    records = []
    for _, row in df.iterrows():
        strand_id = str(row['strand_id']).strip()
        letters = str(row['strand']).strip().upper()
        try:
            strand = Strand.from_string(letters)
        except ValueError as e:
            raise ValueError(f"{strand_id}: {e}") from e

        metadata = {
            k: v for k, v in row.items()
            if k not in ('strand_id', 'strand') and v != ''
        }
        records.append(StrandRecord(strand_id=strand_id, strand=strand, metadata=metadata))

    ids = [r.strand_id for r in records]
    duplicates = sorted({i for i in ids if ids.count(i) > 1})
    if duplicates:
        logger.warning(f"Strand key has duplicate ids: {', '.join(duplicates)}")

    logger.info(f"Loaded {len(records)} strands from {path}")
    return records
