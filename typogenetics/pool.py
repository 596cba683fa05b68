"""
Working pool of strands and enzymes.

A StrandPool holds the strands and enzymes of an ongoing experiment: enzymes
are translated from pooled strands, and applying an enzyme replaces a strand
with the strands it produces.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import logging

import pandas as pd

from .core.enzyme import Enzyme, process
from .core.ribosome import translate
from .core.selection import BindingSelector
from .core.strand import Strand

logger = logging.getLogger(__name__)


@dataclass
class StrandPool:
    """
    Strands and enzymes under study.

    Attributes:
        strands: Strands in the pool, in insertion order
        enzymes: Enzymes available for processing
        selector: Binding site selector used when applying enzymes
        auto_remove_duplicates: Drop products already present in the pool
        auto_remove_short: Drop products shorter than min_length
        min_length: Shortest strand kept when removing short strands
    """
    strands: List[Strand] = field(default_factory=list)
    enzymes: List[Enzyme] = field(default_factory=list)
    selector: BindingSelector = field(default_factory=BindingSelector)
    auto_remove_duplicates: bool = False
    auto_remove_short: bool = False
    min_length: int = 2

    def add_strand(self, strand: Strand) -> None:
        self.strands.append(strand)

    def remove_strand(self, index: int) -> Strand:
        return self.strands.pop(index)

    def remove_enzyme(self, index: int) -> Enzyme:
        return self.enzymes.pop(index)

    def clear_strands(self) -> None:
        self.strands.clear()

    def clear_enzymes(self) -> None:
        self.enzymes.clear()

    def translate(self, index: int) -> List[Enzyme]:
        """Translate one pooled strand and add its enzymes to the pool."""
        strand = self.strands[index]
        enzymes = translate(strand)
        self.enzymes.extend(enzymes)
        if not enzymes:
            logger.info(f"No enzymes coded in strand {strand}")
        return enzymes

    def translate_all(self) -> List[Enzyme]:
        """Replace the enzyme list with the enzymes of every pooled strand."""
        self.enzymes = []
        for strand in self.strands:
            self.enzymes.extend(translate(strand))
        logger.info(f"Translated {len(self.strands)} strands into {len(self.enzymes)} enzymes")
        return list(self.enzymes)

    def apply(self, strand_index: int, enzyme_index: int) -> List[Strand]:
        """
        Process a pooled strand with a pooled enzyme.

        The input strand is removed and the products are appended, subject to
        the auto-remove settings.

        Args:
            strand_index: Index into strands
            enzyme_index: Index into enzymes

        Returns:
            Products actually added to the pool
        """
        enzyme = self.enzymes[enzyme_index]
        strand = self.strands[strand_index]
        products = process(strand, enzyme, self.selector)
        del self.strands[strand_index]

        seen: Optional[set] = set(self.strands) if self.auto_remove_duplicates else None

        added = []
        for product in products:
            if self.auto_remove_short and len(product) < self.min_length:
                continue
            if seen is not None:
                if product in seen:
                    continue
                seen.add(product)
            self.strands.append(product)
            added.append(product)

        logger.info(
            f"{enzyme.name} on {strand}: {len(products)} products, {len(added)} kept"
        )
        return added

    def remove_duplicate_strands(self) -> int:
        """Keep the first occurrence of each strand. Returns number removed."""
        seen = set()
        kept = []
        for strand in self.strands:
            if strand in seen:
                continue
            seen.add(strand)
            kept.append(strand)
        removed = len(self.strands) - len(kept)
        self.strands = kept
        return removed

    def remove_short_strands(self) -> int:
        """Drop strands shorter than min_length. Returns number removed."""
        kept = [s for s in self.strands if len(s) >= self.min_length]
        removed = len(self.strands) - len(kept)
        self.strands = kept
        return removed

    def summary(self) -> pd.DataFrame:
        """Distinct strands with their length and multiplicity, in pool order."""
        if not self.strands:
            return pd.DataFrame(columns=['strand', 'length', 'count'])

        df = pd.DataFrame({'strand': [str(s) for s in self.strands]})
        df['length'] = df['strand'].str.len()
        summary = (
            df.groupby('strand', sort=False)
            .agg(length=('length', 'first'), count=('length', 'size'))
            .reset_index()
        )
        return summary
