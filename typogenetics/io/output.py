"""
Tabular summaries of enzyme runs.
"""

from typing import Any, Dict, List
from dataclasses import dataclass, field
import pandas as pd

from ..core.enzyme import Enzyme
from ..core.strand import Strand

RESULT_COLUMNS = ['strand_id', 'strand', 'enzyme', 'n_products', 'products']


@dataclass
class ProcessResult:
    """Outcome of applying one enzyme to one strand."""
    strand_id: str
    strand: Strand
    enzyme: Enzyme
    products: List[Strand] = field(default_factory=list)

    @property
    def n_products(self) -> int:
        return len(self.products)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for output."""
        return {
            'strand_id': self.strand_id,
            'strand': str(self.strand),
            'enzyme': self.enzyme.name,
            'n_products': self.n_products,
            'products': ' '.join(str(p) for p in self.products),
        }


def results_to_frame(results: List[ProcessResult]) -> pd.DataFrame:
    """Build a DataFrame with one row per result."""
    if not results:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    return pd.DataFrame([r.to_dict() for r in results], columns=RESULT_COLUMNS)
