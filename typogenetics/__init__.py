"""
Typogenetics - strands, enzymes and the ribosome that links them.
"""

__version__ = "0.1.0"

from .config import SimulationConfig
from .core import (
    AminoAcid,
    BindingSelector,
    Enzyme,
    Nucleotide,
    SelectionPolicy,
    Strand,
    process,
    translate,
)
from .pool import StrandPool

__all__ = [
    "Nucleotide",
    "Strand",
    "AminoAcid",
    "Enzyme",
    "SelectionPolicy",
    "BindingSelector",
    "process",
    "translate",
    "StrandPool",
    "SimulationConfig",
    "__version__",
]
