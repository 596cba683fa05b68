"""
Core simulation engine: nucleotides, strands, the unit graph, enzymes and
the ribosome.
"""

from .enzyme import (
    AminoAcid,
    Enzyme,
    EnzymeRun,
    RunState,
    process,
)
from .nucleotide import (
    Nucleotide,
    complement,
)
from .ribosome import (
    CODON_TABLE,
    Codon,
    Direction,
    binding_for_turns,
    lookup_codon,
    translate,
    translate_all,
)
from .selection import (
    BindingSelector,
    SelectionPolicy,
)
from .strand import Strand
from .units import (
    Unit,
    UnitArena,
)

__all__ = [
    # Alphabet
    'Nucleotide',
    'complement',
    'Strand',
    # Unit graph
    'Unit',
    'UnitArena',
    # Binding
    'SelectionPolicy',
    'BindingSelector',
    # Enzymes
    'AminoAcid',
    'Enzyme',
    'EnzymeRun',
    'RunState',
    'process',
    # Ribosome
    'Direction',
    'Codon',
    'CODON_TABLE',
    'lookup_codon',
    'binding_for_turns',
    'translate',
    'translate_all',
]
