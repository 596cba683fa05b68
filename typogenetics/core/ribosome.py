"""
Translation of strands into enzymes.

A strand is read two bases at a time. Each codon is either punctuation,
which ends the current enzyme, or an amino acid together with the turn it
puts into the folded enzyme. The net turn between the second and the
next-to-last amino acid decides the base the enzyme binds to.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple
from enum import Enum
import logging

from .enzyme import AminoAcid, Enzyme
from .nucleotide import Nucleotide
from .strand import Strand

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Turn contributed by an amino acid. Left is +1 (90 degrees), right is -1."""
    STRAIGHT = 0
    LEFT = 1
    RIGHT = -1


@dataclass(frozen=True)
class Codon:
    """One cell of the genetic code."""
    first: Nucleotide
    second: Nucleotide
    amino_acid: Optional[AminoAcid] = None
    direction: Optional[Direction] = None

    @property
    def is_punctuation(self) -> bool:
        return self.amino_acid is None

    def __str__(self) -> str:
        if self.is_punctuation:
            return f"{self.first.name}{self.second.name} pun"
        return f"{self.first.name}{self.second.name} {self.amino_acid.value} {self.direction.name.lower()}"


_S, _L, _R = Direction.STRAIGHT, Direction.LEFT, Direction.RIGHT

_GENETIC_CODE = {
    'AA': None,
    'AC': (AminoAcid.CUT, _S), 'AG': (AminoAcid.DEL, _S), 'AT': (AminoAcid.SWI, _R),
    'CA': (AminoAcid.MVR, _S), 'CC': (AminoAcid.MVL, _S), 'CG': (AminoAcid.COP, _R), 'CT': (AminoAcid.OFF, _L),
    'GA': (AminoAcid.INA, _S), 'GC': (AminoAcid.INC, _R), 'GG': (AminoAcid.ING, _R), 'GT': (AminoAcid.INT, _L),
    'TA': (AminoAcid.RPY, _R), 'TC': (AminoAcid.RPU, _L), 'TG': (AminoAcid.LPY, _L), 'TT': (AminoAcid.LPU, _L),
}


def _build_codon_table() -> Dict[Tuple[Nucleotide, Nucleotide], Codon]:
    table = {}
    for pair, entry in _GENETIC_CODE.items():
        first, second = Nucleotide[pair[0]], Nucleotide[pair[1]]
        if entry is None:
            table[(first, second)] = Codon(first, second)
        else:
            table[(first, second)] = Codon(first, second, *entry)
    return table


CODON_TABLE: Dict[Tuple[Nucleotide, Nucleotide], Codon] = _build_codon_table()

# Net turn (mod 4) -> binding base
_TURN_TO_BINDING = (Nucleotide.A, Nucleotide.C, Nucleotide.T, Nucleotide.G)


def lookup_codon(first: Nucleotide, second: Nucleotide) -> Codon:
    """Return the codon table entry for a pair of bases."""
    return CODON_TABLE[(first, second)]


def binding_for_turns(total_turn: int) -> Nucleotide:
    """
    Map a net turn count to the enzyme's binding base.

    0 turns (same direction) -> A, one left -> C, two (reversed) -> T,
    one right -> G.
    """
    return _TURN_TO_BINDING[total_turn % 4]


def _close_enzyme(commands: List[AminoAcid], turns: List[int]) -> Enzyme:
    # First and last amino acids do not contribute to the fold
    total_turn = sum(turns[1:-1])
    return Enzyme(binding_for_turns(total_turn), tuple(commands))


def translate(strand: Strand) -> List[Enzyme]:
    """
    Translate a strand into the enzymes it codes for.

    Codons are read from offset 0 without overlap; a trailing unpaired base
    is ignored. Punctuation closes the enzyme being built, as does the end
    of the strand. Empty programs produce no enzyme.

    Args:
        strand: Strand to translate

    Returns:
        List of enzymes in strand order
    """
    enzymes = []
    commands: List[AminoAcid] = []
    turns: List[int] = []

    for i in range(0, len(strand) - 1, 2):
        codon = lookup_codon(strand[i], strand[i + 1])
        if codon.is_punctuation:
            if commands:
                enzymes.append(_close_enzyme(commands, turns))
            commands, turns = [], []
        else:
            commands.append(codon.amino_acid)
            turns.append(codon.direction.value)

    if commands:
        enzymes.append(_close_enzyme(commands, turns))

    logger.debug(f"Translated {strand} into {len(enzymes)} enzymes")
    return enzymes


def translate_all(strands: Iterable[Strand]) -> List[Enzyme]:
    """Translate several strands, concatenating their enzymes in order."""
    enzymes = []
    for strand in strands:
        enzymes.extend(translate(strand))
    return enzymes
