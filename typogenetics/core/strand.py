"""
Immutable strand of nucleotides.

A Strand is the at-rest form used for input and output. All editing
happens on the linked unit graph built from it.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .nucleotide import Nucleotide


@dataclass(frozen=True)
class Strand:
    """Ordered, possibly empty, sequence of nucleotides."""
    bases: Tuple[Nucleotide, ...] = ()

    def __post_init__(self):
        bases = tuple(self.bases)
        for i, base in enumerate(bases):
            if not isinstance(base, Nucleotide):
                raise ValueError(f"Invalid nucleotide at position {i}: {base!r}")
        object.__setattr__(self, 'bases', bases)

    @classmethod
    def from_string(cls, text: str) -> 'Strand':
        """Build a strand from letters, e.g. ``Strand.from_string("ACGT")``.

        Only the uppercase letters A, C, G, T are accepted.
        """
        bases = []
        for i, char in enumerate(text):
            try:
                bases.append(Nucleotide.from_char(char))
            except ValueError:
                raise ValueError(
                    f"Invalid nucleotide {char!r} at position {i} in strand {text!r}"
                ) from None
        return cls(tuple(bases))

    @classmethod
    def from_bases(cls, bases: Iterable[Nucleotide]) -> 'Strand':
        return cls(tuple(bases))

    def __len__(self) -> int:
        return len(self.bases)

    def __iter__(self) -> Iterator[Nucleotide]:
        return iter(self.bases)

    def __getitem__(self, index: int) -> Nucleotide:
        return self.bases[index]

    def __str__(self) -> str:
        return ''.join(base.name for base in self.bases)

    def __repr__(self) -> str:
        return f"Strand({str(self)!r})"
