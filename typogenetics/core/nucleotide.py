"""
Nucleotide alphabet for typogenetic strands.

The four bases carry an ordinal 0-3. Purines have an even ordinal,
pyrimidines an odd one, and complementary bases sum to 3.
"""

from enum import Enum


class Nucleotide(Enum):
    """One of the four strand bases."""
    A = 0
    C = 1
    G = 2
    T = 3

    @property
    def is_purine(self) -> bool:
        """A and G."""
        return self.value % 2 == 0

    @property
    def is_pyrimidine(self) -> bool:
        """C and T."""
        return self.value % 2 == 1

    @property
    def complement(self) -> 'Nucleotide':
        """Pairing partner: A<->T, C<->G."""
        return Nucleotide(3 - self.value)

    @classmethod
    def from_char(cls, char: str) -> 'Nucleotide':
        """Convert a single uppercase letter to a Nucleotide.

        Raises ValueError for anything outside A, C, G, T.
        """
        try:
            return cls[char]
        except KeyError:
            raise ValueError(f"Invalid nucleotide: {char!r}") from None

    def __str__(self) -> str:
        return self.name


def complement(base: Nucleotide) -> Nucleotide:
    """Return the complementary base."""
    return base.complement
