"""
Linked unit graph used while an enzyme edits a strand.

Each position of an expanded strand is a Unit with optional left, right and
complementary links. Links are integer handles into a UnitArena rather than
object references, so releasing a unit never leaves a dangling pointer.

The arena keeps every unit it has ever created. Units still owned by the
run are harvested back into strands at the end; released units keep their
storage (and their own links) but are never harvested.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .nucleotide import Nucleotide
from .strand import Strand


@dataclass
class Unit:
    """
    A single position in a strand.

    Attributes:
        base: Nucleotide occupying this position
        left: Handle of the unit to the left (None if none)
        right: Handle of the unit to the right (None if none)
        complementary: Handle of the paired unit on the other strand (None if none)
    """
    base: Nucleotide
    left: Optional[int] = None
    right: Optional[int] = None
    complementary: Optional[int] = None


class UnitArena:
    """Run-scoped owner of all units created while processing one strand."""

    def __init__(self):
        self._units: List[Unit] = []
        # Insertion-ordered set of owned handles
        self._owned: Dict[int, None] = {}

    @classmethod
    def from_strand(cls, strand: Strand) -> 'UnitArena':
        """Expand a strand into a chain of mutually linked units."""
        arena = cls()
        previous = None
        for base in strand:
            handle = arena.create(base)
            if previous is not None:
                arena.link(previous, handle)
            previous = handle
        return arena

    def create(self, base: Nucleotide) -> int:
        """Create a new owned unit and return its handle."""
        handle = len(self._units)
        self._units.append(Unit(base=base))
        self._owned[handle] = None
        return handle

    def release(self, handle: int) -> None:
        """Stop owning a unit. Its storage stays addressable."""
        self._owned.pop(handle, None)

    def link(self, left: int, right: int) -> None:
        """Make ``right`` the right neighbor of ``left`` (mutual link)."""
        self._units[left].right = right
        self._units[right].left = left

    def pair(self, a: int, b: int) -> None:
        """Make two units each other's complementary partner."""
        self._units[a].complementary = b
        self._units[b].complementary = a

    def __getitem__(self, handle: int) -> Unit:
        return self._units[handle]

    def __len__(self) -> int:
        return len(self._owned)

    def __contains__(self, handle: int) -> bool:
        return handle in self._owned

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._owned))

    @property
    def total_created(self) -> int:
        """Number of units ever created, owned or released."""
        return len(self._units)

    def chain_head(self, handle: int) -> int:
        """Follow left links to the leftmost unit of a chain."""
        seen = {handle}
        while self._units[handle].left is not None:
            handle = self._units[handle].left
            if handle in seen:
                break
            seen.add(handle)
        return handle

    def harvest(self) -> List[Strand]:
        """
        Collect every owned unit back into strands.

        Repeatedly takes the earliest owned unit, walks to the head of its
        chain and reads bases rightwards, releasing each visited unit. Only
        left/right links are followed, so a complementary strand comes out
        as its own strand. Leaves the arena owning nothing.

        Returns:
            List of strands in discovery order
        """
        strands = []
        while self._owned:
            start = next(iter(self._owned))
            handle = self.chain_head(start)

            bases = []
            visited = set()
            while handle is not None and handle not in visited:
                visited.add(handle)
                unit = self._units[handle]
                bases.append(unit.base)
                self.release(handle)
                handle = unit.right

            strands.append(Strand(tuple(bases)))

        return strands
