"""
Enzymes and their execution on strands.

An Enzyme is an immutable program: a binding base plus an ordered list of
amino acid commands. Processing a strand expands it into a UnitArena, binds
the enzyme to a unit carrying its binding base, executes the commands until
the list is exhausted or the enzyme falls off, and harvests the resulting
strands.

Command summary:
- cut: sever the strand (and the paired strand) to the right of the bound unit
- del: remove the bound unit and move right
- swi: switch to the complementary unit
- mvr / mvl: move one unit right / left
- cop / off: turn copy mode on / off
- ina / inc / ing / int: insert A / C / G / T to the right and move onto it
- rpy / rpu: search right for a pyrimidine / purine
- lpy / lpu: search left for a pyrimidine / purine
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
import logging

from .nucleotide import Nucleotide
from .selection import BindingSelector
from .strand import Strand
from .units import UnitArena

logger = logging.getLogger(__name__)


class AminoAcid(Enum):
    """Enzyme commands."""
    CUT = 'cut'
    DEL = 'del'
    SWI = 'swi'
    MVR = 'mvr'
    MVL = 'mvl'
    COP = 'cop'
    OFF = 'off'
    INA = 'ina'
    INC = 'inc'
    ING = 'ing'
    INT = 'int'
    RPY = 'rpy'
    RPU = 'rpu'
    LPY = 'lpy'
    LPU = 'lpu'


INSERTED_BASES = {
    AminoAcid.INA: Nucleotide.A,
    AminoAcid.INC: Nucleotide.C,
    AminoAcid.ING: Nucleotide.G,
    AminoAcid.INT: Nucleotide.T,
}


@dataclass(frozen=True)
class Enzyme:
    """
    Enzyme program.

    Attributes:
        binding: Base the enzyme initially binds to
        commands: Ordered, non-empty tuple of AminoAcid commands
    """
    binding: Nucleotide
    commands: Tuple[AminoAcid, ...]

    def __post_init__(self):
        commands = tuple(self.commands)
        if not commands:
            raise ValueError("Enzyme must have at least one command")
        object.__setattr__(self, 'commands', commands)

    @property
    def name(self) -> str:
        """Display name, e.g. 'A:cut-mvr-ina'."""
        return f"{self.binding.name}:" + '-'.join(c.value for c in self.commands)

    def process(self, strand: Strand, selector: Optional[BindingSelector] = None) -> List[Strand]:
        """Run this enzyme on a strand. See :func:`process`."""
        return process(strand, self, selector)

    def __len__(self) -> int:
        return len(self.commands)

    def __str__(self) -> str:
        return self.name


class RunState(Enum):
    """Execution state of an enzyme run."""
    UNBOUND = 'unbound'
    BOUND = 'bound'
    FINISHED = 'finished'


class EnzymeRun:
    """
    A single execution of an enzyme on a strand.

    Holds all transient state; nothing is shared between runs.

    Attributes:
        enzyme: Program being executed
        strand: Input strand
        selector: Binding site selector used when several sites match
        arena: Units created during the run
        state: Current RunState
        bound: Handle of the bound unit (None when unbound or finished
            without ever binding)
        copy_mode: Whether moves currently copy onto the complementary strand
    """

    def __init__(self, enzyme: Enzyme, strand: Strand, selector: Optional[BindingSelector] = None):
        self.enzyme = enzyme
        self.strand = strand
        self.selector = selector if selector is not None else BindingSelector()
        self.arena = UnitArena()
        self.state = RunState.UNBOUND
        self.bound: Optional[int] = None
        self.copy_mode = False

        self._handlers = {
            AminoAcid.CUT: self.cut,
            AminoAcid.DEL: self.delete,
            AminoAcid.SWI: self.switch,
            AminoAcid.MVR: self.move_right,
            AminoAcid.MVL: self.move_left,
            AminoAcid.COP: self.copy_on,
            AminoAcid.OFF: self.copy_off,
            AminoAcid.RPY: lambda: self.search_right(_is_pyrimidine),
            AminoAcid.RPU: lambda: self.search_right(_is_purine),
            AminoAcid.LPY: lambda: self.search_left(_is_pyrimidine),
            AminoAcid.LPU: lambda: self.search_left(_is_purine),
        }

    @property
    def finished(self) -> bool:
        return self.state == RunState.FINISHED

    def run(self) -> List[Strand]:
        """Load, bind, execute and harvest."""
        self.load()
        self.bind()
        self.execute()
        return self.harvest()

    def load(self) -> None:
        """Reset transient state and expand the input strand into units."""
        self.arena = UnitArena.from_strand(self.strand)
        self.state = RunState.UNBOUND
        self.bound = None
        self.copy_mode = False

    def bind(self) -> None:
        """Attach to a unit carrying the enzyme's binding base."""
        candidates = [h for h in self.arena if self.arena[h].base == self.enzyme.binding]

        if not candidates:
            logger.debug(f"{self.enzyme.name}: no {self.enzyme.binding.name} in {self.strand}")
            self._finish()
            return

        if len(candidates) == 1:
            self.bound = candidates[0]
        else:
            self.bound = self.selector.select(candidates)

        self.state = RunState.BOUND
        logger.debug(f"{self.enzyme.name}: bound at unit {self.bound} of {len(candidates)} candidates")

    def execute(self) -> None:
        """Execute commands in order until the list ends or the enzyme finishes."""
        for command in self.enzyme.commands:
            if self.finished:
                return
            self.execute_command(command)

    def execute_command(self, command: AminoAcid) -> None:
        if command in INSERTED_BASES:
            self.insert(INSERTED_BASES[command])
        else:
            self._handlers[command]()

    def harvest(self) -> List[Strand]:
        """Collect all units into output strands."""
        strands = self.arena.harvest()
        logger.debug(f"{self.enzyme.name}: {self.strand} -> {' '.join(str(s) for s in strands)}")
        return strands

    def _finish(self) -> None:
        self.state = RunState.FINISHED

    # Commands

    def move_right(self) -> None:
        right = self.arena[self.bound].right
        if right is None:
            self._finish()
            return
        self.bound = right
        if self.copy_mode:
            self.copy()

    def move_left(self) -> None:
        left = self.arena[self.bound].left
        if left is None:
            self._finish()
            return
        self.bound = left
        if self.copy_mode:
            self.copy()

    def insert(self, base: Nucleotide) -> None:
        """
        Write ``base`` to the right of the bound unit and move onto it.

        A missing right neighbor is created. Its complementary link points
        at the left neighbor of the bound unit's complement, without a
        back-link from that unit.
        """
        unit = self.arena[self.bound]
        if unit.right is None:
            new = self.arena.create(base)
            self.arena.link(self.bound, new)
            if unit.complementary is not None:
                self.arena[new].complementary = self.arena[unit.complementary].left
        self.arena[unit.right].base = base
        self.move_right()

    def delete(self) -> None:
        """
        Remove the bound unit and move to its former right neighbor.

        The removed unit keeps its own links; only its neighbors' links and
        its complement's back-link are cleared.
        """
        unit = self.arena[self.bound]
        right = unit.right
        if unit.left is not None:
            self.arena[unit.left].right = None
        if unit.right is not None:
            self.arena[unit.right].left = None
        if unit.complementary is not None:
            self.arena[unit.complementary].complementary = None
        self.arena.release(self.bound)

        if right is None:
            self._finish()
            return
        self.bound = right
        if self.copy_mode:
            self.copy()

    def cut(self) -> None:
        """Cut both strands between the bound unit and its right neighbor."""
        unit = self.arena[self.bound]
        if unit.right is not None:
            self.arena[unit.right].left = None
            unit.right = None

        if unit.complementary is not None:
            partner = self.arena[unit.complementary]
            if partner.left is not None:
                self.arena[partner.left].right = None
                partner.left = None

    def switch(self) -> None:
        partner = self.arena[self.bound].complementary
        if partner is None:
            self._finish()
            return
        self.bound = partner

    def search_right(self, predicate: Callable[[Nucleotide], bool]) -> None:
        self._search(self.move_right, predicate)

    def search_left(self, predicate: Callable[[Nucleotide], bool]) -> None:
        self._search(self.move_left, predicate)

    def _search(self, move: Callable[[], None], predicate: Callable[[Nucleotide], bool]) -> None:
        # Always moves at least once, even if the current base already matches
        while True:
            move()
            if self.finished or predicate(self.arena[self.bound].base):
                return

    def copy_on(self) -> None:
        self.copy_mode = True
        self.copy()

    def copy_off(self) -> None:
        self.copy_mode = False

    def copy(self) -> None:
        """
        Write the complement of the bound base onto the complementary strand.

        Creates the complementary unit if needed and splices it next to the
        complements of the bound unit's neighbors. The complementary strand
        runs antiparallel, so the left neighbor's complement becomes the new
        unit's right neighbor and vice versa.
        """
        unit = self.arena[self.bound]
        if unit.complementary is None:
            new = self.arena.create(unit.base.complement)
            self.arena.pair(self.bound, new)

            if unit.left is not None:
                left_partner = self.arena[unit.left].complementary
                if left_partner is not None:
                    self.arena.link(new, left_partner)

            if unit.right is not None:
                right_partner = self.arena[unit.right].complementary
                if right_partner is not None:
                    self.arena.link(right_partner, new)

        self.arena[unit.complementary].base = unit.base.complement


def _is_purine(base: Nucleotide) -> bool:
    return base.is_purine


def _is_pyrimidine(base: Nucleotide) -> bool:
    return base.is_pyrimidine


def process(
    strand: Strand,
    enzyme: Enzyme,
    selector: Optional[BindingSelector] = None,
) -> List[Strand]:
    """
    Apply an enzyme to a strand.

    Each call is an independent run. If no unit carries the binding base the
    strand comes back unchanged.

    Args:
        strand: Strand to operate on
        enzyme: Enzyme program
        selector: Binding site selector (defaults to a random selector)

    Returns:
        List of resulting strands
    """
    return EnzymeRun(enzyme, strand, selector).run()

