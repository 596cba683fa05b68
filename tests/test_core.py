"""Tests for typogenetics.core nucleotide, strand, unit graph and selection modules."""

import pytest
from typogenetics.core.nucleotide import Nucleotide, complement
from typogenetics.core.strand import Strand
from typogenetics.core.units import UnitArena
from typogenetics.core.selection import BindingSelector, SelectionPolicy


class TestNucleotide:
    """Test Nucleotide enum."""

    def test_ordinals(self):
        """Test base ordinals."""
        assert [n.value for n in Nucleotide] == [0, 1, 2, 3]
        assert [n.name for n in Nucleotide] == ['A', 'C', 'G', 'T']

    def test_purines(self):
        """Test A and G are purines."""
        assert Nucleotide.A.is_purine
        assert Nucleotide.G.is_purine
        assert not Nucleotide.C.is_purine
        assert not Nucleotide.T.is_purine

    def test_pyrimidines(self):
        """Test C and T are pyrimidines."""
        assert Nucleotide.C.is_pyrimidine
        assert Nucleotide.T.is_pyrimidine
        assert not Nucleotide.A.is_pyrimidine
        assert not Nucleotide.G.is_pyrimidine

    def test_complement_pairs(self):
        """Test A<->T and C<->G pairing."""
        assert complement(Nucleotide.A) == Nucleotide.T
        assert complement(Nucleotide.T) == Nucleotide.A
        assert complement(Nucleotide.C) == Nucleotide.G
        assert complement(Nucleotide.G) == Nucleotide.C

    def test_complement_is_involutive(self):
        """Test complement of complement is the original and never a fixed point."""
        for n in Nucleotide:
            assert n.complement.complement == n
            assert n.complement != n

    def test_from_char_rejects_unknown(self):
        """Test invalid letters raise ValueError."""
        with pytest.raises(ValueError):
            Nucleotide.from_char('U')
        with pytest.raises(ValueError):
            Nucleotide.from_char('a')


class TestStrand:
    """Test Strand value object."""

    def test_from_string(self):
        """Test parsing and printing letters."""
        strand = Strand.from_string("ACGT")
        assert len(strand) == 4
        assert strand[0] == Nucleotide.A
        assert str(strand) == "ACGT"

    def test_empty_strand(self):
        """Test empty strand."""
        assert len(Strand.from_string("")) == 0
        assert str(Strand()) == ""

    def test_structural_equality(self):
        """Test strands with the same bases are equal and hash alike."""
        assert Strand.from_string("GATC") == Strand.from_string("GATC")
        assert hash(Strand.from_string("GATC")) == hash(Strand.from_string("GATC"))
        assert Strand.from_string("GATC") != Strand.from_string("GATA")

    def test_invalid_letter_raises(self):
        """Test letters outside the alphabet raise ValueError."""
        with pytest.raises(ValueError, match="position 2"):
            Strand.from_string("ACXT")

    def test_lowercase_is_rejected(self):
        """Test the core does not coerce lowercase input."""
        with pytest.raises(ValueError):
            Strand.from_string("acgt")

    def test_non_nucleotide_members_raise(self):
        """Test direct construction with foreign values raises ValueError."""
        with pytest.raises(ValueError):
            Strand(('A', 'C'))

    def test_immutable(self):
        """Test strands cannot be modified."""
        strand = Strand.from_string("AC")
        with pytest.raises(Exception):
            strand.bases = ()


class TestUnitArena:
    """Test the linked unit graph."""

    def test_from_strand_links_units(self):
        """Test expansion links each unit to its neighbors."""
        arena = UnitArena.from_strand(Strand.from_string("ACG"))
        assert len(arena) == 3
        assert arena[0].left is None
        assert arena[0].right == 1
        assert arena[1].left == 0
        assert arena[1].right == 2
        assert arena[2].right is None
        assert [arena[h].base for h in arena] == [Nucleotide.A, Nucleotide.C, Nucleotide.G]

    def test_harvest_single_chain(self):
        """Test harvesting an untouched strand returns it."""
        arena = UnitArena.from_strand(Strand.from_string("ACGT"))
        assert arena.harvest() == [Strand.from_string("ACGT")]
        assert len(arena) == 0

    def test_harvest_empty(self):
        """Test harvesting an empty arena returns no strands."""
        assert UnitArena.from_strand(Strand()).harvest() == []

    def test_harvest_split_chain(self):
        """Test harvesting after severing a link gives two strands."""
        arena = UnitArena.from_strand(Strand.from_string("ACGT"))
        arena[1].right = None
        arena[2].left = None
        assert arena.harvest() == [Strand.from_string("AC"), Strand.from_string("GT")]

    def test_harvest_walks_to_chain_head(self):
        """Test harvest starts from the leftmost unit of a chain."""
        arena = UnitArena.from_strand(Strand.from_string("AC"))
        head = arena.create(Nucleotide.T)
        arena.link(head, 0)
        assert arena.harvest() == [Strand.from_string("TAC")]

    def test_released_units_not_harvested(self):
        """Test released units are dropped but stay addressable."""
        arena = UnitArena.from_strand(Strand.from_string("ACG"))
        arena[0].right = None
        arena[2].left = None
        arena.release(1)
        assert 1 not in arena
        assert arena[1].base == Nucleotide.C
        assert arena.total_created == 3
        assert sorted(str(s) for s in arena.harvest()) == ["A", "G"]

    def test_complementary_links_not_followed(self):
        """Test harvest ignores complementary links."""
        arena = UnitArena.from_strand(Strand.from_string("AC"))
        partner = arena.create(Nucleotide.T)
        arena.pair(0, partner)
        assert arena.harvest() == [Strand.from_string("AC"), Strand.from_string("T")]

    def test_cycle_is_harvested_once(self):
        """Test a circular chain is emitted once rather than looping."""
        arena = UnitArena.from_strand(Strand.from_string("ACG"))
        arena.link(2, 0)
        strands = arena.harvest()
        assert len(strands) == 1
        assert sorted(str(strands[0])) == ['A', 'C', 'G']
        assert len(arena) == 0


class TestSelectionPolicy:
    """Test SelectionPolicy parsing."""

    def test_parse_values(self):
        """Test parsing enum values."""
        assert SelectionPolicy.parse('always_first') == SelectionPolicy.ALWAYS_FIRST
        assert SelectionPolicy.parse('nth_or_last') == SelectionPolicy.NTH_OR_LAST

    def test_parse_camel_case(self):
        """Test parsing CamelCase and member names."""
        assert SelectionPolicy.parse('AlwaysMiddle') == SelectionPolicy.ALWAYS_MIDDLE
        assert SelectionPolicy.parse('RANDOM') == SelectionPolicy.RANDOM
        assert SelectionPolicy.parse('NthOrLast') == SelectionPolicy.NTH_OR_LAST

    def test_parse_unknown_raises(self):
        """Test unknown policy names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown selection policy"):
            SelectionPolicy.parse('sometimes_second')
        with pytest.raises(ValueError):
            SelectionPolicy.parse('')


class TestBindingSelector:
    """Test BindingSelector strategies."""

    CANDIDATES = [10, 20, 30, 40, 50]

    def test_always_first(self):
        """Test first candidate is chosen."""
        assert BindingSelector(SelectionPolicy.ALWAYS_FIRST).select(self.CANDIDATES) == 10

    def test_always_last(self):
        """Test last candidate is chosen."""
        assert BindingSelector(SelectionPolicy.ALWAYS_LAST).select(self.CANDIDATES) == 50

    def test_always_middle(self):
        """Test middle uses integer division."""
        selector = BindingSelector(SelectionPolicy.ALWAYS_MIDDLE)
        assert selector.select(self.CANDIDATES) == 30
        assert selector.select([1, 2, 3, 4]) == 3
        assert selector.select([1, 2]) == 2

    def test_nth_or_last(self):
        """Test nth candidate with clamping to the last."""
        assert BindingSelector(SelectionPolicy.NTH_OR_LAST, n=1).select(self.CANDIDATES) == 20
        assert BindingSelector(SelectionPolicy.NTH_OR_LAST, n=99).select(self.CANDIDATES) == 50

    def test_random_stays_in_candidates(self):
        """Test random choices are drawn from the candidates."""
        selector = BindingSelector(SelectionPolicy.RANDOM, seed=7)
        picks = {selector.select(self.CANDIDATES) for _ in range(200)}
        assert picks <= set(self.CANDIDATES)
        assert len(picks) > 1

    def test_random_is_reproducible_with_seed(self):
        """Test seeded selectors make the same choices."""
        a = BindingSelector(SelectionPolicy.RANDOM, seed=42)
        b = BindingSelector(SelectionPolicy.RANDOM, seed=42)
        assert [a.select(self.CANDIDATES) for _ in range(20)] == \
            [b.select(self.CANDIDATES) for _ in range(20)]

    def test_policy_can_change_between_runs(self):
        """Test the policy is mutable."""
        selector = BindingSelector(SelectionPolicy.ALWAYS_FIRST)
        selector.policy = SelectionPolicy.ALWAYS_LAST
        assert selector.select(self.CANDIDATES) == 50

    def test_string_policy(self):
        """Test policies can be given by name."""
        assert BindingSelector('always_last').policy == SelectionPolicy.ALWAYS_LAST

    def test_empty_candidates_raise(self):
        """Test selecting from nothing raises ValueError."""
        with pytest.raises(ValueError):
            BindingSelector(SelectionPolicy.ALWAYS_FIRST).select([])

    def test_negative_n_raises(self):
        """Test negative n raises ValueError."""
        with pytest.raises(ValueError):
            BindingSelector(SelectionPolicy.NTH_OR_LAST, n=-1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
