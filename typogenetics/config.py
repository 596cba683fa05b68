"""
Configuration for typogenetics simulations.

Settings can be given on the command line or loaded from a YAML file.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional
import re
import yaml

from .core.selection import BindingSelector, SelectionPolicy
from .core.strand import Strand
from .pool import StrandPool


# Regex to detect if string is a literal strand rather than a file path
STRAND_PATTERN = re.compile(r'^[ACGTacgt]+$')


def is_strand_text(s: str) -> bool:
    """Check if string is a literal strand (not a file path)."""
    return bool(s) and bool(STRAND_PATTERN.match(s))


def parse_strand_input(value: str) -> Strand:
    """
    Parse strand input - either letters or a path to a FASTA-style file.

    Args:
        value: Strand letters (any case) or path to a file

    Returns:
        The parsed Strand

    Examples:
        >>> str(parse_strand_input("acgt"))
        'ACGT'
    """
    value = value.strip()

    if is_strand_text(value):
        return Strand.from_string(value.upper())

    path = Path(value)
    if not path.is_file():
        raise ValueError(f"Not a strand and no such file: {value}")

    return Strand.from_string(_read_first_record(path))


def _read_first_record(path: Path) -> str:
    """Read the first sequence record from a FASTA-style file."""
    sequence = []
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line.startswith('>'):
                if sequence:
                    break  # Only read first record
                continue
            sequence.append(line.upper())
    return ''.join(sequence)


def _int_setting(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class SimulationConfig:
    """Simulation settings."""
    selection_policy: SelectionPolicy = SelectionPolicy.RANDOM
    nth: int = 0  # Index used by the nth_or_last policy
    seed: Optional[int] = None  # Seed for the random policy

    # Pool housekeeping
    auto_remove_duplicates: bool = False
    auto_remove_short: bool = False
    min_strand_length: int = 2

    def __post_init__(self):
        if not isinstance(self.selection_policy, SelectionPolicy):
            self.selection_policy = SelectionPolicy.parse(str(self.selection_policy))
        if self.nth < 0:
            raise ValueError(f"nth must be non-negative, got {self.nth}")
        if self.min_strand_length < 0:
            raise ValueError(f"min_strand_length must be non-negative, got {self.min_strand_length}")

    @classmethod
    def from_yaml(cls, path: Path) -> 'SimulationConfig':
        """Load configuration from YAML file."""
        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        selection = data.get('selection', {}) or {}
        if not isinstance(selection, dict):
            raise ValueError(f"'selection' must be a mapping with policy, n and seed: {path}")

        seed = selection.get('seed')
        return cls(
            selection_policy=SelectionPolicy.parse(str(selection.get('policy', 'random'))),
            nth=_int_setting('n', selection.get('n', 0)),
            seed=None if seed is None else _int_setting('seed', seed),
            auto_remove_duplicates=bool(data.get('auto_remove_duplicates', False)),
            auto_remove_short=bool(data.get('auto_remove_short', False)),
            min_strand_length=_int_setting('min_strand_length', data.get('min_strand_length', 2)),
        )

    def make_selector(self) -> BindingSelector:
        return BindingSelector(self.selection_policy, n=self.nth, seed=self.seed)

    def make_pool(self, strands: Iterable[Strand] = ()) -> StrandPool:
        """Create a StrandPool using these settings."""
        return StrandPool(
            strands=list(strands),
            selector=self.make_selector(),
            auto_remove_duplicates=self.auto_remove_duplicates,
            auto_remove_short=self.auto_remove_short,
            min_length=self.min_strand_length,
        )


CONFIG_TEMPLATE = '''# Typogenetics configuration
# Edit this file and pass it with --config

# How an enzyme picks a binding site when several bases match:
# always_first, always_last, always_middle, random, nth_or_last
selection:
  policy: random
  n: 0          # Index for nth_or_last (0-based, clamped to the last site)
  seed: null    # Seed for the random policy

# Pool housekeeping after applying an enzyme
auto_remove_duplicates: false
auto_remove_short: false
min_strand_length: 2
'''
