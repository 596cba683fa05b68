"""
Initial binding site selection.

When several units carry an enzyme's binding base, a BindingSelector decides
which one the enzyme attaches to. The selector is passed into each run
instead of living in module state, so concurrent runs can use different
policies.
"""

from enum import Enum
from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar('T')


class SelectionPolicy(Enum):
    """Strategies for choosing among equally valid binding sites."""
    ALWAYS_FIRST = 'always_first'
    ALWAYS_LAST = 'always_last'
    ALWAYS_MIDDLE = 'always_middle'
    RANDOM = 'random'
    NTH_OR_LAST = 'nth_or_last'

    @classmethod
    def parse(cls, name: str) -> 'SelectionPolicy':
        """
        Parse a policy identifier.

        Accepts the enum value ('nth_or_last'), the member name
        ('NTH_OR_LAST') or the CamelCase form ('NthOrLast').

        Raises:
            ValueError: If the identifier is not a known policy
        """
        key = name.strip().replace('_', '').replace('-', '').lower()

        for policy in cls:
            if key and key == policy.value.replace('_', ''):
                return policy

        valid = ', '.join(p.value for p in cls)
        raise ValueError(f"Unknown selection policy: {name!r} (expected one of: {valid})")


class BindingSelector:
    """
    Chooses one binding site from an ordered list of candidates.

    Attributes:
        policy: Active SelectionPolicy
        n: Index used by NTH_OR_LAST (clamped to the last candidate)
    """

    def __init__(
        self,
        policy: SelectionPolicy = SelectionPolicy.RANDOM,
        n: int = 0,
        seed: Optional[int] = None,
    ):
        if not isinstance(policy, SelectionPolicy):
            policy = SelectionPolicy.parse(str(policy))
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self.policy = policy
        self.n = n
        self._rng = np.random.default_rng(seed)

    def select(self, candidates: Sequence[T]) -> T:
        """
        Pick one candidate.

        Args:
            candidates: Non-empty sequence in left-to-right strand order

        Returns:
            The chosen candidate
        """
        count = len(candidates)
        if count == 0:
            raise ValueError("Cannot select a binding site from no candidates")

        if self.policy == SelectionPolicy.ALWAYS_FIRST:
            return candidates[0]
        if self.policy == SelectionPolicy.ALWAYS_LAST:
            return candidates[-1]
        if self.policy == SelectionPolicy.ALWAYS_MIDDLE:
            return candidates[count // 2]
        if self.policy == SelectionPolicy.RANDOM:
            return candidates[int(self._rng.integers(count))]
        if self.policy == SelectionPolicy.NTH_OR_LAST:
            return candidates[min(self.n, count - 1)]

        raise ValueError(f"Unknown selection policy: {self.policy!r}")

    def __repr__(self) -> str:
        return f"BindingSelector(policy={self.policy.value}, n={self.n})"
