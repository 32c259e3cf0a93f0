"""Feature Sets — set-theory view of feature-flag combinations over {A, B, C}.

Invariants:
    - Flags are independent: any subset of {A, B, C} is a valid combination
    - active_features preserves A, B, C order
    - feature_subsets yields all 2**3 subsets, empty set first
"""

from itertools import combinations
from typing import Iterator

from app.core.domain_types import Feature


# Combinations exercised by the set-theory demonstration
DEFAULT_COMBINATIONS: tuple[tuple[bool, bool, bool], ...] = (
    (True, True, False),
    (True, False, True),
    (False, True, True),
    (True, True, True),
)


def active_features(
    feature_a: bool, feature_b: bool, feature_c: bool,
) -> list[Feature]:
    """Features whose flag is set."""
    flags = zip(Feature, (feature_a, feature_b, feature_c))
    return [feature for feature, enabled in flags if enabled]


def feature_subsets() -> Iterator[frozenset[Feature]]:
    """Power set of {A, B, C}, ordered by size."""
    members = list(Feature)
    for size in range(len(members) + 1):
        for subset in combinations(members, size):
            yield frozenset(subset)
