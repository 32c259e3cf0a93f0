"""Sequence Predicates — monotonicity checks over read-only integer sequences.

Invariants:
    - is_sorted never mutates its input
    - Empty and single-element sequences are sorted (vacuously true)
    - Single left-to-right pass; returns on the first inversion
"""

from typing import Sequence


def is_sorted(sequence: Sequence[int]) -> bool:
    """True iff the sequence is non-decreasing (duplicates allowed)."""
    for i in range(1, len(sequence)):
        if sequence[i] < sequence[i - 1]:
            return False
    return True
