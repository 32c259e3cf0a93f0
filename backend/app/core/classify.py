"""Classifiers — map a single input to a Status, label, or visited branch path.

Invariants:
    - All functions are PURE and TOTAL: every int (and bool) input returns a value
    - Rejection is a Status.FAILURE return, never an exception
    - Parity is sign-agnostic: Python `%` with positive modulus gives -3 % 2 == 1
    - RANGE_* and COMBINATION_* constants are single source of truth for the bounds

Design Decisions:
    - Status enum over bool: reads as an outcome at call sites, serializes as "success"/"failure"
    - trace_number_path returns the visited branches instead of printing them:
      the shell decides how to narrate (ADR: functional core, imperative shell)
"""

from app.core.domain_types import NumberClass, PathBranch, Status


RANGE_LOWER: int = 1
RANGE_UPPER: int = 100
COMBINATION_LOWER: int = 0
COMBINATION_UPPER: int = 10


def _is_even(value: int) -> bool:
    return value % 2 == 0


# ─── Equivalence classes ────────────────────────────────────────

def process_value(value: int) -> Status:
    """Negative → FAILURE; zero and positive → SUCCESS."""
    if value < 0:
        return Status.FAILURE
    if value == 0:
        return Status.SUCCESS
    return Status.SUCCESS


# ─── Boundary values ────────────────────────────────────────────

def check_range(value: int) -> Status:
    """SUCCESS iff RANGE_LOWER <= value <= RANGE_UPPER (both inclusive)."""
    if value < RANGE_LOWER or value > RANGE_UPPER:
        return Status.FAILURE
    return Status.SUCCESS


# ─── Combinatorial pairing ──────────────────────────────────────

def evaluate_combination(a: int, b: bool) -> Status:
    """Range check first, then parity must match the flag (True → even, False → odd)."""
    if a < COMBINATION_LOWER or a > COMBINATION_UPPER:
        return Status.FAILURE
    if b and _is_even(a):
        return Status.SUCCESS
    if not b and not _is_even(a):
        return Status.SUCCESS
    return Status.FAILURE


# ─── Venn classification ────────────────────────────────────────

def classify_number(value: int) -> NumberClass:
    """Sign × parity label; zero falls through to UNKNOWN."""
    if value > 0 and _is_even(value):
        return NumberClass.POSITIVE_EVEN
    elif value > 0 and not _is_even(value):
        return NumberClass.POSITIVE_ODD
    elif value < 0 and _is_even(value):
        return NumberClass.NEGATIVE_EVEN
    elif value < 0 and not _is_even(value):
        return NumberClass.NEGATIVE_ODD
    return NumberClass.UNKNOWN


# ─── Path coverage ──────────────────────────────────────────────

def trace_number_path(x: int) -> list[PathBranch]:
    """Branches visited for x, in visit order."""
    if x > 0:
        branch = PathBranch.EVEN if _is_even(x) else PathBranch.ODD
        return [PathBranch.POSITIVE, branch]
    return [PathBranch.NON_POSITIVE]
