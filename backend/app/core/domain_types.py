"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Status has exactly two values: SUCCESS and FAILURE
    - NumberClass holds the five fixed classification labels (values are the labels)
    - All valid outcomes encoded as Enums — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: API returns labels as-is)
"""

from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class Status(str, Enum):
    """Outcome of a validation/classification check."""
    SUCCESS = "success"
    FAILURE = "failure"


class NumberClass(str, Enum):
    """Sign + parity classification (Venn diagram of positive/negative × even/odd)."""
    POSITIVE_EVEN = "Positive and Even"
    POSITIVE_ODD = "Positive and Odd"
    NEGATIVE_EVEN = "Negative and Even"
    NEGATIVE_ODD = "Negative and Odd"
    UNKNOWN = "Unknown Classification"


class PathBranch(str, Enum):
    """Branch nodes visited by trace_number_path (path coverage subject)."""
    POSITIVE = "Positive Number"
    EVEN = "Even Number"
    ODD = "Odd Number"
    NON_POSITIVE = "Non-Positive Number"


class Feature(str, Enum):
    """Independent feature flags for set-based combination testing."""
    A = "A"
    B = "B"
    C = "C"
