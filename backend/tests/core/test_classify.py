"""Classifiers — equivalence classes, boundaries, pairing, Venn labels, path coverage.

Tests cover:
    - process_value: negative / zero / positive classes
    - check_range: inclusive bounds and just-outside values
    - evaluate_combination: full truth table inside [0, 10], FAILURE outside
    - classify_number: five labels, sign-agnostic parity for negatives
    - trace_number_path: every branch reached
"""

import pytest

from app.core.classify import (
    process_value,
    check_range,
    evaluate_combination,
    classify_number,
    trace_number_path,
    RANGE_LOWER,
    RANGE_UPPER,
    COMBINATION_LOWER,
    COMBINATION_UPPER,
)
from app.core.domain_types import NumberClass, PathBranch, Status


# ─── process_value ───────────────────────────────────────────────

def test_process_value_negative_is_failure():
    assert process_value(-5) == Status.FAILURE
    assert process_value(-1) == Status.FAILURE


def test_process_value_zero_is_success():
    assert process_value(0) == Status.SUCCESS


def test_process_value_positive_is_success():
    assert process_value(10) == Status.SUCCESS
    assert process_value(1) == Status.SUCCESS


# ─── check_range ─────────────────────────────────────────────────

def test_check_range_bounds_are_inclusive():
    assert check_range(1) == Status.SUCCESS
    assert check_range(100) == Status.SUCCESS


def test_check_range_just_outside_bounds():
    assert check_range(0) == Status.FAILURE
    assert check_range(101) == Status.FAILURE


def test_check_range_constants():
    assert (RANGE_LOWER, RANGE_UPPER) == (1, 100)


@pytest.mark.parametrize("value", [2, 50, 99])
def test_check_range_interior(value):
    assert check_range(value) == Status.SUCCESS


@pytest.mark.parametrize("value", [-100, -1, 1000])
def test_check_range_far_outside(value):
    assert check_range(value) == Status.FAILURE


# ─── evaluate_combination ────────────────────────────────────────

def test_evaluate_combination_pairs():
    assert evaluate_combination(0, True) == Status.SUCCESS
    assert evaluate_combination(1, False) == Status.SUCCESS
    assert evaluate_combination(2, False) == Status.FAILURE
    assert evaluate_combination(3, True) == Status.FAILURE


def test_evaluate_combination_truth_table_in_range():
    for a in range(COMBINATION_LOWER, COMBINATION_UPPER + 1):
        even = a % 2 == 0
        assert evaluate_combination(a, True) == (
            Status.SUCCESS if even else Status.FAILURE
        )
        assert evaluate_combination(a, False) == (
            Status.FAILURE if even else Status.SUCCESS
        )


@pytest.mark.parametrize("a", [-2, -1, 11, 12])
@pytest.mark.parametrize("b", [True, False])
def test_evaluate_combination_out_of_range_ignores_flag(a, b):
    assert evaluate_combination(a, b) == Status.FAILURE


def test_evaluate_combination_upper_bound_is_inclusive():
    assert evaluate_combination(10, True) == Status.SUCCESS
    assert evaluate_combination(9, False) == Status.SUCCESS


# ─── classify_number ─────────────────────────────────────────────

def test_classify_number_labels():
    assert classify_number(2) == NumberClass.POSITIVE_EVEN
    assert classify_number(1) == NumberClass.POSITIVE_ODD
    assert classify_number(-2) == NumberClass.NEGATIVE_EVEN
    assert classify_number(-1) == NumberClass.NEGATIVE_ODD
    assert classify_number(0) == NumberClass.UNKNOWN


def test_classify_number_negative_parity_is_sign_agnostic():
    assert classify_number(-4) == NumberClass.NEGATIVE_EVEN
    assert classify_number(-3) == NumberClass.NEGATIVE_ODD


def test_classify_number_label_text():
    assert classify_number(2).value == "Positive and Even"
    assert classify_number(0).value == "Unknown Classification"


# ─── trace_number_path ───────────────────────────────────────────

def test_trace_positive_even_path():
    assert trace_number_path(10) == [PathBranch.POSITIVE, PathBranch.EVEN]


def test_trace_positive_odd_path():
    assert trace_number_path(7) == [PathBranch.POSITIVE, PathBranch.ODD]


def test_trace_non_positive_path():
    assert trace_number_path(-5) == [PathBranch.NON_POSITIVE]
    assert trace_number_path(0) == [PathBranch.NON_POSITIVE]
