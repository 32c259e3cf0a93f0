"""Check Suites — each testing technique's paired check cases, expressed as data.

Invariants:
    - A CheckCase either expects a return value or expects an exception type, never both
    - run_suite evaluates every case (no short-circuit) and never raises for a failed case
    - No `assert`: results survive `python -O`
    - Suites are PURE data; evaluating them only calls pure core functions

Design Decisions:
    - Data over functions-with-asserts: the shell can report per-case results
      instead of aborting on the first mismatch (ADR: reportable demonstrations)
    - Unexpected exceptions propagate: only the declared `raises` type is caught
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from app.core.classify import (
    check_range, classify_number, evaluate_combination, process_value,
)
from app.core.domain_types import NumberClass, Status
from app.core.errors import InvalidArgumentError
from app.core.numeric import factorial, fibonacci, is_prime
from app.core.sequences import is_sorted


@dataclass(frozen=True)
class CheckCase:
    """One call with its expected outcome."""
    description: str
    func: Callable[..., Any]
    args: tuple = ()
    expected: Any = None
    raises: type[Exception] | None = None


@dataclass(frozen=True)
class CheckResult:
    description: str
    passed: bool
    expected: str
    actual: str


@dataclass(frozen=True)
class CheckSuite:
    """Named group of cases plus the line announced when all of them pass."""
    name: str
    success_message: str
    cases: tuple[CheckCase, ...] = field(default_factory=tuple)


def _render(value: Any) -> str:
    if isinstance(value, Status | NumberClass):
        return value.value
    return repr(value)


def run_case(case: CheckCase) -> CheckResult:
    """Evaluate one case. Pure — only calls the case's function."""
    if case.raises is not None:
        expected = f"raises {case.raises.__name__}"
        try:
            value = case.func(*case.args)
        except case.raises:
            return CheckResult(case.description, True, expected, expected)
        return CheckResult(case.description, False, expected, _render(value))

    value = case.func(*case.args)
    return CheckResult(
        case.description, value == case.expected,
        _render(case.expected), _render(value),
    )


def run_suite(suite: CheckSuite) -> list[CheckResult]:
    """Evaluate every case in order; a failed case never stops the run."""
    return [run_case(case) for case in suite.cases]


def suite_passed(results: list[CheckResult]) -> bool:
    """True iff every result passed (an empty suite passes)."""
    return all(r.passed for r in results)


# ─── Suites ──────────────────────────────────────────────────────

EQUIVALENCE_SUITE = CheckSuite(
    name="equivalence",
    success_message="All equivalence class tests passed!",
    cases=(
        CheckCase("negative class", process_value, (-5,), Status.FAILURE),
        CheckCase("zero class", process_value, (0,), Status.SUCCESS),
        CheckCase("positive class", process_value, (10,), Status.SUCCESS),
    ),
)

BOUNDARY_SUITE = CheckSuite(
    name="boundary",
    success_message="All boundary tests passed!",
    cases=(
        CheckCase("lower bound", check_range, (1,), Status.SUCCESS),
        CheckCase("upper bound", check_range, (100,), Status.SUCCESS),
        CheckCase("below lower bound", check_range, (0,), Status.FAILURE),
        CheckCase("above upper bound", check_range, (101,), Status.FAILURE),
    ),
)

COMBINATORIAL_SUITE = CheckSuite(
    name="combinatorial",
    success_message="All combinatorial tests passed!",
    cases=(
        CheckCase("a=0, b=True", evaluate_combination, (0, True), Status.SUCCESS),
        CheckCase("a=1, b=False", evaluate_combination, (1, False), Status.SUCCESS),
        CheckCase("a=2, b=False", evaluate_combination, (2, False), Status.FAILURE),
        CheckCase("a=3, b=True", evaluate_combination, (3, True), Status.FAILURE),
    ),
)

SORTING_SUITE = CheckSuite(
    name="sorting",
    success_message="All sorting tests passed!",
    cases=(
        CheckCase("sorted array", is_sorted, ([1, 2, 3, 4, 5],), True),
        CheckCase("unsorted array", is_sorted, ([5, 3, 1],), False),
    ),
)

CLASSIFICATION_SUITE = CheckSuite(
    name="classification",
    success_message="All classification tests passed!",
    cases=(
        CheckCase("2", classify_number, (2,), NumberClass.POSITIVE_EVEN),
        CheckCase("1", classify_number, (1,), NumberClass.POSITIVE_ODD),
        CheckCase("-2", classify_number, (-2,), NumberClass.NEGATIVE_EVEN),
        CheckCase("-1", classify_number, (-1,), NumberClass.NEGATIVE_ODD),
        CheckCase("0", classify_number, (0,), NumberClass.UNKNOWN),
    ),
)

FACTORIAL_SUITE = CheckSuite(
    name="factorial",
    success_message="All factorial tests passed!",
    cases=(
        CheckCase("0!", factorial, (0,), 1),
        CheckCase("1!", factorial, (1,), 1),
        CheckCase("2!", factorial, (2,), 2),
        CheckCase("3!", factorial, (3,), 6),
        CheckCase("4!", factorial, (4,), 24),
        CheckCase("(-1)!", factorial, (-1,), raises=InvalidArgumentError),
    ),
)

FIBONACCI_SUITE = CheckSuite(
    name="fibonacci",
    success_message="All Fibonacci tests passed!",
    cases=(
        *(
            CheckCase(f"F({n})", fibonacci, (n,), expected)
            for n, expected in enumerate((0, 1, 1, 2, 3, 5))
        ),
        CheckCase("F(-1)", fibonacci, (-1,), raises=InvalidArgumentError),
    ),
)

PRIME_SUITE = CheckSuite(
    name="prime",
    success_message="All prime tests passed!",
    cases=tuple(
        CheckCase(str(n), is_prime, (n,), expected)
        for n, expected in (
            (2, True), (3, True), (4, False), (5, True), (10, False), (13, True),
        )
    ),
)
