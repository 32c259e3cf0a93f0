"""Demonstration Runner — narrates the ten testing-technique demonstrations in order.

Invariants:
    - DEMONSTRATIONS is ordered by section (1..10) and is the single registry
    - Every notice is both logged and returned in the report (same order)
    - A failing check never aborts a run: it is reported with passed=False
    - announce_feature_combination returns nothing and never fails

Design Decisions:
    - Reports (pydantic) instead of stdout prints: the API and tests consume the same data
    - Suite-based sections share one runner (_suite_section); only set theory and
      reachability have bespoke bodies because their subjects return no verdict
"""

import logging
from dataclasses import dataclass
from typing import Callable

from app.core.check_suites import (
    BOUNDARY_SUITE, CLASSIFICATION_SUITE, COMBINATORIAL_SUITE,
    EQUIVALENCE_SUITE, FACTORIAL_SUITE, FIBONACCI_SUITE, PRIME_SUITE,
    SORTING_SUITE, CheckResult, CheckSuite, run_suite, suite_passed,
)
from app.core.classify import trace_number_path
from app.core.errors import DemonstrationNotFoundError
from app.core.feature_sets import DEFAULT_COMBINATIONS, active_features
from app.schemas.demonstration import CheckOutcome, DemonstrationReport

logger = logging.getLogger(__name__)

SEPARATOR = "======================="
COMBINATION_SEPARATOR = "------"
REACHABILITY_INPUTS: tuple[int, ...] = (10, 7, -5)

SectionBody = Callable[[], tuple[list[str], list[CheckResult]]]


@dataclass(frozen=True)
class Demonstration:
    section: int
    title: str
    body: SectionBody


# ─── Feature combination (set theory) ───────────────────────────

def feature_combination_notices(
    feature_a: bool, feature_b: bool, feature_c: bool,
) -> list[str]:
    """Notice lines for one combination, closed by the separator."""
    notices = [
        f"Testing Feature {feature.value}"
        for feature in active_features(feature_a, feature_b, feature_c)
    ]
    notices.append(COMBINATION_SEPARATOR)
    return notices


def log_feature_notices(notices: list[str]) -> None:
    for notice in notices:
        logger.info(notice, extra={"technique": "feature_combination"})


def announce_feature_combination(
    feature_a: bool, feature_b: bool, feature_c: bool,
) -> None:
    """Emit one notice per enabled feature."""
    log_feature_notices(feature_combination_notices(feature_a, feature_b, feature_c))


# ─── Section bodies ─────────────────────────────────────────────

def _set_theory() -> tuple[list[str], list[CheckResult]]:
    notices: list[str] = []
    for combination in DEFAULT_COMBINATIONS:
        combination_notices = feature_combination_notices(*combination)
        log_feature_notices(combination_notices)
        notices.extend(combination_notices)
    return notices, []


def _reachability() -> tuple[list[str], list[CheckResult]]:
    notices: list[str] = []
    for x in REACHABILITY_INPUTS:
        for branch in trace_number_path(x):
            logger.info(branch.value, extra={"technique": "path_coverage"})
            notices.append(branch.value)
    return notices, []


def _suite_section(suite: CheckSuite) -> SectionBody:
    def body() -> tuple[list[str], list[CheckResult]]:
        results = run_suite(suite)
        if suite_passed(results):
            logger.info(suite.success_message, extra={"technique": suite.name})
            return [suite.success_message], results
        failed = [r.description for r in results if not r.passed]
        message = f"{len(failed)} {suite.name} check(s) failed: {', '.join(failed)}"
        logger.warning(message, extra={"technique": suite.name})
        return [message], results
    return body


DEMONSTRATIONS: tuple[Demonstration, ...] = (
    Demonstration(1, "Set Theory", _set_theory),
    Demonstration(2, "Equivalence Class Testing", _suite_section(EQUIVALENCE_SUITE)),
    Demonstration(3, "Reachability Testing", _reachability),
    Demonstration(4, "Boundary Testing", _suite_section(BOUNDARY_SUITE)),
    Demonstration(5, "Combinatorial Testing", _suite_section(COMBINATORIAL_SUITE)),
    Demonstration(6, "Sorting Testing", _suite_section(SORTING_SUITE)),
    Demonstration(7, "Venn Diagram", _suite_section(CLASSIFICATION_SUITE)),
    Demonstration(8, "Factorial", _suite_section(FACTORIAL_SUITE)),
    Demonstration(9, "Fibonacci", _suite_section(FIBONACCI_SUITE)),
    Demonstration(10, "Prime Numbers", _suite_section(PRIME_SUITE)),
)


# ─── Runner ─────────────────────────────────────────────────────

def get_demonstration(section: int) -> Demonstration:
    for demo in DEMONSTRATIONS:
        if demo.section == section:
            return demo
    raise DemonstrationNotFoundError(section)


def run_demonstration(section: int) -> DemonstrationReport:
    """Run one section. Raises DemonstrationNotFoundError for unknown sections."""
    demo = get_demonstration(section)
    logger.info(f"{demo.section}. {demo.title}", extra={"section": demo.section})
    notices, results = demo.body()
    return DemonstrationReport(
        section=demo.section,
        title=demo.title,
        notices=notices,
        checks=[CheckOutcome.from_result(r) for r in results],
    )


def run_all_demonstrations() -> list[DemonstrationReport]:
    """Run every section in order, separated by a banner line."""
    reports = []
    for index, demo in enumerate(DEMONSTRATIONS):
        if index:
            logger.info(SEPARATOR)
        reports.append(run_demonstration(demo.section))
    failed = [r.section for r in reports if not r.passed]
    if failed:
        logger.warning(f"Demonstrations with failing checks: {failed}")
    return reports
