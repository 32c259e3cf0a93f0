"""Demonstration Runner — section registry, narration, and reports.

Tests cover:
    - ten sections, numbered 1..10, with the expected titles
    - every section passes against the core implementation
    - set theory and reachability narration lines
    - unknown section raises DemonstrationNotFoundError
    - failing suites are reported, not raised
"""

import logging

import pytest

from app.core.check_suites import CheckCase, CheckSuite
from app.core.classify import check_range
from app.core.domain_types import Status
from app.core.errors import DemonstrationNotFoundError
from app.services import demonstration_runner
from app.services.demonstration_runner import (
    DEMONSTRATIONS,
    SEPARATOR,
    Demonstration,
    announce_feature_combination,
    feature_combination_notices,
    log_feature_notices,
    run_all_demonstrations,
    run_demonstration,
    _suite_section,
)


# ─── registry ────────────────────────────────────────────────────

def test_ten_sections_in_order():
    assert [d.section for d in DEMONSTRATIONS] == list(range(1, 11))
    assert [d.title for d in DEMONSTRATIONS] == [
        "Set Theory",
        "Equivalence Class Testing",
        "Reachability Testing",
        "Boundary Testing",
        "Combinatorial Testing",
        "Sorting Testing",
        "Venn Diagram",
        "Factorial",
        "Fibonacci",
        "Prime Numbers",
    ]


def test_unknown_section_raises():
    with pytest.raises(DemonstrationNotFoundError):
        run_demonstration(11)


# ─── feature combination ─────────────────────────────────────────

def test_feature_combination_notices():
    assert feature_combination_notices(True, False, True) == [
        "Testing Feature A", "Testing Feature C", "------",
    ]


def test_feature_combination_notices_with_no_flags():
    assert feature_combination_notices(False, False, False) == ["------"]


def test_announce_feature_combination_logs_and_returns_none(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.demonstration_runner"):
        result = announce_feature_combination(False, True, True)
    assert result is None
    assert caplog.messages == ["Testing Feature B", "Testing Feature C", "------"]


def test_log_feature_notices_logs_given_list_verbatim(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.demonstration_runner"):
        log_feature_notices(["Testing Feature A", "------"])
    assert caplog.messages == ["Testing Feature A", "------"]
    assert all(r.technique == "feature_combination" for r in caplog.records)


def test_set_theory_logs_each_notice_once(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.demonstration_runner"):
        report = run_demonstration(1)
    assert caplog.messages[1:] == report.notices


# ─── sections ────────────────────────────────────────────────────

def test_set_theory_report():
    report = run_demonstration(1)
    assert report.title == "Set Theory"
    assert report.checks == []
    assert report.passed is True
    assert report.notices == [
        "Testing Feature A", "Testing Feature B", "------",
        "Testing Feature A", "Testing Feature C", "------",
        "Testing Feature B", "Testing Feature C", "------",
        "Testing Feature A", "Testing Feature B", "Testing Feature C", "------",
    ]


def test_reachability_report_covers_every_branch():
    report = run_demonstration(3)
    assert report.notices == [
        "Positive Number", "Even Number",
        "Positive Number", "Odd Number",
        "Non-Positive Number",
    ]


def test_equivalence_report_announces_success():
    report = run_demonstration(2)
    assert report.passed is True
    assert report.notices == ["All equivalence class tests passed!"]
    assert len(report.checks) == 3


def test_banner_is_logged_with_section(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.demonstration_runner"):
        run_demonstration(8)
    banner = caplog.records[0]
    assert banner.getMessage() == "8. Factorial"
    assert banner.section == 8


def test_run_all_demonstrations_passes():
    reports = run_all_demonstrations()
    assert len(reports) == 10
    assert all(r.passed for r in reports)


def test_run_all_logs_separators_between_sections(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.demonstration_runner"):
        run_all_demonstrations()
    assert caplog.messages.count(SEPARATOR) == 9


def test_failing_suite_is_reported_not_raised(monkeypatch, caplog):
    broken = CheckSuite(
        name="boundary",
        success_message="All boundary tests passed!",
        cases=(CheckCase("below lower bound", check_range, (0,), Status.SUCCESS),),
    )
    monkeypatch.setattr(
        demonstration_runner, "DEMONSTRATIONS",
        (Demonstration(4, "Boundary Testing", _suite_section(broken)),),
    )
    with caplog.at_level(logging.WARNING, logger="app.services.demonstration_runner"):
        report = run_demonstration(4)
    assert report.passed is False
    assert report.checks[0].expected == "success"
    assert report.checks[0].actual == "failure"
    assert report.notices == ["1 boundary check(s) failed: below lower bound"]
    assert "below lower bound" in caplog.text
