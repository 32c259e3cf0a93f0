"""Demonstration Schemas — reports produced by the demonstration runner.

Invariants:
    - passed is True iff every check passed (empty checks → True)
    - notices preserve narration order
"""

from pydantic import BaseModel, Field, computed_field

from app.core.check_suites import CheckResult


class CheckOutcome(BaseModel):
    """One evaluated check case."""
    description: str
    passed: bool
    expected: str
    actual: str

    @classmethod
    def from_result(cls, result: CheckResult) -> "CheckOutcome":
        return cls(
            description=result.description, passed=result.passed,
            expected=result.expected, actual=result.actual,
        )


class DemonstrationReport(BaseModel):
    """Outcome of one numbered demonstration section."""
    section: int = Field(ge=1)
    title: str
    notices: list[str] = Field(default_factory=list)
    checks: list[CheckOutcome] = Field(default_factory=list)

    @computed_field
    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)
