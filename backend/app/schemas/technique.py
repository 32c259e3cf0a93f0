"""Technique Schemas — request/response bodies for the per-function endpoints."""

from pydantic import BaseModel, Field

from app.core.domain_types import Feature, NumberClass, PathBranch, Status


class StatusResponse(BaseModel):
    value: int
    status: Status


class CombinationResponse(BaseModel):
    a: int
    b: bool
    status: Status


class ClassificationResponse(BaseModel):
    value: int
    label: NumberClass


class PathResponse(BaseModel):
    value: int
    branches: list[PathBranch]


class SortedRequest(BaseModel):
    """Sequence to check; empty lists are valid (vacuously sorted)."""
    values: list[int] = Field(default_factory=list, max_length=100_000)


class SortedResponse(BaseModel):
    sorted: bool


class SequenceValueResponse(BaseModel):
    n: int
    result: int


class PrimeResponse(BaseModel):
    n: int
    is_prime: bool


class FeatureCombinationResponse(BaseModel):
    active: list[Feature]
    notices: list[str]
