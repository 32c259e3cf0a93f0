"""Technique Routes — one endpoint per core function.

Invariants:
    - Routes only call core/ functions; Status/bool results are returned, not raised
    - factorial/fibonacci: negative n → 400 INVALID_ARGUMENT (raised by core)
    - factorial/fibonacci: n > settings.max_sequence_index → 400 INPUT_TOO_LARGE
    - prime: n > settings.max_prime_candidate → 400 INPUT_TOO_LARGE

Design Decisions:
    - Sync handlers: core is CPU-bound and pure, FastAPI runs them in a threadpool
"""

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.core.classify import (
    check_range, classify_number, evaluate_combination, process_value,
    trace_number_path,
)
from app.core.errors import ErrorContext, InputTooLargeError
from app.core.feature_sets import active_features
from app.core.numeric import factorial, fibonacci, is_prime
from app.core.sequences import is_sorted
from app.schemas.technique import (
    ClassificationResponse, CombinationResponse, FeatureCombinationResponse,
    PathResponse, PrimeResponse, SequenceValueResponse, SortedRequest,
    SortedResponse, StatusResponse,
)
from app.services.demonstration_runner import (
    feature_combination_notices, log_feature_notices,
)

router = APIRouter(prefix="/api/v1/techniques", tags=["techniques"])


def _check_limit(n: int, limit: int, technique: str) -> None:
    if n > limit:
        raise InputTooLargeError(
            "n", n, limit,
            context=ErrorContext(technique=technique),
        )


@router.get("/process-value/{value}", response_model=StatusResponse)
def get_process_value(value: int):
    return StatusResponse(value=value, status=process_value(value))


@router.get("/check-range/{value}", response_model=StatusResponse)
def get_check_range(value: int):
    return StatusResponse(value=value, status=check_range(value))


@router.get("/combination", response_model=CombinationResponse)
def get_combination(a: int, b: bool):
    return CombinationResponse(a=a, b=b, status=evaluate_combination(a, b))


@router.get("/classify/{value}", response_model=ClassificationResponse)
def get_classification(value: int):
    return ClassificationResponse(value=value, label=classify_number(value))


@router.get("/path/{value}", response_model=PathResponse)
def get_path(value: int):
    return PathResponse(value=value, branches=trace_number_path(value))


@router.post("/sorted", response_model=SortedResponse)
def post_sorted(body: SortedRequest):
    return SortedResponse(sorted=is_sorted(body.values))


@router.get("/factorial/{n}", response_model=SequenceValueResponse)
def get_factorial(n: int, settings: Settings = Depends(get_settings)):
    _check_limit(n, settings.max_sequence_index, "factorial")
    return SequenceValueResponse(n=n, result=factorial(n))


@router.get("/fibonacci/{n}", response_model=SequenceValueResponse)
def get_fibonacci(n: int, settings: Settings = Depends(get_settings)):
    _check_limit(n, settings.max_sequence_index, "fibonacci")
    return SequenceValueResponse(n=n, result=fibonacci(n))


@router.get("/prime/{n}", response_model=PrimeResponse)
def get_prime(n: int, settings: Settings = Depends(get_settings)):
    _check_limit(n, settings.max_prime_candidate, "is_prime")
    return PrimeResponse(n=n, is_prime=is_prime(n))


@router.get("/features", response_model=FeatureCombinationResponse)
def get_features(
    feature_a: bool = False, feature_b: bool = False, feature_c: bool = False,
):
    notices = feature_combination_notices(feature_a, feature_b, feature_c)
    log_feature_notices(notices)
    return FeatureCombinationResponse(
        active=active_features(feature_a, feature_b, feature_c),
        notices=notices,
    )
