from .base import AssertionFailure, FailureAssertionError, fail
from .engine import apply_expectations
from .extract import get_failure_info
from .matcher import (
    QueryErrorAssert,
    assert_query_error_raised_by,
    assert_that_query_error,
    query_error_raised,
)

__all__ = [
    "AssertionFailure",
    "FailureAssertionError",
    "QueryErrorAssert",
    "apply_expectations",
    "assert_query_error_raised_by",
    "assert_that_query_error",
    "fail",
    "get_failure_info",
    "query_error_raised",
]
