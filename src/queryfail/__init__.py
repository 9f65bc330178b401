"""Assertions over failures raised by the query engine."""

from queryfail.assertions import (
    FailureAssertionError,
    QueryErrorAssert,
    assert_query_error_raised_by,
    assert_that_query_error,
    query_error_raised,
)
from queryfail.client import FailureInfo, QueryFailedError
from queryfail.spi import ErrorCode, ErrorType, Location, QueryEngineError, StandardErrorCode

__all__ = [
    "ErrorCode",
    "ErrorType",
    "FailureAssertionError",
    "FailureInfo",
    "Location",
    "QueryEngineError",
    "QueryErrorAssert",
    "QueryFailedError",
    "StandardErrorCode",
    "assert_query_error_raised_by",
    "assert_that_query_error",
    "query_error_raised",
]
