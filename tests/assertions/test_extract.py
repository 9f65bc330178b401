from __future__ import annotations

from queryfail.assertions.extract import get_failure_info
from queryfail.client import FailureInfo, QueryFailedError
from queryfail.spi import Location, QueryEngineError, StandardErrorCode


class _DriverError(Exception):
    """Exposes a failure the way a DB-API driver might."""

    def __init__(self, failure_info: FailureInfo) -> None:
        super().__init__(failure_info.message)
        self.failure_info = failure_info


def test_extracts_engine_error() -> None:
    error = QueryEngineError(StandardErrorCode.SYNTAX_ERROR, "bad", location=Location(1, 1))
    info = get_failure_info(error)
    assert info is not None
    assert info.error_info is not None
    assert info.error_info.name == "SYNTAX_ERROR"


def test_extracts_query_failed_error() -> None:
    failure = FailureInfo(type="RemoteError", message="remote boom")
    info = get_failure_info(QueryFailedError(failure))
    assert info is failure


def test_extracts_any_error_exposing_failure_info() -> None:
    failure = FailureInfo(type="RemoteError", message="driver boom")
    assert get_failure_info(_DriverError(failure)) is failure


def test_unwraps_one_level_of_wrapping() -> None:
    engine_error = QueryEngineError(StandardErrorCode.TABLE_NOT_FOUND, "no table")
    try:
        try:
            raise engine_error
        except QueryEngineError as exc:
            raise RuntimeError("task failed") from exc
    except RuntimeError as wrapper:
        info = get_failure_info(wrapper)

    assert info is not None
    assert info.message == "no table"


def test_does_not_unwrap_implicit_context() -> None:
    try:
        try:
            raise QueryEngineError(StandardErrorCode.TABLE_NOT_FOUND)
        except QueryEngineError:
            raise RuntimeError("handler failed")
    except RuntimeError as exc:
        assert get_failure_info(exc) is None


def test_unrecognized_errors_yield_none() -> None:
    assert get_failure_info(ValueError("plain")) is None
    nested = RuntimeError("outer")
    middle = RuntimeError("middle")
    middle.__cause__ = QueryEngineError(StandardErrorCode.SYNTAX_ERROR)
    nested.__cause__ = middle
    assert get_failure_info(nested) is None


def test_ignores_failure_info_attribute_of_wrong_type() -> None:
    error = ValueError("odd")
    error.failure_info = {"type": "x"}  # type: ignore[attr-defined]
    assert get_failure_info(error) is None
