from __future__ import annotations

import pytest

from queryfail.spi import (
    ErrorCode,
    ErrorCodeSupplier,
    ErrorType,
    Location,
    QueryEngineError,
    StandardErrorCode,
)


def test_error_code_equality_ignores_fatal_flag() -> None:
    assert ErrorCode(1, "SYNTAX_ERROR", ErrorType.USER_ERROR) == ErrorCode(
        1, "SYNTAX_ERROR", ErrorType.USER_ERROR, fatal=True
    )
    assert ErrorCode(1, "SYNTAX_ERROR", ErrorType.USER_ERROR) != ErrorCode(
        1, "SYNTAX_ERROR", ErrorType.INTERNAL_ERROR
    )


def test_error_code_rejects_invalid_values() -> None:
    with pytest.raises(ValueError):
        ErrorCode(-1, "BAD", ErrorType.USER_ERROR)
    with pytest.raises(ValueError):
        ErrorCode(1, "", ErrorType.USER_ERROR)


def test_error_code_is_its_own_supplier() -> None:
    code = ErrorCode(7, "CUSTOM", ErrorType.EXTERNAL)
    assert isinstance(code, ErrorCodeSupplier)
    assert code.to_error_code() is code


def test_standard_error_codes() -> None:
    code = StandardErrorCode.SYNTAX_ERROR.to_error_code()
    assert code == ErrorCode(1, "SYNTAX_ERROR", ErrorType.USER_ERROR)
    assert StandardErrorCode.GENERIC_INTERNAL_ERROR.to_error_code().code == 0x0001_0000
    assert (
        StandardErrorCode.EXCEEDED_TIME_LIMIT.to_error_code().type
        is ErrorType.INSUFFICIENT_RESOURCES
    )
    assert isinstance(StandardErrorCode.TABLE_NOT_FOUND, ErrorCodeSupplier)


def test_standard_error_codes_are_unique() -> None:
    codes = [supplier.to_error_code().code for supplier in StandardErrorCode]
    assert len(codes) == len(set(codes))


def test_by_name() -> None:
    assert StandardErrorCode.by_name("TABLE_NOT_FOUND") is StandardErrorCode.TABLE_NOT_FOUND
    with pytest.raises(ValueError, match="Unknown error code"):
        StandardErrorCode.by_name("NO_SUCH_CODE")


def test_location_must_be_positive() -> None:
    assert str(Location(3, 7)) == "line 3:7"
    with pytest.raises(ValueError):
        Location(0, 1)
    with pytest.raises(ValueError):
        Location(1, 0)


def test_query_engine_error_defaults_message_to_code_name() -> None:
    error = QueryEngineError(StandardErrorCode.DIVISION_BY_ZERO)
    assert str(error) == "DIVISION_BY_ZERO"
    assert error.error_code == StandardErrorCode.DIVISION_BY_ZERO.to_error_code()
    assert error.location is None


def test_query_engine_error_installs_cause() -> None:
    cause = OSError("disk full")
    error = QueryEngineError(
        StandardErrorCode.GENERIC_INTERNAL_ERROR,
        "write failed",
        location=Location(1, 2),
        cause=cause,
    )
    assert error.__cause__ is cause
    assert error.message == "write failed"
    assert error.location == Location(1, 2)
