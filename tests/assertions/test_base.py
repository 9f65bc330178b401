from __future__ import annotations

import pytest

from queryfail.assertions.base import AssertionFailure, FailureAssertionError, fail


def test_fail_raises_assertion_error_with_failure() -> None:
    failure = AssertionFailure(type="location", message="wrong location", details={"a": 1})
    with pytest.raises(AssertionError, match="wrong location") as excinfo:
        fail(failure)
    assert isinstance(excinfo.value, FailureAssertionError)
    assert excinfo.value.failure is failure
    assert excinfo.value.suppressed == ()
    assert excinfo.value.__cause__ is None


def test_suppressed_errors_are_attached() -> None:
    original = ValueError("original")
    with pytest.raises(FailureAssertionError) as excinfo:
        fail(AssertionFailure(type="message", message="mismatch"), suppressed=original)
    error = excinfo.value
    assert error.suppressed == (original,)
    assert error.__cause__ is original
    assert error.__notes__ == ["Suppressed: ValueError: original"]


def test_add_suppressed_keeps_first_cause_and_skips_duplicates() -> None:
    first = ValueError("first")
    second = KeyError("second")
    error = FailureAssertionError(AssertionFailure(type="x", message="y"), (first,))
    error.add_suppressed(second)
    error.add_suppressed(first)
    error.add_suppressed(error)
    assert error.suppressed == (first, second)
    assert error.__cause__ is first
