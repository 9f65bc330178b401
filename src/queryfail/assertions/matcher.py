from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Callable, Iterator

from queryfail.client import FailureInfo
from queryfail.spi import ErrorCodeSupplier, ErrorType

from . import checks
from .base import AssertionFailure, fail
from .extract import get_failure_info, unrecognized_failure

logger = logging.getLogger(__name__)


class QueryErrorAssert:
    """Fluent checks over an error raised by the query engine.

    Build one with :func:`assert_query_error_raised_by` or
    :func:`assert_that_query_error`; every check returns the matcher so
    checks can be chained::

        (
            assert_query_error_raised_by(lambda: run("SELECT x FROM t"))
            .has_error_code(StandardErrorCode.COLUMN_NOT_FOUND)
            .has_location(1, 8)
        )
    """

    __slots__ = ("_actual", "_failure_info")

    def __init__(self, actual: BaseException, failure_info: FailureInfo) -> None:
        self._actual = actual
        self._failure_info = failure_info

    @property
    def actual(self) -> BaseException:
        return self._actual

    @property
    def failure_info(self) -> FailureInfo:
        return self._failure_info

    def _verify(self, failures: list[AssertionFailure]) -> QueryErrorAssert:
        if failures:
            fail(failures[0], suppressed=self._actual)
        return self

    def has_error_code(self, *error_codes: ErrorCodeSupplier) -> QueryErrorAssert:
        return self._verify(checks.check_error_code(self._failure_info, error_codes))

    def has_error_type(self, error_type: ErrorType) -> QueryErrorAssert:
        return self._verify(checks.check_error_type(self._failure_info, error_type))

    def has_location(self, line_number: int, column_number: int) -> QueryErrorAssert:
        return self._verify(checks.check_location(self._failure_info, line_number, column_number))

    def has_message(self, message: str) -> QueryErrorAssert:
        return self._verify(checks.check_message(self._actual, message))

    def has_message_containing(self, substring: str) -> QueryErrorAssert:
        return self._verify(checks.check_message_containing(self._actual, substring))

    def has_message_matching(self, regex: str | re.Pattern[str]) -> QueryErrorAssert:
        return self._verify(checks.check_message_matching(self._actual, regex))

    def has_cause_message_matching(self, regex: str | re.Pattern[str]) -> QueryErrorAssert:
        return self._verify(checks.check_cause_message_matching(self._actual, regex))

    def has_cause_message_containing(self, substring: str) -> QueryErrorAssert:
        return self._verify(checks.check_cause_message_containing(self._actual, substring))


def assert_that_query_error(error: BaseException) -> QueryErrorAssert:
    failure_info = get_failure_info(error)
    if failure_info is None:
        fail(unrecognized_failure(error), suppressed=error)
    return QueryErrorAssert(error, failure_info)


def assert_query_error_raised_by(callback: Callable[[], object]) -> QueryErrorAssert:
    try:
        callback()
    except Exception as exc:
        logger.debug("Captured %s from %r", type(exc).__name__, callback)
        return assert_that_query_error(exc)
    fail(
        AssertionFailure(
            type="no_error",
            message="Expected an error but none was raised",
        )
    )


class RaisedQueryError:
    """Holder filled in when a :func:`query_error_raised` block exits."""

    __slots__ = ("_matcher",)

    def __init__(self) -> None:
        self._matcher: QueryErrorAssert | None = None

    @property
    def matcher(self) -> QueryErrorAssert:
        if self._matcher is None:
            raise RuntimeError("matcher is available only after the block has raised")
        return self._matcher


@contextmanager
def query_error_raised() -> Iterator[RaisedQueryError]:
    raised = RaisedQueryError()
    try:
        yield raised
    except Exception as exc:
        raised._matcher = assert_that_query_error(exc)
        return
    fail(
        AssertionFailure(
            type="no_error",
            message="Expected an error but none was raised",
        )
    )
