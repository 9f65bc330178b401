from __future__ import annotations

import logging
import re
from typing import Callable, Iterable

from queryfail.client import FailureInfo
from queryfail.spi import ErrorCode, ErrorCodeSupplier, ErrorType, Location

from .base import AssertionFailure

logger = logging.getLogger(__name__)

_NO_MESSAGE = "<no message>"


def actual_error_code(info: FailureInfo) -> ErrorCode | None:
    if info.error_info is None:
        return None
    return info.error_info.to_error_code()


def actual_location(info: FailureInfo) -> Location | None:
    if info.error_location is None:
        return None
    return info.error_location.to_location()


def cause_chain(error: BaseException) -> list[BaseException]:
    """Exceptions from ``error`` outward, in the order a traceback prints them."""
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__
    return chain


def message_of(error: BaseException) -> str | None:
    message = str(error)
    return message or None


def _format_chain(chain: list[BaseException]) -> str:
    lines = []
    for depth, error in enumerate(chain):
        message = message_of(error)
        lines.append(f"  {depth}: {type(error).__name__}: {message if message is not None else _NO_MESSAGE}")
    return "\n".join(lines)


def _failed(failure: AssertionFailure) -> list[AssertionFailure]:
    logger.debug("Check %s failed: %s", failure.type, failure.message)
    return [failure]


def check_error_code(
    info: FailureInfo, suppliers: Iterable[ErrorCodeSupplier]
) -> list[AssertionFailure]:
    expected = {supplier.to_error_code() for supplier in suppliers}
    if not expected:
        raise ValueError("At least one error code is required")
    actual = actual_error_code(info)
    if actual in expected:
        return []
    expected_text = ", ".join(sorted(str(code) for code in expected))
    return _failed(
        AssertionFailure(
            type="error_code",
            message=f"Expected error code to be in [{expected_text}] but was: {actual}",
            details={
                "expected": sorted(str(code) for code in expected),
                "actual": None if actual is None else str(actual),
            },
        )
    )


def check_error_type(info: FailureInfo, error_type: ErrorType) -> list[AssertionFailure]:
    actual = actual_error_code(info)
    actual_type = None if actual is None else actual.type
    if actual_type is error_type:
        return []
    return _failed(
        AssertionFailure(
            type="error_type",
            message=(
                f"Expected error type {error_type.name} but was: "
                f"{actual_type.name if actual_type is not None else None}"
            ),
            details={
                "expected": error_type.name,
                "actual": None if actual_type is None else actual_type.name,
            },
        )
    )


def check_location(info: FailureInfo, line_number: int, column_number: int) -> list[AssertionFailure]:
    actual = actual_location(info)
    if actual is not None and (actual.line_number, actual.column_number) == (
        line_number,
        column_number,
    ):
        return []
    actual_text = "<none>" if actual is None else f"{actual.line_number}:{actual.column_number}"
    return _failed(
        AssertionFailure(
            type="location",
            message=f"Expected location {line_number}:{column_number} but was: {actual_text}",
            details={
                "expected": [line_number, column_number],
                "actual": None if actual is None else [actual.line_number, actual.column_number],
            },
        )
    )


def check_message(error: BaseException, expected: str) -> list[AssertionFailure]:
    actual = message_of(error)
    if actual == expected:
        return []
    return _failed(
        AssertionFailure(
            type="message",
            message=f"Expected message:\n  {expected!r}\nbut was:\n  {actual!r}",
            details={"expected": expected, "actual": actual},
        )
    )


def check_message_containing(error: BaseException, substring: str) -> list[AssertionFailure]:
    actual = message_of(error)
    if actual is not None and substring in actual:
        return []
    return _failed(
        AssertionFailure(
            type="message",
            message=f"Expected message to contain:\n  {substring!r}\nbut was:\n  {actual!r}",
            details={"expected": substring, "actual": actual},
        )
    )


def check_message_matching(error: BaseException, regex: str | re.Pattern[str]) -> list[AssertionFailure]:
    pattern = re.compile(regex) if isinstance(regex, str) else regex
    actual = message_of(error)
    if actual is not None and pattern.fullmatch(actual):
        return []
    return _failed(
        AssertionFailure(
            type="message",
            message=f"Expected message to match:\n  {pattern.pattern!r}\nbut was:\n  {actual!r}",
            details={"expected": pattern.pattern, "actual": actual},
        )
    )


def _check_cause_messages(
    error: BaseException,
    predicate: Callable[[str], bool],
    description: str,
    expected: str,
) -> list[AssertionFailure]:
    chain = cause_chain(error)
    for cause in chain:
        message = message_of(cause)
        # message-less causes are skipped
        if message is not None and predicate(message):
            return []
    return _failed(
        AssertionFailure(
            type="cause_message",
            message=(
                f"Expected a message in the cause chain to {description}:\n"
                f"  {expected!r}\n"
                f"but none did. Cause chain:\n{_format_chain(chain)}"
            ),
            details={
                "expected": expected,
                "chain": [message_of(cause) for cause in chain],
            },
        )
    )


def check_cause_message_matching(
    error: BaseException, regex: str | re.Pattern[str]
) -> list[AssertionFailure]:
    pattern = re.compile(regex) if isinstance(regex, str) else regex
    return _check_cause_messages(
        error,
        lambda message: pattern.fullmatch(message) is not None,
        "match",
        pattern.pattern,
    )


def check_cause_message_containing(error: BaseException, substring: str) -> list[AssertionFailure]:
    return _check_cause_messages(
        error,
        lambda message: substring in message,
        "contain",
        substring,
    )
