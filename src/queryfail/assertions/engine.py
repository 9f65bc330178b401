from __future__ import annotations

from queryfail.config.models import ExpectationSpec

from . import checks
from .base import AssertionFailure
from .extract import get_failure_info, unrecognized_failure


def count_expectations(spec: ExpectationSpec) -> int:
    return len(spec.model_dump(exclude_none=True))


def evaluate_expectations(
    error: BaseException,
    spec: ExpectationSpec,
) -> list[tuple[str, list[AssertionFailure]]]:
    """Evaluate each configured expectation, keyed by its field name."""
    info = get_failure_info(error)
    if info is None:
        return [("failure", [unrecognized_failure(error)])]

    results: list[tuple[str, list[AssertionFailure]]] = []
    if spec.error_code is not None:
        results.append(("error_code", checks.check_error_code(info, spec.error_code)))
    if spec.error_type is not None:
        results.append(("error_type", checks.check_error_type(info, spec.error_type)))
    if spec.location is not None:
        results.append(
            ("location", checks.check_location(info, spec.location.line, spec.location.column))
        )
    if spec.message is not None:
        results.append(("message", checks.check_message(error, spec.message)))
    if spec.message_containing is not None:
        results.append(
            ("message_containing", checks.check_message_containing(error, spec.message_containing))
        )
    if spec.message_matching is not None:
        results.append(
            ("message_matching", checks.check_message_matching(error, spec.message_matching))
        )
    if spec.cause_message_matching is not None:
        results.append(
            (
                "cause_message_matching",
                checks.check_cause_message_matching(error, spec.cause_message_matching),
            )
        )
    if spec.cause_message_containing is not None:
        results.append(
            (
                "cause_message_containing",
                checks.check_cause_message_containing(error, spec.cause_message_containing),
            )
        )
    return results


def apply_expectations(
    error: BaseException | None,
    spec: ExpectationSpec,
) -> list[AssertionFailure]:
    if error is None:
        return [
            AssertionFailure(
                type="no_error",
                message="Expected an error but none was raised",
            )
        ]

    failures: list[AssertionFailure] = []
    for _, result in evaluate_expectations(error, spec):
        failures.extend(result)
    return failures
