from __future__ import annotations

import logging

from queryfail.client import FailureInfo, RemoteFailureError, to_failure_info
from queryfail.spi import QueryEngineError

from .base import AssertionFailure

logger = logging.getLogger(__name__)


def type_name(error: BaseException) -> str:
    cls = type(error)
    return f"{cls.__module__}.{cls.__qualname__}"


def _direct_failure_info(error: BaseException) -> FailureInfo | None:
    if isinstance(error, (QueryEngineError, RemoteFailureError)):
        return to_failure_info(error)
    failure_info = getattr(error, "failure_info", None)
    if isinstance(failure_info, FailureInfo):
        return failure_info
    return None


def get_failure_info(error: BaseException) -> FailureInfo | None:
    """Return the structured failure carried by ``error``, if any.

    Recognizes engine errors, rebuilt remote failures, anything exposing a
    ``failure_info`` attribute, and wrappers whose direct cause is one of
    those.
    """
    info = _direct_failure_info(error)
    if info is not None:
        return info
    cause = error.__cause__
    if cause is not None:
        info = _direct_failure_info(cause)
        if info is not None:
            logger.debug("Unwrapped %s to reach %s", type(error).__name__, type(cause).__name__)
            return info
    logger.debug("No structured failure in %s", type_name(error))
    return None


def unrecognized_failure(error: BaseException) -> AssertionFailure:
    return AssertionFailure(
        type="unrecognized_failure",
        message=f"Expected QueryEngineError or wrapper, but got: {type_name(error)} {error}",
        details={"actual_type": type_name(error)},
    )
