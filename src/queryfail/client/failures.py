from __future__ import annotations

import json
import traceback
from pathlib import Path

from pydantic import ValidationError

from queryfail.spi import QueryEngineError

from .models import ErrorInfo, ErrorLocation, FailureInfo


def _qualified_name(error: BaseException) -> str:
    cls = type(error)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _next_in_chain(error: BaseException) -> BaseException | None:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def _stack(error: BaseException) -> list[str]:
    if error.__traceback__ is None:
        return []
    return [line.rstrip("\n") for line in traceback.format_tb(error.__traceback__)]


def _project(item: BaseException, cause: FailureInfo | None) -> FailureInfo:
    error_info = None
    error_location = None
    if isinstance(item, RemoteFailureError):
        error_info = item.error_info
        error_location = item.error_location
    elif isinstance(item, QueryEngineError):
        code = item.error_code
        error_info = ErrorInfo(code=code.code, name=code.name, type=code.type.name)
        if item.location is not None:
            error_location = ErrorLocation(
                line_number=item.location.line_number,
                column_number=item.location.column_number,
            )
    suppressed: list[FailureInfo] = []
    if isinstance(item, BaseExceptionGroup):
        suppressed = [to_failure_info(nested) for nested in item.exceptions]
    message = str(item)
    return FailureInfo(
        type=item.remote_type if isinstance(item, RemoteFailureError) else _qualified_name(item),
        message=message or None,
        cause=cause,
        suppressed=suppressed,
        stack=_stack(item),
        error_info=error_info,
        error_location=error_location,
    )


def to_failure_info(error: BaseException) -> FailureInfo:
    """Project an exception and its cause chain onto the wire model."""
    chain: list[BaseException] = [error]
    seen: set[int] = {id(error)}
    current = _next_in_chain(error)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        current = _next_in_chain(current)

    info = _project(chain[-1], None)
    for item in reversed(chain[:-1]):
        info = _project(item, info)
    return info


class RemoteFailureError(Exception):
    """Local stand-in for an exception that was raised on the server."""

    def __init__(
        self,
        remote_type: str,
        message: str | None,
        *,
        error_info: ErrorInfo | None = None,
        error_location: ErrorLocation | None = None,
    ) -> None:
        self.remote_type = remote_type
        self.error_info = error_info
        self.error_location = error_location
        if message is None:
            super().__init__()
        else:
            super().__init__(message)

    @classmethod
    def from_failure_info(cls, info: FailureInfo) -> RemoteFailureError:
        error = cls(
            info.type,
            info.message,
            error_info=info.error_info,
            error_location=info.error_location,
        )
        if info.cause is not None:
            error.__cause__ = cls.from_failure_info(info.cause)
        return error


class QueryFailedError(Exception):
    """Raised by a client when the server reports a failed query."""

    def __init__(self, failure: FailureInfo, *, query: str | None = None) -> None:
        self.failure_info = failure
        self.query = query
        if failure.message is None:
            super().__init__()
        else:
            super().__init__(failure.message)
        self.__cause__ = failure.to_exception()


def load_failure_info(path: Path) -> FailureInfo:
    if not path.is_file():
        raise FileNotFoundError(f"Failure file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    try:
        return FailureInfo.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid failure info in {path}: {exc}") from exc


def write_failure_info(path: Path, info: FailureInfo) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = info.model_dump(by_alias=True, exclude_none=True)
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return path
