from __future__ import annotations

from .error_code import ErrorCode, ErrorCodeSupplier
from .location import Location


class QueryEngineError(Exception):
    """Structured failure raised by the query engine."""

    def __init__(
        self,
        error_code: ErrorCodeSupplier,
        message: str | None = None,
        *,
        location: Location | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.error_code: ErrorCode = error_code.to_error_code()
        self.location = location
        super().__init__(message if message is not None else self.error_code.name)
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        return str(self)
