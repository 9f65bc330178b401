from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from queryfail.spi import ErrorCode, ErrorType, Location

if TYPE_CHECKING:
    from .failures import RemoteFailureError


class ErrorInfo(BaseModel):
    code: int = Field(ge=0)
    name: str = Field(min_length=1)
    type: str

    model_config = ConfigDict(frozen=True)

    @field_validator("type")
    @classmethod
    def _validate_type(cls, value: str) -> str:
        if value not in ErrorType.__members__:
            raise ValueError(f"Unknown error type: {value}")
        return value

    def to_error_code(self) -> ErrorCode:
        return ErrorCode(self.code, self.name, ErrorType[self.type])


class ErrorLocation(BaseModel):
    line_number: int = Field(alias="lineNumber", ge=1)
    column_number: int = Field(alias="columnNumber", ge=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_location(self) -> Location:
        return Location(self.line_number, self.column_number)


class FailureInfo(BaseModel):
    """Failure as reported over the client protocol.

    ``cause`` links to the next failure in the chain; ``message`` may be null
    for exceptions raised without one.
    """

    type: str
    message: str | None = None
    cause: FailureInfo | None = None
    suppressed: list[FailureInfo] = Field(default_factory=list)
    stack: list[str] = Field(default_factory=list)
    error_info: ErrorInfo | None = Field(default=None, alias="errorInfo")
    error_location: ErrorLocation | None = Field(default=None, alias="errorLocation")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_exception(self) -> RemoteFailureError:
        from .failures import RemoteFailureError

        return RemoteFailureError.from_failure_info(self)

    def causes(self) -> list[FailureInfo]:
        chain: list[FailureInfo] = []
        current: FailureInfo | None = self
        while current is not None:
            chain.append(current)
            current = current.cause
        return chain
