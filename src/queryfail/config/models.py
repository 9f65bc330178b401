from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from queryfail.spi import ErrorCode, ErrorType, StandardErrorCode


class LocationSpec(BaseModel):
    line: int = Field(ge=1)
    column: int = Field(ge=1)

    model_config = ConfigDict(extra="forbid")


class ErrorCodeSpec(BaseModel):
    code: int = Field(ge=0)
    name: str
    type: ErrorType

    model_config = ConfigDict(extra="forbid")

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return ErrorType[value]
            except KeyError:
                raise ValueError(f"Unknown error type: {value}") from None
        return value

    def to_error_code(self) -> ErrorCode:
        return ErrorCode(self.code, self.name, self.type)


class ExpectationSpec(BaseModel):
    error_code: list[StandardErrorCode | ErrorCodeSpec] | None = None
    error_type: ErrorType | None = None
    location: LocationSpec | None = None
    message: str | None = None
    message_containing: str | None = None
    message_matching: str | None = None
    cause_message_matching: str | None = None
    cause_message_containing: str | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("error_code", mode="before")
    @classmethod
    def _parse_error_codes(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, (str, dict)):
            value = [value]
        if not isinstance(value, list) or not value:
            raise ValueError("error_code must be a name, a mapping or a non-empty list")
        parsed: list[Any] = []
        for item in value:
            if isinstance(item, str):
                parsed.append(StandardErrorCode.by_name(item))
            else:
                parsed.append(item)
        return parsed

    @field_validator("error_type", mode="before")
    @classmethod
    def _parse_error_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return ErrorType[value]
            except KeyError:
                raise ValueError(f"Unknown error type: {value}") from None
        return value

    @field_validator("message_matching", "cause_message_matching")
    @classmethod
    def _compile_regex(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"Invalid regular expression {value!r}: {exc}") from exc
        return value

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)
