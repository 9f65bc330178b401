from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


class ErrorType(Enum):
    USER_ERROR = 0
    INTERNAL_ERROR = 1
    INSUFFICIENT_RESOURCES = 2
    EXTERNAL = 3


@dataclass(frozen=True)
class ErrorCode:
    code: int
    name: str
    type: ErrorType
    fatal: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.code < 0:
            raise ValueError(f"code is negative: {self.code}")
        if not self.name:
            raise ValueError("name is empty")

    def to_error_code(self) -> ErrorCode:
        return self

    def __str__(self) -> str:
        return f"{self.name}:{self.code}"


@runtime_checkable
class ErrorCodeSupplier(Protocol):
    def to_error_code(self) -> ErrorCode: ...


_INTERNAL = 0x0001_0000
_INSUFFICIENT_RESOURCES = 0x0002_0000
_EXTERNAL = 0x0100_0000


class StandardErrorCode(Enum):
    """Error codes raised by the engine itself.

    Connectors define their own suppliers; anything with ``to_error_code()``
    can be passed to the matcher.
    """

    GENERIC_USER_ERROR = (0, ErrorType.USER_ERROR)
    SYNTAX_ERROR = (1, ErrorType.USER_ERROR)
    ABANDONED_QUERY = (2, ErrorType.USER_ERROR)
    USER_CANCELED = (3, ErrorType.USER_ERROR)
    PERMISSION_DENIED = (4, ErrorType.USER_ERROR)
    NOT_FOUND = (5, ErrorType.USER_ERROR)
    FUNCTION_NOT_FOUND = (6, ErrorType.USER_ERROR)
    INVALID_FUNCTION_ARGUMENT = (7, ErrorType.USER_ERROR)
    DIVISION_BY_ZERO = (8, ErrorType.USER_ERROR)
    INVALID_CAST_ARGUMENT = (9, ErrorType.USER_ERROR)
    OPERATOR_NOT_FOUND = (10, ErrorType.USER_ERROR)
    INVALID_VIEW = (11, ErrorType.USER_ERROR)
    ALREADY_EXISTS = (12, ErrorType.USER_ERROR)
    NOT_SUPPORTED = (13, ErrorType.USER_ERROR)
    INVALID_SESSION_PROPERTY = (14, ErrorType.USER_ERROR)
    INVALID_WINDOW_FRAME = (15, ErrorType.USER_ERROR)
    CONSTRAINT_VIOLATION = (16, ErrorType.USER_ERROR)
    TRANSACTION_CONFLICT = (17, ErrorType.USER_ERROR)
    INVALID_TABLE_PROPERTY = (18, ErrorType.USER_ERROR)
    NUMERIC_VALUE_OUT_OF_RANGE = (19, ErrorType.USER_ERROR)
    READ_ONLY_VIOLATION = (23, ErrorType.USER_ERROR)
    SUBQUERY_MULTIPLE_ROWS = (28, ErrorType.USER_ERROR)
    QUERY_REJECTED = (31, ErrorType.USER_ERROR)
    AMBIGUOUS_FUNCTION_CALL = (32, ErrorType.USER_ERROR)
    TYPE_MISMATCH = (42, ErrorType.USER_ERROR)
    CATALOG_NOT_FOUND = (44, ErrorType.USER_ERROR)
    SCHEMA_NOT_FOUND = (45, ErrorType.USER_ERROR)
    TABLE_NOT_FOUND = (46, ErrorType.USER_ERROR)
    COLUMN_NOT_FOUND = (47, ErrorType.USER_ERROR)
    TABLE_ALREADY_EXISTS = (50, ErrorType.USER_ERROR)
    COLUMN_ALREADY_EXISTS = (51, ErrorType.USER_ERROR)
    DUPLICATE_COLUMN_NAME = (54, ErrorType.USER_ERROR)
    MISSING_COLUMN_NAME = (55, ErrorType.USER_ERROR)
    INVALID_LITERAL = (56, ErrorType.USER_ERROR)
    EXPRESSION_NOT_AGGREGATE = (57, ErrorType.USER_ERROR)

    GENERIC_INTERNAL_ERROR = (_INTERNAL, ErrorType.INTERNAL_ERROR)
    TOO_MANY_REQUESTS_FAILED = (_INTERNAL + 1, ErrorType.INTERNAL_ERROR)
    PAGE_TOO_LARGE = (_INTERNAL + 2, ErrorType.INTERNAL_ERROR)
    PAGE_TRANSPORT_ERROR = (_INTERNAL + 3, ErrorType.INTERNAL_ERROR)
    PAGE_TRANSPORT_TIMEOUT = (_INTERNAL + 4, ErrorType.INTERNAL_ERROR)
    NO_NODES_AVAILABLE = (_INTERNAL + 5, ErrorType.INTERNAL_ERROR)
    REMOTE_TASK_ERROR = (_INTERNAL + 6, ErrorType.INTERNAL_ERROR)
    COMPILER_ERROR = (_INTERNAL + 7, ErrorType.INTERNAL_ERROR)
    SERVER_SHUTTING_DOWN = (_INTERNAL + 9, ErrorType.INTERNAL_ERROR)
    SERVER_STARTING_UP = (_INTERNAL + 13, ErrorType.INTERNAL_ERROR)

    GENERIC_INSUFFICIENT_RESOURCES = (_INSUFFICIENT_RESOURCES, ErrorType.INSUFFICIENT_RESOURCES)
    EXCEEDED_GLOBAL_MEMORY_LIMIT = (_INSUFFICIENT_RESOURCES + 1, ErrorType.INSUFFICIENT_RESOURCES)
    QUERY_QUEUE_FULL = (_INSUFFICIENT_RESOURCES + 2, ErrorType.INSUFFICIENT_RESOURCES)
    EXCEEDED_TIME_LIMIT = (_INSUFFICIENT_RESOURCES + 3, ErrorType.INSUFFICIENT_RESOURCES)
    EXCEEDED_CPU_LIMIT = (_INSUFFICIENT_RESOURCES + 4, ErrorType.INSUFFICIENT_RESOURCES)
    EXCEEDED_SPILL_LIMIT = (_INSUFFICIENT_RESOURCES + 5, ErrorType.INSUFFICIENT_RESOURCES)
    EXCEEDED_LOCAL_MEMORY_LIMIT = (_INSUFFICIENT_RESOURCES + 6, ErrorType.INSUFFICIENT_RESOURCES)

    GENERIC_EXTERNAL_ERROR = (_EXTERNAL, ErrorType.EXTERNAL)

    def __init__(self, code: int, error_type: ErrorType) -> None:
        self._error_code = ErrorCode(code, self.name, error_type)

    def to_error_code(self) -> ErrorCode:
        return self._error_code

    @classmethod
    def by_name(cls, name: str) -> StandardErrorCode:
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown error code: {name}") from None
