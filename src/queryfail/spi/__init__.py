from .error_code import ErrorCode, ErrorCodeSupplier, ErrorType, StandardErrorCode
from .exceptions import QueryEngineError
from .location import Location

__all__ = [
    "ErrorCode",
    "ErrorCodeSupplier",
    "ErrorType",
    "Location",
    "QueryEngineError",
    "StandardErrorCode",
]
