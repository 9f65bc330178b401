from .failures import (
    QueryFailedError,
    RemoteFailureError,
    load_failure_info,
    to_failure_info,
    write_failure_info,
)
from .models import ErrorInfo, ErrorLocation, FailureInfo

__all__ = [
    "ErrorInfo",
    "ErrorLocation",
    "FailureInfo",
    "QueryFailedError",
    "RemoteFailureError",
    "load_failure_info",
    "to_failure_info",
    "write_failure_info",
]
