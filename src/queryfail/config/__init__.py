from .loader import load_expectations
from .models import ErrorCodeSpec, ExpectationSpec, LocationSpec

__all__ = ["ErrorCodeSpec", "ExpectationSpec", "LocationSpec", "load_expectations"]
