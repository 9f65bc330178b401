from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """1-based position in the query text."""

    line_number: int
    column_number: int

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError(f"line_number must be at least one: {self.line_number}")
        if self.column_number < 1:
            raise ValueError(f"column_number must be at least one: {self.column_number}")

    def __str__(self) -> str:
        return f"line {self.line_number}:{self.column_number}"
