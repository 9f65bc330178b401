from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, NoReturn


@dataclass(frozen=True)
class AssertionFailure:
    type: str
    message: str
    details: dict[str, Any] | None = None


class FailureAssertionError(AssertionError):
    """Assertion failure carrying the structured failure and attached errors.

    Attached errors play the role of suppressed exceptions: the first one
    becomes ``__cause__`` so the test report prints it below the failure.
    """

    def __init__(
        self,
        failure: AssertionFailure,
        suppressed: Iterable[BaseException] = (),
    ) -> None:
        super().__init__(failure.message)
        self.failure = failure
        self.suppressed: tuple[BaseException, ...] = ()
        for error in suppressed:
            self.add_suppressed(error)

    def add_suppressed(self, error: BaseException) -> None:
        if error is self or error in self.suppressed:
            return
        self.suppressed = (*self.suppressed, error)
        if self.__cause__ is None:
            self.__cause__ = error
        self.add_note(f"Suppressed: {type(error).__name__}: {error}")


def fail(failure: AssertionFailure, *, suppressed: BaseException | None = None) -> NoReturn:
    raise FailureAssertionError(failure, () if suppressed is None else (suppressed,))
