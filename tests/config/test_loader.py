from __future__ import annotations

from pathlib import Path

import pytest

from queryfail.config.loader import load_expectations
from queryfail.config.models import ErrorCodeSpec, ExpectationSpec
from queryfail.spi import ErrorCode, ErrorType, StandardErrorCode


def _write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


def test_load_expectations(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "expect.yaml",
        "\n".join(
            [
                "error_code:",
                "  - COLUMN_NOT_FOUND",
                "  - {code: 42, name: STORAGE_FULL, type: EXTERNAL}",
                "error_type: USER_ERROR",
                "location: {line: 1, column: 8}",
                "cause_message_matching: \"Column '.*' cannot be resolved\"",
                "",
            ]
        ),
    )

    spec = load_expectations(path)
    assert spec.error_code is not None
    assert spec.error_code[0] is StandardErrorCode.COLUMN_NOT_FOUND
    assert isinstance(spec.error_code[1], ErrorCodeSpec)
    assert spec.error_code[1].to_error_code() == ErrorCode(42, "STORAGE_FULL", ErrorType.EXTERNAL)
    assert spec.error_type is ErrorType.USER_ERROR
    assert spec.location is not None
    assert (spec.location.line, spec.location.column) == (1, 8)
    assert spec.cause_message_matching == "Column '.*' cannot be resolved"


def test_single_error_code_is_accepted() -> None:
    spec = ExpectationSpec.model_validate({"error_code": "SYNTAX_ERROR"})
    assert spec.error_code == [StandardErrorCode.SYNTAX_ERROR]


def test_unknown_error_code_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown error code"):
        ExpectationSpec.model_validate({"error_code": "NO_SUCH_CODE"})


def test_unknown_error_type_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown error type"):
        ExpectationSpec.model_validate({"error_type": "SOMETIMES"})


def test_invalid_regex_is_rejected() -> None:
    with pytest.raises(ValueError, match="Invalid regular expression"):
        ExpectationSpec.model_validate({"cause_message_matching": "("})


def test_unknown_fields_are_rejected() -> None:
    with pytest.raises(ValueError):
        ExpectationSpec.model_validate({"error_kode": "SYNTAX_ERROR"})


def test_location_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ExpectationSpec.model_validate({"location": {"line": 0, "column": 1}})


def test_load_expectations_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_expectations(tmp_path / "missing.yaml")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_expectations(_write(tmp_path / "bad.yaml", "error_code: [unterminated"))

    with pytest.raises(ValueError, match="Expected a YAML mapping"):
        load_expectations(_write(tmp_path / "list.yaml", "- SYNTAX_ERROR\n"))
