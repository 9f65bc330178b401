from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import ExpectationSpec


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_expectations(path: Path) -> ExpectationSpec:
    if not path.is_file():
        raise FileNotFoundError(f"Expectations file not found: {path}")
    return ExpectationSpec.model_validate(_load_yaml(path))
