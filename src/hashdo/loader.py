"""Card definition loading.

Each card is described by a YAML document exposing ``name`` and, optionally,
``description``, ``icon`` and ``inputs``. Any failure to load one is fatal.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from hashdo.errors import ErrorCode, HashdoError
from hashdo.models.manifest import CardDefinition


def load_card_definition(path: str | Path) -> CardDefinition:
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise HashdoError(
            ErrorCode.CARD_LOAD_FAILED,
            f"Cannot load card definition {path}: {exc}",
            path=str(path),
        ) from exc

    if not isinstance(data, dict):
        raise HashdoError(
            ErrorCode.CARD_LOAD_FAILED,
            f"Card definition {path} must be a mapping, got {type(data).__name__}",
            path=str(path),
        )

    try:
        return CardDefinition.model_validate(data)
    except ValidationError as exc:
        raise HashdoError(
            ErrorCode.CARD_LOAD_FAILED,
            f"Invalid card definition {path}: {exc.error_count()} error(s)\n{exc}",
            path=str(path),
        ) from exc
