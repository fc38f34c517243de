"""Load and validate catalog data from JSON files or mappings."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from greenpath.domain.exceptions import CatalogError
from greenpath.domain.models import Catalog


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogError(f"catalog file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"catalog file is not valid JSON: {path}: {exc}") from exc


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(piece) for piece in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', '')}" if loc else str(err.get("msg", "")))
    return "; ".join(parts)


def load_catalog(source: Union[str, Path, Mapping[str, Any]]) -> Catalog:
    """Build a validated ``Catalog`` from a mapping or a JSON file path.

    Malformed entries (missing price or emission, negative values, duplicate
    ids) raise ``CatalogError`` before any aggregation runs.
    """
    if isinstance(source, Mapping):
        payload: Any = dict(source)
    else:
        payload = _read_json(Path(source))

    if not isinstance(payload, Mapping):
        raise CatalogError("catalog payload must be a JSON object")
    try:
        return Catalog.model_validate(payload)
    except ValidationError as exc:
        raise CatalogError(f"invalid catalog: {_describe(exc)}") from exc


__all__ = ["load_catalog"]
