"""Validation utilities for SpriteFactory document data."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

_SCHEMA_PATH = Path(__file__).parent / "schemas" / "sprites.schema.json"


@lru_cache(maxsize=1)
def _load_schema() -> dict[str, object]:
    return json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_document_json(data: object) -> None:
    """Validate sprite document data against sprites.schema.json.

    Parameters
    ----------
    data:
        The decoded document, usually a dict straight from ``json.loads``.

    Raises
    ------
    jsonschema.ValidationError
        If the data does not conform to the schema.
    """
    jsonschema.validate(data, _load_schema())
