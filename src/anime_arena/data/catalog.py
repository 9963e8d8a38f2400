"""Catalog loading - turns raw character data into engine characters."""

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..engine.types import Character
from .characters import CHARACTERS
from .schemas import CharacterSchema

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when catalog data is malformed."""


def load_catalog(raw: Mapping[str, Mapping[str, Any]]) -> dict[str, Character]:
    """Validate a raw catalog and convert it to engine characters.

    Args:
        raw: Mapping of character id to character data. An entry without an
            ``id`` takes its key; an entry whose ``id`` differs from its key
            is rejected.

    Returns:
        Mapping of character id to Character

    Raises:
        CatalogError: If any entry fails validation
    """
    characters: dict[str, Character] = {}
    for key, entry in raw.items():
        data = dict(entry)
        data.setdefault("id", key)
        if data["id"] != key:
            raise CatalogError(f"Character '{key}' declares a different id: {data['id']!r}")
        try:
            schema = CharacterSchema.model_validate(data)
        except ValidationError as e:
            raise CatalogError(f"Invalid character '{key}': {e}") from e
        characters[key] = schema.to_domain()

    logger.debug("Loaded catalog with %d characters", len(characters))
    return characters


def load_catalog_file(path: str | Path) -> dict[str, Character]:
    """Load a catalog from a JSON file shaped like ``{id: character}``."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read catalog {path}: {e}") from e
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog {path} must be a JSON object keyed by character id")

    logger.info("Loading catalog from %s", path)
    return load_catalog(raw)


@lru_cache
def get_catalog() -> dict[str, Character]:
    """Get the cached built-in roster."""
    return load_catalog(CHARACTERS)
