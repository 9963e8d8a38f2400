"""Character catalog - built-in roster and validating loaders."""

from .catalog import CatalogError, get_catalog, load_catalog, load_catalog_file
from .schemas import CharacterSchema, MoveEffectSchema, MoveSchema

__all__ = [
    "CatalogError",
    "get_catalog",
    "load_catalog",
    "load_catalog_file",
    "CharacterSchema",
    "MoveSchema",
    "MoveEffectSchema",
]
