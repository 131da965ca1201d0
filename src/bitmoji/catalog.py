"""
Static avatar catalog.

The catalog is two JSON documents:

* ``assets.json``: every trait (per gender and style) and every outfit
  brand (per gender).
* ``templates.json``: comic templates, split into regular single-avatar
  comics (``imoji``) and two-avatar friendmoji comics (``friends``).

Usage:
    from bitmoji.catalog import get_catalog

    catalog = get_catalog()
    brands = catalog.get_brands(2)
    traits = catalog.get_traits(2, 4)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from config.constants import FRIENDS_KEY, TEMPLATES_KEY
from config.settings import get_settings
from core.logging import LoggerMixin, get_logger
from core.utils import safe_get
from bitmoji.exceptions import CatalogLoadError, CatalogLookupError
from bitmoji.models import (
    AssetsDocument,
    Brand,
    Outfit,
    Template,
    TemplatesDocument,
    Trait,
)

logger = get_logger(__name__)


class AvatarCatalog(LoggerMixin):
    """Read-only view over the assets and templates documents."""

    def __init__(self, assets: Dict[str, Any], templates: Dict[str, Any]):
        self._assets = assets
        self._templates = templates

    @property
    def templates(self) -> List[Template]:
        """Regular bitmoji comic templates."""
        return self._templates.get(TEMPLATES_KEY, [])

    @property
    def friends(self) -> List[Template]:
        """Friendmoji comic templates."""
        return self._templates.get(FRIENDS_KEY, [])

    def get_traits(self, gender: Union[str, int], style: Union[str, int]) -> List[Trait]:
        """
        Trait categories available for a gender and style.

        Keys are compared as strings, so ``4`` and ``"4"`` are the same style.

        Raises:
            CatalogLookupError: If the gender/style pair is not in the catalog
        """
        categories = safe_get(self._assets, "traits", str(gender), str(style), "categories")
        if categories is None:
            self.logger.warning("Unknown trait lookup", gender=gender, style=style)
            raise CatalogLookupError(f"No traits for gender={gender!r} style={style!r}")
        return categories

    def get_brands(self, gender: Union[str, int]) -> List[Brand]:
        """
        Outfit brands available for a gender.

        Raises:
            CatalogLookupError: If the gender is not in the catalog
        """
        brands = safe_get(self._assets, "outfits", str(gender), "brands")
        if brands is None:
            self.logger.warning("Unknown brand lookup", gender=gender)
            raise CatalogLookupError(f"No brands for gender={gender!r}")
        return brands


# =============================================================================
# Record accessors
# =============================================================================

def get_outfits(brand: Brand) -> List[Outfit]:
    """Outfits offered by a brand."""
    return brand["outfits"]


def get_values(trait: Trait) -> List[Dict[str, Any]]:
    """Selectable options of a trait."""
    return trait["options"]


def get_key(trait: Trait) -> str:
    """Query parameter name of a trait."""
    return trait["key"]


def get_comic_id(template: Template) -> Any:
    return template["comic_id"]


# =============================================================================
# Loading
# =============================================================================

def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {path} (set CATALOG_DIR)") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog file is not valid JSON: {path} ({e})") from e


def load_catalog(
    catalog_dir: Optional[Union[str, Path]] = None,
    assets_file: Optional[str] = None,
    templates_file: Optional[str] = None,
) -> AvatarCatalog:
    """
    Load and validate the catalog documents.

    Args:
        catalog_dir: Directory holding the documents (default: settings.catalog_dir)
        assets_file: Assets document name (default: settings.assets_file)
        templates_file: Templates document name (default: settings.templates_file)

    Returns:
        AvatarCatalog over the parsed documents

    Raises:
        CatalogLoadError: If a document is missing, malformed, or has the
            wrong top-level shape
    """
    settings = get_settings()
    directory = Path(catalog_dir) if catalog_dir is not None else settings.catalog_dir
    assets_path = directory / (assets_file or settings.assets_file)
    templates_path = directory / (templates_file or settings.templates_file)

    assets = _read_json(assets_path)
    templates = _read_json(templates_path)

    try:
        AssetsDocument.model_validate(assets)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid assets document {assets_path}: {e}") from e
    try:
        TemplatesDocument.model_validate(templates)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid templates document {templates_path}: {e}") from e

    catalog = AvatarCatalog(assets, templates)
    logger.info(
        "Catalog loaded",
        catalog_dir=str(directory),
        genders=sorted(assets["outfits"].keys()),
        templates=len(catalog.templates),
        friends=len(catalog.friends),
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> AvatarCatalog:
    """
    Get the process-wide catalog built from settings.

    Uses lru_cache so the documents are read once. Call
    ``get_catalog.cache_clear()`` after changing CATALOG_DIR.
    """
    return load_catalog()
