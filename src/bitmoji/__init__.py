"""
Bitmoji avatar toolkit.

Catalog lookups, outfit filtering, random avatar selection and image url
construction for the avatar renderer.

Usage:
    from bitmoji import get_catalog, filter_brands, rand_brand, rand_outfit

    catalog = get_catalog()
    brands = filter_brands(catalog.get_brands(2), {"Levi's": {"category": ["shoes"]}})
    outfit = rand_outfit(rand_brand(brands)["outfits"])

No catalog ships with the package: point CATALOG_DIR (or load_catalog's
``catalog_dir``) at a directory holding assets.json and templates.json.

Logging goes through structlog. Call ``core.logging.configure_logging()``
once at startup; without it structlog's default config prints every
message, including the per-brand debug lines from filter_brands, to stdout.
"""

from bitmoji.avatar import random_preview_url
from bitmoji.catalog import (
    AvatarCatalog,
    get_catalog,
    get_comic_id,
    get_key,
    get_outfits,
    get_values,
    load_catalog,
)
from bitmoji.exceptions import CatalogError, CatalogLoadError, CatalogLookupError
from bitmoji.filters import filter_brands
from bitmoji.randomness import (
    get_rng,
    rand_brand,
    rand_int,
    rand_outfit,
    rand_template,
    rand_traits,
    rand_value,
)
from bitmoji.urls import (
    build_cpanel_url,
    build_friendmoji_url,
    build_preview_url,
    build_render_url,
    get_avatar_id,
    get_avatar_uuid,
    map_traits,
)

__all__ = [
    "AvatarCatalog",
    "CatalogError",
    "CatalogLoadError",
    "CatalogLookupError",
    "build_cpanel_url",
    "build_friendmoji_url",
    "build_preview_url",
    "build_render_url",
    "filter_brands",
    "get_avatar_id",
    "get_avatar_uuid",
    "get_catalog",
    "get_comic_id",
    "get_key",
    "get_outfits",
    "get_rng",
    "get_values",
    "load_catalog",
    "map_traits",
    "rand_brand",
    "rand_int",
    "rand_outfit",
    "rand_template",
    "rand_traits",
    "rand_value",
    "random_preview_url",
]
