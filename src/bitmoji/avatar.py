"""Random avatar previews assembled from the catalog."""

import random
from typing import Any, Optional

from core.logging import get_logger
from bitmoji.catalog import AvatarCatalog, get_outfits
from bitmoji.filters import filter_brands
from bitmoji.models import FilterConfig
from bitmoji.randomness import rand_brand, rand_outfit, rand_traits
from bitmoji.urls import build_preview_url

logger = get_logger(__name__)


def random_preview_url(
    catalog: AvatarCatalog,
    gender: int,
    style: int,
    pose: str = "fashion",
    filters: Optional[FilterConfig] = None,
    return_filtered_fields: bool = False,
    scale: Any = 1,
    rotation: Any = 0,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Preview url of a random avatar for a gender and style.

    Traits are drawn from the catalog for (gender, style); the outfit comes
    from a random brand after applying ``filters``. Brands left with no
    outfits by the filter are skipped.

    Raises:
        CatalogLookupError: If the gender/style pair is not in the catalog
        IndexError: If no brand has a selectable outfit
    """
    traits = rand_traits(catalog.get_traits(gender, style), rng)

    brands = catalog.get_brands(gender)
    if filters:
        brands = filter_brands(brands, filters, return_filtered_fields)
    brands = [brand for brand in brands if brand.get("outfits")]

    brand = rand_brand(brands, rng)
    outfit = rand_outfit(get_outfits(brand), rng)

    logger.debug("Random avatar", gender=gender, style=style, brand=brand.get("name"), outfit=outfit)
    return build_preview_url(pose, scale, gender, style, rotation, traits, outfit)
