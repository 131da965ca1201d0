"""
Brand outfit filtering.

A filter config maps a brand name to per-field value lists:

    {"Levi's": {"category": ["shoes"], "color": ["neon"]}}

Two modes:
- exclusion (default): outfits matching any configured field are dropped
- allowlist (``return_filtered_fields=True``): only matching outfits are kept

Fields are tested in the config's key order and the first matching field
decides. Brands without a config entry are returned as-is. Values match
strictly: ``True`` does not match ``1``, while ``1`` matches ``1.0``.
"""

from typing import Any, Collection, List, Mapping, Sequence

from core.logging import get_logger
from bitmoji.models import Brand, FilterConfig, Outfit

logger = get_logger(__name__)


def _same_value(a: Any, b: Any) -> bool:
    """Strict equality: booleans never equal numbers, ints equal floats by value."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    return type(a) is type(b) and a == b


def _value_in(value: Any, values: Collection[Any]) -> bool:
    # linear scan so unhashable outfit values (e.g. tag lists) work against sets
    return any(_same_value(value, candidate) for candidate in values)


def _matches_filter(outfit: Outfit, brand_filter: Mapping[str, Collection[Any]]) -> bool:
    """True on the first configured field whose outfit value is in its value list."""
    for field_name, values in brand_filter.items():
        # a missing field is a non-match
        if field_name in outfit and _value_in(outfit[field_name], values):
            return True
    return False


def filter_brands(
    brands: Sequence[Brand],
    filters: FilterConfig,
    return_filtered_fields: bool = False,
) -> List[Brand]:
    """
    Return brands with their outfits filtered by the brand's config entry.

    Args:
        brands: Brand records (``name`` + ``outfits`` + passthrough fields)
        filters: Brand name -> field name -> values to match
        return_filtered_fields: Keep only matching outfits instead of
            dropping them

    Returns:
        New list in input order. Filtered brands are shallow copies with a
        new ``outfits`` list of the original outfit objects; unfiltered
        brands are the input objects.
    """
    result: List[Brand] = []

    for brand in brands:
        brand_filter = filters.get(brand.get("name"))
        if brand_filter is None:
            result.append(brand)
            continue

        outfits = brand.get("outfits") or []
        kept = [
            outfit for outfit in outfits
            if _matches_filter(outfit, brand_filter) is bool(return_filtered_fields)
        ]
        logger.debug(
            "Filtered brand outfits",
            brand=brand.get("name"),
            fields=list(brand_filter.keys()),
            allowlist=return_filtered_fields,
            kept=len(kept),
            dropped=len(outfits) - len(kept),
        )
        result.append({**brand, "outfits": kept})

    return result
