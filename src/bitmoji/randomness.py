"""
Random avatar selection.

Every picker takes an optional ``random.Random`` so a caller can reproduce
an avatar (``random.Random(seed)``); without one the shared generator from
get_rng() is used, which honours RANDOM_SEED.
"""

import math
import random
from functools import lru_cache
from typing import Any, List, Optional, Sequence, Tuple

from config.settings import get_settings
from bitmoji.catalog import get_key, get_values
from bitmoji.models import Brand, Outfit, Template, Trait


@lru_cache(maxsize=1)
def get_rng() -> random.Random:
    """Shared generator, seeded from settings.random_seed when set."""
    return random.Random(get_settings().random_seed)


def rand_int(max_value: float, rng: Optional[random.Random] = None) -> int:
    """Random integer in [0, floor(max_value))."""
    rng = rng or get_rng()
    return math.floor(rng.random() * math.floor(max_value))


def _pick(items: Sequence[Any], what: str, rng: Optional[random.Random]) -> Any:
    if not items:
        raise IndexError(f"Cannot pick a random {what} from an empty sequence")
    return items[rand_int(len(items), rng)]


def rand_brand(brands: Sequence[Brand], rng: Optional[random.Random] = None) -> Brand:
    return _pick(brands, "brand", rng)


def rand_outfit(outfits: Sequence[Outfit], rng: Optional[random.Random] = None) -> Any:
    """Id of a random outfit."""
    return _pick(outfits, "outfit", rng)["id"]


def rand_value(values: Sequence[dict], rng: Optional[random.Random] = None) -> Any:
    """Value of a random trait option."""
    return _pick(values, "trait option", rng)["value"]


def rand_traits(traits: Sequence[Trait], rng: Optional[random.Random] = None) -> List[Tuple[str, Any]]:
    """One random (key, value) pair per trait, in trait order."""
    return [(get_key(trait), rand_value(get_values(trait), rng)) for trait in traits]


def rand_template(templates: Sequence[Template], rng: Optional[random.Random] = None) -> Template:
    return _pick(templates, "template", rng)
