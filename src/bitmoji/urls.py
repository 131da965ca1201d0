"""
Image URL construction for avatars and comics.

Hosts default to the public renderer (see config.constants) and can be
pointed elsewhere with PREVIEW_BASE_URL, CPANEL_BASE_URL and
RENDER_BASE_URL.

Comic urls embed ids separated by ``-``:

    .../cpanel/<comic_id>-<avatar_id>-v3.png

where an avatar id is itself ``<part>-<part>``; get_avatar_id and
get_avatar_uuid pull those pieces back out of a comic url.
"""

from typing import Any, Iterable, List, Optional, Tuple

from config.settings import get_settings
from core.utils import format_query_value as _q


# =============================================================================
# Comic url parsing
# =============================================================================

def get_avatar_uuid(url: str) -> str:
    """Avatar uuid from a comic url (dash-separated segments 5 to 9)."""
    return "-".join(url.split("-")[5:10])


def get_avatar_id(url: str) -> str:
    """Avatar id from a comic url (dash-separated segments 1 and 2)."""
    return "-".join(url.split("-")[1:3])


# =============================================================================
# Builders
# =============================================================================

def map_traits(traits: Iterable[Tuple[str, Any]]) -> List[str]:
    """Render (key, value) trait pairs as ``&key=value`` query fragments."""
    return [f"&{key}={_q(value)}" for key, value in traits]


def build_preview_url(
    pose: str,
    scale: Any,
    gender: Any,
    style: Any,
    rotation: Any,
    traits: Iterable[Tuple[str, Any]],
    outfit: Any,
) -> str:
    """
    Image url of an avatar preview.

    Args:
        pose: One of config.constants.POSES
        scale: Render scale
        gender: Renderer gender value (see GENDERS)
        style: Renderer style value (see STYLES)
        rotation: Body rotation
        traits: (key, value) pairs, e.g. from rand_traits()
        outfit: Outfit id
    """
    base = get_settings().preview_base_url
    url = f"{base}{pose}?scale={_q(scale)}&gender={_q(gender)}&style={_q(style)}"
    url += f"&rotation={_q(rotation)}{''.join(map_traits(traits))}&outfit={_q(outfit)}"
    return url


def build_cpanel_url(comic_id: Any, avatar_id: str, transparent: Any, scale: Any) -> str:
    """Image url of a single-avatar comic panel."""
    base = get_settings().cpanel_base_url
    return f"{base}{comic_id}-{avatar_id}-v3.png?transparent={_q(transparent)}&scale={_q(scale)}"


def build_render_url(
    comic_id: Any,
    avatar_id: str,
    transparent: Any,
    scale: Any,
    outfit: Optional[Any] = None,
) -> str:
    """Image url of a rendered comic; the outfit is only added when set."""
    base = get_settings().render_base_url
    url = f"{base}{comic_id}/{avatar_id}-v3.png?transparent={_q(transparent)}&scale={_q(scale)}"
    if outfit:
        url += f"&outfit={_q(outfit)}"
    return url


def build_friendmoji_url(
    comic_id: Any,
    avatar_id1: str,
    avatar_id2: str,
    transparent: Any,
    scale: Any,
) -> str:
    """Image url of a two-avatar (friendmoji) comic panel."""
    base = get_settings().cpanel_base_url
    return (
        f"{base}{comic_id}-{avatar_id1}-{avatar_id2}-v3.png"
        f"?transparent={_q(transparent)}&scale={_q(scale)}"
    )
