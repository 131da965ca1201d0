"""
Avatar constants.

These are values that don't change based on environment: the genders,
poses and styles understood by the avatar renderer, and the default
image hosts used when settings do not override them.
"""

from typing import Tuple


# =============================================================================
# Avatar Options
# =============================================================================

# (name, renderer value)
GENDERS: Tuple[Tuple[str, int], ...] = (
    ("male", 1),
    ("female", 2),
)

POSES: Tuple[str, ...] = (
    "fashion",
    "head",
    "body",
)

# (name, renderer value)
STYLES: Tuple[Tuple[str, int], ...] = (
    ("bitstrips", 1),
    ("bitmoji", 4),
    ("cm", 5),
)


# =============================================================================
# Image Hosts
# =============================================================================

# Shared prefix of every avatar preview url
BASE_PREVIEW_URL = "https://preview.bitmoji.com/avatar-builder-v3/preview/"

# Shared prefix of every comic panel url (regular and friendmoji)
BASE_CPANEL_URL = "https://render.bitstrips.com/v2/cpanel/"

# Shared prefix of every rendered comic url
BASE_RENDER_URL = "https://render.bitstrips.com/render/"


# =============================================================================
# Catalog Keys
# =============================================================================

TEMPLATES_KEY = "imoji"
FRIENDS_KEY = "friends"
