"""
Pytest configuration and shared fixtures for the avatar toolkit tests.
"""
import os
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

# Load environment variables
from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"))


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ============================================================================
# Fixtures: Cache isolation
# ============================================================================

@pytest.fixture(autouse=True)
def reset_cached_singletons():
    """Drop cached settings, catalog and rng so env changes take effect."""
    from config.settings import get_settings
    from bitmoji.catalog import get_catalog
    from bitmoji.randomness import get_rng

    get_settings.cache_clear()
    get_catalog.cache_clear()
    get_rng.cache_clear()
    yield
    get_settings.cache_clear()
    get_catalog.cache_clear()
    get_rng.cache_clear()


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def catalog_dir() -> Path:
    """Directory with a small assets.json / templates.json pair."""
    return FIXTURES_DIR / "catalog"


@pytest.fixture
def catalog(catalog_dir: Path):
    """Catalog loaded from the fixture documents."""
    from bitmoji.catalog import load_catalog
    return load_catalog(catalog_dir)


@pytest.fixture
def sample_brands() -> list[dict]:
    """Two brands; only 'A' is usually targeted by filters."""
    return [
        {
            "name": "A",
            "tier": "premium",
            "outfits": [
                {"id": 1, "color": "red", "category": "casual"},
                {"id": 2, "color": "blue", "category": "formal"},
                {"id": 3, "color": "green", "category": "casual"},
                {"id": 4, "category": "sport"},
            ],
        },
        {
            "name": "B",
            "outfits": [
                {"id": 10, "color": "red"},
                {"id": 11, "color": "black"},
            ],
        },
    ]


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for reproducible picks."""
    return random.Random(1234)
