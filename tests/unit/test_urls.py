"""
Tests for image url construction and comic url parsing.
"""

import pytest

from bitmoji.urls import (
    build_cpanel_url,
    build_friendmoji_url,
    build_preview_url,
    build_render_url,
    get_avatar_id,
    get_avatar_uuid,
    map_traits,
)
from config.constants import BASE_CPANEL_URL, BASE_PREVIEW_URL, BASE_RENDER_URL


COMIC_URL = (
    "https://render.bitstrips.com/v2/cpanel/10187551-"
    "128256895_8-s5-99887766_2-s5-"
    "a1b2c3d4-e5f6-7890-abcd-ef0123456789-v3.png"
)


class TestComicUrlParsing:
    """Tests for get_avatar_id / get_avatar_uuid."""

    def test_get_avatar_id(self):
        assert get_avatar_id(COMIC_URL) == "128256895_8-s5"

    def test_get_avatar_uuid(self):
        assert get_avatar_uuid(COMIC_URL) == "a1b2c3d4-e5f6-7890-abcd-ef0123456789"

    def test_short_url_yields_partial_or_empty(self):
        assert get_avatar_id("no-dashes") == "dashes"
        assert get_avatar_uuid("no-dashes") == ""


class TestMapTraits:
    """Tests for map_traits."""

    def test_renders_query_fragments(self):
        assert map_traits([("hair", 1001), ("eye_color", "brown")]) == ["&hair=1001", "&eye_color=brown"]

    def test_empty(self):
        assert map_traits([]) == []


class TestBuilders:
    """Tests for the url builders with default hosts."""

    def test_preview_url(self):
        url = build_preview_url("fashion", 1, 2, 4, 0, [("hair", 2001), ("eye_color", "green")], 201)

        assert url == (
            f"{BASE_PREVIEW_URL}fashion?scale=1&gender=2&style=4"
            "&rotation=0&hair=2001&eye_color=green&outfit=201"
        )

    def test_preview_url_without_traits(self):
        url = build_preview_url("head", 2, 1, 5, 3, [], 7)

        assert url == f"{BASE_PREVIEW_URL}head?scale=2&gender=1&style=5&rotation=3&outfit=7"

    def test_cpanel_url(self):
        url = build_cpanel_url("10220709", "128256895_8-s5", True, 1)

        assert url == f"{BASE_CPANEL_URL}10220709-128256895_8-s5-v3.png?transparent=true&scale=1"

    def test_render_url_without_outfit(self):
        url = build_render_url("10220709", "128256895_8-s5", False, 2)

        assert url == f"{BASE_RENDER_URL}10220709/128256895_8-s5-v3.png?transparent=false&scale=2"

    @pytest.mark.parametrize("outfit", [None, 0, ""])
    def test_render_url_falsy_outfit_omitted(self, outfit):
        url = build_render_url("1", "a-b", 1, 1, outfit)

        assert "outfit" not in url

    def test_render_url_with_outfit(self):
        url = build_render_url("10220709", "128256895_8-s5", 1, 1, 201)

        assert url == f"{BASE_RENDER_URL}10220709/128256895_8-s5-v3.png?transparent=1&scale=1&outfit=201"

    def test_friendmoji_url(self):
        url = build_friendmoji_url("10187551", "1-s5", "2-s5", 1, 1)

        assert url == f"{BASE_CPANEL_URL}10187551-1-s5-2-s5-v3.png?transparent=1&scale=1"


class TestHostOverrides:
    """Hosts come from settings."""

    def test_preview_host_override(self, monkeypatch):
        monkeypatch.setenv("PREVIEW_BASE_URL", "https://cdn.example.com/preview")

        url = build_preview_url("body", 1, 1, 1, 0, [], 5)

        assert url.startswith("https://cdn.example.com/preview/body?")

    def test_cpanel_host_override_applies_to_friendmoji(self, monkeypatch):
        monkeypatch.setenv("CPANEL_BASE_URL", "https://cdn.example.com/cpanel/")

        assert build_cpanel_url("1", "a-b", 1, 1).startswith("https://cdn.example.com/cpanel/1-a-b")
        assert build_friendmoji_url("1", "a-b", "c-d", 1, 1).startswith("https://cdn.example.com/cpanel/1-a-b-c-d")

    def test_render_host_override(self, monkeypatch):
        monkeypatch.setenv("RENDER_BASE_URL", "https://cdn.example.com/render/")

        assert build_render_url("1", "a-b", 1, 1).startswith("https://cdn.example.com/render/1/a-b")
