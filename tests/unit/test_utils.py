"""
Tests for core utilities.
"""

from types import SimpleNamespace

import pytest

from core.utils import format_query_value, safe_get


class TestFormatQueryValue:

    @pytest.mark.parametrize("value,expected", [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (1.5, "1.5"),
        ("brown", "brown"),
    ])
    def test_renders_values(self, value, expected):
        assert format_query_value(value) == expected


class TestSafeGet:

    def test_nested_dict(self):
        assert safe_get({"a": {"b": {"c": 1}}}, "a", "b", "c") == 1

    def test_missing_key_returns_default(self):
        assert safe_get({"a": {}}, "a", "b", default=0) == 0

    def test_attribute_access(self):
        assert safe_get(SimpleNamespace(traits={"1": 2}), "traits", "1") == 2

    def test_non_container_returns_default(self):
        assert safe_get({"a": [1, 2]}, "a", "b") is None

    def test_falsy_value_is_returned(self):
        assert safe_get({"brands": []}, "brands", default="x") == []
