"""Tests for shared command helpers."""

from __future__ import annotations

import pytest

from netbox_mapper.commands._common import parse_data, parse_pairs


class TestParsePairs:
    def test_pairs(self):
        assert parse_pairs(["name=test-vlan", "vid=3999"], "--by") == {
            "name": "test-vlan",
            "vid": "3999",
        }

    def test_value_may_contain_equals(self):
        assert parse_pairs(["q=a=b"], "--filter") == {"q": "a=b"}

    def test_none(self):
        assert parse_pairs(None, "--by") == {}

    @pytest.mark.parametrize("pair", ["name", "=value"])
    def test_invalid(self, pair):
        with pytest.raises(ValueError, match="Invalid --by"):
            parse_pairs([pair], "--by")


class TestParseData:
    def test_inline_json(self):
        assert parse_data('{"vid": 3999}') == {"vid": 3999}

    def test_from_file(self, tmp_path):
        path = tmp_path / "vlan.json"
        path.write_text('{"name": "test-vlan"}')
        assert parse_data(f"@{path}") == {"name": "test-vlan"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            parse_data(f"@{tmp_path / 'nope.json'}")

    def test_invalid_json(self):
        with pytest.raises(ValueError, match="Invalid JSON"):
            parse_data("{vid: 1}")

    def test_must_be_object(self):
        with pytest.raises(ValueError, match="JSON object"):
            parse_data("[1, 2]")
