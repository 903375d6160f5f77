"""
Tests for item records, match requests and match rules.
"""

import pytest
import regex

from config.models import ItemRecord, LookupConfig, MatchRequest, OutputFormat
from config.rules import IdSetRule, MatchRules, NamePatternRule


class TestItemRecord:
    """Test parsing of item definitions."""

    def test_from_dict_minimal(self):
        """Only the id is required."""
        item = ItemRecord.from_dict({"id": 7})

        assert item.id == 7
        assert item.name is None
        assert item.description is None
        assert item.members is False
        assert item.value == 0

    def test_from_dict_full(self):
        """All known attributes are carried through."""
        item = ItemRecord.from_dict({
            "id": 4151,
            "name": "Abyssal whip",
            "description": "A weapon from the abyss.",
            "ground_actions": [None, None, "Take", None, None],
            "inventory_actions": [None, "Wield", None, None, "Drop"],
            "members": True,
            "note_graphic_id": None,
            "note_info_id": 4152,
            "team": 0,
            "stackable": False,
            "value": 120001,
        })

        assert item.name == "Abyssal whip"
        assert item.inventory_actions == (None, "Wield", None, None, "Drop")
        assert item.note_info_id == 4152
        assert item.members is True

    def test_unknown_fields_ignored(self):
        item = ItemRecord.from_dict({"id": 1, "name": "sword", "weight": 2.5})

        assert item == ItemRecord(id=1, name="sword")

    @pytest.mark.parametrize("data", [
        [1, 2],
        {"name": "no id"},
        {"id": "1"},
        {"id": True},
        {"id": 1, "name": 5},
        {"id": 1, "members": "yes"},
        {"id": 1, "ground_actions": ["Take"]},
    ])
    def test_from_dict_rejects_bad_shapes(self, data):
        with pytest.raises((TypeError, ValueError)):
            ItemRecord.from_dict(data)

    def test_display_name_defaults_to_empty(self):
        assert ItemRecord(id=3).display_name == ""
        assert ItemRecord(id=1, name="sword").display_name == "sword"

    def test_structural_equality(self):
        """Records are equal only when every field is equal."""
        assert ItemRecord(id=1, name="sword") == ItemRecord(id=1, name="sword")
        assert ItemRecord(id=1, name="sword") != ItemRecord(id=1, name="sword", value=5)
        assert len({ItemRecord(id=1, name="sword"), ItemRecord(id=1, name="sword")}) == 1

    def test_to_dict_uses_lists(self):
        item = ItemRecord(id=1, ground_actions=("Take", None, None, None, None))

        assert item.to_dict()["ground_actions"] == ["Take", None, None, None, None]


class TestMatchRequest:
    """Test match request construction."""

    def test_empty_request(self):
        assert MatchRequest().is_empty

    def test_lists_become_tuples(self):
        request = MatchRequest(patterns=["^sw"], ids=[1, 2])

        assert request.patterns == ("^sw",)
        assert request.ids == (1, 2)
        assert not request.is_empty

    def test_id_file_alone_is_not_empty(self):
        assert not MatchRequest(id_list_paths=["ids.json"]).is_empty


class TestLookupConfig:
    """Test lookup settings."""

    def test_defaults(self):
        config = LookupConfig()

        assert config.items_path == "./data/item_definitions"
        assert config.extensions == (".json",)

    def test_extensions_normalized(self):
        assert LookupConfig(extensions=("JSON", ".Txt")).extensions == (".json", ".txt")

    def test_rejects_zero_chunk_size(self):
        with pytest.raises(ValueError):
            LookupConfig(chunk_size=0)

    def test_output_format_values(self):
        assert OutputFormat("json-id-names") is OutputFormat.JSON_ID_NAMES


class TestMatchRules:
    """Test rule evaluation."""

    def test_name_pattern_searches_name(self):
        rule = NamePatternRule(regex.compile("ield"))

        assert rule.matches(ItemRecord(id=2, name="shield"))
        assert not rule.matches(ItemRecord(id=1, name="sword"))

    def test_name_pattern_treats_missing_name_as_empty(self):
        assert NamePatternRule(regex.compile(".*")).matches(ItemRecord(id=3))
        assert not NamePatternRule(regex.compile(".")).matches(ItemRecord(id=3))

    def test_id_set_rule(self):
        rule = IdSetRule([3, 5])

        assert rule.matches(ItemRecord(id=3))
        assert not rule.matches(ItemRecord(id=4))

    def test_rules_are_ored(self):
        rules = MatchRules.from_predicates([regex.compile("^sw")], {3})

        assert rules.matches(ItemRecord(id=1, name="sword"))
        assert rules.matches(ItemRecord(id=3))
        assert not rules.matches(ItemRecord(id=2, name="shield"))

    def test_empty_rules_match_nothing(self):
        rules = MatchRules.from_predicates([], set())

        assert rules.is_empty
        assert not rules.matches(ItemRecord(id=1, name="sword"))
