"""Tests for FormConfig serialization and deserialization."""

import json

import pytest

from fieldgate import FormConfig
from fieldgate.conditions import PREDICATE_SLOTS

YAML_CONFIG = """
groups:
  - name: breaking_change
    depends_on:
      or_conditions:
        - parameter_name: type
          value_equals: feat
        - parameter_name: type
          value_equals: refactor
      and_conditions:
        - parameter_name: confirm
          value_empty: false
  - name: body
"""


def slot_presence(config):
    """Map each condition to the set of predicate slots it sets."""
    presence = []
    for group in config.groups:
        for condition in group.depends_on.or_conditions + group.depends_on.and_conditions:
            presence.append(
                {slot for slot in PREDICATE_SLOTS if getattr(condition, slot) is not None}
            )
    return presence


@pytest.fixture
def config():
    """A config exercising every predicate slot, including falsy values."""
    return FormConfig.model_validate(
        {
            "groups": [
                {
                    "name": "details",
                    "depends_on": {
                        "or_conditions": [
                            {"parameter_name": "scope", "value_empty": False},
                            {"parameter_name": "type", "value_equals": ""},
                        ],
                        "and_conditions": [
                            {"parameter_name": "breaking", "value_not_equals": False},
                            {"parameter_name": "labels", "value_contains": "api"},
                            {"parameter_name": "labels", "value_not_contains": 0},
                        ],
                    },
                },
                {"name": "footer"},
            ]
        }
    )


class TestDictSerialization:
    """Test to_dict and model_validate."""

    def test_from_yaml_shape(self):
        """Test loading the documented wire format."""
        config = FormConfig.model_validate_yaml(YAML_CONFIG)

        assert [group.name for group in config.groups] == ["breaking_change", "body"]
        breaking = config.groups[0]
        assert len(breaking.depends_on.or_conditions) == 2
        assert breaking.depends_on.and_conditions[0].value_empty is False
        assert config.groups[1].depends_on.is_empty()

    def test_to_dict_omits_unset_slots(self, config):
        """Test unset slots are left out and falsy slots kept."""
        data = config.to_dict()
        first = data["groups"][0]["depends_on"]["or_conditions"][0]
        assert first == {"parameter_name": "scope", "value_empty": False}

    def test_round_trip_dict(self, config):
        """Test round trip through a mapping."""
        restored = FormConfig.model_validate(config.to_dict())
        assert restored == config
        assert slot_presence(restored) == slot_presence(config)


class TestFormats:
    """Test JSON, YAML and TOML round trips preserve slot presence."""

    def test_json(self, config):
        """Test JSON round trip."""
        text = config.model_dump_json()
        assert json.loads(text)["groups"][1] == {
            "name": "footer",
            "depends_on": {"and_conditions": [], "or_conditions": []},
        }
        restored = FormConfig.model_validate_json(text)
        assert slot_presence(restored) == slot_presence(config)
        assert restored == config

    def test_yaml(self, config):
        """Test YAML round trip."""
        restored = FormConfig.model_validate_yaml(config.model_dump_yaml())
        assert slot_presence(restored) == slot_presence(config)
        assert restored == config

    def test_toml(self, config):
        """Test TOML round trip."""
        restored = FormConfig.model_validate_toml(config.model_dump_toml())
        assert slot_presence(restored) == slot_presence(config)
        assert restored == config

    def test_toml_bytes(self, config):
        """Test TOML given as bytes."""
        restored = FormConfig.model_validate_toml(config.model_dump_toml().encode())
        assert restored == config

    def test_empty_yaml(self):
        """Test an empty YAML document yields no groups."""
        assert FormConfig.model_validate_yaml("").groups == []

    def test_null_groups(self):
        """Test a null groups key yields no groups."""
        assert FormConfig.model_validate_yaml("groups:\n").groups == []


class TestFromFile:
    """Test FormConfig.from_file."""

    @pytest.mark.parametrize("suffix", [".json", ".yaml", ".yml", ".toml"])
    def test_by_extension(self, tmp_path, config, suffix):
        """Test each supported extension."""
        dump = {
            ".json": config.model_dump_json,
            ".yaml": config.model_dump_yaml,
            ".yml": config.model_dump_yaml,
            ".toml": config.model_dump_toml,
        }[suffix]
        path = tmp_path / f"groups{suffix}"
        path.write_text(dump(), encoding="utf-8")

        assert FormConfig.from_file(path) == config

    def test_unsupported_extension(self, tmp_path):
        """Test error with an unknown extension."""
        path = tmp_path / "groups.ini"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported configuration format"):
            FormConfig.from_file(path)
