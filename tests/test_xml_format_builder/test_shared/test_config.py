"""Comprehensive tests for configuration system."""

import json
from dataclasses import FrozenInstanceError

import pytest

from xml_format_builder.shared.config import (
    FORMATTING_OPTION_ALIASES,
    BuilderConfig,
    ConfigError,
    ConfigValidationError,
    FormattingOptions,
)


class TestFormattingOptions:
    """Test suite for FormattingOptions."""

    def test_default_configuration(self):
        """Test default formatting option values."""
        options = FormattingOptions()

        assert options.insert_spaces is True
        assert options.tab_size == 2
        assert options.split_attributes is False
        assert options.join_content_lines is False
        assert options.join_comment_lines is False
        assert options.join_cdata_lines is False
        assert options.space_before_empty_close_tag is True

    def test_options_are_immutable(self):
        """Test frozen dataclass behavior."""
        options = FormattingOptions()
        with pytest.raises(FrozenInstanceError):
            options.tab_size = 8  # type: ignore[misc]

    def test_validation_failures(self):
        """Test option validation failures."""
        with pytest.raises(ValueError, match="tab_size must be >= 0"):
            FormattingOptions(tab_size=-1)

        with pytest.raises(ValueError, match="tab_size must be an integer"):
            FormattingOptions(tab_size=2.5)  # type: ignore[arg-type]

        with pytest.raises(ValueError, match="tab_size must be an integer"):
            FormattingOptions(tab_size=True)

        with pytest.raises(ValueError, match="split_attributes must be a boolean"):
            FormattingOptions(split_attributes="yes")  # type: ignore[arg-type]

    def test_indent_unit(self):
        """Test text of one indentation level."""
        assert FormattingOptions(tab_size=4).indent_unit == "    "
        assert FormattingOptions(insert_spaces=False).indent_unit == "\t"

    def test_from_dict_with_client_names(self):
        """Test loading editor-style option names."""
        options = FormattingOptions.from_dict({
            "insertSpaces": False,
            "tabSize": 8,
            "splitAttributes": True,
            "joinCDATALines": True,
            "spaceBeforeEmptyCloseTag": False,
            "unknownSetting": 1,
        })

        assert options.insert_spaces is False
        assert options.tab_size == 8
        assert options.split_attributes is True
        assert options.join_cdata_lines is True
        assert options.space_before_empty_close_tag is False

    def test_from_dict_with_field_names(self):
        """Test loading field names."""
        options = FormattingOptions.from_dict({"join_comment_lines": True})
        assert options.join_comment_lines is True

    def test_from_dict_invalid_value(self):
        """Test invalid values surface as ConfigValidationError."""
        with pytest.raises(ConfigValidationError) as exc_info:
            FormattingOptions.from_dict({"tabSize": -2})
        assert exc_info.value.field_name == "tab_size"

    def test_to_dict_round_trip_names(self):
        """Test both naming styles on export."""
        options = FormattingOptions(tab_size=3)
        assert options.to_dict()["tab_size"] == 3
        camel = options.to_dict(camel_case=True)
        assert camel["tabSize"] == 3
        assert set(camel) == set(FORMATTING_OPTION_ALIASES)


class TestBuilderConfig:
    """Test suite for BuilderConfig."""

    def test_default_configuration(self):
        """Test default builder configuration values."""
        config = BuilderConfig()

        assert config.formatting == FormattingOptions()
        assert config.line_delimiter == "\n"
        assert config.base_indent == ""
        assert config.track_constructs is False
        assert config.logging_level == "WARNING"
        assert config.correlation_id is None

    def test_validation_failures(self):
        """Test builder configuration validation failures."""
        with pytest.raises(ConfigValidationError, match="line_delimiter"):
            BuilderConfig(line_delimiter="")

        with pytest.raises(ConfigValidationError, match="line_delimiter"):
            BuilderConfig(line_delimiter="<br>")

        with pytest.raises(ConfigValidationError, match="base_indent"):
            BuilderConfig(base_indent="..")

        with pytest.raises(ConfigValidationError, match="logging_level"):
            BuilderConfig(logging_level="VERBOSE")

        with pytest.raises(ConfigValidationError, match="formatting"):
            BuilderConfig(formatting={"tabSize": 2})  # type: ignore[arg-type]

    def test_loaded_values_of_wrong_type(self):
        """Test that mistyped values from dicts and JSON fail validation."""
        with pytest.raises(ConfigValidationError, match="line_delimiter"):
            BuilderConfig.from_dict({"line_delimiter": 10})

        with pytest.raises(ConfigValidationError, match="base_indent"):
            BuilderConfig.from_json('{"base_indent": null}')

        with pytest.raises(ConfigValidationError, match="track_constructs") as exc_info:
            BuilderConfig.from_dict({"track_constructs": "no"})
        assert exc_info.value.field_name == "track_constructs"

    def test_validation_error_details(self):
        """Test field name and suggestions on validation errors."""
        with pytest.raises(ConfigValidationError) as exc_info:
            BuilderConfig(line_delimiter=";")

        assert exc_info.value.field_name == "line_delimiter"
        assert exc_info.value.suggestions
        assert isinstance(exc_info.value, ConfigError)

    def test_override_nested_formatting(self):
        """Test nested override notation."""
        config = BuilderConfig()
        new_config = config.override(
            formatting__tab_size=4,
            formatting__split_attributes=True,
            line_delimiter="\r\n"
        )

        assert new_config.formatting.tab_size == 4
        assert new_config.formatting.split_attributes is True
        assert new_config.line_delimiter == "\r\n"
        # Original unchanged
        assert config.formatting.tab_size == 2
        assert config.line_delimiter == "\n"

    def test_override_invalid_formatting(self):
        """Test invalid nested overrides."""
        with pytest.raises(ConfigValidationError):
            BuilderConfig().override(formatting__tab_size=-1)

        with pytest.raises(ConfigValidationError):
            BuilderConfig().override(formatting__no_such_option=True)

    def test_to_dict_and_json(self):
        """Test serialization."""
        config = BuilderConfig(base_indent="  ", name="custom")
        data = config.to_dict()

        assert data["formatting"]["tab_size"] == 2
        assert data["base_indent"] == "  "
        assert data["name"] == "custom"
        assert json.loads(config.to_json()) == data

    def test_from_dict(self):
        """Test deserialization with client option names."""
        config = BuilderConfig.from_dict({
            "formatting": {"tabSize": 4, "joinContentLines": True},
            "line_delimiter": "\r\n",
            "track_constructs": True,
            "ignored": "value",
        })

        assert config.formatting.tab_size == 4
        assert config.formatting.join_content_lines is True
        assert config.line_delimiter == "\r\n"
        assert config.track_constructs is True

    def test_json_round_trip(self):
        """Test that JSON export can be loaded back."""
        config = BuilderConfig.compact().override(correlation_id="req-7")
        assert BuilderConfig.from_json(config.to_json()) == config

    def test_from_json_invalid(self):
        """Test malformed configuration JSON."""
        with pytest.raises(ConfigValidationError, match="Invalid configuration JSON"):
            BuilderConfig.from_json("{not json")

        with pytest.raises(ConfigValidationError, match="must be an object"):
            BuilderConfig.from_json("[1, 2]")


class TestPresets:
    """Test configuration presets."""

    def test_default_preset(self):
        """Test default preset."""
        config = BuilderConfig.default()
        assert config.name == "default"
        assert config.formatting == FormattingOptions()

    def test_compact_preset(self):
        """Test compact preset joins all line kinds."""
        formatting = BuilderConfig.compact().formatting
        assert formatting.join_content_lines is True
        assert formatting.join_comment_lines is True
        assert formatting.join_cdata_lines is True
        assert formatting.split_attributes is False

    def test_split_attributes_preset(self):
        """Test split attributes preset."""
        assert BuilderConfig.split_attributes_preset().formatting.split_attributes is True

    def test_tabs_preset(self):
        """Test tab indentation preset."""
        assert BuilderConfig.tabs().formatting.indent_unit == "\t"
