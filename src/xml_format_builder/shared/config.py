"""Configuration classes for XML formatting.

This module provides the formatting options consulted by the builder and the
builder-level configuration that bundles them with line delimiter, base
indentation and diagnostics settings.
"""

import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

_VALID_LOGGING_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Option names as sent by editor clients (LSP formatting settings)
FORMATTING_OPTION_ALIASES: Dict[str, str] = {
    "insertSpaces": "insert_spaces",
    "tabSize": "tab_size",
    "splitAttributes": "split_attributes",
    "joinContentLines": "join_content_lines",
    "joinCommentLines": "join_comment_lines",
    "joinCDATALines": "join_cdata_lines",
    "spaceBeforeEmptyCloseTag": "space_before_empty_close_tag",
}


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class FormattingOptions:
    """Style rules read by the builder on every formatting decision.

    Instances are immutable and may be shared by any number of builders.
    """

    insert_spaces: bool = True
    tab_size: int = 2
    split_attributes: bool = False
    join_content_lines: bool = False
    join_comment_lines: bool = False
    join_cdata_lines: bool = False
    space_before_empty_close_tag: bool = True

    def __post_init__(self) -> None:
        """Validate formatting options."""
        if isinstance(self.tab_size, bool) or not isinstance(self.tab_size, int):
            raise ValueError("tab_size must be an integer")
        if self.tab_size < 0:
            raise ValueError("tab_size must be >= 0")
        for option in fields(self):
            if option.name == "tab_size":
                continue
            if not isinstance(getattr(self, option.name), bool):
                raise ValueError(f"{option.name} must be a boolean")

    @property
    def indent_unit(self) -> str:
        """Text of one indentation level."""
        return " " * self.tab_size if self.insert_spaces else "\t"

    def to_dict(self, camel_case: bool = False) -> Dict[str, Any]:
        """Convert options to dictionary format.

        Args:
            camel_case: Use client-side option names instead of field names

        Returns:
            Dictionary representation of the options
        """
        result = {option.name: getattr(self, option.name) for option in fields(self)}
        if camel_case:
            reverse = {value: key for key, value in FORMATTING_OPTION_ALIASES.items()}
            return {reverse[key]: value for key, value in result.items()}
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormattingOptions":
        """Create options from a dictionary.

        Both field names (``tab_size``) and client-side names (``tabSize``)
        are accepted. Unknown keys are ignored.

        Args:
            data: Dictionary containing option values

        Returns:
            FormattingOptions instance

        Raises:
            ConfigValidationError: If a value is invalid
        """
        known = {option.name for option in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = FORMATTING_OPTION_ALIASES.get(key, key)
            if name in known:
                values[name] = value

        try:
            return cls(**values)
        except ValueError as e:
            raise ConfigValidationError(
                str(e), field_name=str(e).split(" ", 1)[0]
            ) from e


@dataclass(frozen=True)
class BuilderConfig:
    """Complete configuration for one rendering pass.

    Bundles the formatting options with the construction-time inputs of the
    builder. Thread-safe due to frozen dataclass implementation.
    """

    formatting: FormattingOptions = field(default_factory=FormattingOptions)
    line_delimiter: str = "\n"
    base_indent: str = ""
    track_constructs: bool = False
    logging_level: str = "WARNING"
    correlation_id: Optional[str] = None

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the builder configuration."""
        if not isinstance(self.formatting, FormattingOptions):
            raise ConfigValidationError(
                "formatting must be a FormattingOptions instance",
                field_name="formatting",
                suggestions=["Use FormattingOptions.from_dict() for raw settings"]
            )
        if (
            not isinstance(self.line_delimiter, str)
            or not self.line_delimiter
            or self.line_delimiter.strip("\r\n")
        ):
            raise ConfigValidationError(
                "line_delimiter must be a non-empty sequence of CR/LF characters",
                field_name="line_delimiter",
                suggestions=["Use '\\n'", "Use '\\r\\n'"]
            )
        if not isinstance(self.base_indent, str) or self.base_indent.strip(" \t"):
            raise ConfigValidationError(
                "base_indent may only contain spaces and tabs",
                field_name="base_indent"
            )
        if not isinstance(self.track_constructs, bool):
            raise ConfigValidationError(
                "track_constructs must be a boolean",
                field_name="track_constructs"
            )
        if self.logging_level not in _VALID_LOGGING_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {_VALID_LOGGING_LEVELS}",
                field_name="logging_level"
            )

    def override(self, **kwargs: Any) -> "BuilderConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Fields to override; ``formatting__<option>`` targets a
                single formatting option

        Returns:
            New BuilderConfig instance with overrides applied

        Example:
            >>> config = BuilderConfig()
            >>> new_config = config.override(
            ...     formatting__tab_size=4,
            ...     line_delimiter="\\r\\n"
            ... )
        """
        formatting_overrides: Dict[str, Any] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if key.startswith("formatting__"):
                formatting_overrides[key.split("__", 1)[1]] = value
            else:
                top_level[key] = value

        if formatting_overrides:
            try:
                top_level["formatting"] = replace(
                    top_level.get("formatting", self.formatting),
                    **formatting_overrides
                )
            except (TypeError, ValueError) as e:
                raise ConfigValidationError(str(e), field_name="formatting") from e

        return replace(self, **top_level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result: Dict[str, Any] = {}
        for config_field in fields(self):
            value = getattr(self, config_field.name)
            if isinstance(value, FormattingOptions):
                value = value.to_dict()
            result[config_field.name] = value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string representation
        """
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuilderConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary containing configuration data; the
                ``formatting`` section may use client-side option names

        Returns:
            BuilderConfig instance created from dictionary
        """
        known = {config_field.name for config_field in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if isinstance(values.get("formatting"), dict):
            values["formatting"] = FormattingOptions.from_dict(values["formatting"])
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "BuilderConfig":
        """Create configuration from JSON string.

        Args:
            json_str: JSON string containing configuration data

        Returns:
            BuilderConfig instance created from JSON
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def default(cls) -> "BuilderConfig":
        """Create the default configuration: two-space indent, nothing joined."""
        return cls(name="default")

    @classmethod
    def compact(cls) -> "BuilderConfig":
        """Create preset that joins content, comment and CDATA lines."""
        return cls(
            formatting=FormattingOptions(
                join_content_lines=True,
                join_comment_lines=True,
                join_cdata_lines=True,
                space_before_empty_close_tag=False
            ),
            name="compact",
            description="Collapse whitespace runs inside text, comments and CDATA"
        )

    @classmethod
    def split_attributes_preset(cls) -> "BuilderConfig":
        """Create preset that places every attribute on its own line."""
        return cls(
            formatting=FormattingOptions(split_attributes=True),
            name="split_attributes",
            description="Wrap each attribute two levels deeper than its tag"
        )

    @classmethod
    def tabs(cls) -> "BuilderConfig":
        """Create preset that indents with tab characters."""
        return cls(
            formatting=FormattingOptions(insert_spaces=False),
            name="tabs",
            description="Indent with one tab character per level"
        )
