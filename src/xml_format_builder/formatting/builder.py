"""Formatted XML text assembly.

This module implements the builder an XML serializer drives while it walks a
document tree: every call appends one fragment (a tag opening, an attribute,
a linefeed, comment content ...) to an append-only buffer, applying the
indentation, line-joining and spacing rules of the active formatting options.

The builder knows nothing about tree structure. Pairing ``start_*`` and
``end_*`` calls is the caller's job; with ``track_constructs`` enabled the
builder additionally keeps a stack of open constructs and records a warning
diagnostic for every unbalanced call, without changing the output.
"""

from enum import Enum, auto
from typing import Any, Dict, List, Optional, Tuple

from xml_format_builder.dtd import DTDDeclNode
from xml_format_builder.shared import (
    BuilderConfig,
    DiagnosticEntry,
    DiagnosticSeverity,
    FormattingOptions,
    get_logger,
    set_package_log_level,
)
from xml_format_builder.text import normalize_space

# Wrapped attributes sit this many levels deeper than their owning tag
SPLIT_ATTRIBUTES_INDENT = 2

_COMPONENT = "xml_builder"


class ConstructKind(Enum):
    """Lexical constructs opened by a ``start_*`` call."""

    ELEMENT = auto()
    COMMENT = auto()
    CDATA = auto()
    PROCESSING_INSTRUCTION = auto()
    DOCTYPE = auto()
    INTERNAL_SUBSET = auto()


class XMLBuilder:
    """Append-only assembler of formatted XML text.

    All fragment operations return the builder itself so calls can be
    chained; the order of calls alone determines the output.

    Example:
        >>> builder = XMLBuilder(FormattingOptions(), "", "\\n")
        >>> builder.start_element("a").self_close_element().to_string()
        '<a />'
        >>> XMLBuilder(None).start_element("b", prefix="x").self_close_element().to_string()
        '<x:b/>'
        >>> XMLBuilder(None).start_element("a", False).close_start_element().to_string()
        '<a>'
    """

    def __init__(
        self,
        options: Optional[FormattingOptions],
        base_indent: Optional[str] = "",
        line_delimiter: str = "\n",
        track_constructs: bool = False,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize builder.

        Args:
            options: Formatting options, read but never modified; ``None``
                turns every option off
            base_indent: Whitespace written after every linefeed
            line_delimiter: Text written for every linefeed
            track_constructs: Keep a stack of open constructs and record
                diagnostics for unbalanced calls
            correlation_id: Optional correlation ID for request tracking
        """
        self.options = options
        self.base_indent = base_indent
        self.line_delimiter = line_delimiter
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, _COMPONENT)

        self._parts: List[str] = []
        self._length = 0

        self.track_constructs = track_constructs
        self._open: List[Tuple[ConstructKind, Optional[str]]] = []
        self.diagnostics: List[DiagnosticEntry] = []

        self.logger.debug(
            "XML builder created",
            extra={
                "line_delimiter": repr(line_delimiter),
                "base_indent_length": len(base_indent or ""),
                "track_constructs": track_constructs,
            }
        )

    @classmethod
    def from_config(cls, config: BuilderConfig) -> "XMLBuilder":
        """Create a builder from a complete builder configuration."""
        set_package_log_level(config.logging_level)
        return cls(
            config.formatting,
            config.base_indent,
            config.line_delimiter,
            track_constructs=config.track_constructs,
            correlation_id=config.correlation_id
        )

    # Elements

    def start_element(
        self, name: str, close: bool = False, *, prefix: Optional[str] = None
    ) -> "XMLBuilder":
        """Append ``<[prefix:]name``, and ``>`` as well when ``close`` is set."""
        self._append("<")
        self._append_qualified_name(prefix, name)
        self._push(ConstructKind.ELEMENT, _qualified(prefix, name))
        if close:
            self.close_start_element()
        return self

    def close_start_element(self) -> "XMLBuilder":
        self._append(">")
        return self

    def self_close_element(self) -> "XMLBuilder":
        """Append ``/>``, preceded by a space if the options ask for one."""
        if self._option("space_before_empty_close_tag"):
            self._append(" ")
        self._append("/>")
        self._pop(ConstructKind.ELEMENT)
        return self

    def end_element(
        self,
        name: str,
        is_end_tag_closed: bool = True,
        *,
        prefix: Optional[str] = None
    ) -> "XMLBuilder":
        """Append ``</[prefix:]name``, and ``>`` when ``is_end_tag_closed``.

        An unclosed end tag is left open for callers that keep composing the
        fragment themselves.
        """
        self._append("</")
        self._append_qualified_name(prefix, name)
        if is_end_tag_closed:
            self._append(">")
        self._pop(ConstructKind.ELEMENT, _qualified(prefix, name))
        return self

    # Attributes

    def add_single_attribute(self, name: str, value: Optional[str]) -> "XMLBuilder":
        """Append `` name="value"`` without any layout decision."""
        self._append(" ")
        self._append_attribute_value_pair(name, value)
        return self

    def add_attribute(
        self,
        name: str,
        value: Optional[str],
        index: int,
        level: int,
        tag_name: Optional[str] = None
    ) -> "XMLBuilder":
        """Append an attribute, wrapped onto its own line when splitting.

        With ``split_attributes`` on, the attribute starts a new line indented
        ``level + 2`` levels; otherwise it follows a single space. ``index``
        and ``tag_name`` identify the attribute's position and owner but do
        not influence placement.
        """
        if self._option("split_attributes"):
            self.linefeed()
            self.indent(level + SPLIT_ATTRIBUTES_INDENT)
        else:
            self._append(" ")
        self._append_attribute_value_pair(name, value)
        return self

    # Line structure

    def linefeed(self) -> "XMLBuilder":
        """Append the line delimiter followed by the base indent."""
        self._append(self.line_delimiter)
        if self.base_indent:
            self._append(self.base_indent)
        return self

    def indent(self, level: int) -> "XMLBuilder":
        """Append ``level`` indentation units."""
        if level > 0:
            if self._option("insert_spaces"):
                unit = " " * self._tab_size()
            else:
                unit = "\t"
            self._append(unit * level)
        return self

    # Text content

    def add_content(self, text: str) -> "XMLBuilder":
        if self.is_join_content_lines():
            self._append(normalize_space(text))
        else:
            self._append(text)
        return self

    # CDATA

    def start_cdata(self) -> "XMLBuilder":
        self._append("<![CDATA[")
        self._push(ConstructKind.CDATA)
        return self

    def add_content_cdata(self, content: str) -> "XMLBuilder":
        if self._option("join_cdata_lines"):
            content = normalize_space(content)
        self._append(content)
        return self

    def end_cdata(self) -> "XMLBuilder":
        self._append("]]>")
        self._pop(ConstructKind.CDATA)
        return self

    # Comments

    def start_comment(self, is_same_line_as_prior_tag: bool = False) -> "XMLBuilder":
        """Append ``<!--``, after a space when the comment continues a line."""
        if is_same_line_as_prior_tag:
            self._append(" ")
        self._append("<!--")
        self._push(ConstructKind.COMMENT)
        return self

    def add_content_comment(self, content: str) -> "XMLBuilder":
        """Append comment content; joined content is preceded by one space."""
        if self._option("join_comment_lines"):
            self._append(" ")
            self._append(normalize_space(content))
        else:
            self._append(content)
        return self

    def end_comment(self) -> "XMLBuilder":
        self._append("-->")
        self._pop(ConstructKind.COMMENT)
        return self

    # Processing instructions and prolog

    def start_prolog_or_pi(self, tag_name: str) -> "XMLBuilder":
        self._append("<?")
        self._append(tag_name)
        self._push(ConstructKind.PROCESSING_INSTRUCTION, tag_name)
        return self

    def add_content_pi(self, content: str) -> "XMLBuilder":
        self._append(" ")
        self._append(content)
        self._append(" ")
        return self

    def end_prolog_or_pi(self) -> "XMLBuilder":
        self._append("?>")
        self._pop(ConstructKind.PROCESSING_INSTRUCTION)
        return self

    # Doctype and DTD declarations

    def start_doctype(self) -> "XMLBuilder":
        self._append("<!DOCTYPE")
        self._push(ConstructKind.DOCTYPE)
        return self

    def add_parameter(self, parameter: str) -> "XMLBuilder":
        self._append(" ")
        self._append(parameter)
        return self

    def add_unindented_parameter(self, parameter: str) -> "XMLBuilder":
        self._append(parameter)
        return self

    def start_doctype_internal_subset(self) -> "XMLBuilder":
        self._append(" [")
        self._push(ConstructKind.INTERNAL_SUBSET)
        return self

    def end_doctype_internal_subset(self) -> "XMLBuilder":
        self._append("]")
        self._pop(ConstructKind.INTERNAL_SUBSET)
        return self

    def end_doctype(self) -> "XMLBuilder":
        self._append(">")
        self._pop(ConstructKind.DOCTYPE)
        return self

    def add_decl_tag_start(self, decl: DTDDeclNode) -> "XMLBuilder":
        """Append ``<!`` and the declaration keyword, e.g. ``<!ATTLIST``.

        Parameters follow through :meth:`add_parameter` and
        :meth:`add_unindented_parameter`.
        """
        self._append("<!")
        self._append(decl.decl_type or "")
        return self

    # Rendering

    def to_string(self) -> str:
        """Get the text assembled so far."""
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return self._length

    # Options

    def is_join_content_lines(self) -> bool:
        return self._option("join_content_lines")

    def _option(self, name: str) -> bool:
        return self.options is not None and bool(getattr(self.options, name))

    def _tab_size(self) -> int:
        return self.options.tab_size if self.options is not None else 0

    # Construct tracking

    @property
    def open_constructs(self) -> List[ConstructKind]:
        """Constructs started but not yet ended, outermost first."""
        return [kind for kind, _ in self._open]

    @property
    def is_balanced(self) -> bool:
        """True when nothing is open and no unbalanced call was seen."""
        return not self._open and not self.diagnostics

    def _push(self, kind: ConstructKind, name: Optional[str] = None) -> None:
        if self.track_constructs:
            self._open.append((kind, name))

    def _pop(self, kind: ConstructKind, name: Optional[str] = None) -> None:
        if not self.track_constructs:
            return

        if not self._open:
            self._record_unbalanced(
                f"End of {kind.name.lower()} without a matching start",
                {"expected": None, "found": kind.name, "tag": name}
            )
            return

        open_kind, open_name = self._open[-1]
        if open_kind is not kind:
            self._record_unbalanced(
                f"End of {kind.name.lower()} while {open_kind.name.lower()} is open",
                {"expected": open_kind.name, "found": kind.name, "tag": name}
            )
            return

        self._open.pop()
        if name is not None and open_name != name:
            self._record_unbalanced(
                f"End tag '{name}' does not match start tag '{open_name}'",
                {"expected": open_name, "found": name}
            )

    def _record_unbalanced(self, message: str, details: Dict[str, Any]) -> None:
        entry = DiagnosticEntry(
            severity=DiagnosticSeverity.WARNING,
            message=message,
            component=_COMPONENT,
            position=self._length,
            details=details,
            correlation_id=self.correlation_id
        )
        self.diagnostics.append(entry)
        self.logger.warning(message, extra={"position": self._length, **details})

    # Buffer

    def _append(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def _append_qualified_name(self, prefix: Optional[str], name: str) -> None:
        if prefix:
            self._append(prefix)
            self._append(":")
        self._append(name)

    def _append_attribute_value_pair(self, name: str, value: Optional[str]) -> None:
        self._append(name)
        self._append('="')
        if value is not None:
            self._append(value)
        self._append('"')


def _qualified(prefix: Optional[str], name: str) -> str:
    return f"{prefix}:{name}" if prefix else name
