#!/usr/bin/env python3
"""
Quick Start Guide for the XML Format Builder.

This example drives the builder the way a serializer does: it walks a small
document description and emits fragments in output order, once per
configuration preset, so the effect of each formatting rule is visible.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from xml_format_builder import BuilderConfig, DocumentType, DTDAttlistDecl, XMLBuilder

DOCTYPE_SOURCE = '<!DOCTYPE book [<!ATTLIST book genre CDATA "fiction">]>'

# (tag, attributes, text, children)
BOOK = (
    "book", {"id": "123", "genre": "fiction"}, None, [
        ("title", {}, "My   Book", []),
        ("summary", {}, "A story\n    told over\n    several lines", []),
        ("cover", {"src": "cover.png"}, None, []),
    ]
)


def write_element(builder: XMLBuilder, element, level: int) -> None:
    """Emit one element and its children."""
    tag, attributes, text, children = element

    builder.linefeed().indent(level).start_element(tag)
    for index, (name, value) in enumerate(attributes.items()):
        builder.add_attribute(name, value, index, level, tag)

    if text is None and not children:
        builder.self_close_element()
        return

    builder.close_start_element()
    if text is not None:
        builder.add_content(text)
    for child in children:
        write_element(builder, child, level + 1)
    if children:
        builder.linefeed().indent(level)
    builder.end_element(tag)


def render(config: BuilderConfig) -> str:
    """Render the sample document with one configuration."""
    doctype = DocumentType(DOCTYPE_SOURCE)
    attlist = DTDAttlistDecl(DOCTYPE_SOURCE.index("<!ATTLIST"), DOCTYPE_SOURCE.index("]"), doctype)

    builder = XMLBuilder.from_config(config)
    builder.start_prolog_or_pi("xml").add_single_attribute("version", "1.0").end_prolog_or_pi()

    builder.linefeed().start_doctype().add_parameter("book").start_doctype_internal_subset()
    builder.linefeed().indent(1).add_decl_tag_start(attlist)
    for parameter in ("book", "genre", "CDATA", '"fiction"'):
        builder.add_parameter(parameter)
    builder.add_unindented_parameter(">")
    builder.linefeed().end_doctype_internal_subset().end_doctype()

    builder.linefeed().start_comment().add_content_comment(" generated\n   catalog ").end_comment()
    write_element(builder, BOOK, 0)
    return builder.to_string()


def main():
    """Main function."""
    presets = [
        BuilderConfig.default(),
        BuilderConfig.compact(),
        BuilderConfig.split_attributes_preset(),
        BuilderConfig.tabs(),
    ]

    for config in presets:
        print(f"\n📋 {config.name}: {config.description or 'library defaults'}")
        print("-" * 50)
        print(render(config))

    return 0


if __name__ == "__main__":
    sys.exit(main())
