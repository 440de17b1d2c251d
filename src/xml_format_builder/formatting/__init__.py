"""Formatted XML text assembly.

Key Components:
    XMLBuilder: Append-only builder driven by an XML serializer
    ConstructKind: Constructs tracked when construct tracking is enabled
"""

from .builder import (
    SPLIT_ATTRIBUTES_INDENT,
    ConstructKind,
    XMLBuilder,
)

__all__ = [
    "SPLIT_ATTRIBUTES_INDENT",
    "ConstructKind",
    "XMLBuilder",
]
