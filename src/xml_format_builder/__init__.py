"""XML Format Builder.

An append-only text builder that re-serializes a parsed XML document model
into formatted markup, honoring configurable style rules: indentation, line
joining, attribute splitting and spacing before self-closing tags.

Progressive API Disclosure:
- Level 1: XMLBuilder with FormattingOptions
- Level 2: BuilderConfig presets, JSON configuration, XMLBuilder.from_config()
- Level 3: Construct tracking diagnostics and lxml adapter
"""

__version__ = "0.1.0"
__author__ = "XML Format Builder Team"

from .dtd import DocumentType, DTDAttlistDecl, DTDDeclNode, DTDDeclParameter
from .formatting import ConstructKind, XMLBuilder
from .shared.config import BuilderConfig, FormattingOptions

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Builder
    "XMLBuilder",
    "ConstructKind",

    # Configuration classes
    "BuilderConfig",
    "FormattingOptions",

    # DTD declaration model
    "DocumentType",
    "DTDAttlistDecl",
    "DTDDeclNode",
    "DTDDeclParameter",
]
