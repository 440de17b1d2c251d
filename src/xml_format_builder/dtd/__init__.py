"""DTD declaration model.

Key Components:
    DocumentType: Doctype node owning the declaration source text
    DTDDeclNode: Generic declaration with a keyword and ordered parameters
    DTDAttlistDecl: ``<!ATTLIST`` declaration with sibling bindings
    DTDDeclParameter: Positional parameter stored as a source span
"""

from .nodes import (
    DOCUMENT_TYPE_NODE,
    DTD_ATT_LIST_NODE,
    DTD_DECL_NODE,
    DTD_ELEMENT_DECL_NODE,
    DTD_ENTITY_DECL_NODE,
    DOMNode,
    DocumentType,
    DTDAttlistDecl,
    DTDDeclNode,
    DTDDeclParameter,
)

__all__ = [
    "DOCUMENT_TYPE_NODE",
    "DTD_ATT_LIST_NODE",
    "DTD_DECL_NODE",
    "DTD_ELEMENT_DECL_NODE",
    "DTD_ENTITY_DECL_NODE",
    "DOMNode",
    "DocumentType",
    "DTDAttlistDecl",
    "DTDDeclNode",
    "DTDDeclParameter",
]
