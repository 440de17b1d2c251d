"""DTD declaration nodes consumed by the XML builder.

Declarations do not copy their text: every parameter is a span into the
source text held by the owning doctype node, decoded on access. An external
parser creates the nodes and assigns spans while it reads a ``<!DOCTYPE``;
once parsing is done the nodes are read-only.
"""

from dataclasses import dataclass
from typing import List, Optional

# Node type constants
DOCUMENT_TYPE_NODE = 10
DTD_ELEMENT_DECL_NODE = 101
DTD_ATT_LIST_NODE = 102
DTD_ENTITY_DECL_NODE = 103
DTD_DECL_NODE = 105

_NODE_TYPES_BY_KEYWORD = {
    "ELEMENT": DTD_ELEMENT_DECL_NODE,
    "ATTLIST": DTD_ATT_LIST_NODE,
    "ENTITY": DTD_ENTITY_DECL_NODE,
}

# Length of the "<!" that precedes every declaration keyword
_DECL_OPEN_LENGTH = 2


class DOMNode:
    """Minimal structural node: a source span plus a parent link."""

    def __init__(self, start: int, end: int, parent: Optional["DOMNode"] = None) -> None:
        if start < 0 or end < start:
            raise ValueError("Node span must satisfy 0 <= start <= end")
        self.start = start
        self.end = end
        self.parent = parent

    @property
    def node_type(self) -> int:
        """Get the node type constant."""
        raise NotImplementedError

    def is_doctype(self) -> bool:
        """Check if this node is a ``<!DOCTYPE`` construct."""
        return False


class DocumentType(DOMNode):
    """The ``<!DOCTYPE ...>`` node that owns the declaration source text."""

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None) -> None:
        super().__init__(start, len(text) if end is None else end)
        self.text = text
        self.children: List[DOMNode] = []

    @property
    def node_type(self) -> int:
        return DOCUMENT_TYPE_NODE

    def is_doctype(self) -> bool:
        return True

    def get_substring(self, start: int, end: int) -> str:
        """Get source text between two offsets."""
        return self.text[start:end]

    def add_child(self, child: DOMNode) -> None:
        """Add a declaration and establish parent relationship."""
        child.parent = self
        self.children.append(child)


@dataclass(frozen=True)
class DTDDeclParameter:
    """One positional parameter of a declaration, stored as a source span."""

    document_type: DocumentType
    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate parameter span."""
        if self.start < 0 or self.end < self.start:
            raise ValueError("Parameter span must satisfy 0 <= start <= end")

    @property
    def parameter(self) -> str:
        """Decoded text of the span."""
        return self.document_type.get_substring(self.start, self.end)

    def contains(self, offset: int) -> bool:
        """Check if an offset falls inside the span (end inclusive)."""
        return self.start <= offset <= self.end


class DTDDeclNode(DOMNode):
    """A DTD declaration (``<!ELEMENT``, ``<!ATTLIST``, ``<!ENTITY`` ...).

    The declaration keyword is itself a span, so a node created for
    ``<!ELEMENT a ANY>`` reports ``decl_type == "ELEMENT"`` once the parser
    has called :meth:`set_decl_type`.
    """

    def __init__(
        self,
        start: int,
        end: int,
        parent_document_type: DocumentType,
        parent: Optional[DOMNode] = None
    ) -> None:
        super().__init__(start, end, parent if parent is not None else parent_document_type)
        self.parent_document_type = parent_document_type
        self.parameters: List[DTDDeclParameter] = []
        self._decl_type: Optional[DTDDeclParameter] = None

    @property
    def node_type(self) -> int:
        return _NODE_TYPES_BY_KEYWORD.get(self.decl_type or "", DTD_DECL_NODE)

    @property
    def decl_type(self) -> Optional[str]:
        """Declaration keyword, e.g. ``ATTLIST``; ``None`` until assigned."""
        return self._decl_type.parameter if self._decl_type is not None else None

    def set_decl_type(self, start: int, end: int) -> None:
        self._decl_type = DTDDeclParameter(self.parent_document_type, start, end)

    def add_new_parameter(self, start: int, end: int) -> DTDDeclParameter:
        """Create a parameter span and append it to the ordered parameter list."""
        parameter = DTDDeclParameter(self.parent_document_type, start, end)
        self.parameters.append(parameter)
        return parameter

    def parameter_at(self, offset: int) -> Optional[DTDDeclParameter]:
        """Find the parameter whose span contains ``offset``."""
        for parameter in self.parameters:
            if parameter.contains(offset):
                return parameter
        return None


class DTDAttlistDecl(DTDDeclNode):
    """Attribute-list declaration ``<!ATTLIST``.

    Format::

        <!ATTLIST element-name attribute-name attribute-type "attribute-value">

    or, with several bindings in one tag body::

        <!ATTLIST element-name
                  attribute-name1 attribute-type1 "attribute-value1"
                  attribute-name2 attribute-type2 "attribute-value2">

    Each binding is its own ``DTDAttlistDecl``; the second and later ones are
    kept in :attr:`internal_children` of the first.
    """

    def __init__(
        self,
        start: int,
        end: int,
        parent_document_type: DocumentType,
        parent: Optional[DOMNode] = None
    ) -> None:
        super().__init__(start, end, parent_document_type, parent)
        self.set_decl_type(start + _DECL_OPEN_LENGTH, start + _DECL_OPEN_LENGTH + len("ATTLIST"))

        self.element_name_param: Optional[DTDDeclParameter] = None
        self.attribute_name_param: Optional[DTDDeclParameter] = None
        self.attribute_type_param: Optional[DTDDeclParameter] = None
        self.attribute_value_param: Optional[DTDDeclParameter] = None

        self.internal_children: List["DTDAttlistDecl"] = []

    @property
    def node_type(self) -> int:
        return DTD_ATT_LIST_NODE

    @property
    def node_name(self) -> Optional[str]:
        """An attribute-list node is named after the attribute it declares."""
        return self.attribute_name

    @property
    def element_name(self) -> Optional[str]:
        return _decode(self.element_name_param)

    def set_element_name(self, start: int, end: int) -> None:
        self.element_name_param = self.add_new_parameter(start, end)

    @property
    def attribute_name(self) -> Optional[str]:
        return _decode(self.attribute_name_param)

    def set_attribute_name(self, start: int, end: int) -> None:
        self.attribute_name_param = self.add_new_parameter(start, end)

    @property
    def attribute_type(self) -> Optional[str]:
        return _decode(self.attribute_type_param)

    def set_attribute_type(self, start: int, end: int) -> None:
        self.attribute_type_param = self.add_new_parameter(start, end)

    @property
    def attribute_value(self) -> Optional[str]:
        return _decode(self.attribute_value_param)

    def set_attribute_value(self, start: int, end: int) -> None:
        self.attribute_value_param = self.add_new_parameter(start, end)

    def add_additional_att_decl(self, child: "DTDAttlistDecl") -> None:
        """Append another binding declared in the same ``<!ATTLIST`` body."""
        child.parent = self
        self.internal_children.append(child)

    @property
    def is_root_attlist(self) -> bool:
        """True for the first binding of a tag, whose parent is the doctype."""
        return self.parent is not None and self.parent.is_doctype()


def _decode(parameter: Optional[DTDDeclParameter]) -> Optional[str]:
    return parameter.parameter if parameter is not None else None
