"""
stencil - build html as an immutable tree of nodes and render it to a string
"""
from . import attributes, tags
from .stencil import (
    DOCTYPE_HTML5,
    FLAG,
    VOID_ELEMENTS,
    Attributes,
    DocumentDeclaration,
    Element,
    Flag,
    Node,
    RawText,
    Text,
    comment,
    doctype,
    element,
    escape,
    parse_shorthand,
    render,
    text,
    unsafe,
)

__all__ = [
    "DOCTYPE_HTML5",
    "FLAG",
    "VOID_ELEMENTS",
    "Attributes",
    "DocumentDeclaration",
    "Element",
    "Flag",
    "Node",
    "RawText",
    "Text",
    "attributes",
    "comment",
    "doctype",
    "element",
    "escape",
    "parse_shorthand",
    "render",
    "tags",
    "text",
    "unsafe",
]
