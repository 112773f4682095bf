"""
stencil

Immutable html trees and their rendering.

A tree is built bottom-up from Element, Text, RawText and
DocumentDeclaration nodes and rendered with render(). Nodes can not be
changed once created, so a finished tree can be rendered any number of
times (from any thread) with the same result.

Text content is escaped when the Text node is created (see text()).
Attribute values are NOT escaped: never pass untrusted data as an attribute
value.

Does not enforce correct html structure.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

logger = logging.getLogger(__name__)

# in html5 these elements can not have a closing tags (or empty tag)
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

DOCTYPE_HTML5 = "<!DOCTYPE html>"

# characters that are always replaced by a numeric character reference
_RESERVED = frozenset("\"'<>&")


class Flag(enum.Enum):
    """
    Flag - value of a boolean attribute (eg required). The attribute is
    rendered as its bare name.
    """

    FLAG = "flag"

    def __repr__(self) -> str:
        return "FLAG"


FLAG = Flag.FLAG

AttributeValue = Union[str, Flag]
AttributeSource = Union[Mapping[str, AttributeValue], Iterable[Tuple[str, AttributeValue]]]


def escape(text: str) -> str:
    """
    escape - return text with the reserved characters (" ' < > &) and every
    character above ascii replaced by a decimal character reference
    (eg "&" -> "&#38;", "é" -> "&#233;")

    Escaping an escaped string escapes it again.
    """
    return "".join(
        f"&#{ord(c)};" if ord(c) > 127 or c in _RESERVED else c for c in text
    )


def _pairs(source: Optional[AttributeSource]) -> Iterable[Tuple[str, AttributeValue]]:
    if source is None:
        return ()
    if isinstance(source, Mapping):
        return source.items()
    return source


class Attributes(Mapping[str, AttributeValue]):
    """
    An ordered, immutable collection of element attributes.

    Setting a name that is already present replaces its value but the name
    keeps the position where it was first seen.
    """

    __slots__ = ("_items",)

    def __init__(self, source: Optional[AttributeSource] = None):
        """
        source: a mapping or an iterable of (name, value) pairs. value is a
            string or FLAG
        """
        items: dict[str, AttributeValue] = {}
        for name, value in _pairs(source):
            if not isinstance(name, str) or not name:
                raise ValueError(f"Attribute name must be a non empty string: {name!r}")
            if any(c.isspace() for c in name):
                raise ValueError(f"Attribute name can not contain whitespace: {name!r}")
            if not isinstance(value, (str, Flag)):
                raise TypeError(
                    f"Attribute value must be a string or FLAG. Attribute: {name}, "
                    f"value: {value!r}"
                )
            items[name] = value
        self._items = items

    def __getitem__(self, name: str) -> AttributeValue:
        return self._items[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        # order is part of the value: it is the rendering order
        if isinstance(other, Attributes):
            return list(self._items.items()) == list(other._items.items())
        if isinstance(other, Mapping):
            return self._items == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._items.items()))

    def __repr__(self) -> str:
        return f"Attributes({list(self._items.items())!r})"

    def merge(self, *sources: Optional[AttributeSource]) -> Attributes:
        """
        merge - return a new collection with the entries of sources applied,
            in order, after the entries of this one
        """
        pairs: List[Tuple[str, AttributeValue]] = list(self._items.items())
        for source in sources:
            pairs.extend(_pairs(source))
        return Attributes(pairs)


def parse_shorthand(shorthand: str) -> Attributes:
    """
    parse_shorthand - convert "#id.class1.class2" into id and class attributes

    Only the first segment can set the id (when it starts with "#"); every
    other segment is a class name. Empty segments are ignored and empty
    values are left out, so "" gives no attributes at all.
    """
    id = ""
    classnames: List[str] = []
    for i, segment in enumerate(shorthand.split(".")):
        if i == 0 and segment.startswith("#"):
            id = segment[1:]
        elif segment:
            classnames.append(segment)

    attributes: List[Tuple[str, AttributeValue]] = []
    if id:
        attributes.append(("id", id))
    if classnames:
        attributes.append(("class", " ".join(classnames)))
    return Attributes(attributes)


class _Renderable:
    """
    rendering helpers shared by all nodes
    """

    __slots__ = ()

    def render(self) -> str:
        """
        render - render this node (and its children) to a string of html
        """
        return render(self)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Text(_Renderable):
    """
    A text node. content has already been escaped, use text() to create one
    from plain text.
    """

    content: str


@dataclass(frozen=True)
class RawText(_Renderable):
    """
    A text node that is rendered as is. The caller is responsible for the
    content being safe (see unsafe()).
    """

    content: str


@dataclass(frozen=True)
class DocumentDeclaration(_Renderable):
    """
    A fixed preamble, usually the doctype
    """

    literal: str = DOCTYPE_HTML5


@dataclass(frozen=True)
class Element(_Renderable):
    """
    An HTML element. Has a tag, optionally attributes, optionally children

    tagName: type of this tag, stored in lower case
    attributes: an Attributes collection, a mapping or an iterable of
        (name, value) pairs
    children: child nodes, in order
    isvoid: set this as a void element when true. Void elements will not
        have a closing tag and cannot have children. If false, this may still
        be a void element if the tag is one of the void element tags.
        Children given to a void element are dropped.
    """

    tagName: str
    attributes: Attributes = field(default_factory=Attributes)
    children: Tuple[Node, ...] = ()
    isvoid: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.tagName, str):
            raise TypeError(f"Element tag name must be a string: {self.tagName!r}")
        tagName = self.tagName.strip().lower()
        if not tagName:
            raise ValueError("Element tag name can not be empty")
        isvoid = self.isvoid or tagName in VOID_ELEMENTS
        attributes = self.attributes
        if not isinstance(attributes, Attributes):
            attributes = Attributes(attributes)
        children = tuple(self.children)
        for c in children:
            if not isinstance(c, _NODE_TYPES):
                raise TypeError(f"Element child must be a node. Tag: {tagName}, child: {c!r}")
        if isvoid and children:
            logger.debug(
                "Dropping %d children of void element. Tag: %s", len(children), tagName
            )
            children = ()

        # frozen dataclass, fields can only be normalised through object
        object.__setattr__(self, "tagName", tagName)
        object.__setattr__(self, "isvoid", isvoid)
        object.__setattr__(self, "attributes", attributes)
        object.__setattr__(self, "children", children)

    def getAttribute(self, name: str) -> Optional[AttributeValue]:
        """
        getAttribute - return the value of an attribute if it exists
        """
        return self.attributes.get(name)

    @property
    def id(self) -> Optional[str]:
        """
        id - return the id of this element or None if no id
        """
        id = self.attributes.get("id")
        return id if isinstance(id, str) else None

    @property
    def innerHTML(self) -> str:
        """
        innerHTML - return the children elements as HTML
        """
        return render(self.children)

    def getElementById(self, id: str) -> Optional[Element]:
        """
        getElementById - return the Element from the tree (ie this element
            or its children) with the supplied id

        Returns first element found with the matching id, depth first
        """
        if self.id == id:
            return self

        for c in self.children:
            if isinstance(c, Element):
                e = c.getElementById(id)
                if e:
                    return e
        return None

    def getElementsByTagName(self, tagName: str) -> List[Element]:
        """
        getElementsByTagName - return a list of elements from this (sub)tree
            with the supplied tagName. Exhaustive search, depth first
        """
        tagName = tagName.lower()
        result: List[Element] = []

        if self.tagName == tagName:
            result.append(self)

        for c in self.children:
            if isinstance(c, Element):
                result.extend(c.getElementsByTagName(tagName))

        return result

    def getElementByTagName(self, tagName: str) -> Optional[Element]:
        """
        getElementByTagName - return an element from this (sub)tree
            with the supplied tagName. Returns first match immediately,
            depth first
        """
        tagName = tagName.lower()
        if self.tagName == tagName:
            return self

        for c in self.children:
            if isinstance(c, Element):
                e = c.getElementByTagName(tagName)
                if e:
                    return e

        return None


Node = Union[Element, Text, RawText, DocumentDeclaration]
Child = Union[Node, str, Iterable[Any]]

_NODE_TYPES = (Element, Text, RawText, DocumentDeclaration)


def text(content: str) -> Text:
    """
    text - create a text node, content is escaped
    """
    return Text(escape(content))


def unsafe(content: str) -> RawText:
    """
    unsafe - create a text node that is rendered without escaping. Only use
        for trusted content (eg inline scripts)
    """
    return RawText(content)


def doctype(literal: str = DOCTYPE_HTML5) -> DocumentDeclaration:
    """
    doctype - create a doctype declaration

    literal: the full text of the doctype, defaults to the standard
        short doctype
    """
    return DocumentDeclaration(literal)


def comment(content: str) -> RawText:
    """
    comment - create a comment. content (without delimiters) is not escaped
    """
    return RawText("<!-- " + content + " -->")


def _flatten(children: Iterable[Any], dest: List[Node]) -> List[Node]:
    for c in children:
        if isinstance(c, _NODE_TYPES):
            dest.append(c)
        elif isinstance(c, str):
            dest.append(text(c))
        elif isinstance(c, Mapping):
            raise TypeError("Attributes are not children, pass them as attributes=")
        elif isinstance(c, Iterable):
            _flatten(c, dest)
        else:
            raise TypeError(f"Unsupported child: {c!r}")
    return dest


def element(
    tagName: str,
    *children: Child,
    selector: Optional[str] = None,
    attributes: Optional[AttributeSource] = None,
    id: Optional[str] = None,
    classname: Optional[str] = None,
    isvoid: bool = False,
) -> Element:
    """
    element - create an Element

    tagName: type of the element
    children: nodes, strings (added as escaped text) or lists of either
    selector: "#id.class" shorthand for the id and class attributes
    attributes: a mapping or an iterable of (name, value) pairs
    id: id for the element (optional)
    classname: class(es) for this element
    isvoid: force a void element (tags in VOID_ELEMENTS always are)

    Later sources win when an attribute is given more than once, in the order
    selector, attributes, id, classname.
    """
    attribs = parse_shorthand(selector) if selector else Attributes()
    extra: List[Tuple[str, AttributeValue]] = []
    if id:
        extra.append(("id", id))
    if classname:
        extra.append(("class", classname))
    return Element(
        tagName,
        attribs.merge(attributes, extra),
        tuple(_flatten(children, [])),
        isvoid,
    )


def _renderattributes(attributes: Attributes) -> str:
    return " ".join(
        name if value is FLAG else f'{name}="{value}"'
        for name, value in attributes.items()
    )


def renderlist(node: Node, dest: List[str]) -> List[str]:
    """
    renderlist - render a node and all its child nodes, depth first

    dest: list the rendered parts are appended to

    Uses an explicit stack, so the depth of the tree is not limited by the
    python recursion limit.

    returns dest, the parts can be joined to create the rendered html
    """
    if not isinstance(node, _NODE_TYPES):
        raise TypeError(f"Not a node: {node!r}")

    # holds nodes still to render and closing tags (str) still to emit
    stack: List[Union[Node, str]] = [node]
    while stack:
        item = stack.pop()

        if isinstance(item, str):
            dest.append(item)

        elif isinstance(item, Element):
            dest.append("<" + item.tagName)
            if item.attributes:
                dest.append(" " + _renderattributes(item.attributes))
            dest.append(">")

            if item.isvoid:
                continue

            stack.append(f"</{item.tagName}>")
            stack.extend(reversed(item.children))

        elif isinstance(item, (Text, RawText)):
            dest.append(item.content)

        elif isinstance(item, DocumentDeclaration):
            dest.append(item.literal)

        else:
            raise TypeError(f"Not a node: {item!r}")

    return dest


def render(nodes: Union[Node, Iterable[Node]]) -> str:
    """
    render - render a node, or a sequence of nodes (a fragment), to a string
        of html
    """
    dest: List[str] = []
    if isinstance(nodes, _NODE_TYPES):
        renderlist(nodes, dest)
    elif isinstance(nodes, Iterable) and not isinstance(nodes, str):
        for n in nodes:
            renderlist(n, dest)
    else:
        raise TypeError(f"Not a node: {nodes!r}")
    return "".join(dest)
