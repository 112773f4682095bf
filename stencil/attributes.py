"""
attributes

Helpers that build (name, value) attribute pairs, to be passed to the
attributes= option of the element builders:

    input_(attributes=attrs(type_("email"), name("login"), required()))

Names that clash with python builtins or keywords carry a trailing
underscore.
"""
from __future__ import annotations

from typing import Tuple, Union

from .stencil import FLAG, Attributes, AttributeValue

Pair = Tuple[str, AttributeValue]


def attr(name: str, value: AttributeValue = FLAG) -> Pair:
    """
    attr - create an attribute pair. Without a value this is a boolean
        attribute
    """
    return (name, value)


def attrs(*pairs: Pair) -> Attributes:
    """
    attrs - collect attribute pairs into an Attributes collection
    """
    return Attributes(pairs)


def id_(id: str) -> Pair:
    return attr("id", id)


def classes(*classnames: str) -> Pair:
    """
    classes - the class attribute for the given class names. Empty names are
        skipped
    """
    return attr("class", " ".join(c for c in classnames if c))


def data(name: str, value: str) -> Pair:
    """
    data - a data-* attribute
    """
    return attr("data-" + name, value)


def aria(name: str, value: str) -> Pair:
    """
    aria - an aria-* attribute
    """
    return attr("aria-" + name, value)


# boolean attributes


def required() -> Pair:
    return attr("required")


def selected() -> Pair:
    return attr("selected")


def checked() -> Pair:
    return attr("checked")


def disabled() -> Pair:
    return attr("disabled")


def readonly() -> Pair:
    return attr("readonly")


def hidden() -> Pair:
    return attr("hidden")


def async_() -> Pair:
    return attr("async")


def defer() -> Pair:
    return attr("defer")


# valued attributes


def href(url: str) -> Pair:
    return attr("href", url)


def src(url: str) -> Pair:
    return attr("src", url)


def alt(text: str) -> Pair:
    return attr("alt", text)


def rel(rel: str) -> Pair:
    return attr("rel", rel)


def type_(type: str) -> Pair:
    return attr("type", type)


def name(name: str) -> Pair:
    return attr("name", name)


def value(value: str) -> Pair:
    return attr("value", value)


def placeholder(text: str) -> Pair:
    return attr("placeholder", text)


def for_(id: str) -> Pair:
    return attr("for", id)


def action(url: str) -> Pair:
    return attr("action", url)


def method(method: str) -> Pair:
    return attr("method", method)


def charset(charset: str) -> Pair:
    return attr("charset", charset)


def content(content: str) -> Pair:
    return attr("content", content)


def lang(lang: str) -> Pair:
    return attr("lang", lang)


def role(role: str) -> Pair:
    return attr("role", role)


def title_(title: str) -> Pair:
    return attr("title", title)


def http_equiv(value: str) -> Pair:
    return attr("http-equiv", value)


# numeric attributes, converted to strings


def width(width: Union[int, str]) -> Pair:
    return attr("width", str(width))


def height(height: Union[int, str]) -> Pair:
    return attr("height", str(height))


def rows(rows: Union[int, str]) -> Pair:
    return attr("rows", str(rows))


def cols(cols: Union[int, str]) -> Pair:
    return attr("cols", str(cols))


def rowspan(rowspan: Union[int, str]) -> Pair:
    return attr("rowspan", str(rowspan))


def colspan(colspan: Union[int, str]) -> Pair:
    return attr("colspan", str(colspan))
