"""
tags

Builder functions for html elements. Each one only supplies the tag name to
element(), so they all accept the same options:

    children: nodes, strings (added as escaped text) or lists of either
    selector: "#id.class" shorthand for the id and class attributes
    attributes: a mapping or an iterable of (name, value) pairs
    id: id for the element
    classname: class(es) for the element

Void elements (br, img, input_ ...) take options only.

see https://developer.mozilla.org/en-US/docs/Web/HTML/Element
"""
from __future__ import annotations

from typing import Any, List

from .stencil import (
    Child,
    Element,
    Node,
    doctype,
    element,
    text,
    unsafe,
)

# main root element


def html5(*children: Child, **options: Any) -> List[Node]:
    """
    html5 - a complete html5 document: the doctype followed by the html
        element. Render the returned list with render()
    """
    return [doctype(), html(*children, **options)]


def html(*children: Child, **options: Any) -> Element:
    """
    html - the root element of a document
    """
    return element("html", *children, **options)


# document metadata elements


def head(*children: Child, **options: Any) -> Element:
    """
    head - contains metadata about the document
    """
    return element("head", *children, **options)


def title(title: str, **options: Any) -> Element:
    """
    title - the document title (shown in the browser tab)

    title: plain text, escaped
    """
    return element("title", text(title), **options)


def base(**options: Any) -> Element:
    """
    base - specifies the base URL for all relative URLs in the document
    """
    return element("base", **options)


def link(**options: Any) -> Element:
    """
    link - specifies links to external resources (eg CSS, favicon)
    """
    return element("link", **options)


def meta(**options: Any) -> Element:
    """
    meta - misc. additional metadata for the document
    """
    return element("meta", **options)


def style(css: str = "", **options: Any) -> Element:
    """
    style - inline style information. css is not escaped
    """
    return element("style", unsafe(css) if css else (), **options)


# sectioning root


def body(*children: Child, **options: Any) -> Element:
    return element("body", *children, **options)


# content sectioning


def address(*children: Child, **options: Any) -> Element:
    return element("address", *children, **options)


def article(*children: Child, **options: Any) -> Element:
    return element("article", *children, **options)


def aside(*children: Child, **options: Any) -> Element:
    return element("aside", *children, **options)


def footer(*children: Child, **options: Any) -> Element:
    return element("footer", *children, **options)


def header(*children: Child, **options: Any) -> Element:
    return element("header", *children, **options)


def h1(*children: Child, **options: Any) -> Element:
    return element("h1", *children, **options)


def h2(*children: Child, **options: Any) -> Element:
    return element("h2", *children, **options)


def h3(*children: Child, **options: Any) -> Element:
    return element("h3", *children, **options)


def h4(*children: Child, **options: Any) -> Element:
    return element("h4", *children, **options)


def h5(*children: Child, **options: Any) -> Element:
    return element("h5", *children, **options)


def h6(*children: Child, **options: Any) -> Element:
    return element("h6", *children, **options)


def main(*children: Child, **options: Any) -> Element:
    """
    main - the dominant content of the body
    """
    return element("main", *children, **options)


def nav(*children: Child, **options: Any) -> Element:
    return element("nav", *children, **options)


def section(*children: Child, **options: Any) -> Element:
    return element("section", *children, **options)


# text content


def blockquote(*children: Child, **options: Any) -> Element:
    return element("blockquote", *children, **options)


def dd(*children: Child, **options: Any) -> Element:
    """
    dd - the value for the preceding <dt> (definition term)
    """
    return element("dd", *children, **options)


def div(*children: Child, **options: Any) -> Element:
    """
    div - generic container for flow content
    """
    return element("div", *children, **options)


def dl(*children: Child, **options: Any) -> Element:
    """
    dl - a list of definitions specified using <dt> <dd> pairs
    """
    return element("dl", *children, **options)


def dt(*children: Child, **options: Any) -> Element:
    return element("dt", *children, **options)


def figcaption(*children: Child, **options: Any) -> Element:
    return element("figcaption", *children, **options)


def figure(*children: Child, **options: Any) -> Element:
    return element("figure", *children, **options)


def hr(**options: Any) -> Element:
    """
    hr - a break between paragraph level content
    """
    return element("hr", **options)


def li(*children: Child, **options: Any) -> Element:
    """
    li - an item in a list (<ol> or <ul>)
    """
    return element("li", *children, **options)


def ol(*children: Child, **options: Any) -> Element:
    return element("ol", *children, **options)


def p(*children: Child, **options: Any) -> Element:
    return element("p", *children, **options)


def pre(*children: Child, **options: Any) -> Element:
    return element("pre", *children, **options)


def ul(*children: Child, **options: Any) -> Element:
    return element("ul", *children, **options)


# inline text semantics


def a(*children: Child, **options: Any) -> Element:
    """
    a - a hyperlink, give the target with attributes=[href(...)]
    """
    return element("a", *children, **options)


def b(*children: Child, **options: Any) -> Element:
    return element("b", *children, **options)


def br(**options: Any) -> Element:
    return element("br", **options)


def code(*children: Child, **options: Any) -> Element:
    return element("code", *children, **options)


def em(*children: Child, **options: Any) -> Element:
    return element("em", *children, **options)


def i(*children: Child, **options: Any) -> Element:
    return element("i", *children, **options)


def small(*children: Child, **options: Any) -> Element:
    return element("small", *children, **options)


def span(*children: Child, **options: Any) -> Element:
    return element("span", *children, **options)


def strong(*children: Child, **options: Any) -> Element:
    return element("strong", *children, **options)


# image and multimedia


def img(**options: Any) -> Element:
    return element("img", **options)


def source(**options: Any) -> Element:
    return element("source", **options)


def video(*children: Child, **options: Any) -> Element:
    return element("video", *children, **options)


# scripting


def script(js: str = "", **options: Any) -> Element:
    """
    script - embedded or referenced javascript. js is not escaped
    """
    return element("script", unsafe(js) if js else (), **options)


def noscript(*children: Child, **options: Any) -> Element:
    return element("noscript", *children, **options)


# demarcating edits


def del_(*children: Child, **options: Any) -> Element:
    return element("del", *children, **options)


def ins(*children: Child, **options: Any) -> Element:
    return element("ins", *children, **options)


# table content


def table(*children: Child, **options: Any) -> Element:
    return element("table", *children, **options)


def caption(*children: Child, **options: Any) -> Element:
    return element("caption", *children, **options)


def thead(*children: Child, **options: Any) -> Element:
    return element("thead", *children, **options)


def tbody(*children: Child, **options: Any) -> Element:
    return element("tbody", *children, **options)


def tfoot(*children: Child, **options: Any) -> Element:
    return element("tfoot", *children, **options)


def tr(*children: Child, **options: Any) -> Element:
    return element("tr", *children, **options)


def th(*children: Child, **options: Any) -> Element:
    return element("th", *children, **options)


def td(*children: Child, **options: Any) -> Element:
    return element("td", *children, **options)


# forms


def button(*children: Child, **options: Any) -> Element:
    return element("button", *children, **options)


def fieldset(*children: Child, **options: Any) -> Element:
    return element("fieldset", *children, **options)


def form(*children: Child, **options: Any) -> Element:
    return element("form", *children, **options)


def input_(**options: Any) -> Element:
    """
    input_ - an interactive control for a form
    """
    return element("input", **options)


def label(*children: Child, **options: Any) -> Element:
    return element("label", *children, **options)


def legend(*children: Child, **options: Any) -> Element:
    return element("legend", *children, **options)


def option(*children: Child, **options: Any) -> Element:
    return element("option", *children, **options)


def select(*children: Child, **options: Any) -> Element:
    return element("select", *children, **options)


def textarea(*children: Child, **options: Any) -> Element:
    return element("textarea", *children, **options)


# interactive elements


def details(*children: Child, **options: Any) -> Element:
    return element("details", *children, **options)


def dialog(*children: Child, **options: Any) -> Element:
    """
    dialog - an interactive component: dialog box, dismissable alert etc.
    """
    return element("dialog", *children, **options)


def summary(*children: Child, **options: Any) -> Element:
    """
    summary - a summary or caption for a <details> element
    """
    return element("summary", *children, **options)


# web component elements


def template(*children: Child, **options: Any) -> Element:
    return element("template", *children, **options)
