#!/usr/bin/env python3
"""Command-line interface for stencil: render the showcase document."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import List, Optional

from .attributes import (
    attrs,
    charset,
    classes,
    content,
    for_,
    href,
    method,
    name,
    placeholder,
    rel,
    required,
    selected,
    type_,
    value,
)
from .stencil import Node, render
from .tags import (
    body,
    button,
    div,
    form,
    h1,
    head,
    html5,
    input_,
    label,
    li,
    link,
    meta,
    option,
    p,
    section,
    select,
    table,
    tbody,
    td,
    th,
    thead,
    title,
    tr,
    ul,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "This is a showcase of stencil"


def _get_version() -> str:
    try:
        return version("stencil")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def showcase(page_title: str = DEFAULT_TITLE) -> List[Node]:
    """
    showcase - a small document using most of the builders
    """
    return html5(
        head(
            title(page_title),
            meta(attributes=[charset("utf-8")]),
            meta(
                attributes=[
                    name("viewport"),
                    content("width=device-width, initial-scale=1"),
                ]
            ),
            link(attributes=[rel("stylesheet"), href("style.css")]),
        ),
        body(
            section(
                div(
                    h1("Hello stencil!", selector="#main-title.title.big-title"),
                    p("Immutable html trees & their rendering.", classname="subtitle"),
                    ul(li("escaped <text>"), li("boolean attributes")),
                    table(
                        thead(tr(th("Position"), th("Played"), th("Won"))),
                        tbody(
                            tr(td(str(i)), td(str(10 + i)), td(str(i * 2)))
                            for i in range(1, 4)
                        ),
                        attributes=attrs(classes("table")),
                    ),
                    form(
                        label("Login :", attributes=[for_("login")]),
                        input_(
                            attributes=attrs(
                                type_("text"),
                                name("login"),
                                placeholder("someone@example.com"),
                                required(),
                            ),
                            id="login",
                        ),
                        select(
                            option("User", attributes=[value("USER"), selected()]),
                            option("Admin", attributes=[value("ADMIN")]),
                            attributes=[name("role")],
                        ),
                        button("Submit"),
                        attributes=[method("POST")],
                    ),
                    classname="container",
                ),
                classname="section",
            )
        ),
        attributes=[("lang", "en")],
    )


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stencil",
        description="Render the stencil showcase html document.",
        epilog=(
            "Examples:\n"
            "  stencil\n"
            "  stencil --title 'My page' --output index.html\n"
            "\n"
            "If you don't have the 'stencil' command available, use:\n"
            "  python -m stencil ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--title",
        default=DEFAULT_TITLE,
        help="Document title (default: %(default)r)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="-",
        help="File to write the html to, or '-' for stdout (default)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"stencil {_get_version()}",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    html = render(showcase(args.title))

    if args.output == "-":
        sys.stdout.write(html)
        sys.stdout.write("\n")
        return None

    try:
        Path(args.output).write_text(html, encoding="utf-8")
    except OSError as e:
        print(f"Can not write {args.output}: {e}", file=sys.stderr)
        raise SystemExit(2) from e
    logger.debug("Wrote %d characters to %s", len(html), args.output)
    return None


if __name__ == "__main__":
    main()
