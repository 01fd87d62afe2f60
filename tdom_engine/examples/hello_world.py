#!/usr/bin/env python3
"""
Hello World Example

Builds a small page, then reshapes it with selector-driven operations.
"""

import sys

from tdom_engine.dom import Element, attr, element, text


def build_page() -> Element:
    """Build the hello-world document."""
    html = element("html",
                   element("head",
                           element("title", text("A title"))),
                   element("body",
                           element("div", attr("class", "content"),
                                   text("Hello, world."))))

    # Insert a header before the content.
    html.before(".content", element("h1", text("My title")))

    # Add another block of text to the body.
    html.append("body", element("div", text("Goodbye, world.")))

    # Insert a ruler after both divs; the second one gets a copy.
    html.after("div", element("hr"))

    # Methods can be chained.
    (html
     .append("body", element("div", attr("class", "footer"), text("a footer")))
     .after(".footer", text("that's all folks!")))

    return html


def main() -> None:
    build_page().dump(sys.stdout)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
