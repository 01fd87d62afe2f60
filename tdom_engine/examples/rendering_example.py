#!/usr/bin/env python3
"""
Rendering Example

A custom visitor can produce different textual formats from the same tree.
This builds a page with an embedded hCard microformat, renders it as HTML,
then renders only the hCard part as a vCard.
"""

import sys

from tdom_engine.dom import Element, attr, element, text
from tdom_engine.rendering import DomVisitor

VCARD_FIELDS = ("fn", "title", "org")


def build_page() -> Element:
    html = element("html",
                   element("head", element("title", text("A title"))),
                   element("body", element("h1", text("This is the info for a user"))))

    # <div class="vcard">
    #   <img class="photo" src="http://example.com/bob.jpg"/>
    #   <strong class="fn">Bob Smith</strong> is the
    #   <span class="title">Senior editor</span> at
    #   <span class="org">ACME Reviews</span>
    # </div>
    content = element("div", attr("class", "vcard"),
                      element("img", attr("class", "photo"), attr("src", "http://example.com/bob.jpg")),
                      element("strong", attr("class", "fn"), text("Bob Smith")),
                      text(" is the "),
                      element("span", attr("class", "title"), text("Senior editor")),
                      text(" at "),
                      element("span", attr("class", "org"), text("ACME Reviews")))

    html.append("body", content).append("body", element("h3", text("This is a footer")))
    return html


class VCardRenderer(DomVisitor):
    """Writes hCard-marked elements as vCard 4.0 lines."""

    def __init__(self, sink):
        self.sink = sink

    def visit_text(self, text_node) -> None:
        self.sink.write(text_node.data)

    def visit_attr(self, attr_node) -> None:
        pass

    def visit_element(self, node) -> None:
        vtag = node.get_attribute("class")

        if vtag == "vcard":
            self.sink.write("BEGIN:VCARD\n")
            self.sink.write("VERSION:4.0\n")
            for child in node.children:
                child.visit(self)
            self.sink.write("END:VCARD\n")
        elif vtag == "photo":
            self.sink.write(f"PHOTO:{node.get_attribute('src')}\n")
        elif vtag in VCARD_FIELDS:
            self.sink.write(f"{vtag.upper()}:")
            for child in node.child_nodes:
                if not isinstance(child, Element):
                    child.visit(self)
            self.sink.write("\n")
        elif vtag is None:
            # Unmarked element: just descend
            for child in node.children:
                child.visit(self)


def main() -> None:
    page = build_page()
    page.dump(sys.stdout)
    sys.stdout.write("\n")
    page.select(".vcard").visit(VCardRenderer(sys.stdout))


if __name__ == "__main__":
    main()
