import io
import json

import pytest

from tdom_engine.dom import NodeSet, attr, element, text
from tdom_engine.rendering import DomVisitor, HTMLRenderer, JSONRenderer, escape


@pytest.mark.ci
def test_escape_text_and_attribute_values():
    assert escape('a < b & c > "d"') == 'a &lt; b &amp; c &gt; "d"'
    assert escape('say "hi"', quote=True) == 'say &quot;hi&quot;'
    assert escape("café ☃") == "caf&#233; &#9731;"
    assert escape("\x7f") == "&#127;"
    assert escape("line\nbreak") == "line\nbreak"


def test_escaping_in_rendered_tree():
    node = element("p", attr("title", 'a "quoted" <value>'), text("1 < 2 & 3"))
    assert node.to_html() == '<p title="a &quot;quoted&quot; &lt;value&gt;">1 &lt; 2 &amp; 3</p>'


@pytest.mark.ci
def test_self_closing_rules():
    assert element("br").to_html() == "<br />"
    assert element("div").to_html() == "<div></div>"
    assert element("a", attr("name", "top")).to_html() == '<a name="top"></a>'
    assert element("script", attr("src", "app.js")).to_html() == '<script src="app.js"></script>'


def test_never_self_close_override():
    node = element("root", element("div"), element("textarea"))
    assert node.to_html(never_self_close={"textarea"}) == "<root><div /><textarea></textarea></root>"


def test_never_self_close_from_configuration(default_config):
    default_config.set("rendering", "never_self_close", ["span"])
    node = element("p", element("span"), element("div"))
    assert node.to_html() == "<p><span></span><div /></p>"


def test_dump_writes_to_sink(page):
    sink = io.StringIO()
    page.dump(sink)
    assert sink.getvalue() == ('<html><head><title>A title</title></head>'
                               '<body><div class="content">Hello, world.</div></body></html>')


def test_renderer_can_be_used_directly():
    sink = io.StringIO()
    renderer = HTMLRenderer(sink, never_self_close=())
    NodeSet([element("div"), element("hr")]).visit(renderer)
    assert sink.getvalue() == "<div /><hr />"


def test_leaf_nodes_render_on_their_own():
    assert text("x & y").to_html() == "x &amp; y"
    assert attr("href", "/a?b=1&c=2").to_html() == 'href="/a?b=1&amp;c=2"'
    assert attr("hidden").to_html() == "hidden"
    assert str(element("b", text("bold"))) == "<b>bold</b>"


@pytest.mark.ci
def test_duplicate_renders_identically(page):
    page.append("body", element("input", attr("disabled"), attr("value", "ü")))
    assert page.duplicate().to_html() == page.to_html()


def test_json_rendering(page):
    data = json.loads(page.to_json())

    assert data["tag"] == "html"
    body = data["children"][1]
    assert body == {
        "tag": "body",
        "attributes": {},
        "children": [
            {"tag": "div", "attributes": {"class": "content"}, "children": ["Hello, world."]},
        ],
    }


def test_json_rendering_of_node_set_and_boolean_attribute():
    nodes = NodeSet([element("input", attr("disabled")), element("br")])
    renderer = JSONRenderer()
    nodes.visit(renderer)

    assert renderer.data == [
        {"tag": "input", "attributes": {"disabled": None}, "children": []},
        {"tag": "br", "attributes": {}, "children": []},
    ]

    sink = io.StringIO()
    renderer.dump(sink)
    assert json.loads(sink.getvalue()) == renderer.data


class TagCounter(DomVisitor):
    """Counts elements without descending into <skip> subtrees."""

    def __init__(self):
        self.count = 0

    def visit_text(self, text_node):
        pass

    def visit_attr(self, attr_node):
        pass

    def visit_element(self, node):
        self.count += 1
        if node.tag_name == "skip":
            return
        for child in node.child_nodes:
            child.visit(self)


def test_custom_visitor_controls_recursion():
    tree = element("root",
                   element("a", element("b")),
                   element("skip", element("c"), element("d")))
    counter = TagCounter()
    tree.visit(counter)
    assert counter.count == 4


def test_visitor_base_requires_callbacks():
    with pytest.raises(NotImplementedError):
        element("p").visit(DomVisitor())
