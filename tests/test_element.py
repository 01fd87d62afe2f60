import pytest

from tdom_engine.dom import (
    END, Element, NodeSet, Text, attr, element, text,
    OrphanNodeError, ReparentError, TreeInvariantError,
)


def html_of(node):
    return node.to_html()


@pytest.mark.ci
def test_basic_operations():
    html = element("html",
                   element("head",
                           element("link", attr("type", "stylesheet"), attr("href", "a.css"))))
    assert html_of(html) == '<html><head><link type="stylesheet" href="a.css" /></head></html>'

    body = element("body",
                   element("h1", text("Hello, world")),
                   element("div", attr("class", "content")))
    assert html_of(body) == '<body><h1>Hello, world</h1><div class="content"></div></body>'

    body.append(".content", element("div", attr("class", "tile"), text("This is tile 0")))
    assert html_of(body) == ('<body><h1>Hello, world</h1><div class="content">'
                             '<div class="tile">This is tile 0</div></div></body>')

    html.after("head", body)
    assert html_of(html) == ('<html><head><link type="stylesheet" href="a.css" /></head>'
                             '<body><h1>Hello, world</h1><div class="content">'
                             '<div class="tile">This is tile 0</div></div></body></html>')

    with pytest.raises(ReparentError):
        html.append(body)

    html.before(".tile", element("h2", text("Tile header")))
    assert html_of(body) == ('<body><h1>Hello, world</h1><div class="content">'
                             '<h2>Tile header</h2><div class="tile">'
                             'This is tile 0</div></div></body>')

    html.after(".tile", element("h2", attr("class", "footer"), text("a footer")))
    assert html_of(body) == ('<body><h1>Hello, world</h1><div class="content">'
                             '<h2>Tile header</h2><div class="tile">'
                             'This is tile 0</div><h2 class="footer">a footer</h2>'
                             '</div></body>')

    html.before("h2", element("p", attr("class", "prefooter"), text("a pre-footer")))
    assert html_of(body) == ('<body><h1>Hello, world</h1><div class="content">'
                             '<p class="prefooter">a pre-footer</p>'
                             '<h2>Tile header</h2><div class="tile">This is tile 0</div>'
                             '<p class="prefooter">a pre-footer</p>'
                             '<h2 class="footer">a footer</h2></div></body>')

    html.remove("p.prefooter")
    assert html_of(body) == ('<body><h1>Hello, world</h1><div class="content">'
                             '<h2>Tile header</h2><div class="tile">This is tile 0</div>'
                             '<h2 class="footer">a footer</h2></div></body>')

    html.remove("h2")
    assert html_of(body) == ('<body><h1>Hello, world</h1><div class="content">'
                             '<div class="tile">This is tile 0</div></div></body>')

    html.remove(".content")
    assert html_of(body) == '<body><h1>Hello, world</h1></body>'


@pytest.mark.ci
def test_attributes_passed_as_children_go_to_attribute_map():
    div = element("div", text("a"), attr("class", "content"), text("b"))
    assert [child.data for child in div.child_nodes] == ["a", "b"]
    assert div.get_attribute("class") == "content"


def test_constructor_rejects_plain_strings():
    with pytest.raises(TypeError):
        Element("p", "not wrapped")


def test_attribute_names_are_case_insensitive_and_overwrite_in_place():
    node = element("input", attr("Type", "text"), attr("name", "q"))
    node.append(attr("TYPE", "search"))

    assert list(node.attributes) == ["type", "name"]
    assert node.get_attribute("type") == "search"
    assert node.has_attribute("Type")
    assert html_of(node) == '<input TYPE="search" name="q" />'

    node.remove(attr("NAME"))
    assert not node.has_attribute("name")


def test_boolean_attribute_has_no_value():
    node = element("input", attr("disabled"))
    assert node.has_attribute("disabled")
    assert node.get_attribute("disabled") is None
    assert html_of(node) == "<input disabled />"


def test_insert_positions():
    ul = element("ul", element("li", text("b")))
    ul.prepend(element("li", text("a")))
    ul.append(element("li", text("d")))
    ul.insert_at(2, element("li", text("c")))
    ul.insert_at(-1, element("li", text("e")))
    ul.insert_at(END, element("li", text("f")))

    assert [li.text_content for li in ul.children] == ["a", "b", "c", "d", "e", "f"]


@pytest.mark.ci
def test_insert_sets_parent_and_rejects_second_parent():
    first = element("div")
    second = element("div")
    child = element("p")

    first.append(child)
    assert child.parent_node is first

    with pytest.raises(ReparentError, match="<p>"):
        second.append(child)
    with pytest.raises(ValueError):
        second.prepend(child)
    assert child.parent_node is first
    assert second.child_nodes == ()


def test_removed_node_can_be_reparented():
    first = element("div")
    second = element("section")
    child = element("p")
    first.append(child)

    child.remove()
    assert child.parent_node is None
    assert first.child_nodes == ()

    second.append(child)
    assert child.parent_node is second


def test_remove_without_parent_is_a_noop():
    lonely = element("p")
    assert lonely.remove() is lonely
    assert lonely.parent_node is None


def test_remove_child_by_identity():
    shared = text("same")
    twin = text("same")
    p = element("p", shared, twin)
    stranger = element("em")

    p.remove(twin)
    assert len(p.child_nodes) == 1
    assert p.child_nodes[0] is shared

    # Not a child: silently ignored
    p.remove(stranger)
    assert len(p.child_nodes) == 1


def test_remove_node_set_of_children():
    a, b, c = element("a"), element("b"), element("c")
    parent = element("div", a, b, c)

    parent.remove(NodeSet([a, c]))

    assert parent.children == [b]
    assert a.parent_node is None and c.parent_node is None


def test_text_can_be_shared():
    label = text("hi")
    left = element("p", label)
    right = element("p", label)
    assert left.child_nodes[0] is right.child_nodes[0]
    assert label.duplicate() is label


@pytest.mark.ci
def test_before_and_after_siblings():
    middle = element("b")
    parent = element("p", element("a"), middle, element("c"))

    middle.before(element("x"))
    middle.after(element("y"))

    assert [child.tag_name for child in parent.children] == ["a", "x", "b", "y", "c"]


def test_after_last_child_appends():
    last = element("li")
    ul = element("ul", element("li"), last)

    last.after(text("tail"))

    assert ul.child_nodes[-1] == Text("tail")


def test_sibling_operations_need_a_parent():
    orphan = element("div")
    with pytest.raises(OrphanNodeError, match="No parent for <div>"):
        orphan.before(element("p"))
    with pytest.raises(OrphanNodeError):
        orphan.after(element("p"))


def test_corrupted_tree_is_reported():
    parent = element("div")
    child = element("p")
    child._parent_node = parent  # parent never received it

    with pytest.raises(TreeInvariantError):
        child.after(text("x"))


def test_insert_node_set_keeps_relative_order():
    ul = element("ul", element("li", text("first")), element("li", text("last")))
    batch = NodeSet([element("li", text("two")), element("li", text("three"))])

    ul.insert_at(1, batch)

    assert [li.text_content for li in ul.children] == ["first", "two", "three", "last"]
    assert all(li.parent_node is ul for li in ul.children)


def test_inserting_selected_nodes_elsewhere_fails(page):
    target = element("section")
    with pytest.raises(ReparentError):
        target.append(page.select("div"))


@pytest.mark.ci
def test_duplicate_is_independent(page):
    copy = page.duplicate()

    assert copy is not page
    assert copy.parent_node is None
    assert copy.to_html() == page.to_html()

    copy.append("body", element("p", text("only in the copy")))
    copy.select(".content").last().append(attr("id", "main"))

    assert "only in the copy" not in page.to_html()
    assert not page.select(".content").nth(0).has_attribute("id")


def test_duplicate_of_subtree_has_no_parent(page):
    body = page.select("body").nth(0)
    copy = body.duplicate()
    assert copy.parent_node is None
    page.append(copy)
    assert len(page.select("body")) == 2


def test_text_content_concatenates_descendants():
    node = element("p", text("a "), element("b", text("bold")), text(" c"))
    assert node.text_content == "a bold c"


def test_id_and_class_name_accessors():
    node = element("div", attr("id", "main"), attr("class", "a b"))
    assert node.id == "main"
    assert node.class_name == "a b"
    assert element("div").id == ""


def test_mutations_chain(page):
    result = (page
              .append("body", element("footer"))
              .prepend("body", element("header")))
    assert result is page
    assert [child.tag_name for child in page.select("body").nth(0).children] == ["header", "div", "footer"]


def test_inserting_an_ancestor_is_rejected():
    root = element("div", element("p", element("span")))
    span = root.select("span").nth(0)

    with pytest.raises(TreeInvariantError, match="own subtree"):
        span.append(root)
    with pytest.raises(TreeInvariantError):
        root.append(NodeSet([root]))

    assert root.parent_node is None
    assert span.child_nodes == ()
    assert html_of(root) == "<div><p><span /></p></div>"


def test_has_child_nodes_and_attribute_values():
    empty = element("br", attr("hidden"), attr("title", ""))

    assert not empty.has_child_nodes()
    assert element("p", text("")).has_child_nodes()
    assert not empty.get_attribute_node("hidden").has_value
    assert empty.get_attribute_node("title").has_value
    assert html_of(empty) == '<br hidden title="" />'
