import io
import json

import pytest

from tdom_engine import main as demo
from tdom_engine.examples import hello_world, rendering_example


@pytest.mark.ci
def test_hello_world_page():
    assert hello_world.build_page().to_html() == (
        '<html><head><title>A title</title></head><body>'
        '<h1>My title</h1>'
        '<div class="content">Hello, world.</div><hr />'
        '<div>Goodbye, world.</div><hr />'
        '<div class="footer">a footer</div>'
        "that's all folks!"
        '</body></html>')


def test_vcard_rendering():
    page = rendering_example.build_page()
    sink = io.StringIO()

    page.select(".vcard").visit(rendering_example.VCardRenderer(sink))

    assert sink.getvalue() == (
        "BEGIN:VCARD\n"
        "VERSION:4.0\n"
        "PHOTO:http://example.com/bob.jpg\n"
        "FN:Bob Smith\n"
        "TITLE:Senior editor\n"
        "ORG:ACME Reviews\n"
        "END:VCARD\n")


def test_vcard_page_html():
    html = rendering_example.build_page().to_html()
    assert '<img class="photo" src="http://example.com/bob.jpg" />' in html
    assert html.endswith("<h3>This is a footer</h3></body></html>")


def test_demo_renders_html(capsys):
    assert demo.main(["hello"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("<html><head><title>A title</title></head>")


def test_demo_renders_json(capsys):
    assert demo.main(["vcard", "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["tag"] == "html"


def test_demo_reports_failures(monkeypatch, caplog):
    def broken():
        raise RuntimeError("boom")

    monkeypatch.setitem(demo.EXAMPLES, "hello", broken)
    assert demo.main(["hello"]) == 1
    assert "Failed to render example 'hello': boom" in caplog.text
