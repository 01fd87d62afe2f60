import pytest

from tdom_engine.dom import attr, element, text
from tdom_engine.utils import config_manager
from tdom_engine.utils.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Give every test its own in-memory default configuration."""
    config = ConfigManager()
    monkeypatch.setattr(config_manager, "_default_config", config)
    return config


@pytest.fixture
def page():
    return element("html",
                   element("head", element("title", text("A title"))),
                   element("body",
                           element("div", attr("class", "content"), text("Hello, world."))))


@pytest.fixture
def links():
    return element("body",
                   element("a", attr("href", "x"), text("exact")),
                   element("a", attr("href", "y"), text("other")),
                   element("a", attr("name", "anchor")),
                   element("span", attr("class", "footer copyright small"), text("(c)")),
                   element("span", attr("class", "copyrighted"), text("tm")))
