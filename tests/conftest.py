"""
pytest configuration and shared fixtures for partial_templates tests.

Fixtures defined here are automatically available to all tests.

Fixtures
--------
app_root : Path
    A sample web application with Home and Shared view folders.

config : EngineConfig
    Engine settings rooted at ``app_root``.

engine : ViewEngine
    A fresh view engine (and therefore an empty listing cache) per test.

home_context : ViewContext
    Request context for the Home controller with a ``name`` in the view bag.
"""

import pytest
from pathlib import Path

from partial_templates.engine import ViewEngine
from partial_templates.models import EngineConfig, ViewContext


INDEX_VIEW = (
    '<h1>Hello {{ name }}</h1>\n'
    '{{ html.render_all_templates("~/Views/Home") }}'
)


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """
    Create a sample application tree.

    Layout
    ------
        webapp/
        └── Views/
            ├── Home/
            │   ├── Index.html
            │   ├── MyFirstTemplate.html
            │   ├── SecondTemplate.html
            │   └── notes.txt
            └── Shared/
                ├── Layout.html
                └── FooterTemplate.html

    Files are written without trailing newlines so rendered output can be
    compared exactly.
    """
    root = tmp_path / "webapp"
    home = root / "Views" / "Home"
    shared = root / "Views" / "Shared"
    home.mkdir(parents=True)
    shared.mkdir(parents=True)

    (home / "Index.html").write_text(INDEX_VIEW, encoding="utf-8")
    (home / "MyFirstTemplate.html").write_text("<p><%= title %></p>", encoding="utf-8")
    (home / "SecondTemplate.html").write_text("<li>{{ view_bag.name }}</li>", encoding="utf-8")
    (home / "notes.txt").write_text("not a template", encoding="utf-8")

    (shared / "Layout.html").write_text("<main>{{ controller }}</main>", encoding="utf-8")
    (shared / "FooterTemplate.html").write_text("<footer></footer>", encoding="utf-8")

    return root


@pytest.fixture
def config(app_root: Path) -> EngineConfig:
    """Engine settings for the sample application."""
    return EngineConfig(app_root=app_root)


@pytest.fixture
def engine(config: EngineConfig) -> ViewEngine:
    """A view engine with an empty listing cache."""
    return ViewEngine(config)


@pytest.fixture
def home_context() -> ViewContext:
    """Request context for HomeController.Index(name="Ada")."""
    return ViewContext(controller="Home", view_data={"name": "Ada"})
