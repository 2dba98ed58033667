"""
partial_templates - Client-Side Templates from Server-Side Partial Views
=======================================================================

A helper for server-rendered web applications that turns partial views into
``<script type="text/template">`` blocks for client-side templating
libraries.

Features
--------
- **Convention over configuration**: every ``*Template.*`` file in a
  directory is picked up automatically
- **Derived ids**: ``MyFirstTemplate`` under the ``Home`` controller becomes
  ``home-my-first-template``
- **Cached listing**: each directory is listed once per process
- **Jinja2 views**: partials are ordinary Jinja2 templates that see the
  request's view data

Example
-------
>>> from partial_templates import EngineConfig, ViewContext, ViewEngine
>>> engine = ViewEngine(EngineConfig(app_root="/srv/app"))
>>> html = engine.helper(ViewContext(controller="Home"))
>>> html.render_all_templates("~/Views/Home")  # doctest: +SKIP
Markup('<script type="text/template" id="home-my-first-template">...</script>')

Architecture
------------
- ``models``: Pydantic models for configuration and request context
- ``naming``: Script tag id derivation
- ``lister``: Cached directory listing
- ``engine``: Jinja2 view engine and partial view lookup
- ``helper``: Script tag wrapping exposed to views as ``html``
- ``cli``: Typer based command line interface
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from partial_templates.engine import ViewEngine
from partial_templates.helper import TemplateHelper, wrap_in_script_tag
from partial_templates.lister import TemplateLister
from partial_templates.models import EngineConfig, ScriptTag, ViewContext
from partial_templates.naming import id_from_partial_view_name, template_id


__all__ = [
    "EngineConfig",
    "ScriptTag",
    "TemplateHelper",
    "TemplateLister",
    "ViewContext",
    "ViewEngine",
    "__version__",
    "id_from_partial_view_name",
    "template_id",
    "wrap_in_script_tag",
]
