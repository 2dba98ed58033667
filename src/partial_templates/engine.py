"""
partial_templates.engine - Jinja2 View Engine
=============================================

This module is the view-rendering pipeline the template helper delegates to.
It owns the Jinja2 environment for a web application, locates partial views
by name the way an MVC framework does, and renders them with the view data
of the current request.

View Lookup
-----------
A plain name such as ``MyFirstTemplate`` is searched for in:

    1. <views_dir>/<controller>/MyFirstTemplate<ext>
    2. <views_dir>/<shared_dir>/MyFirstTemplate<ext>

trying every configured extension at each location. A name that looks like a
path (``~/Views/Home/Index.html``, ``Views/Home/Index``) is mapped relative to
the application root instead. If nothing matches, ``jinja2.TemplatesNotFound``
lists every location that was searched.

Render Context
--------------
Every view receives the keys of the view bag as top-level variables, plus:

    - view_bag / view_data: the view bag itself
    - temp_data: the temp data dict
    - controller: the controller route value
    - html: a TemplateHelper bound to this engine and request

Usage Example
-------------
>>> from partial_templates.engine import ViewEngine
>>> from partial_templates.models import EngineConfig, ViewContext
>>> engine = ViewEngine(EngineConfig(app_root="/srv/app"))
>>> context = ViewContext(controller="Home", view_data={"name": "Ada"})
>>> engine.render_partial("Index", context)  # doctest: +SKIP
'<h1>Hello Ada</h1>...'
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from partial_templates.helper import TemplateHelper
from partial_templates.lister import TemplateLister
from partial_templates.models import EngineConfig, ViewContext
from partial_templates.naming import id_from_partial_view_name


logger = logging.getLogger(__name__)


# =============================================================================
# Template Engine Setup
# =============================================================================


def create_jinja_env(config: EngineConfig) -> Environment:
    """
    Create and configure the Jinja2 environment for an application.

    The environment is configured with:
    - File system loading rooted at the application root
    - Autoescaping for HTML views (helper output is ``Markup`` and is
      inserted untouched)
    - Trailing newlines preserved so partials render byte for byte

    Parameters
    ----------
    config : EngineConfig
        Application settings.

    Returns
    -------
    Environment
        Configured Jinja2 environment.
    """
    extensions = [ext.lstrip(".") for ext in config.view_extensions]
    env = Environment(
        loader=FileSystemLoader(config.app_root),
        autoescape=select_autoescape(
            enabled_extensions=("html", "htm", *extensions),
            default_for_string=True,
        ),
        keep_trailing_newline=True,
    )

    env.filters["kebab_id"] = id_from_partial_view_name

    return env


# =============================================================================
# View Engine
# =============================================================================


class ViewEngine:
    """
    Application-wide view engine.

    One engine is created at application start-up and shared by every
    request. It holds the Jinja2 environment and the template listing cache.

    Parameters
    ----------
    config : EngineConfig
        Application settings.

    Attributes
    ----------
    env : Environment
        The Jinja2 environment views are loaded from.

    lister : TemplateLister
        Directory listing cache used by ``render_all_templates``.
    """

    def __init__(self, config: EngineConfig) -> None:
        self.config = config
        self.env = create_jinja_env(config)
        self.lister = TemplateLister(config)

    def view_locations(self, controller: str, name: str) -> list[str]:
        """
        Loader names searched, in order, for a view.

        Parameters
        ----------
        controller : str
            Controller whose view folder is searched first.

        name : str
            View name or logical path.

        Returns
        -------
        list[str]
            Template names relative to the application root.
        """
        extensions = self.config.view_extensions

        if name.startswith(("~", "/")) or "/" in name or "\\" in name:
            root = self.config.app_root.resolve()
            base = self.config.map_path(name).relative_to(root).as_posix()
            if PurePosixPath(base).suffix.lower() in extensions:
                return [base]
            return [base] + [f"{base}{ext}" for ext in extensions]

        folders = [
            f"{self.config.views_dir}/{controller}",
            f"{self.config.views_dir}/{self.config.shared_dir}",
        ]
        return [f"{folder}/{name}{ext}" for folder in folders for ext in extensions]

    def find_partial_view(self, controller: str, name: str) -> Template:
        """
        Locate a partial view.

        Raises
        ------
        jinja2.TemplatesNotFound
            If no candidate location holds the view; the message lists every
            location searched.
        jinja2.TemplateSyntaxError
            If the view was found but does not compile.
        """
        template = self.env.select_template(self.view_locations(controller, name))
        logger.debug("Resolved view %r for %s to %s", name, controller, template.name)
        return template

    def helper(self, context: ViewContext) -> TemplateHelper:
        """Template helper bound to this engine and request."""
        return TemplateHelper(self, context)

    def render_partial(self, name: str, context: ViewContext) -> str:
        """
        Render a view to a string.

        Parameters
        ----------
        name : str
            View name or logical path.

        context : ViewContext
            Controller, view data and temp data of the current request.

        Returns
        -------
        str
            The rendered markup.
        """
        template = self.find_partial_view(context.controller, name)
        variables = context.to_template_context()
        variables["html"] = self.helper(context)
        return template.render(variables)
