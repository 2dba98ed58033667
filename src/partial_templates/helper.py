"""
partial_templates.helper - Script Tag Template Helper
=====================================================

Client-side templating libraries (Underscore, Handlebars, Knockout, ...)
read their markup from non-executing ``<script type="text/template">``
blocks. ``TemplateHelper`` renders partial views on the server and wraps
them in such blocks, so the templates can be authored as ordinary views.

Views reach the helper as ``html``:

    {{ html.render_template("greeting", "GreetingTemplate") }}
    {{ html.render_all_templates("~/Views/Home") }}

``render_all_templates`` picks up every ``*Template.*`` file in the
directory, so adding a template never requires touching the layout.
Ids are derived from file names with the controller as prefix:
``Views/Home/MyFirstTemplate.html`` becomes ``home-my-first-template``.

Errors are not caught here: a missing directory or partial view propagates
to the caller and no partial output is produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from markupsafe import Markup

from partial_templates import naming
from partial_templates.models import ScriptTag, ViewContext


if TYPE_CHECKING:
    from partial_templates.engine import ViewEngine


def wrap_in_script_tag(template_id: str, markup: str) -> str:
    """
    Wrap rendered markup in a client-side template tag.

    Neither argument is escaped: the markup has already been rendered by
    the view engine and must reach the browser unchanged.

    Examples
    --------
    >>> wrap_in_script_tag("home-template", "<p>{{ name }}</p>")
    '<script type="text/template" id="home-template"><p>{{ name }}</p></script>'
    """
    return ScriptTag(id=template_id, markup=markup).render()


class TemplateHelper:
    """
    Per-request helper exposed to views.

    Parameters
    ----------
    engine : ViewEngine
        Engine used to locate and render partial views. Its lister holds the
        directory cache shared by all requests.

    context : ViewContext
        Controller, view data and temp data of the current request.
    """

    def __init__(self, engine: ViewEngine, context: ViewContext) -> None:
        self.engine = engine
        self.context = context

    def render_template(self, template_id: str, partial_view_name: str) -> Markup:
        """
        Render one partial view wrapped in a script tag.

        Parameters
        ----------
        template_id : str
            Id of the script tag, used as given.

        partial_view_name : str
            Name or logical path of the partial view.

        Returns
        -------
        Markup
            The tag, marked safe for autoescaping templates.

        Raises
        ------
        jinja2.TemplatesNotFound
            If the partial view cannot be located.
        """
        return Markup(self._render_template_to_string(template_id, partial_view_name))

    def render_all_templates(self, directory: str) -> Markup:
        """
        Render every template file in ``directory`` as a script tag.

        The directory is listed once per engine and cached. Tags are joined
        with the configured separator (a newline by default) in listing
        order.

        Parameters
        ----------
        directory : str
            Logical directory, e.g. ``"~/Views/Home"``.

        Returns
        -------
        Markup
            The joined tags; empty when the directory holds no templates.

        Raises
        ------
        FileNotFoundError
            If the directory does not exist.
        jinja2.TemplatesNotFound
            If a listed template cannot be located as a partial view.
        """
        names = self.engine.lister.list_templates(directory)
        controller = self.context.controller

        tags = [
            self._render_template_to_string(naming.template_id(controller, name), name)
            for name in names
        ]
        return Markup(self.engine.config.separator.join(tags))

    def _render_template_to_string(self, template_id: str, partial_view_name: str) -> str:
        markup = self.engine.render_partial(partial_view_name, self.context)
        return wrap_in_script_tag(template_id, markup)

    def __repr__(self) -> str:
        return f"TemplateHelper(controller={self.context.controller!r})"
