"""
partial_templates.naming - Script Tag Id Derivation
===================================================

Template file names are assumed to be camelCase or PascalCase. The id of the
script tag that wraps a template is derived from that name by inserting a
hyphen before every uppercase letter (except the first character) and
lowercasing everything:

    MyFirstTemplate -> my-first-template
    Template        -> template
    HTMLPage        -> h-t-m-l-page

Acronyms and digits get no special treatment, so each letter of an uppercase
run gets its own hyphen. Client-side code already looks templates up by these
ids, so the behaviour is kept as is.
"""

from __future__ import annotations


def id_from_partial_view_name(name: str) -> str:
    """
    Convert a partial view name to a kebab-case element id.

    Parameters
    ----------
    name : str
        Template base name, e.g. ``"MyFirstTemplate"``.

    Returns
    -------
    str
        The lowercase, hyphen-separated id.

    Examples
    --------
    >>> id_from_partial_view_name("MyFirstTemplate")
    'my-first-template'
    >>> id_from_partial_view_name("HTMLPage")
    'h-t-m-l-page'
    """
    return "".join(
        f"-{char.lower()}" if index > 0 and char.isupper() else char.lower()
        for index, char in enumerate(name)
    )


def id_prefix(controller: str) -> str:
    """Lowercased ``<controller>-`` prefix shared by a controller's templates."""
    return f"{controller}-".lower()


def template_id(controller: str, name: str) -> str:
    """
    Full script tag id for a template rendered under ``controller``.

    >>> template_id("Home", "MyFirstTemplate")
    'home-my-first-template'
    """
    return id_prefix(controller) + id_from_partial_view_name(name)
