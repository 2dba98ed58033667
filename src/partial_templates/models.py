"""
partial_templates.models - Pydantic Models for Engine Configuration
===================================================================

This module defines the data models shared by the view engine, the template
helper and the CLI. Pydantic gives us validation of user supplied settings
(from code, ``pyproject.toml`` or command-line flags) with clear error
messages.

Architecture Notes
------------------
    EngineConfig (application wide, one per ViewEngine)
    ├── app_root: Path
    ├── views_dir / shared_dir: str
    ├── pattern: str
    ├── view_extensions: list[str]
    └── separator: str

    ViewContext (one per request)
    ├── controller: str
    ├── view_data: dict
    └── temp_data: dict

    ScriptTag
    ├── id: str
    └── markup: str

Usage Example
-------------
>>> from partial_templates.models import EngineConfig, ViewContext
>>> config = EngineConfig(app_root="/srv/app")
>>> config.map_path("~/Views/Home")
PosixPath('/srv/app/Views/Home')
>>> ViewContext(controller="Home", view_data={"name": "Ada"}).controller
'Home'
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any

import tomlkit
from pydantic import BaseModel, Field, field_validator


# =============================================================================
# Constants
# =============================================================================

# Glob used to discover client-side templates in a directory
DEFAULT_PATTERN = "*Template.*"

# Extensions tried, in order, when a partial view is looked up by name
DEFAULT_VIEW_EXTENSIONS = [".html", ".jinja", ".j2"]

# Table read from the application's pyproject.toml
PYPROJECT_TABLE = "partial-templates"

SCRIPT_TAG_FORMAT = '<script type="text/template" id="{id}">{markup}</script>'


# =============================================================================
# Engine Configuration
# =============================================================================

class EngineConfig(BaseModel):
    """
    Application-wide settings for the view engine.

    Attributes
    ----------
    app_root : Path
        Physical root of the web application. Logical paths such as
        ``~/Views/Home`` are mapped relative to it.

    views_dir : str
        Directory (relative to ``app_root``) holding one folder of views per
        controller.

    shared_dir : str
        Folder inside ``views_dir`` searched when a controller folder does
        not contain the requested partial.

    pattern : str
        Glob selecting client-side template files in a directory.

    view_extensions : list[str]
        File extensions tried when a partial view is located by name.

    separator : str
        String placed between script tags by ``render_all_templates``.

    Examples
    --------
    >>> EngineConfig(view_extensions=["HTML", ".J2"]).view_extensions
    ['.html', '.j2']
    """

    app_root: Path = Field(
        default_factory=Path.cwd,
        description="Physical root of the web application",
    )
    views_dir: str = Field(
        default="Views",
        description="Directory holding the controller view folders",
        min_length=1,
    )
    shared_dir: str = Field(
        default="Shared",
        description="Fallback folder for partial views",
        min_length=1,
    )
    pattern: str = Field(
        default=DEFAULT_PATTERN,
        description="Glob selecting template files",
        min_length=1,
    )
    view_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_VIEW_EXTENSIONS),
        description="Extensions tried when locating a partial view",
        min_length=1,
    )
    separator: str = Field(
        default="\n",
        description="Separator placed between rendered script tags",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------

    @field_validator("view_extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """
        Normalize extensions to lowercase with a leading dot.

        Raises
        ------
        ValueError
            If an extension is empty.
        """
        normalized: list[str] = []
        for ext in v:
            ext = ext.strip().lower()
            if ext in {"", "."}:
                msg = "View extensions cannot be empty."
                raise ValueError(msg)
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        return normalized

    @field_validator("views_dir", "shared_dir")
    @classmethod
    def validate_folder_name(cls, v: str) -> str:
        v = v.strip().strip("/")
        if not v or ".." in PurePosixPath(v).parts:
            msg = f"Invalid view folder '{v}'."
            raise ValueError(msg)
        return v

    # -------------------------------------------------------------------------
    # Path Mapping
    # -------------------------------------------------------------------------

    def map_path(self, directory: str) -> Path:
        """
        Map a logical application path to a physical path.

        ``~/Views/Home``, ``/Views/Home`` and ``Views/Home`` all resolve to
        ``app_root/Views/Home``. Backslashes are accepted as separators.

        Parameters
        ----------
        directory : str
            Logical path of a file or directory inside the application.

        Returns
        -------
        Path
            Absolute physical path.

        Raises
        ------
        ValueError
            If the path points outside of ``app_root``.
        """
        logical = directory.strip().replace("\\", "/")
        if logical.startswith("~"):
            logical = logical[1:]
        relative = PurePosixPath(logical.lstrip("/"))

        root = self.app_root.resolve()
        physical = (root / relative).resolve()
        if not physical.is_relative_to(root):
            msg = f"'{directory}' is outside of the application root {root}."
            raise ValueError(msg)
        return physical

    @property
    def views_path(self) -> Path:
        """Physical path of the views directory."""
        return self.app_root / self.views_dir

    # -------------------------------------------------------------------------
    # Serialization Methods
    # -------------------------------------------------------------------------

    @classmethod
    def from_pyproject(cls, app_root: Path, **overrides: Any) -> EngineConfig:
        """
        Load settings from ``[tool.partial-templates]`` in pyproject.toml.

        A missing file or table gives the defaults. Keyword arguments that
        are not None override values read from the file.

        Parameters
        ----------
        app_root : Path
            Application root; ``pyproject.toml`` is read from here.

        Returns
        -------
        EngineConfig
            Validated configuration object.

        Raises
        ------
        ValidationError
            If the table holds invalid values.
        tomlkit.exceptions.ParseError
            If pyproject.toml is not valid TOML.
        """
        data: dict[str, Any] = {}
        pyproject = Path(app_root) / "pyproject.toml"
        if pyproject.is_file():
            doc = tomlkit.parse(pyproject.read_text(encoding="utf-8"))
            table = doc.unwrap().get("tool", {}).get(PYPROJECT_TABLE, {})
            data.update({key.replace("-", "_"): value for key, value in table.items()})

        data.update({key: value for key, value in overrides.items() if value is not None})
        data["app_root"] = Path(app_root)
        return cls(**data)


# =============================================================================
# Per-Request Context
# =============================================================================

class ViewContext(BaseModel):
    """
    Values a controller action hands to the views it renders.

    Attributes
    ----------
    controller : str
        Name of the controller handling the request (route value). It picks
        the view folder and prefixes template ids.

    view_data : dict
        The view bag. Keys are also exposed as top-level template variables.

    temp_data : dict
        Data that survives a single redirect.
    """

    controller: str = Field(
        description="Controller route value",
        min_length=1,
    )
    view_data: dict[str, Any] = Field(default_factory=dict)
    temp_data: dict[str, Any] = Field(default_factory=dict)

    @field_validator("controller")
    @classmethod
    def validate_controller(cls, v: str) -> str:
        v = v.strip()
        if not v or "/" in v or "\\" in v or v.startswith("."):
            msg = f"Invalid controller name '{v}'."
            raise ValueError(msg)
        return v

    def to_template_context(self) -> dict[str, Any]:
        """Build the Jinja2 render context for a view or partial."""
        return {
            **self.view_data,
            "view_bag": self.view_data,
            "view_data": self.view_data,
            "temp_data": self.temp_data,
            "controller": self.controller,
        }


# =============================================================================
# Output
# =============================================================================

class ScriptTag(BaseModel):
    """A rendered template wrapped for client-side templating libraries."""

    id: str
    markup: str

    def render(self) -> str:
        """
        Format the tag. Neither the id nor the markup is escaped.

        >>> ScriptTag(id="home-template", markup="<b>hi</b>").render()
        '<script type="text/template" id="home-template"><b>hi</b></script>'
        """
        return SCRIPT_TAG_FORMAT.format(id=self.id, markup=self.markup)
