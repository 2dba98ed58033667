"""
partial_templates.lister - Cached Template Directory Listing
============================================================

Listing a directory on every page render is wasteful: the set of template
files only changes on deploy. ``TemplateLister`` lists a directory once and
keeps the ordered base names for the lifetime of the lister (normally the
lifetime of the process, since the view engine owns it).

Concurrency
-----------
The cache is a plain dict shared by every request. Two requests that miss
the cache at the same time both list the directory; ``dict.setdefault``
keeps the first stored value and both callers return it. The values are
equal, so the duplicate work is harmless and no lock is taken.

Ordering
--------
Names are returned sorted by file name, which keeps the rendered output
stable across filesystems.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from partial_templates.models import EngineConfig


if TYPE_CHECKING:
    from pathlib import Path


logger = logging.getLogger(__name__)


class TemplateLister:
    """
    Lists template files in logical directories and caches the result.

    Parameters
    ----------
    config : EngineConfig
        Supplies the application root used to map logical paths and the
        glob pattern selecting template files.

    Examples
    --------
    >>> lister = TemplateLister(EngineConfig(app_root="/srv/app"))
    >>> lister.list_templates("~/Views/Home")  # doctest: +SKIP
    ('MyFirstTemplate', 'SecondTemplate')
    """

    def __init__(self, config: EngineConfig) -> None:
        self.config = config
        self._cache: dict[str, tuple[str, ...]] = {}

    def list_templates(self, directory: str) -> tuple[str, ...]:
        """
        Return the template base names found in ``directory``.

        Parameters
        ----------
        directory : str
            Logical directory, e.g. ``"~/Views/Home"``. It is also the cache
            key, so different spellings of the same folder are cached
            separately.

        Returns
        -------
        tuple[str, ...]
            File names without their last extension, sorted.

        Raises
        ------
        FileNotFoundError
            If the directory does not exist.
        NotADirectoryError
            If the path exists but is not a directory.
        ValueError
            If the path points outside of the application root.
        """
        names = self._cache.get(directory)
        if names is not None:
            logger.debug("Template list cache hit for %s", directory)
            return names

        physical_path = self.config.map_path(directory)
        names = self._scan(physical_path)
        logger.debug(
            "Listed %d template(s) in %s (%s)", len(names), directory, physical_path
        )
        return self._cache.setdefault(directory, names)

    def _scan(self, physical_path: Path) -> tuple[str, ...]:
        if not physical_path.exists():
            msg = f"Could not find a part of the path '{physical_path}'."
            raise FileNotFoundError(msg)
        if not physical_path.is_dir():
            msg = f"'{physical_path}' is not a directory."
            raise NotADirectoryError(msg)

        files = sorted(
            (p for p in physical_path.glob(self.config.pattern) if p.is_file()),
            key=lambda p: p.name,
        )
        return tuple(p.stem for p in files)

    def is_cached(self, directory: str) -> bool:
        """Whether ``directory`` has already been listed."""
        return directory in self._cache

    def clear(self, directory: str | None = None) -> None:
        """
        Forget cached listings.

        Parameters
        ----------
        directory : str | None
            Drop only this entry; drop everything when None.
        """
        if directory is None:
            self._cache.clear()
        else:
            self._cache.pop(directory, None)
