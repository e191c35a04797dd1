"""
Project Classifier Storage
==========================

This module provides the project-level store for saved pixel classifiers.
A project is a directory; each saved pixel classifier is written to its own
JSON file named after the classifier.

Classes
-------
ClassifierStore
    Name-keyed collection of classifiers saved in one directory
Project
    A project directory and its classifier store

Notes
-----
Folder structure::

    <project>/classifiers/pixel_classifiers/<name>.json

Names are expected to be valid file names already; see
:func:`pxc_ui.core.naming.strip_invalid_filename_chars`.

Examples
--------
>>> from pathlib import Path
>>> from pxc_ui.core.project import Project
>>> project = Project(Path("/data/my_project"))
>>> store = project.pixel_classifiers
>>> store.put("tumor-v2", classifier)
>>> "tumor-v2" in store
True
>>> store.names()
['tumor-v2']

See Also
--------
pxc_ui.core.commands.try_to_save : Validates names and prompts before saving
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)


class ClassifierStore:
    """
    Directory-backed store of classifiers keyed by name.

    Parameters
    ----------
    directory : Path
        Directory holding one ``<name>.json`` file per classifier. It is
        created on the first :meth:`put`.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}{config.CLASSIFIER_SUFFIX}"

    def names(self) -> list[str]:
        """Return the names of all stored classifiers, sorted."""
        if not self.directory.is_dir():
            return []
        return sorted(p.stem for p in self.directory.glob(f"*{config.CLASSIFIER_SUFFIX}"))

    def contains(self, name: str) -> bool:
        return self._path(name).is_file()

    def __contains__(self, name):
        return self.contains(name)

    def put(self, name: str, classifier) -> None:
        """
        Save ``classifier`` under ``name``, replacing any existing entry.

        Parameters
        ----------
        name : str
            Classifier name, used as the file name
        classifier : PixelClassifier
            Classifier to save; serialized via its ``to_dict()`` method

        Raises
        ------
        OSError
            If the classifier file cannot be written
        TypeError, ValueError
            If ``to_dict()`` does not return JSON-serializable data

        Notes
        -----
        The file is written to a temporary sibling and moved into place, so a
        failed save leaves any existing classifier of the same name intact.
        """
        text = json.dumps(classifier.to_dict(), indent=2)
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._path(name)
        fd, tmp = tempfile.mkstemp(dir=self.directory, prefix=f".{name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                f.write(text)
            os.replace(tmp, path)
        except Exception:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.info("Pixel classifier '%s' written to %s", name, path)

    def get(self, name: str) -> dict:
        """
        Load the serialized form of a stored classifier.

        Raises
        ------
        KeyError
            If no classifier is stored under ``name``
        """
        path = self._path(name)
        if not path.is_file():
            raise KeyError(name)
        with open(path) as f:
            return json.load(f)


class Project:
    """
    A project directory.

    Parameters
    ----------
    root : Path
        Project directory

    Attributes
    ----------
    root : Path
        Project directory
    pixel_classifiers : ClassifierStore
        Store for saved pixel classifiers
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        self.pixel_classifiers = ClassifierStore(self.root / config.PIXEL_CLASSIFIERS_DIR)

    @property
    def name(self) -> str:
        return self.root.name
