# Sphinx configuration for the pixclass-ui API reference.

import sys
from pathlib import Path

# Add src to path for autodoc
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

project = "pixclass-ui"
copyright = "2025, pixclass-ui developers"
author = "pixclass-ui developers"
release = "0.1.0"

extensions = [
    "myst_parser",  # index.md
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",  # NumPy docstrings
    "sphinx.ext.intersphinx",  # Python and Qt links
]

exclude_patterns = ["_build"]

html_theme = "pydata_sphinx_theme"

napoleon_google_docstring = False
napoleon_numpy_docstring = True

autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
}
autodoc_typehints = "description"
autosummary_generate = True

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "PySide6": ("https://doc.qt.io/qtforpython-6/", None),
}
