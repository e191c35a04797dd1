#!/usr/bin/env python
"""
pixclass-ui GUI Application Entry Point.

This script launches the pixel classifier controls for a project directory.
The classification itself is provided by the host application through a
``ClassifierTools`` implementation, named with ``--tools module:attribute``.
"""

import argparse
import importlib
import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent.parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from PySide6.QtWidgets import QApplication  # noqa: E402
from pxc_ui.core import config, Project  # noqa: E402
from pxc_ui.ui.main_window import MainWindow  # noqa: E402


def load_tools(target):
    """
    Import a ClassifierTools implementation from ``module:attribute``.

    A class is instantiated without arguments; any other object is used as is.
    """
    module_name, _, attr = target.partition(":")
    if not attr:
        raise ValueError(f"Expected 'module:attribute', got {target!r}")
    obj = getattr(importlib.import_module(module_name), attr)
    return obj() if isinstance(obj, type) else obj


def main(argv=None):
    """
    Launch the pixclass-ui GUI application.

    Returns
    -------
    int
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="Pixel classifier controls")
    parser.add_argument("project", nargs="?", type=Path, help="Project directory")
    parser.add_argument(
        "--tools", required=True, help="ClassifierTools implementation as module:attribute"
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    args = parser.parse_args(argv)

    config.configure_logging(args.log_level)
    try:
        tools = load_tools(args.tools)
    except (ImportError, AttributeError, ValueError) as e:
        parser.error(f"--tools: {e}")

    # Create application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(config.APP_NAME)

    # Set application style
    app.setStyle("Fusion")

    window = MainWindow(tools)
    if args.project is not None:
        window.session.project = Project(args.project)

    window.show()

    # Start event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
