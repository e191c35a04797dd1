"""
pixclass-ui: Pixel Classifier Controls
======================================

pixclass-ui provides the PySide6 controls used alongside a pixel classifier
in a bio-image analysis application. Once a classifier has been trained and
saved in a project, the controls let the user:

1. **Preview**: choose where live classification is computed (everywhere,
   inside any objects, or inside annotations only)
2. **Create objects**: turn classified regions into annotations or
   detections inside chosen parent objects
3. **Measure**: add classification area measurements to chosen objects
4. **Classify**: set detection classes from the prediction at each centroid
5. **Save**: store the classifier in the project under a name

Each command that completes is logged to the image's workflow history as a
line of script, so an interactive session can be replayed later.

The classification itself is not part of this package: the host application
supplies a ``ClassifierTools`` implementation (see :mod:`pxc_ui.core.tools`).

Quick Start
-----------
>>> from pathlib import Path
>>> from PySide6.QtWidgets import QApplication
>>> from pxc_ui.core import ImageData, Project
>>> from pxc_ui.ui import MainWindow
>>>
>>> app = QApplication([])
>>> window = MainWindow(tools)
>>> window.session.project = Project(Path("my_project"))
>>> window.session.image_data = ImageData("slide_01.svs")
>>> window.session.classifier = classifier
>>> window.show()

Main Modules
------------
core
    Object model, selection scopes, commands, history and project storage
ui
    PySide6 widgets and dialogs
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
