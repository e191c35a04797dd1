"""
UI Components for pixclass-ui
=============================

This module provides the PySide6 widgets that sit next to a pixel
classifier in the host application:

1. **Region filter combo**
   - Everywhere / Any objects / Any annotations, plus the active filter
   - Kept in sync with the shared ``OverlayOptions``

2. **Save pane**
   - Classifier name field with completion of names already in the project
   - Save button, asking before overwriting an existing classifier

3. **Command buttons**
   - Measure, Create objects, Classify
   - Enabled only once the classifier has been saved under a name

Design Philosophy
-----------------
**Guided workflow ("no wrong moves")**:
- Buttons enable/disable based on session state
- Modal forms collect parameters; cancelling changes nothing
- Every completed command is logged to the workflow history

UI Components
-------------
MainWindow
    Window hosting all panes plus the workflow history
PixelClassifierButtons
    Measure / Create objects / Classify buttons
SavePixelClassifierPane
    Name field and Save button
RegionFilterCombo
    Region filter selector
QtPrompts
    Dialog implementation of the command prompts

Examples
--------
>>> from PySide6.QtWidgets import QApplication
>>> from pxc_ui.ui import MainWindow
>>> import sys
>>>
>>> app = QApplication(sys.argv)
>>> window = MainWindow(tools)
>>> window.show()
>>> sys.exit(app.exec())

See Also
--------
pxc_ui.core : Application logic and state
apps.gui_app : Entry point for launching the GUI
"""

from .main_window import MainWindow
from .classifier_buttons import PixelClassifierButtons
from .save_pane import SavePixelClassifierPane
from .region_filter_combo import RegionFilterCombo, create_region_filter_combo
from .dialogs import QtPrompts

__all__ = [
    "MainWindow",
    "PixelClassifierButtons",
    "SavePixelClassifierPane",
    "RegionFilterCombo",
    "create_region_filter_combo",
    "QtPrompts",
]
