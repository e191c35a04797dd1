"""Main window for the pixclass-ui application."""

from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QGroupBox,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QApplication,
)

from pxc_ui.core import config
from pxc_ui.core.region_filter import OverlayOptions
from pxc_ui.core.state import ClassifierSession
from .region_filter_combo import create_region_filter_combo
from .save_pane import SavePixelClassifierPane
from .classifier_buttons import PixelClassifierButtons


class MainWindow(QMainWindow):
    """
    Main window hosting the pixel classifier controls.

    Parameters
    ----------
    tools : ClassifierTools
        Collaborator doing the classification work
    session : ClassifierSession, optional
        Shared state, a new session by default
    options : OverlayOptions, optional
        Shared viewer options, new options by default
    parent : QWidget, optional
        Parent widget, by default None

    Attributes
    ----------
    region_combo : RegionFilterCombo
        Region filter selector
    save_pane : SavePixelClassifierPane
        Classifier name field and Save button
    buttons : PixelClassifierButtons
        Measure / Create objects / Classify buttons
    history_list : QListWidget
        Workflow history of the current image
    copy_script_btn : QPushButton
        Copies the history script of the current image to the clipboard
    """

    def __init__(self, tools, session=None, options=None, parent=None):
        super().__init__(parent)
        self.session = session if session is not None else ClassifierSession(self)
        self.options = options if options is not None else OverlayOptions(self)
        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        g = QGroupBox("Preview region")
        v = QVBoxLayout(g)
        self.region_combo = create_region_filter_combo(self.options)
        v.addWidget(self.region_combo)
        layout.addWidget(g)

        g = QGroupBox("Classifier")
        v = QVBoxLayout(g)
        self.save_pane = SavePixelClassifierPane(self.session)
        v.addWidget(self.save_pane)
        self.buttons = PixelClassifierButtons(self.session, tools)
        v.addWidget(self.buttons)
        layout.addWidget(g)

        g = QGroupBox("Workflow history")
        v = QVBoxLayout(g)
        self.history_list = QListWidget()
        v.addWidget(self.history_list)
        self.copy_script_btn = QPushButton("Copy script")
        self.copy_script_btn.setToolTip(config.COPY_SCRIPT_TOOLTIP)
        self.copy_script_btn.clicked.connect(self.copy_script)
        v.addWidget(self.copy_script_btn)
        layout.addWidget(g, 1)

        self.buttons.command_finished.connect(self._refresh_history)
        self.session.image_data_changed.connect(self._on_image_changed)
        self.session.project_changed.connect(self._update_title)
        self._on_image_changed(self.session.image_data)

    def _on_image_changed(self, image_data):
        self._update_title()
        self._refresh_history()

    def _update_title(self, *_):
        parts = [config.WINDOW_TITLE]
        if self.session.project is not None:
            parts.append(self.session.project.name)
        if self.session.image_data is not None:
            parts.append(self.session.image_data.name)
        self.setWindowTitle(" - ".join(parts))

    def copy_script(self):
        """Copy the workflow script of the current image to the clipboard."""
        image_data = self.session.image_data
        if image_data is None:
            return
        QApplication.clipboard().setText(image_data.history.to_script())

    def _refresh_history(self, *_):
        """Show the workflow steps of the current image, newest last."""
        self.history_list.clear()
        image_data = self.session.image_data
        self.copy_script_btn.setEnabled(image_data is not None and len(image_data.history) > 0)
        if image_data is None:
            return
        for step in image_data.history:
            item = QListWidgetItem(step.name)
            item.setToolTip(step.script)
            self.history_list.addItem(item)
