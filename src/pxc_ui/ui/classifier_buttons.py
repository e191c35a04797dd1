from PySide6.QtWidgets import QWidget, QHBoxLayout, QPushButton, QSizePolicy
from PySide6.QtCore import Signal

from pxc_ui.core import config
from pxc_ui.core import commands
from .dialogs import QtPrompts


class PixelClassifierButtons(QWidget):
    """
    Buttons to create objects, add measurements and classify detections.

    The buttons are enabled only while the session has image data, a
    classifier and a saved classifier name.

    Parameters
    ----------
    session : ClassifierSession
        Provides the image data, classifier and saved name
    tools : ClassifierTools
        Collaborator doing the classification work
    prompts : Prompts, optional
        User interaction, by default Qt dialogs parented to this widget
    parent : QWidget, optional
        Parent widget, by default None

    Signals
    -------
    command_finished : Signal(bool)
        Emitted after a command ran, with True if it changed anything

    Attributes
    ----------
    last_create_params : CreateObjectsParams or None
        Settings confirmed in the last object-creation form
    """

    command_finished = Signal(bool)

    def __init__(self, session, tools, prompts=None, parent=None):
        super().__init__(parent)
        self.session = session
        self.tools = tools
        self.prompts = prompts if prompts is not None else QtPrompts(self)
        self.last_create_params = None
        self._build()
        for sig in (
            session.image_data_changed,
            session.classifier_changed,
            session.classifier_name_changed,
        ):
            sig.connect(self._update_enabled)
        self._update_enabled()

    def _build(self):
        h = QHBoxLayout(self)
        h.setContentsMargins(0, 0, 0, 0)
        self.measure_btn = QPushButton("Measure")
        self.measure_btn.setToolTip(config.MEASURE_TOOLTIP)
        self.measure_btn.clicked.connect(self._add_measurements)
        self.create_btn = QPushButton("Create objects")
        self.create_btn.setToolTip(config.CREATE_OBJECTS_TOOLTIP)
        self.create_btn.clicked.connect(self._create_objects)
        self.classify_btn = QPushButton("Classify")
        self.classify_btn.setToolTip(config.CLASSIFY_TOOLTIP)
        self.classify_btn.clicked.connect(self._classify)
        for b in self.buttons():
            b.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            h.addWidget(b)

    def buttons(self):
        return (self.measure_btn, self.create_btn, self.classify_btn)

    def _update_enabled(self, *_):
        enabled = self.session.can_run_commands()
        for b in self.buttons():
            b.setEnabled(enabled)

    def _add_measurements(self):
        s = self.session
        changed = commands.add_measurements(
            s.image_data, s.classifier, s.classifier_name, self.tools, self.prompts
        )
        self.command_finished.emit(changed)

    def _create_objects(self):
        s = self.session
        result = commands.create_objects(
            s.image_data,
            s.classifier,
            s.classifier_name,
            self.tools,
            self.prompts,
            previous=self.last_create_params,
        )
        self.last_create_params = result.params
        self.command_finished.emit(result.changed)

    def _classify(self):
        s = self.session
        changed = commands.classify_detections_by_centroid(
            s.image_data, s.classifier, s.classifier_name, self.tools
        )
        self.command_finished.emit(changed)
