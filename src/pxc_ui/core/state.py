"""
Classifier Session State
========================

This module provides the observable state shared by the pixel classifier
panes: the current image, the classifier being trained, the name it was last
saved under and the open project. Widgets listen to the change signals to
enable or disable their controls.

Classes
-------
ClassifierSession
    QObject holding the current image, classifier, saved name and project

Notes
-----
The saved name is only meaningful for the classifier it was saved from.
Assigning a different classifier object therefore resets it to None, so a
non-None ``classifier_name`` always names the active classifier as it was
last saved.

Examples
--------
>>> from pxc_ui.core.state import ClassifierSession
>>> session = ClassifierSession()
>>> session.classifier = classifier
>>> session.classifier_name = "tumor-v2"
>>> session.classifier = retrained_classifier
>>> session.classifier_name is None
True

See Also
--------
pxc_ui.ui.classifier_buttons : Enabled by can_run_commands
pxc_ui.ui.save_pane : Enabled by can_save, sets classifier_name
"""

from PySide6.QtCore import QObject, Signal


class ClassifierSession(QObject):
    """
    Observable pixel classifier state.

    Signals
    -------
    image_data_changed : Signal(object)
        Emitted with the new ImageData (or None)
    classifier_changed : Signal(object)
        Emitted with the new classifier (or None)
    classifier_name_changed : Signal(object)
        Emitted with the new saved name (or None)
    project_changed : Signal(object)
        Emitted with the new Project (or None)
    """

    image_data_changed = Signal(object)
    classifier_changed = Signal(object)
    classifier_name_changed = Signal(object)
    project_changed = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._image_data = None
        self._classifier = None
        self._classifier_name = None
        self._project = None

    @property
    def image_data(self):
        return self._image_data

    @image_data.setter
    def image_data(self, value):
        if value is self._image_data:
            return
        self._image_data = value
        self.image_data_changed.emit(value)

    @property
    def classifier(self):
        return self._classifier

    @classifier.setter
    def classifier(self, value):
        if value is self._classifier:
            return
        self._classifier = value
        self.classifier_changed.emit(value)
        self.classifier_name = None

    @property
    def classifier_name(self):
        return self._classifier_name

    @classifier_name.setter
    def classifier_name(self, value):
        if value == self._classifier_name:
            return
        self._classifier_name = value
        self.classifier_name_changed.emit(value)

    @property
    def project(self):
        return self._project

    @project.setter
    def project(self, value):
        if value is self._project:
            return
        self._project = value
        self.project_changed.emit(value)

    def can_run_commands(self) -> bool:
        """True if image data, a classifier and a saved classifier name are all present."""
        return (
            self._image_data is not None
            and self._classifier is not None
            and bool(self._classifier_name)
        )

    def can_save(self, name_text: str) -> bool:
        """True if a classifier, a project and a non-empty name are present."""
        return self._classifier is not None and self._project is not None and bool(name_text)
