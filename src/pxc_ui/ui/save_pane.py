"""Text field and Save button for storing a pixel classifier in a project."""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QLineEdit, QPushButton, QCompleter
from PySide6.QtCore import Signal, QStringListModel

from pxc_ui.core import config
from pxc_ui.core.commands import try_to_save
from .dialogs import QtPrompts


class SavePixelClassifierPane(QWidget):
    """
    Pane to save the session classifier in the session project.

    On a successful save ``session.classifier_name`` is set to the saved
    name. Because the session resets that name when the classifier changes,
    it always tells whether the current classifier has been saved and under
    which name.

    Parameters
    ----------
    session : ClassifierSession
        Provides the project and classifier; receives the saved name
    prompts : Prompts, optional
        User interaction, by default Qt dialogs parented to this widget
    parent : QWidget, optional
        Parent widget, by default None

    Signals
    -------
    saved : Signal(str)
        Emitted with the name after the classifier was saved
    """

    saved = Signal(str)

    def __init__(self, session, prompts=None, parent=None):
        super().__init__(parent)
        self.session = session
        self.prompts = prompts if prompts is not None else QtPrompts(self)
        self._build()
        session.classifier_changed.connect(self._update_enabled)
        session.project_changed.connect(self._on_project_changed)
        self._refresh_completions()
        self._update_enabled()

    def _build(self):
        h = QHBoxLayout(self)
        h.setContentsMargins(0, 0, 0, 0)
        self.label = QLabel("Classifier name")
        self.name_edit = QLineEdit(self.session.classifier_name or "")
        self.name_edit.setPlaceholderText("Enter pixel classifier name")
        self.label.setBuddy(self.name_edit)
        self.completion_model = QStringListModel(self)
        completer = QCompleter(self.completion_model, self)
        self.name_edit.setCompleter(completer)
        self.name_edit.textChanged.connect(self._update_enabled)
        self.save_btn = QPushButton("Save")
        self.save_btn.clicked.connect(lambda: self.save())
        for w in (self.label, self.name_edit, self.save_btn):
            w.setToolTip(config.SAVE_TOOLTIP)
        h.addWidget(self.label)
        h.addWidget(self.name_edit, 1)
        h.addWidget(self.save_btn)

    def _update_enabled(self, *_):
        self.save_btn.setEnabled(self.session.can_save(self.name_edit.text()))

    def _on_project_changed(self, project):
        self._refresh_completions()
        self._update_enabled()

    def _refresh_completions(self):
        project = self.session.project
        names = project.pixel_classifiers.names() if project is not None else []
        self.completion_model.setStringList(names)

    def save(self, overwrite_quietly=False):
        """
        Save the classifier under the entered name.

        Returns
        -------
        str or None
            The saved name, or None if nothing was saved
        """
        s = self.session
        name = try_to_save(
            s.project, s.classifier, self.name_edit.text(), self.prompts, overwrite_quietly
        )
        if name is not None:
            s.classifier_name = name
            self._refresh_completions()
            self.saved.emit(name)
        return name
