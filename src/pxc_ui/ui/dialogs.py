"""Modal dialogs used by the pixel classifier commands."""

from PySide6.QtWidgets import (
    QWidget,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QVBoxLayout,
    QComboBox,
    QDoubleSpinBox,
    QCheckBox,
    QLineEdit,
    QInputDialog,
    QMessageBox,
)

from pxc_ui.core import config
from pxc_ui.core.params import OBJECT_TYPES, CreateObjectsParams, MeasurementParams

MAX_AREA = 1e12


def _button_box(dialog):
    buttons = QDialogButtonBox(
        QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
    )
    buttons.accepted.connect(dialog.accept)
    buttons.rejected.connect(dialog.reject)
    return buttons


class CreateObjectsDialog(QDialog):
    """
    Form for the object-creation settings.

    Parameters
    ----------
    area_units : str
        Units shown next to the size fields, e.g. "µm^2"
    initial : CreateObjectsParams
        Values to pre-fill the form with
    parent : QWidget, optional
        Parent widget, by default None
    """

    def __init__(self, area_units: str, initial: CreateObjectsParams, parent=None):
        super().__init__(parent)
        self.setWindowTitle(config.CREATE_OBJECTS_TITLE)
        self.setModal(True)

        form = QFormLayout()
        self.type_combo = QComboBox()
        self.type_combo.addItems(list(OBJECT_TYPES))
        self.type_combo.setCurrentText(initial.object_type)
        form.addRow("New object type", self.type_combo)

        self.min_size_spin = self._area_spin(
            area_units, initial.min_size,
            "Minimum size of a region to keep (smaller regions will be dropped)",
        )
        form.addRow("Minimum object size", self.min_size_spin)

        self.min_hole_spin = self._area_spin(
            area_units, initial.min_hole_size,
            "Minimum size of a hole to keep (smaller holes will be filled)",
        )
        form.addRow("Minimum hole size", self.min_hole_spin)

        self.split_check = QCheckBox("Split objects")
        self.split_check.setChecked(initial.do_split)
        self.split_check.setToolTip("Split multi-part regions into separate objects")
        form.addRow(self.split_check)

        self.clear_check = QCheckBox("Delete existing objects")
        self.clear_check.setChecked(initial.clear_existing)
        self.clear_check.setToolTip(
            "Delete any existing objects within the selected object before adding "
            "new objects (or entire image if no object is selected)"
        )
        form.addRow(self.clear_check)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(_button_box(self))

    @staticmethod
    def _area_spin(units, value, tooltip):
        spin = QDoubleSpinBox()
        spin.setRange(0.0, MAX_AREA)
        spin.setDecimals(3)
        spin.setSuffix(f" {units}")
        spin.setValue(value)
        spin.setToolTip(tooltip)
        return spin

    def params(self) -> CreateObjectsParams:
        return CreateObjectsParams(
            object_type=self.type_combo.currentText(),
            min_size=self.min_size_spin.value(),
            min_hole_size=self.min_hole_spin.value(),
            do_split=self.split_check.isChecked(),
            clear_existing=self.clear_check.isChecked(),
        )


class MeasurementDialog(QDialog):
    """Form for the measurement base name and the objects to measure."""

    def __init__(self, default_id, choices, default, parent=None):
        super().__init__(parent)
        self.setWindowTitle(config.DIALOG_TITLE)
        self.setModal(True)

        form = QFormLayout()
        self.id_edit = QLineEdit(default_id)
        self.id_edit.setToolTip(
            "Choose a base name for measurements - this helps distinguish between "
            "measurements from different classifiers"
        )
        form.addRow("Measurement name", self.id_edit)

        self.scope_combo = QComboBox()
        for scope in choices:
            self.scope_combo.addItem(str(scope), userData=scope)
        self.scope_combo.setCurrentIndex(list(choices).index(default))
        self.scope_combo.setToolTip("Select the objects")
        form.addRow("Select objects", self.scope_combo)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(_button_box(self))

    def params(self) -> MeasurementParams:
        measurement_id = self.id_edit.text().strip() or None
        return MeasurementParams(measurement_id, self.scope_combo.currentData())


class QtPrompts:
    """
    Qt dialogs implementing :class:`pxc_ui.core.commands.Prompts`.

    Parameters
    ----------
    parent : QWidget, optional
        Parent for all dialogs, by default None
    """

    def __init__(self, parent: QWidget = None):
        self.parent = parent

    def choose_scope(self, message, choices, default):
        choices = list(choices)
        item, ok = QInputDialog.getItem(
            self.parent,
            config.DIALOG_TITLE,
            message,
            [str(c) for c in choices],
            choices.index(default),
            False,
        )
        if not ok:
            return None
        return next(c for c in choices if str(c) == item)

    def create_objects_params(self, area_units, initial):
        dialog = CreateObjectsDialog(area_units, initial, self.parent)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return None
        return dialog.params()

    def measurement_params(self, default_id, choices, default):
        dialog = MeasurementDialog(default_id, choices, default, self.parent)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return None
        return dialog.params()

    def confirm(self, title, message):
        reply = QMessageBox.question(
            self.parent,
            title,
            message,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    def warning(self, title, message):
        QMessageBox.warning(self.parent, title, message)

    def error(self, title, message):
        QMessageBox.critical(self.parent, title, message)
