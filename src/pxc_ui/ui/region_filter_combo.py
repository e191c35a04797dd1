from PySide6.QtWidgets import QComboBox, QSizePolicy

from pxc_ui.core import config
from pxc_ui.core.region_filter import RegionFilter, OverlayOptions

STANDARD_FILTERS = (
    RegionFilter.EVERYWHERE,
    RegionFilter.ANY_OBJECTS,
    RegionFilter.ANY_ANNOTATIONS,
)


class RegionFilterCombo(QComboBox):
    """
    Combo box bound to the region filter of an :class:`OverlayOptions`.

    Selecting an item updates the options, and changes made elsewhere are
    shown in the combo. The options are connected to a method of the combo,
    so Qt drops the connection when the combo is destroyed.

    Parameters
    ----------
    options : OverlayOptions
        Options holding the active filter
    parent : QWidget, optional
        Parent widget, by default None
    """

    def __init__(self, options: OverlayOptions, parent=None):
        super().__init__(parent)
        self.options = options
        for f in STANDARD_FILTERS:
            self.addItem(str(f), userData=f)
        self._show_filter(options.pixel_classification_region_filter)
        self.currentIndexChanged.connect(self._on_index_changed)
        options.region_filter_changed.connect(self._show_filter)

    def index_of(self, value) -> int:
        for i in range(self.count()):
            if self.itemData(i) is value:
                return i
        return -1

    def _show_filter(self, value):
        idx = self.index_of(value)
        if idx < 0:
            self.addItem(str(value), userData=value)
            idx = self.count() - 1
        self.setCurrentIndex(idx)

    def _on_index_changed(self, index):
        if index >= 0:
            self.options.pixel_classification_region_filter = self.itemData(index)

    def current_filter(self) -> RegionFilter:
        return self.currentData()


def create_region_filter_combo(options: OverlayOptions, parent=None) -> RegionFilterCombo:
    """
    Create a combo box to select the pixel classification region filter.

    Parameters
    ----------
    options : OverlayOptions
        Options holding the active filter
    parent : QWidget, optional
        Parent widget, by default None

    Returns
    -------
    RegionFilterCombo
        Combo listing Everywhere, Any objects and Any annotations, plus the
        active filter if it is not one of them
    """
    combo = RegionFilterCombo(options, parent)
    combo.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
    combo.setToolTip(config.REGION_FILTER_TOOLTIP)
    return combo
