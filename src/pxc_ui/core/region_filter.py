"""
Region Filters
==============

Where live pixel classification is computed while previewing a classifier.
Classifying a whole slide at high resolution is slow, so the preview is
usually restricted to regions covered by objects.

Classes
-------
RegionFilter
    Standard region filters
OverlayOptions
    Shared viewer options holding the active region filter

Examples
--------
>>> from pxc_ui.core.region_filter import OverlayOptions, RegionFilter
>>> options = OverlayOptions()
>>> options.region_filter_changed.connect(lambda f: print(f"Now: {f}"))
>>> options.pixel_classification_region_filter = RegionFilter.ANY_ANNOTATIONS
Now: Any annotations
"""

from enum import Enum

from PySide6.QtCore import QObject, Signal


class RegionFilter(Enum):
    """Standard filters for the area in which pixels are classified."""

    EVERYWHERE = "Everywhere"
    IMAGE = "Image (non-empty regions)"
    ANY_ANNOTATIONS = "Any annotations"
    ANY_OBJECTS = "Any objects"

    def __str__(self):
        return self.value


class OverlayOptions(QObject):
    """
    Viewer options shared between the classifier panes.

    Signals
    -------
    region_filter_changed : Signal(object)
        Emitted with the new :class:`RegionFilter` whenever it changes
    """

    region_filter_changed = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._region_filter = RegionFilter.EVERYWHERE

    @property
    def pixel_classification_region_filter(self) -> RegionFilter:
        return self._region_filter

    @pixel_classification_region_filter.setter
    def pixel_classification_region_filter(self, value: RegionFilter):
        if value is None or value == self._region_filter:
            return
        self._region_filter = value
        self.region_filter_changed.emit(value)
