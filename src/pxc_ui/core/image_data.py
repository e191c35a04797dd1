"""
Image Data
==========

Container tying together everything the pixel classifier commands need to
know about one open image: its object hierarchy, its pixel calibration (used
to label size parameters with area units) and its workflow history.

Classes
-------
PixelCalibration
    Pixel size and units of an image
ImageData
    Hierarchy, calibration and history of one image

Examples
--------
>>> from pxc_ui.core.image_data import ImageData, PixelCalibration
>>> cal = PixelCalibration(0.25, 0.25, "µm", "µm")
>>> cal.area_units()
'µm^2'
>>> image_data = ImageData("slide_01.svs", calibration=cal)
>>> image_data.hierarchy.has_selection()
False
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .history import HistoryWorkflow
from .objects import ObjectHierarchy


@dataclass(frozen=True)
class PixelCalibration:
    """
    Physical size of a pixel.

    Parameters
    ----------
    pixel_width : float, default=1.0
        Width of a pixel in ``width_unit``
    pixel_height : float, default=1.0
        Height of a pixel in ``height_unit``
    width_unit : str, default="px"
        Unit of the pixel width
    height_unit : str, default="px"
        Unit of the pixel height
    """

    pixel_width: float = 1.0
    pixel_height: float = 1.0
    width_unit: str = "px"
    height_unit: str = "px"

    def units_match(self) -> bool:
        return self.width_unit == self.height_unit

    def area_units(self) -> str:
        """
        Return the label for areas measured with this calibration.

        Returns
        -------
        str
            ``"<unit>^2"`` when width and height share a unit, otherwise
            ``"<width unit>x<height unit>"``
        """
        if self.units_match():
            return f"{self.width_unit}^2"
        return f"{self.width_unit}x{self.height_unit}"


@dataclass
class ImageData:
    """
    State of one open image.

    Parameters
    ----------
    name : str
        Image name, used in window titles and logs
    hierarchy : ObjectHierarchy, optional
        Objects of the image, a new empty hierarchy by default
    calibration : PixelCalibration, optional
        Pixel calibration, uncalibrated pixels by default
    history : HistoryWorkflow, optional
        Workflow history, empty by default
    """

    name: str
    hierarchy: ObjectHierarchy = field(default_factory=ObjectHierarchy)
    calibration: PixelCalibration = field(default_factory=PixelCalibration)
    history: HistoryWorkflow = field(default_factory=HistoryWorkflow)
