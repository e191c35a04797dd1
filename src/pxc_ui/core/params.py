"""
Command Parameters
==================

Values collected from the user by the object-creation and measurement forms.

Classes
-------
CreateObjectsParams
    Settings for creating objects from a pixel classifier
MeasurementParams
    Settings for adding pixel classifier measurements

Notes
-----
The most recently confirmed :class:`CreateObjectsParams` is used to pre-fill
the next object-creation form. It is passed around explicitly by the caller;
nothing here keeps module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .selection import Scope

OBJECT_TYPE_ANNOTATION = "Annotation"
OBJECT_TYPE_DETECTION = "Detection"
OBJECT_TYPES = (OBJECT_TYPE_ANNOTATION, OBJECT_TYPE_DETECTION)


@dataclass(frozen=True)
class CreateObjectsParams:
    """
    Settings for creating objects from pixel classifier output.

    Parameters
    ----------
    object_type : str, default="Annotation"
        Type of objects to create, one of ``OBJECT_TYPES``
    min_size : float, default=0.0
        Minimum area of a region to keep, in calibrated area units
    min_hole_size : float, default=0.0
        Minimum area of a hole to keep, in calibrated area units; smaller
        holes are filled
    do_split : bool, default=False
        Split multi-part regions into separate objects
    clear_existing : bool, default=False
        Delete existing objects inside the parent before adding new ones

    Raises
    ------
    ValueError
        If ``object_type`` is unknown or a size is negative
    """

    object_type: str = OBJECT_TYPE_ANNOTATION
    min_size: float = 0.0
    min_hole_size: float = 0.0
    do_split: bool = False
    clear_existing: bool = False

    def __post_init__(self):
        if self.object_type not in OBJECT_TYPES:
            raise ValueError(f"Unknown object type: {self.object_type!r}")
        if self.min_size < 0:
            raise ValueError(f"Minimum object size must be >= 0, got {self.min_size}")
        if self.min_hole_size < 0:
            raise ValueError(f"Minimum hole size must be >= 0, got {self.min_hole_size}")
        # History scripts record these as float literals
        object.__setattr__(self, "min_size", float(self.min_size))
        object.__setattr__(self, "min_hole_size", float(self.min_hole_size))

    @property
    def create_detections(self) -> bool:
        return self.object_type == OBJECT_TYPE_DETECTION


@dataclass(frozen=True)
class MeasurementParams:
    """
    Settings for adding pixel classifier measurements.

    Parameters
    ----------
    measurement_id : str or None
        Base name for the new measurements, distinguishing measurements made
        with different classifiers
    scope : Scope
        Objects to measure
    """

    measurement_id: Optional[str]
    scope: Scope
