"""
Collaborator Interfaces
=======================

Protocols for the components that do the actual pixel classification work.
The UI only collects parameters and hands them on; implementations of these
protocols are supplied by the host application.

Classes
-------
PixelClassifier
    A trained classifier that can be stored in a project
ClassifierTools
    Operations that apply a pixel classifier to an image
"""

from __future__ import annotations

from typing import Optional, Protocol


class PixelClassifier(Protocol):
    """A trained pixel classifier, opaque apart from its serialized form."""

    def to_dict(self) -> dict:
        """Return a JSON-serializable description of the classifier."""
        ...


class ClassifierTools(Protocol):
    """
    Operations applying a pixel classifier to image data.

    All methods run synchronously on the calling (UI) thread and mutate the
    hierarchy of ``image_data``.
    """

    def classify_detections_by_centroid(self, image_data, classifier: PixelClassifier) -> None:
        """Set the class of each detection from the prediction at its ROI centroid."""
        ...

    def create_objects(
        self,
        image_data,
        classifier: PixelClassifier,
        min_size: float,
        min_hole_size: float,
        do_split: bool,
        clear_existing: bool,
        object_type: str,
    ) -> bool:
        """
        Create annotations or detections from the classification output.

        Objects are created inside each selected object, or across the whole
        image when nothing is selected. Returns True if objects were created.
        """
        ...

    def add_measurements(
        self, image_data, classifier: PixelClassifier, measurement_id: Optional[str]
    ) -> bool:
        """
        Add classification area measurements to the selected objects (or the
        root object when nothing is selected). Returns True on success.
        """
        ...
