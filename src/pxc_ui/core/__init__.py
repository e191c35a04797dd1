"""
Core Application Logic for pixclass-ui
======================================

This module contains the logic behind the pixel classifier panes, kept free
of widgets so that it can be tested without a display:

- **Object model**: objects of an image and the current selection
- **Selection scopes**: which objects a bulk command should target
- **Commands**: create objects, add measurements, classify by centroid, save
- **Workflow history**: replayable log of the commands that were run
- **Project storage**: classifiers saved by name in a project directory
- **Session state**: observable image/classifier/project state for widgets

Selection Scopes
----------------
A bulk command first decides which objects it applies to:

1. **Current selection**: offered only if something is selected
2. **Full image**: always offered; clears the selection
3. **All annotations / detections / cells / tiles, TMA cores**: offered only
   if objects of that kind exist and the command accepts them

Examples
--------
>>> from pxc_ui.core import ImageData, Scope, build_choice_list, default_choice
>>> image_data = ImageData("slide_01.svs")
>>> choices = build_choice_list(image_data.hierarchy, list(Scope))
>>> choices
[<Scope.FULL_IMAGE: 'full_image'>]
>>> default_choice(choices)
<Scope.FULL_IMAGE: 'full_image'>

Modules
-------
objects
    ObjectKind, PathObject and ObjectHierarchy
selection
    Scope and the scope resolution functions
commands
    Command orchestration and the Prompts protocol
history
    Workflow history steps
image_data
    ImageData and PixelCalibration
project
    Project and ClassifierStore
params
    Parameters collected by the command forms
tools
    Protocols for the classifier collaborators
region_filter
    Region filters and OverlayOptions
state
    ClassifierSession
config
    Constants and logging setup

See Also
--------
pxc_ui.ui : PySide6 widgets built on this module
"""

from .objects import ObjectKind, PathObject, ObjectHierarchy
from .selection import Scope, build_choice_list, default_choice, apply_scope
from .history import HistoryWorkflow, WorkflowStep
from .image_data import ImageData, PixelCalibration
from .project import Project, ClassifierStore
from .params import CreateObjectsParams, MeasurementParams
from .commands import (
    add_measurements,
    classify_detections_by_centroid,
    create_objects,
    try_to_save,
)

__all__ = [
    "ObjectKind",
    "PathObject",
    "ObjectHierarchy",
    "Scope",
    "build_choice_list",
    "default_choice",
    "apply_scope",
    "HistoryWorkflow",
    "WorkflowStep",
    "ImageData",
    "PixelCalibration",
    "Project",
    "ClassifierStore",
    "CreateObjectsParams",
    "MeasurementParams",
    "add_measurements",
    "classify_detections_by_centroid",
    "create_objects",
    "try_to_save",
]
