"""
Pixel Classifier Commands
=========================

This module implements the commands behind the pixel classifier buttons:
classifying detections by centroid, creating objects, adding measurements
and saving a classifier to a project. Each command collects its parameters
through a :class:`Prompts` object, hands the work to a
:class:`~pxc_ui.core.tools.ClassifierTools` implementation and, if the
classifier has been saved under a name, records a replayable step in the
image's workflow history.

Classes
-------
Prompts
    User interaction needed by the commands
CreateObjectsResult
    Outcome of the object-creation command

Functions
---------
classify_detections_by_centroid
    Classify detections from the prediction at their centroid
create_objects
    Prompt for parent objects and settings, then create objects
add_measurements
    Prompt for objects and a measurement name, then add measurements
try_to_save
    Validate a name and save a classifier in a project

Notes
-----
Cancelling any prompt aborts the command without touching the hierarchy and
without logging a history step. A missing image or classifier is a
programming error and raises ``ValueError``; the UI disables the buttons in
that state.

History steps are only logged when ``classifier_name`` is given, because the
script line refers to the classifier by the name it is saved under.

See Also
--------
pxc_ui.ui.dialogs.QtPrompts : Qt implementation of Prompts
pxc_ui.ui.classifier_buttons : Buttons that run these commands
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from . import config
from .naming import strip_invalid_filename_chars
from .params import CreateObjectsParams, MeasurementParams
from .selection import Scope, apply_scope, build_choice_list, default_choice

logger = logging.getLogger(__name__)

CREATE_OBJECTS_CANDIDATES = (
    Scope.FULL_IMAGE,
    Scope.CURRENT_SELECTION,
    Scope.ANNOTATIONS,
    Scope.TMA_CORES,
)
MEASUREMENT_CANDIDATES = tuple(Scope)


class Prompts(Protocol):
    """
    User interaction required by the commands.

    Every ``*_params`` and ``choose_*`` method returns None when the user
    cancels.
    """

    def choose_scope(self, message: str, choices: Sequence[Scope], default: Scope) -> Optional[Scope]:
        ...

    def create_objects_params(self, area_units: str, initial: CreateObjectsParams) -> Optional[CreateObjectsParams]:
        ...

    def measurement_params(
        self, default_id: str, choices: Sequence[Scope], default: Scope
    ) -> Optional[MeasurementParams]:
        ...

    def confirm(self, title: str, message: str) -> bool:
        ...

    def warning(self, title: str, message: str) -> None:
        ...

    def error(self, title: str, message: str) -> None:
        ...


@dataclass(frozen=True)
class CreateObjectsResult:
    """
    Outcome of :func:`create_objects`.

    Attributes
    ----------
    changed : bool
        True if objects were created
    params : CreateObjectsParams or None
        Settings to pre-fill the next form with: the confirmed settings, or
        the previous ones if the user cancelled
    """

    changed: bool
    params: Optional[CreateObjectsParams]


def _require(image_data, classifier) -> None:
    if image_data is None:
        raise ValueError("image_data is required")
    if classifier is None:
        raise ValueError("classifier is required")


def classify_detections_by_centroid(image_data, classifier, classifier_name: Optional[str], tools) -> bool:
    """
    Classify detections according to the prediction at each ROI centroid.

    Parameters
    ----------
    image_data : ImageData
        Image whose detections are classified
    classifier : PixelClassifier
        Classifier to apply
    classifier_name : str or None
        Saved name of the classifier; if given, a history step is logged
    tools : ClassifierTools
        Collaborator doing the classification

    Returns
    -------
    bool
        Always True
    """
    _require(image_data, classifier)
    tools.classify_detections_by_centroid(image_data, classifier)
    if classifier_name is not None:
        image_data.history.add_step(
            "Classify detections by centroid",
            f"classify_detections_by_centroid({classifier_name!r})",
        )
    return True


def create_objects(
    image_data,
    classifier,
    classifier_name: Optional[str],
    tools,
    prompts: Prompts,
    previous: Optional[CreateObjectsParams] = None,
) -> CreateObjectsResult:
    """
    Prompt the user to create objects from the output of a pixel classifier.

    The user first chooses the parent objects (current selection, full
    image, all annotations or TMA cores, as far as they exist), then the
    object type and size settings.

    Parameters
    ----------
    image_data : ImageData
        Image to which objects are added
    classifier : PixelClassifier
        Classifier generating the regions
    classifier_name : str or None
        Saved name of the classifier; if given and objects were created, a
        history step is logged
    tools : ClassifierTools
        Collaborator creating the objects
    prompts : Prompts
        User interaction
    previous : CreateObjectsParams, optional
        Settings confirmed last time, used to pre-fill the form

    Returns
    -------
    CreateObjectsResult
        Whether anything changed, and the settings to remember

    Raises
    ------
    ValueError
        If ``image_data`` or ``classifier`` is None
    """
    _require(image_data, classifier)

    choices = build_choice_list(image_data.hierarchy, CREATE_OBJECTS_CANDIDATES)
    parent_choice = prompts.choose_scope(
        "Choose parent objects", choices, default_choice(choices)
    )
    if parent_choice is None:
        return CreateObjectsResult(False, previous)

    units = image_data.calibration.area_units()
    params = prompts.create_objects_params(units, previous or CreateObjectsParams())
    if params is None:
        return CreateObjectsResult(False, previous)

    apply_scope(parent_choice, image_data)

    changed = bool(
        tools.create_objects(
            image_data,
            classifier,
            params.min_size,
            params.min_hole_size,
            params.do_split,
            params.clear_existing,
            params.object_type,
        )
    )
    if not changed:
        logger.warning("No objects created from pixel classifier")
        return CreateObjectsResult(False, params)

    if classifier_name is not None:
        if params.create_detections:
            title = "Pixel classifier create detections"
            fn = "create_detections_from_pixel_classifier"
        else:
            title = "Pixel classifier create annotations"
            fn = "create_annotations_from_pixel_classifier"
        image_data.history.add_step(
            title,
            f"{fn}({classifier_name!r}, {params.min_size!r}, {params.min_hole_size!r}, "
            f"{params.do_split!r}, {params.clear_existing!r})",
        )
    logger.info("Created %s objects (parent: %s)", params.object_type.lower(), parent_choice)
    return CreateObjectsResult(True, params)


def add_measurements(image_data, classifier, classifier_name: Optional[str], tools, prompts: Prompts) -> bool:
    """
    Prompt the user to add pixel classifier measurements to objects.

    Parameters
    ----------
    image_data : ImageData
        Image whose objects are measured
    classifier : PixelClassifier
        Classifier to measure with
    classifier_name : str or None
        Saved name of the classifier; used as the default measurement name
        and, if given, to log a history step
    tools : ClassifierTools
        Collaborator computing the measurements
    prompts : Prompts
        User interaction

    Returns
    -------
    bool
        True if measurements were added

    Raises
    ------
    ValueError
        If ``image_data`` or ``classifier`` is None
    """
    _require(image_data, classifier)
    hierarchy = image_data.hierarchy

    choices = build_choice_list(hierarchy, MEASUREMENT_CANDIDATES)
    default_id = classifier_name if classifier_name is not None else config.DEFAULT_MEASUREMENT_NAME
    params = prompts.measurement_params(default_id, choices, default_choice(choices))
    if params is None:
        return False

    apply_scope(params.scope, image_data)

    n = len(hierarchy.selected_objects)
    if n == 0:
        logger.info("Requesting measurements for image")
    elif n == 1:
        logger.info("Requesting measurements for one object")
    else:
        logger.info("Requesting measurements for %d objects", n)

    if not tools.add_measurements(image_data, classifier, params.measurement_id):
        return False
    if classifier_name is not None:
        image_data.history.add_step(
            "Pixel classifier measurements",
            f"add_pixel_classifier_measurements({classifier_name!r}, {params.measurement_id!r})",
        )
    return True


def try_to_save(project, classifier, name: str, prompts: Prompts, overwrite_quietly: bool = False) -> Optional[str]:
    """
    Save a classifier in a project under a user-supplied name.

    Parameters
    ----------
    project : Project or None
        Project to save into; a warning is shown if missing
    classifier : PixelClassifier
        Classifier to save
    name : str
        Name entered by the user; characters invalid in file names are
        removed first
    prompts : Prompts
        User interaction
    overwrite_quietly : bool, default=False
        Replace an existing classifier of the same name without asking

    Returns
    -------
    str or None
        The name the classifier was saved under, or None if nothing was saved
    """
    title = config.DIALOG_TITLE
    if project is None:
        prompts.warning(title, "You need a project to be able to save the pixel classifier")
        return None
    name = strip_invalid_filename_chars(name)
    if not name:
        prompts.error(title, "Please enter a valid classifier name!")
        return None
    store = project.pixel_classifiers
    try:
        if not overwrite_quietly and store.contains(name):
            if not prompts.confirm(title, f"Overwrite existing classifier '{name}'?"):
                return None
        store.put(name, classifier)
    except (OSError, TypeError, ValueError) as e:
        logger.exception("Unable to save pixel classifier '%s'", name)
        prompts.error(title, f"Unable to save classifier '{name}': {e}")
        return None
    return name
