"""
Selection Scopes
================

This module decides which objects a bulk pixel classifier operation (object
creation or measurement) applies to. A :class:`Scope` names a group of
objects ("All annotations", "Full image", ...); the functions here work out
which scopes make sense for the objects in a hierarchy, pick a default, and
apply the chosen scope by updating the hierarchy selection.

Functions
---------
build_choice_list
    Filter candidate scopes down to those applicable to a hierarchy
default_choice
    Pick the scope to preselect in a dialog
apply_scope
    Update the hierarchy selection for a chosen scope

Notes
-----
Each scope is described by one row of a dispatch table holding its display
label, the object kind it corresponds to (if any) and the function that
applies it. Applying a scope replaces the selection rather than adding to it,
so the last applied scope always wins.

Examples
--------
>>> from pxc_ui.core.objects import ObjectHierarchy, PathObject, ObjectKind
>>> from pxc_ui.core.selection import Scope, build_choice_list, default_choice
>>> hierarchy = ObjectHierarchy()
>>> _ = hierarchy.add_object(PathObject(ObjectKind.ANNOTATION))
>>> choices = build_choice_list(
...     hierarchy, [Scope.FULL_IMAGE, Scope.CURRENT_SELECTION, Scope.ANNOTATIONS, Scope.TMA_CORES]
... )
>>> [str(c) for c in choices]
['Full image', 'All annotations']
>>> default_choice(choices)
<Scope.ANNOTATIONS: 'annotations'>
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, NamedTuple, Optional

from .objects import ObjectHierarchy, ObjectKind

logger = logging.getLogger(__name__)


class Scope(Enum):
    """Group of objects that a bulk operation should target."""

    CURRENT_SELECTION = "current_selection"
    ANNOTATIONS = "annotations"
    DETECTIONS = "detections"
    CELLS = "cells"
    TILES = "tiles"
    TMA_CORES = "tma_cores"
    FULL_IMAGE = "full_image"

    @property
    def label(self) -> str:
        return _SCOPES[self].label

    @property
    def kind(self) -> Optional[ObjectKind]:
        return _SCOPES[self].kind

    def __str__(self):
        return self.label


def _keep_selection(hierarchy: ObjectHierarchy, kind: Optional[ObjectKind]) -> None:
    pass


def _reset_selection(hierarchy: ObjectHierarchy, kind: Optional[ObjectKind]) -> None:
    hierarchy.reset_selection()


def _select_kind(hierarchy: ObjectHierarchy, kind: Optional[ObjectKind]) -> None:
    hierarchy.select_all_of_kind(kind)


class _ScopeInfo(NamedTuple):
    label: str
    kind: Optional[ObjectKind]
    apply: Callable[[ObjectHierarchy, Optional[ObjectKind]], None]


_SCOPES: dict[Scope, _ScopeInfo] = {
    Scope.CURRENT_SELECTION: _ScopeInfo("Current selection", None, _keep_selection),
    Scope.ANNOTATIONS: _ScopeInfo("All annotations", ObjectKind.ANNOTATION, _select_kind),
    Scope.DETECTIONS: _ScopeInfo("All detections", ObjectKind.DETECTION, _select_kind),
    Scope.CELLS: _ScopeInfo("All cells", ObjectKind.CELL, _select_kind),
    Scope.TILES: _ScopeInfo("All tiles", ObjectKind.TILE, _select_kind),
    Scope.TMA_CORES: _ScopeInfo("TMA cores", ObjectKind.TMA_CORE, _select_kind),
    Scope.FULL_IMAGE: _ScopeInfo("Full image", None, _reset_selection),
}


def build_choice_list(hierarchy: ObjectHierarchy, candidates: Iterable[Scope]) -> list[Scope]:
    """
    Build the ordered list of scopes applicable to a hierarchy.

    Parameters
    ----------
    hierarchy : ObjectHierarchy
        Hierarchy whose objects and selection determine the valid scopes
    candidates : iterable of Scope
        Scopes the calling command is willing to offer, in display order.
        Commands pass different candidates, e.g. object creation does not
        offer detections or cells as parents.

    Returns
    -------
    list of Scope
        ``CURRENT_SELECTION`` first if anything is selected, then
        ``FULL_IMAGE``, then each candidate whose object kind occurs in the
        hierarchy, in candidate order. Never empty and free of duplicates.

    Raises
    ------
    ValueError
        If ``hierarchy`` is None
    """
    if hierarchy is None:
        raise ValueError("An object hierarchy is required to build scope choices")
    choices = []
    if hierarchy.has_selection():
        choices.append(Scope.CURRENT_SELECTION)
    choices.append(Scope.FULL_IMAGE)
    kinds = hierarchy.kinds_present()
    for scope in candidates:
        if scope.kind is not None and scope.kind in kinds and scope not in choices:
            choices.append(scope)
    return choices


def default_choice(choices: list[Scope]) -> Scope:
    """
    Pick the scope to preselect.

    The current selection is preferred, then all annotations, otherwise the
    first available choice.
    """
    if not choices:
        raise ValueError("No scope choices available")
    if Scope.CURRENT_SELECTION in choices:
        return Scope.CURRENT_SELECTION
    if Scope.ANNOTATIONS in choices:
        return Scope.ANNOTATIONS
    return choices[0]


def apply_scope(scope: Scope, image_data) -> None:
    """
    Update the selection of ``image_data`` to match ``scope``.

    ``FULL_IMAGE`` clears the selection, kind scopes select every object of
    the kind, and ``CURRENT_SELECTION`` leaves the selection untouched.

    Parameters
    ----------
    scope : Scope
        Chosen scope
    image_data : ImageData
        Image whose hierarchy selection is updated
    """
    info = _SCOPES[scope]
    logger.debug("Applying scope '%s'", info.label)
    info.apply(image_data.hierarchy, info.kind)
