"""
Object Hierarchy
================

This module provides the in-memory object model that pixel classifier
commands operate on: the objects associated with an image (annotations,
detections, cells, tiles and TMA cores) arranged under a single root object,
together with the user's current selection over them.

Classes
-------
ObjectKind
    Enumeration of the object types that can appear in a hierarchy
PathObject
    A single object with a kind, optional classification and measurements
ObjectHierarchy
    Root object plus descendants and the current selection

Notes
-----
Kinds are compared exactly. A cell is a kind of detection for the purpose of
analysis, but selecting "all detections" does not select cells and a
hierarchy holding only cells does not offer the detection scope.

See Also
--------
pxc_ui.core.selection : Decides which objects a bulk operation targets
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional


class ObjectKind(Enum):
    """Type tag of a :class:`PathObject`."""

    ROOT = "root"
    ANNOTATION = "annotation"
    DETECTION = "detection"
    CELL = "cell"
    TILE = "tile"
    TMA_CORE = "tma_core"


@dataclass(eq=False)
class PathObject:
    """
    An object in an image hierarchy.

    Parameters
    ----------
    kind : ObjectKind
        Type of the object
    name : str, optional
        Display name, by default None
    classification : str, optional
        Class label assigned to the object, by default None
    measurements : dict of str to float
        Measurement list of the object

    Attributes
    ----------
    parent : PathObject or None
        Parent object, None for the root or detached objects
    children : list of PathObject
        Direct child objects in insertion order
    """

    kind: ObjectKind
    name: Optional[str] = None
    classification: Optional[str] = None
    measurements: dict[str, float] = field(default_factory=dict)
    parent: Optional["PathObject"] = field(default=None, repr=False)
    children: list["PathObject"] = field(default_factory=list, repr=False)

    def is_root(self) -> bool:
        return self.kind is ObjectKind.ROOT

    def descendants(self) -> Iterator["PathObject"]:
        """Yield all descendants depth-first, excluding this object."""
        for child in self.children:
            yield child
            yield from child.descendants()


class ObjectHierarchy:
    """
    Tree of objects belonging to one image, plus the current selection.

    The hierarchy always has a root object representing the whole image.
    Selection is held as an ordered set of objects; the root itself is never
    part of the selection.

    Attributes
    ----------
    root : PathObject
        The root object of the hierarchy

    Examples
    --------
    >>> from pxc_ui.core.objects import ObjectHierarchy, PathObject, ObjectKind
    >>> hierarchy = ObjectHierarchy()
    >>> tumor = hierarchy.add_object(PathObject(ObjectKind.ANNOTATION, "Tumor"))
    >>> hierarchy.has_selection()
    False
    >>> hierarchy.select_all_of_kind(ObjectKind.ANNOTATION)
    >>> hierarchy.selected_objects == [tumor]
    True
    """

    def __init__(self):
        self.root = PathObject(ObjectKind.ROOT, "Image")
        self._selected: dict[int, PathObject] = {}

    def add_object(self, obj: PathObject, parent: Optional[PathObject] = None) -> PathObject:
        """
        Add an object to the hierarchy.

        Parameters
        ----------
        obj : PathObject
            Object to add; must not be a root object
        parent : PathObject, optional
            Parent to attach to, by default the hierarchy root

        Returns
        -------
        PathObject
            The added object, for chaining
        """
        if obj.is_root():
            raise ValueError("Cannot add a root object to a hierarchy")
        parent = self.root if parent is None else parent
        obj.parent = parent
        parent.children.append(obj)
        return obj

    def flattened_objects(self) -> list[PathObject]:
        """Return the root followed by every descendant, depth-first."""
        return [self.root, *self.root.descendants()]

    def objects_of_kind(self, kind: ObjectKind) -> list[PathObject]:
        return [p for p in self.flattened_objects() if p.kind is kind]

    def kinds_present(self) -> set[ObjectKind]:
        return {p.kind for p in self.flattened_objects()}

    # Selection model

    def has_selection(self) -> bool:
        return bool(self._selected)

    @property
    def selected_objects(self) -> list[PathObject]:
        return list(self._selected.values())

    def set_selected_objects(self, objs: Iterable[PathObject]) -> None:
        self._selected = {id(p): p for p in objs if not p.is_root()}

    def select_all_of_kind(self, kind: ObjectKind) -> None:
        """Replace the selection with exactly the objects of ``kind``."""
        self.set_selected_objects(self.objects_of_kind(kind))

    def reset_selection(self) -> None:
        """Clear the selection so that commands operate on the whole image."""
        self._selected.clear()
