# tests/test_core_model.py
# Unit tests for the object hierarchy, history, parameters, naming and calibration

import unittest

from pxc_ui.core.history import HistoryWorkflow, WorkflowStep
from pxc_ui.core.image_data import PixelCalibration
from pxc_ui.core.naming import strip_invalid_filename_chars
from pxc_ui.core.objects import ObjectHierarchy, ObjectKind, PathObject
from pxc_ui.core.params import CreateObjectsParams


class TestObjectHierarchy(unittest.TestCase):
    """Tests for ObjectHierarchy selection and structure."""

    def setUp(self):
        self.h = ObjectHierarchy()
        self.tumor = self.h.add_object(PathObject(ObjectKind.ANNOTATION, "Tumor"))
        self.cell = self.h.add_object(PathObject(ObjectKind.CELL), parent=self.tumor)
        self.det = self.h.add_object(PathObject(ObjectKind.DETECTION), parent=self.tumor)

    def test_flattened_includes_root_and_nested(self):
        objs = self.h.flattened_objects()

        self.assertIs(objs[0], self.h.root)
        self.assertEqual(objs[1:], [self.tumor, self.cell, self.det])

    def test_kinds_present(self):
        self.assertEqual(
            self.h.kinds_present(),
            {ObjectKind.ROOT, ObjectKind.ANNOTATION, ObjectKind.CELL, ObjectKind.DETECTION},
        )

    def test_select_all_of_kind_replaces_selection(self):
        self.h.select_all_of_kind(ObjectKind.CELL)
        self.h.select_all_of_kind(ObjectKind.DETECTION)

        self.assertEqual(self.h.selected_objects, [self.det])

    def test_root_never_selected(self):
        self.h.set_selected_objects([self.h.root])
        self.assertFalse(self.h.has_selection())

    def test_reset_selection(self):
        self.h.select_all_of_kind(ObjectKind.ANNOTATION)
        self.h.reset_selection()

        self.assertFalse(self.h.has_selection())
        self.assertEqual(self.h.selected_objects, [])

    def test_cannot_add_root(self):
        with self.assertRaises(ValueError):
            self.h.add_object(PathObject(ObjectKind.ROOT))


class TestHistoryWorkflow(unittest.TestCase):
    """Tests for HistoryWorkflow."""

    def test_append_only_order(self):
        history = HistoryWorkflow()
        history.add_step("First", "first()")
        history.add_step("Second", "second()")

        self.assertEqual(len(history), 2)
        self.assertEqual([s.name for s in history], ["First", "Second"])
        self.assertEqual(history.last_step(), WorkflowStep("Second", "second()"))
        self.assertEqual(history.to_script(), "first()\nsecond()")

    def test_empty(self):
        history = HistoryWorkflow()

        self.assertIsNone(history.last_step())
        self.assertEqual(history.to_script(), "")
        self.assertEqual(history.steps, ())


class TestCreateObjectsParams(unittest.TestCase):
    """Tests for CreateObjectsParams validation."""

    def test_defaults(self):
        p = CreateObjectsParams()

        self.assertEqual(p.object_type, "Annotation")
        self.assertEqual((p.min_size, p.min_hole_size), (0.0, 0.0))
        self.assertFalse(p.do_split or p.clear_existing)
        self.assertFalse(p.create_detections)

    def test_sizes_stored_as_float(self):
        p = CreateObjectsParams("Detection", 10, 0)

        self.assertIsInstance(p.min_size, float)
        self.assertEqual(repr(p.min_size), "10.0")
        self.assertTrue(p.create_detections)

    def test_negative_sizes_rejected(self):
        with self.assertRaises(ValueError):
            CreateObjectsParams(min_size=-1)
        with self.assertRaises(ValueError):
            CreateObjectsParams(min_hole_size=-0.5)

    def test_unknown_type_rejected(self):
        with self.assertRaises(ValueError):
            CreateObjectsParams(object_type="Cell")


class TestNaming(unittest.TestCase):
    """Tests for strip_invalid_filename_chars()."""

    def test_strips_invalid(self):
        self.assertEqual(strip_invalid_filename_chars('a/b\\c:d*e?f"g<h>i|j'), "abcdefghij")

    def test_strips_line_breaks_and_trims(self):
        self.assertEqual(strip_invalid_filename_chars("  tumor\nv2\r "), "tumorv2")

    def test_all_invalid_is_blank(self):
        self.assertEqual(strip_invalid_filename_chars("/:*?"), "")
        self.assertEqual(strip_invalid_filename_chars(None), "")

    def test_keeps_valid(self):
        self.assertEqual(strip_invalid_filename_chars("tumor-v2 (final)"), "tumor-v2 (final)")


class TestPixelCalibration(unittest.TestCase):
    """Tests for PixelCalibration.area_units()."""

    def test_default_pixels(self):
        self.assertEqual(PixelCalibration().area_units(), "px^2")

    def test_matching_units(self):
        self.assertEqual(PixelCalibration(0.5, 0.5, "µm", "µm").area_units(), "µm^2")

    def test_mismatched_units(self):
        self.assertEqual(PixelCalibration(0.5, 2.0, "µm", "mm").area_units(), "µmxmm")


if __name__ == "__main__":
    unittest.main()
