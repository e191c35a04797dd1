# tests/test_widgets.py
# Offscreen tests for the region filter combo, command buttons, save pane and dialogs

import os
import tempfile
import unittest
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from pxc_ui.core.image_data import ImageData  # noqa: E402
from pxc_ui.core.objects import ObjectKind, PathObject  # noqa: E402
from pxc_ui.core.params import CreateObjectsParams  # noqa: E402
from pxc_ui.core.project import Project  # noqa: E402
from pxc_ui.core.region_filter import OverlayOptions, RegionFilter  # noqa: E402
from pxc_ui.core.selection import Scope  # noqa: E402
from pxc_ui.core.state import ClassifierSession  # noqa: E402
from pxc_ui.ui.classifier_buttons import PixelClassifierButtons  # noqa: E402
from pxc_ui.ui.dialogs import CreateObjectsDialog, MeasurementDialog  # noqa: E402
from pxc_ui.ui.main_window import MainWindow  # noqa: E402
from pxc_ui.ui.region_filter_combo import create_region_filter_combo  # noqa: E402
from pxc_ui.ui.save_pane import SavePixelClassifierPane  # noqa: E402

from fakes import FakeClassifier, FakePrompts, FakeTools  # noqa: E402

app = None


def setUpModule():
    global app
    app = QApplication.instance() or QApplication([])


class TestRegionFilterCombo(unittest.TestCase):
    """Tests for create_region_filter_combo()."""

    def test_standard_items(self):
        options = OverlayOptions()
        combo = create_region_filter_combo(options)

        items = [combo.itemData(i) for i in range(combo.count())]
        self.assertEqual(
            items, [RegionFilter.EVERYWHERE, RegionFilter.ANY_OBJECTS, RegionFilter.ANY_ANNOTATIONS]
        )
        self.assertIs(combo.current_filter(), RegionFilter.EVERYWHERE)
        self.assertTrue(combo.toolTip())

    def test_active_nonstandard_filter_added(self):
        options = OverlayOptions()
        options.pixel_classification_region_filter = RegionFilter.IMAGE
        combo = create_region_filter_combo(options)

        self.assertEqual(combo.count(), 4)
        self.assertIs(combo.current_filter(), RegionFilter.IMAGE)

    def test_selection_updates_options(self):
        options = OverlayOptions()
        combo = create_region_filter_combo(options)
        combo.setCurrentIndex(combo.index_of(RegionFilter.ANY_ANNOTATIONS))

        self.assertIs(options.pixel_classification_region_filter, RegionFilter.ANY_ANNOTATIONS)

    def test_options_update_combo(self):
        options = OverlayOptions()
        combo = create_region_filter_combo(options)
        options.pixel_classification_region_filter = RegionFilter.ANY_OBJECTS

        self.assertIs(combo.current_filter(), RegionFilter.ANY_OBJECTS)


class TestPixelClassifierButtons(unittest.TestCase):
    """Tests for PixelClassifierButtons enablement and actions."""

    def setUp(self):
        self.session = ClassifierSession()
        self.tools = FakeTools()
        self.image_data = ImageData("slide")
        self.image_data.hierarchy.add_object(PathObject(ObjectKind.DETECTION))

    def ready(self):
        self.session.image_data = self.image_data
        self.session.classifier = FakeClassifier()
        self.session.classifier_name = "tumor-v2"

    def test_disabled_until_saved(self):
        pane = PixelClassifierButtons(self.session, self.tools, FakePrompts())
        self.assertFalse(any(b.isEnabled() for b in pane.buttons()))

        self.ready()
        self.assertTrue(all(b.isEnabled() for b in pane.buttons()))

        self.session.classifier = FakeClassifier()
        self.assertFalse(any(b.isEnabled() for b in pane.buttons()))

    def test_classify_click(self):
        self.ready()
        pane = PixelClassifierButtons(self.session, self.tools, FakePrompts())
        results = []
        pane.command_finished.connect(results.append)

        pane.classify_btn.click()

        self.assertEqual(results, [True])
        self.assertEqual(len(self.image_data.history), 1)

    def test_create_click_remembers_params(self):
        self.ready()
        params = CreateObjectsParams("Detection", 10.0)
        prompts = FakePrompts(scope=Scope.FULL_IMAGE, create_params=params)
        pane = PixelClassifierButtons(self.session, self.tools, prompts)

        pane.create_btn.click()
        self.assertIs(pane.last_create_params, params)

        prompts.create_params = None
        pane.create_btn.click()
        self.assertIs(prompts.asked[-1][2], params)
        self.assertIs(pane.last_create_params, params)


class TestSavePixelClassifierPane(unittest.TestCase):
    """Tests for SavePixelClassifierPane."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.project = Project(Path(self._tmp.name))
        self.session = ClassifierSession()

    def tearDown(self):
        self._tmp.cleanup()

    def test_enablement(self):
        pane = SavePixelClassifierPane(self.session, FakePrompts())
        pane.name_edit.setText("tumor")
        self.assertFalse(pane.save_btn.isEnabled())

        self.session.classifier = FakeClassifier()
        self.assertFalse(pane.save_btn.isEnabled())
        self.session.project = self.project
        self.assertTrue(pane.save_btn.isEnabled())

        pane.name_edit.setText("")
        self.assertFalse(pane.save_btn.isEnabled())

    def test_save_sets_name_and_completions(self):
        self.session.classifier = FakeClassifier()
        self.session.project = self.project
        pane = SavePixelClassifierPane(self.session, FakePrompts())
        saved = []
        pane.saved.connect(saved.append)

        pane.name_edit.setText("tumor-v2")
        pane.save_btn.click()

        self.assertEqual(self.session.classifier_name, "tumor-v2")
        self.assertEqual(saved, ["tumor-v2"])
        self.assertEqual(pane.completion_model.stringList(), ["tumor-v2"])

    def test_declined_overwrite_keeps_name_unset(self):
        self.project.pixel_classifiers.put("tumor", FakeClassifier("old"))
        self.session.classifier = FakeClassifier("new")
        self.session.project = self.project
        pane = SavePixelClassifierPane(self.session, FakePrompts(confirm=False))

        pane.name_edit.setText("tumor")
        self.assertIsNone(pane.save())
        self.assertIsNone(self.session.classifier_name)
        self.assertEqual(self.project.pixel_classifiers.get("tumor")["name"], "old")


class TestDialogs(unittest.TestCase):
    """Tests for the parameter forms without showing them."""

    def test_create_objects_dialog_roundtrips_initial(self):
        initial = CreateObjectsParams("Detection", 12.5, 2.0, True, False)
        dialog = CreateObjectsDialog("µm^2", initial)

        self.assertEqual(dialog.params(), initial)
        self.assertTrue(dialog.min_size_spin.suffix().endswith("µm^2"))

    def test_create_objects_dialog_rejects_negative(self):
        dialog = CreateObjectsDialog("px^2", CreateObjectsParams())
        dialog.min_size_spin.setValue(-5)

        self.assertEqual(dialog.params().min_size, 0.0)

    def test_measurement_dialog(self):
        choices = [Scope.FULL_IMAGE, Scope.ANNOTATIONS]
        dialog = MeasurementDialog("tumor-v2", choices, Scope.ANNOTATIONS)

        params = dialog.params()
        self.assertEqual(params.measurement_id, "tumor-v2")
        self.assertIs(params.scope, Scope.ANNOTATIONS)

        dialog.id_edit.setText("  ")
        self.assertIsNone(dialog.params().measurement_id)


class TestMainWindow(unittest.TestCase):
    """Tests for MainWindow history display."""

    def test_history_refreshed_after_command(self):
        window = MainWindow(FakeTools())
        image_data = ImageData("slide_01")
        window.session.image_data = image_data
        window.session.classifier = FakeClassifier()
        window.session.classifier_name = "tumor-v2"

        self.assertIn("slide_01", window.windowTitle())
        self.assertEqual(window.history_list.count(), 0)

        window.buttons.classify_btn.click()

        self.assertEqual(window.history_list.count(), 1)
        self.assertEqual(window.history_list.item(0).text(), "Classify detections by centroid")

    def test_copy_script(self):
        window = MainWindow(FakeTools())
        self.assertFalse(window.copy_script_btn.isEnabled())

        image_data = ImageData("slide_01")
        window.session.image_data = image_data
        window.session.classifier = FakeClassifier()
        window.session.classifier_name = "tumor-v2"
        window.buttons.classify_btn.click()

        self.assertTrue(window.copy_script_btn.isEnabled())
        window.copy_script_btn.click()
        self.assertEqual(
            QApplication.clipboard().text(), "classify_detections_by_centroid('tumor-v2')"
        )

    def test_title_names_project_and_image(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "my_project"
            window = MainWindow(FakeTools())
            window.session.project = Project(root)
            window.session.image_data = ImageData("slide_01")

            self.assertEqual(window.windowTitle(), "Pixel classifier - my_project - slide_01")


if __name__ == "__main__":
    unittest.main()
