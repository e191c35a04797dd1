# tests/fakes.py
# Stand-ins for the classifier collaborators and the user prompts

from pxc_ui.core.objects import ObjectKind, PathObject


class FakeClassifier:
    def __init__(self, name="classifier", classes=("Tumor", "Stroma")):
        self.name = name
        self.classes = list(classes)

    def to_dict(self):
        return {"name": self.name, "classes": self.classes}


class FakeTools:
    """Records every call; create/measure results are configurable."""

    def __init__(self, create_result=True, measure_result=True):
        self.create_result = create_result
        self.measure_result = measure_result
        self.calls = []
        self.selection_at_call = None

    def classify_detections_by_centroid(self, image_data, classifier):
        self.calls.append(("classify", classifier))
        for d in image_data.hierarchy.objects_of_kind(ObjectKind.DETECTION):
            d.classification = classifier.classes[0]

    def create_objects(self, image_data, classifier, min_size, min_hole_size,
                       do_split, clear_existing, object_type):
        self.selection_at_call = image_data.hierarchy.selected_objects
        self.calls.append(
            ("create", min_size, min_hole_size, do_split, clear_existing, object_type)
        )
        if self.create_result:
            kind = ObjectKind.DETECTION if object_type == "Detection" else ObjectKind.ANNOTATION
            image_data.hierarchy.add_object(PathObject(kind, classification=classifier.classes[0]))
        return self.create_result

    def add_measurements(self, image_data, classifier, measurement_id):
        self.selection_at_call = image_data.hierarchy.selected_objects
        self.calls.append(("measure", measurement_id))
        return self.measure_result


class FakePrompts:
    """Answers prompts from preset values; None means the user cancelled."""

    def __init__(self, scope=None, create_params=None, measurement=None, confirm=True):
        self.scope = scope
        self.create_params = create_params
        self.measurement = measurement
        self.confirm_answer = confirm
        self.asked = []
        self.warnings = []
        self.errors = []

    def choose_scope(self, message, choices, default):
        self.asked.append(("scope", list(choices), default))
        return self.scope

    def create_objects_params(self, area_units, initial):
        self.asked.append(("create", area_units, initial))
        return self.create_params

    def measurement_params(self, default_id, choices, default):
        self.asked.append(("measure", default_id, list(choices), default))
        return self.measurement

    def confirm(self, title, message):
        self.asked.append(("confirm", message))
        return self.confirm_answer

    def warning(self, title, message):
        self.warnings.append(message)

    def error(self, title, message):
        self.errors.append(message)
