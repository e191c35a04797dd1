"""Application configuration settings."""
import logging
import os

# Application
APP_NAME = "pixclass-ui"
WINDOW_TITLE = "Pixel classifier"
WINDOW_WIDTH = 420
WINDOW_HEIGHT = 520

# Dialogs
DIALOG_TITLE = "Pixel classifier"
CREATE_OBJECTS_TITLE = "Create objects"
DEFAULT_MEASUREMENT_NAME = "Classifier"

# Project layout (relative to the project directory)
PIXEL_CLASSIFIERS_DIR = "classifiers/pixel_classifiers"
CLASSIFIER_SUFFIX = ".json"

# Tooltips
REGION_FILTER_TOOLTIP = (
    "Control where the pixel classification is applied during preview.\n"
    "Warning! Classifying the entire image at high resolution can be very slow "
    "and require a lot of memory."
)
SAVE_TOOLTIP = (
    "Save classifier in the current project - this is required to use the "
    "classifier later (e.g. to create objects, measurements)"
)
CREATE_OBJECTS_TOOLTIP = "Create annotation or detection objects from the classification output"
MEASURE_TOOLTIP = "Add measurements to existing objects based upon the classification output"
CLASSIFY_TOOLTIP = "Classify detection based upon the prediction at the ROI centroid"
COPY_SCRIPT_TOOLTIP = "Copy the workflow history of the current image as a script"

# Logging
LOG_LEVEL = os.environ.get("PXC_UI_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=None):
    """
    Configure the root logger for the application.

    Parameters
    ----------
    level : str or int, optional
        Log level, by default the value of ``PXC_UI_LOG_LEVEL`` (INFO if unset)
    """
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
