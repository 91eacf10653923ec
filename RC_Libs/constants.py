"""
Constants and configuration values for RGBA Composer.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

from pathlib import Path

# Application identity
ORGANIZATION_NAME = "ExclusiveOrange"
APPLICATION_NAME = "RGBA Composer"

# Output channels, in the order presented to the user
CHANNEL_COUNT = 4
CHANNEL_NAMES = ("R", "G", "B", "A")
CHANNEL_COLOR_NAMES = ("Red", "Green", "Blue", "Black")
SOURCE_CHANNEL_LABELS = ("red", "green", "blue", "alpha")

# Byte range for constant values and extracted channels
MIN_BYTE_VALUE = 0
MAX_BYTE_VALUE = 255

# UI constants
CHANNEL_NAME_POINT_SIZE = 32
CHANNEL_NAME_MINIMUM_WIDTH = 50
SAVE_BUTTON_POINT_SIZE = 24
MAX_IMAGE_DIMENSION = 65535

# Defaults
DEFAULT_OUTPUT_WIDTH = 1
DEFAULT_OUTPUT_HEIGHT = 1
DEFAULT_OUTPUT_FORMAT = "png (*.png)"
DEFAULT_INPUT_SOURCE = "constant"

# Settings file location
SETTINGS_DIR_NAME = ".rgba_composer"
SETTINGS_FILE_NAME = "settings.json"

# Settings keys
KEY_INPUT_DIR = "inputDir"
KEY_OUTPUT_DIR = "outputDir"
KEY_OUTPUT_FORMAT = "outputFormat"
KEY_OUTPUT_SIZE = "outputSize"
KEY_OUTPUT_CHANNEL = "outputChannel"

# Per output channel settings keys
KEY_CONSTANT_VALUE = "constantValue"
KEY_INPUT_CHANNEL = "inputChannel"
KEY_INPUT_IMAGE_FILENAME = "inputImageFilename"
KEY_INPUT_IMAGE_INVERT = "inputImageInvert"
KEY_INPUT_SOURCE = "inputSource"

# Supported file formats, keyed by extension -> Pillow format name
SUPPORTED_INPUT_FORMATS = {
    "bmp": "BMP",
    "gif": "GIF",
    "jpeg": "JPEG",
    "jpg": "JPEG",
    "png": "PNG",
    "tga": "TGA",
    "tif": "TIFF",
    "tiff": "TIFF",
    "webp": "WEBP",
}
SUPPORTED_OUTPUT_FORMATS = {
    "bmp": "BMP",
    "jpeg": "JPEG",
    "jpg": "JPEG",
    "png": "PNG",
    "tga": "TGA",
    "tif": "TIFF",
    "tiff": "TIFF",
    "webp": "WEBP",
}

# Formats that cannot carry an alpha channel
FORMATS_WITHOUT_ALPHA = {"JPEG"}


def get_default_settings_path() -> Path:
    """Location of the persisted settings file in the user's home directory."""
    return Path.home() / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME
