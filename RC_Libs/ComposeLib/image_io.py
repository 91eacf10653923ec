"""
Image decoding and encoding for RGBA Composer.

Pillow does the actual codec work. Source images are always converted to
RGBA on load so that every pixel is an (r, g, b, a) tuple regardless of the
file's own mode.

Classes:
    DecodedImage: A loaded source image with RGBA pixel access

Functions:
    decode_image: Load a source image from disk
    encode_image: Save a composed image to disk
    format_from_filter: Map a file dialog filter to a Pillow format name
    get_input_image_filename_filter: File dialog filter for source images
    get_output_image_filename_filter: File dialog filter for output images
"""

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from RC_Libs.ComposeLib.channel_config import ImageSize
from RC_Libs.ComposeLib.errors import DecodeError, EncodeError
from RC_Libs.constants import (
    FORMATS_WITHOUT_ALPHA,
    SUPPORTED_INPUT_FORMATS,
    SUPPORTED_OUTPUT_FORMATS,
)

logger = logging.getLogger(__name__)

# Matches the extension inside a filter such as "png (*.png)"
FILTER_EXTENSION_PATTERN = r'\(\*\.([A-Za-z0-9]+)'


@dataclass
class DecodedImage:
    """A source image held for the duration of one composition.

    Attributes:
        filename: Path the image was loaded from
        image: RGBA PIL Image
    """
    filename: str
    image: Any
    _pixels: Any = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if self.image.mode != "RGBA":
            self.image = self.image.convert("RGBA")
        self._pixels = self.image.load()

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> ImageSize:
        return ImageSize(self.image.width, self.image.height)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the (r, g, b, a) tuple at (x, y)."""
        return self._pixels[x, y]


def decode_image(filename: str) -> DecodedImage:
    """
    Load a source image from disk.

    Args:
        filename: Path to the image file

    Returns:
        DecodedImage in RGBA mode

    Raises:
        DecodeError: If the file is missing, unreadable or not an image
    """
    path = Path(filename)
    if not path.is_file():
        raise DecodeError(str(filename), "file not found")

    try:
        with Image.open(path) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise DecodeError(str(filename), str(e)) from e

    logger.debug(f"Decoded {filename} ({rgba.width}x{rgba.height}, source mode {img.mode})")
    return DecodedImage(filename=str(filename), image=rgba)


def format_from_filter(output_filter: Optional[str]) -> Optional[str]:
    """
    Map a file dialog filter to a Pillow format name.

    Args:
        output_filter: Filter string like "png (*.png)", or a bare extension

    Returns:
        Pillow format name (e.g. "PNG"), or None if not recognised

    Example:
        >>> format_from_filter("jpg (*.jpg)")
        'JPEG'
    """
    if not output_filter:
        return None

    match = re.search(FILTER_EXTENSION_PATTERN, output_filter)
    extension = match.group(1) if match else output_filter.strip().lstrip(".")
    return SUPPORTED_OUTPUT_FORMATS.get(extension.lower())


def _format_from_suffix(filename: str) -> Optional[str]:
    suffix = Path(filename).suffix.lower().lstrip(".")
    return SUPPORTED_OUTPUT_FORMATS.get(suffix)


def encode_image(image: Any, filename: str, output_format: Optional[str] = None) -> Path:
    """
    Save a composed image to disk.

    The format is taken from the filename's extension when it names a
    supported format, otherwise from ``output_format`` (a dialog filter or
    extension). Formats without alpha support get an RGB copy.

    Args:
        image: PIL Image to save
        filename: Destination path
        output_format: Optional dialog filter such as "png (*.png)"

    Returns:
        Path where the image was saved

    Raises:
        EncodeError: If no format can be determined or the write fails
    """
    if not hasattr(image, "save"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    save_format = _format_from_suffix(filename) or format_from_filter(output_format)
    if save_format is None:
        raise EncodeError(str(filename), f"unsupported output format '{output_format}'")

    if image.mode == "RGBA" and save_format in FORMATS_WITHOUT_ALPHA:
        image = image.convert("RGB")

    output_file = Path(filename)
    try:
        image.save(output_file, format=save_format)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(str(filename), str(e)) from e

    logger.info(f"Saved {image.width}x{image.height} {save_format} image to {output_file}")
    return output_file


def _unique_extensions(formats) -> list:
    return sorted(formats.keys())


@lru_cache(maxsize=None)
def get_input_image_filename_filter() -> str:
    """
    File dialog filter for source images.

    The first entry covers every supported extension, followed by one entry
    per extension.

    Returns:
        Filter string like "Images (*.bmp *.gif ...);;bmp (*.bmp);;..."
    """
    extensions = _unique_extensions(SUPPORTED_INPUT_FORMATS)
    all_filter = "Images (" + " ".join(f"*.{ext}" for ext in extensions) + ")"
    filters = [all_filter] + [f"{ext} (*.{ext})" for ext in extensions]
    return ";;".join(filters)


@lru_cache(maxsize=None)
def get_output_image_filename_filter() -> str:
    """File dialog filter for output images, one entry per extension."""
    extensions = _unique_extensions(SUPPORTED_OUTPUT_FORMATS)
    return ";;".join(f"{ext} (*.{ext})" for ext in extensions)
