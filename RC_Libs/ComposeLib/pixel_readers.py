"""
Pixel readers: pure (x, y) -> byte functions for one output channel.

A reader is either a constant or a channel of a decoded source image. Both
are immutable values, so a composition can be driven and tested without any
user interface.
"""

import logging
from dataclasses import dataclass
from typing import Tuple, Union

from RC_Libs.ComposeLib.channel_config import InputSource, OutputChannelConfig, SourceChannel
from RC_Libs.ComposeLib.errors import DecodeError
from RC_Libs.ComposeLib.image_cache import ImageCache
from RC_Libs.ComposeLib.image_io import DecodedImage
from RC_Libs.constants import MAX_BYTE_VALUE

logger = logging.getLogger(__name__)


def extract_channel(rgba: Tuple[int, int, int, int], channel: SourceChannel) -> int:
    """Pick one channel's byte out of an (r, g, b, a) pixel."""
    return rgba[channel]


def invert_byte(value: int) -> int:
    return MAX_BYTE_VALUE - value


@dataclass(frozen=True)
class ConstantReader:
    """Reader returning the same byte at every coordinate."""
    value: int

    def __call__(self, x: int, y: int) -> int:
        return self.value


@dataclass(frozen=True)
class ImageChannelReader:
    """Reader extracting one channel of a source image, optionally inverted.

    Attributes:
        image: Decoded source image
        channel: Channel to extract
        invert: Return 255 - value instead of value
    """
    image: DecodedImage
    channel: SourceChannel
    invert: bool = False

    def __call__(self, x: int, y: int) -> int:
        value = extract_channel(self.image.pixel(x, y), self.channel)
        if self.invert:
            return invert_byte(value)
        return value


PixelReader = Union[ConstantReader, ImageChannelReader]


def make_pixel_reader(config: OutputChannelConfig, cache: ImageCache) -> PixelReader:
    """
    Build the reader for one output channel.

    Args:
        config: The channel's configuration
        cache: Image cache of the current composition pass

    Returns:
        ConstantReader or ImageChannelReader

    Raises:
        DecodeError: If the source image is missing or unreadable
        SizeMismatchError: If the source image size differs from earlier images
    """
    if config.input_source == InputSource.CONSTANT:
        return ConstantReader(config.constant_value)

    if not config.image_filename:
        raise DecodeError(config.image_filename, "no image selected")

    image = cache.get_image(config.image_filename)
    logger.debug(
        f"Reader for {config.image_filename}: channel={config.source_channel.name.lower()}, "
        f"invert={config.invert_image}"
    )
    return ImageChannelReader(image, config.source_channel, config.invert_image)
