"""
ComposeLib - Channel composition engine

This module resolves per-channel configuration into pixel readers,
caches decoded source images and builds the composed RGBA image.
"""

from RC_Libs.ComposeLib.channel_config import (
    ImageSize,
    InputSource,
    OutputChannelConfig,
    SourceChannel,
)
from RC_Libs.ComposeLib.errors import (
    CompositionError,
    DecodeError,
    EncodeError,
    SizeMismatchError,
)
from RC_Libs.ComposeLib.image_io import (
    DecodedImage,
    decode_image,
    encode_image,
    format_from_filter,
    get_input_image_filename_filter,
    get_output_image_filename_filter,
)
from RC_Libs.ComposeLib.image_cache import ImageCache
from RC_Libs.ComposeLib.pixel_readers import (
    ConstantReader,
    ImageChannelReader,
    make_pixel_reader,
)
from RC_Libs.ComposeLib.output_size import resolve_output_size
from RC_Libs.ComposeLib.composer import RgbaComposer, build_pixel_readers, compose

__all__ = [
    "ImageSize",
    "InputSource",
    "OutputChannelConfig",
    "SourceChannel",
    "CompositionError",
    "DecodeError",
    "EncodeError",
    "SizeMismatchError",
    "DecodedImage",
    "decode_image",
    "encode_image",
    "format_from_filter",
    "get_input_image_filename_filter",
    "get_output_image_filename_filter",
    "ImageCache",
    "ConstantReader",
    "ImageChannelReader",
    "make_pixel_reader",
    "resolve_output_size",
    "RgbaComposer",
    "build_pixel_readers",
    "compose",
]
