"""
Channel configuration data models for RGBA Composer.

Each of the four output channels (R, G, B, A) is fed independently, either
by a constant byte or by one channel of a source image.

Classes:
    InputSource: Where an output channel takes its bytes from
    SourceChannel: Which channel of a source image is extracted
    ImageSize: Width/height pair of an image
    OutputChannelConfig: Settings record for one output channel
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NamedTuple, Optional

from RC_Libs.constants import (
    CHANNEL_COUNT,
    CHANNEL_NAMES,
    DEFAULT_OUTPUT_HEIGHT,
    DEFAULT_OUTPUT_WIDTH,
    MAX_BYTE_VALUE,
    MIN_BYTE_VALUE,
)


class InputSource(str, Enum):
    CONSTANT = "constant"
    IMAGE = "image"


class SourceChannel(IntEnum):
    """Channel of an RGBA source pixel, valued by its index in the tuple."""

    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


class ImageSize(NamedTuple):
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


DEFAULT_OUTPUT_SIZE = ImageSize(DEFAULT_OUTPUT_WIDTH, DEFAULT_OUTPUT_HEIGHT)


def validate_output_channel(output_channel: int) -> int:
    """
    Check an output channel index.

    Args:
        output_channel: Index 0-3 ordered R, G, B, A

    Returns:
        The index as an int

    Raises:
        IndexError: If the index is outside 0-3
    """
    index = int(output_channel)
    if not (0 <= index < CHANNEL_COUNT):
        raise IndexError(f"output channel must be 0-{CHANNEL_COUNT - 1}, got {output_channel}")
    return index


def channel_name(output_channel: int) -> str:
    return CHANNEL_NAMES[validate_output_channel(output_channel)]


@dataclass(frozen=True)
class OutputChannelConfig:
    """Configuration for a single output channel.

    Attributes:
        input_source: Constant byte or image channel
        constant_value: Byte used when input_source is CONSTANT (0-255)
        image_filename: Source image path used when input_source is IMAGE
        source_channel: Channel extracted from the source image
        invert_image: Complement the extracted byte (255 - value)
    """
    input_source: InputSource = InputSource.CONSTANT
    constant_value: int = 0
    image_filename: Optional[str] = None
    source_channel: SourceChannel = SourceChannel.RED
    invert_image: bool = False

    def __post_init__(self):
        """Validate channel parameters."""
        object.__setattr__(self, "input_source", InputSource(self.input_source))

        if not (MIN_BYTE_VALUE <= self.constant_value <= MAX_BYTE_VALUE):
            raise ValueError(f"constant_value must be 0-255, got {self.constant_value}")

        object.__setattr__(self, "source_channel", SourceChannel(self.source_channel))
        object.__setattr__(self, "invert_image", bool(self.invert_image))

        if self.image_filename is not None:
            object.__setattr__(self, "image_filename", str(self.image_filename))

    @classmethod
    def constant(cls, value: int) -> "OutputChannelConfig":
        return cls(input_source=InputSource.CONSTANT, constant_value=value)

    @classmethod
    def image(
        cls,
        filename: str,
        source_channel: SourceChannel = SourceChannel.RED,
        invert: bool = False,
    ) -> "OutputChannelConfig":
        return cls(
            input_source=InputSource.IMAGE,
            image_filename=str(filename),
            source_channel=source_channel,
            invert_image=invert,
        )

