"""
Errors raised while composing and saving images.

A composition stops at the first error; no partial image is produced.
User cancellation of the size prompt is not an error and is reported by
``compose`` returning ``None``.
"""

from typing import Optional

from RC_Libs.ComposeLib.channel_config import ImageSize


class CompositionError(Exception):
    """Base class for composition failures tied to a file."""

    def __init__(self, filename: Optional[str], message: str):
        super().__init__(message)
        self.filename = filename


class DecodeError(CompositionError):
    """A source image could not be read."""

    def __init__(self, filename: Optional[str], reason: str):
        super().__init__(filename, f"Couldn't read image from file {filename or '<none>'}: {reason}")
        self.reason = reason


class SizeMismatchError(CompositionError):
    """A source image's dimensions differ from the images loaded before it."""

    def __init__(self, filename: str, expected_size: ImageSize, actual_size: ImageSize):
        super().__init__(
            filename,
            f"The input images must be the same size: {filename} is {actual_size}, "
            f"expected {expected_size}",
        )
        self.expected_size = expected_size
        self.actual_size = actual_size


class EncodeError(CompositionError):
    """The composed image could not be written."""

    def __init__(self, filename: str, reason: str):
        super().__init__(filename, f"Couldn't save image to file {filename}: {reason}")
        self.reason = reason
