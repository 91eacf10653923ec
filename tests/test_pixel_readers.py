"""
Tests for pixel reader resolution.

Tests cover:
- Constant readers
- Channel extraction for every source channel
- Inversion
- Error propagation from the image cache
"""

import unittest
from unittest.mock import Mock

from PIL import Image

from RC_Libs.ComposeLib.channel_config import OutputChannelConfig, SourceChannel
from RC_Libs.ComposeLib.errors import DecodeError, SizeMismatchError
from RC_Libs.ComposeLib.image_cache import ImageCache
from RC_Libs.ComposeLib.image_io import DecodedImage
from RC_Libs.ComposeLib.pixel_readers import (
    ConstantReader,
    ImageChannelReader,
    extract_channel,
    invert_byte,
    make_pixel_reader,
)


PIXELS = {
    (0, 0): (10, 20, 30, 40),
    (1, 0): (50, 60, 70, 80),
    (0, 1): (90, 100, 110, 120),
    (1, 1): (130, 140, 150, 255),
}


def _decoded(filename="src.png"):
    image = Image.new("RGBA", (2, 2))
    access = image.load()
    for (x, y), value in PIXELS.items():
        access[x, y] = value
    return DecodedImage(filename, image)


class TestExtraction(unittest.TestCase):

    def test_extract_each_channel(self):
        rgba = (1, 2, 3, 4)

        self.assertEqual(extract_channel(rgba, SourceChannel.RED), 1)
        self.assertEqual(extract_channel(rgba, SourceChannel.GREEN), 2)
        self.assertEqual(extract_channel(rgba, SourceChannel.BLUE), 3)
        self.assertEqual(extract_channel(rgba, SourceChannel.ALPHA), 4)

    def test_invert_byte(self):
        self.assertEqual(invert_byte(0), 255)
        self.assertEqual(invert_byte(255), 0)
        for value in (0, 1, 127, 128, 254, 255):
            self.assertEqual(invert_byte(invert_byte(value)), value)


class TestMakePixelReader(unittest.TestCase):
    """Test make_pixel_reader."""

    def setUp(self):
        self.decoder = Mock(side_effect=_decoded)
        self.cache = ImageCache(self.decoder)

    def test_constant_ignores_coordinates(self):
        reader = make_pixel_reader(OutputChannelConfig.constant(42), self.cache)

        self.assertIsInstance(reader, ConstantReader)
        self.assertEqual(reader(0, 0), 42)
        self.assertEqual(reader(1000, 5), 42)
        self.decoder.assert_not_called()

    def test_red_channel_matches_source(self):
        config = OutputChannelConfig.image("src.png", SourceChannel.RED)

        reader = make_pixel_reader(config, self.cache)

        self.assertIsInstance(reader, ImageChannelReader)
        for (x, y), value in PIXELS.items():
            self.assertEqual(reader(x, y), value[0])

    def test_each_source_channel(self):
        for channel in SourceChannel:
            reader = make_pixel_reader(OutputChannelConfig.image("src.png", channel), self.cache)
            for (x, y), value in PIXELS.items():
                self.assertEqual(reader(x, y), value[channel])

    def test_invert_complements_red(self):
        config = OutputChannelConfig.image("src.png", SourceChannel.RED, invert=True)

        reader = make_pixel_reader(config, self.cache)

        for (x, y), value in PIXELS.items():
            self.assertEqual(reader(x, y), 255 - value[0])

    def test_missing_filename_raises_decode_error(self):
        config = OutputChannelConfig(input_source="image")

        with self.assertRaises(DecodeError):
            make_pixel_reader(config, self.cache)

    def test_decode_error_propagates_unchanged(self):
        error = DecodeError("broken.png", "truncated")
        cache = ImageCache(Mock(side_effect=error))

        with self.assertRaises(DecodeError) as ctx:
            make_pixel_reader(OutputChannelConfig.image("broken.png"), cache)

        self.assertIs(ctx.exception, error)

    def test_size_mismatch_propagates(self):
        sizes = {"a.png": (2, 2), "b.png": (5, 5)}
        cache = ImageCache(lambda name: DecodedImage(name, Image.new("RGBA", sizes[name])))
        make_pixel_reader(OutputChannelConfig.image("a.png"), cache)

        with self.assertRaises(SizeMismatchError):
            make_pixel_reader(OutputChannelConfig.image("b.png"), cache)
