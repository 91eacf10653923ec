"""
Tests for channel configuration models.

Tests cover:
- Defaults and validation
- Convenience constructors
- Output channel index validation
"""

import unittest

from RC_Libs.ComposeLib.channel_config import (
    ImageSize,
    InputSource,
    OutputChannelConfig,
    SourceChannel,
    channel_name,
    validate_output_channel,
)


class TestOutputChannelConfig(unittest.TestCase):
    """Test OutputChannelConfig dataclass."""

    def test_defaults(self):
        """Default config is a zero constant reading red."""
        config = OutputChannelConfig()

        self.assertEqual(config.input_source, InputSource.CONSTANT)
        self.assertEqual(config.constant_value, 0)
        self.assertIsNone(config.image_filename)
        self.assertEqual(config.source_channel, SourceChannel.RED)
        self.assertFalse(config.invert_image)

    def test_constant_constructor(self):
        config = OutputChannelConfig.constant(200)

        self.assertEqual(config.input_source, InputSource.CONSTANT)
        self.assertEqual(config.constant_value, 200)

    def test_image_constructor(self):
        config = OutputChannelConfig.image("a.png", SourceChannel.ALPHA, invert=True)

        self.assertEqual(config.input_source, InputSource.IMAGE)
        self.assertEqual(config.image_filename, "a.png")
        self.assertEqual(config.source_channel, SourceChannel.ALPHA)
        self.assertTrue(config.invert_image)

    def test_validate_constant_range(self):
        """Test constant_value validation."""
        with self.assertRaises(ValueError):
            OutputChannelConfig.constant(256)

        with self.assertRaises(ValueError):
            OutputChannelConfig.constant(-1)

    def test_validate_source_channel(self):
        with self.assertRaises(ValueError):
            OutputChannelConfig(source_channel=4)

    def test_accepts_raw_enum_values(self):
        """Plain strings and ints are coerced to the enums."""
        config = OutputChannelConfig(input_source="image", image_filename="a.png", source_channel=2)

        self.assertEqual(config.input_source, InputSource.IMAGE)
        self.assertEqual(config.source_channel, SourceChannel.BLUE)

    def test_is_immutable(self):
        config = OutputChannelConfig()

        with self.assertRaises(Exception):
            config.constant_value = 5


class TestOutputChannelIndex(unittest.TestCase):

    def test_valid_indices(self):
        for index in range(4):
            self.assertEqual(validate_output_channel(index), index)

    def test_invalid_indices(self):
        with self.assertRaises(IndexError):
            validate_output_channel(4)

        with self.assertRaises(IndexError):
            validate_output_channel(-1)

    def test_channel_names(self):
        self.assertEqual([channel_name(i) for i in range(4)], ["R", "G", "B", "A"])


class TestImageSize(unittest.TestCase):

    def test_str(self):
        self.assertEqual(str(ImageSize(3, 2)), "3x2")

    def test_compares_as_tuple(self):
        self.assertEqual(ImageSize(3, 2), (3, 2))
