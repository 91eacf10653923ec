"""
Unit tests for output size resolution.
"""

from unittest.mock import Mock

import pytest

from RC_Libs.ComposeLib.channel_config import ImageSize
from RC_Libs.ComposeLib.output_size import resolve_output_size


class TestResolveOutputSize:
    """Tests for resolve_output_size function."""

    def test_seeds_prompt_with_default(self, settings):
        ask_size = Mock(return_value=ImageSize(8, 4))

        size = resolve_output_size(settings, ask_size)

        ask_size.assert_called_once_with(ImageSize(1, 1))
        assert size == ImageSize(8, 4)

    def test_persists_chosen_size(self, settings):
        resolve_output_size(settings, Mock(return_value=ImageSize(8, 4)))

        assert settings.get_output_size() == ImageSize(8, 4)

    def test_cancel_returns_none_and_persists_nothing(self, settings):
        settings.set_output_size(ImageSize(3, 3))

        assert resolve_output_size(settings, Mock(return_value=None)) is None
        assert settings.get_output_size() == ImageSize(3, 3)

    def test_accepts_plain_tuple(self, settings):
        size = resolve_output_size(settings, Mock(return_value=(2, 9)))

        assert isinstance(size, ImageSize)
        assert size == (2, 9)

    def test_rejects_non_positive_size(self, settings):
        with pytest.raises(ValueError):
            resolve_output_size(settings, Mock(return_value=ImageSize(0, 4)))
