"""
RGBA composition.

Builds one output image whose R, G, B and A channels each come from a
constant or from a channel of a source image.

Classes:
    RgbaComposer: Composes from stored settings and saves the result

Functions:
    build_pixel_readers: Resolve the four channel readers for one pass
    compose: Run one composition pass
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from PIL import Image

from RC_Libs.ComposeLib.channel_config import ImageSize, OutputChannelConfig, channel_name
from RC_Libs.ComposeLib.image_cache import DecoderFunction, ImageCache
from RC_Libs.ComposeLib.image_io import encode_image
from RC_Libs.ComposeLib.output_size import AskSizeFunction, resolve_output_size
from RC_Libs.ComposeLib.pixel_readers import PixelReader, make_pixel_reader
from RC_Libs.constants import CHANNEL_COUNT

logger = logging.getLogger(__name__)

SizeResolver = Callable[[], Optional[ImageSize]]


def build_pixel_readers(
    configs: Sequence[OutputChannelConfig],
    cache: ImageCache,
) -> List[PixelReader]:
    """
    Resolve one reader per output channel, in R, G, B, A order.

    Raises:
        ValueError: If configs does not hold exactly four entries
        DecodeError, SizeMismatchError: From the first failing channel
    """
    if len(configs) != CHANNEL_COUNT:
        raise ValueError(f"Expected {CHANNEL_COUNT} channel configs, got {len(configs)}")

    readers = []
    for output_channel, config in enumerate(configs):
        reader = make_pixel_reader(config, cache)
        logger.debug(f"Channel {channel_name(output_channel)}: {type(reader).__name__}")
        readers.append(reader)
    return readers


def compose(
    configs: Sequence[OutputChannelConfig],
    resolve_size: SizeResolver,
    decoder: Optional[DecoderFunction] = None,
) -> Optional[Image.Image]:
    """
    Run one composition pass.

    Args:
        configs: Four channel configs ordered R, G, B, A
        resolve_size: Called only when no channel reads an image; returns
                      the output size or None when the user cancels
        decoder: Optional decode collaborator for the image cache

    Returns:
        RGBA PIL Image, or None if the size prompt was cancelled

    Raises:
        DecodeError: If a source image cannot be read
        SizeMismatchError: If source images differ in size
    """
    cache = ImageCache(decoder)
    red, green, blue, alpha = build_pixel_readers(configs, cache)

    size = cache.working_size
    if size is None:
        size = resolve_size()
        if size is None:
            return None

    width, height = size
    pixels: List[Tuple[int, int, int, int]] = [
        (red(x, y), green(x, y), blue(x, y), alpha(x, y))
        for y in range(height)
        for x in range(width)
    ]

    image = Image.new("RGBA", (width, height))
    image.putdata(pixels)

    logger.info(f"Composed {width}x{height} image from {len(cache)} source image(s)")
    return image


class RgbaComposer:
    """
    Composes images from a ComposerSettings store.

    The settings object is passed in explicitly; the size prompt is supplied
    by the caller so the composer itself stays free of any UI.

    Example:
        >>> settings = ComposerSettings(MemorySettingsStore())
        >>> composer = RgbaComposer(settings, ask_size=lambda initial: ImageSize(4, 4))
        >>> image = composer.compose()
        >>> composer.save(image, "out.png")
    """

    def __init__(
        self,
        settings,
        ask_size: AskSizeFunction,
        decoder: Optional[DecoderFunction] = None,
    ):
        self.settings = settings
        self.ask_size = ask_size
        self.decoder = decoder

    def compose(self) -> Optional[Image.Image]:
        """Compose from the current settings. Returns None if cancelled."""
        configs = self.settings.get_channel_configs()
        return compose(
            configs,
            lambda: resolve_output_size(self.settings, self.ask_size),
            decoder=self.decoder,
        )

    def save(self, image: Image.Image, filename: str, output_format: Optional[str] = None):
        """
        Save a composed image, defaulting to the stored output format.

        Raises:
            EncodeError: If the file cannot be written
        """
        if output_format is None:
            output_format = self.settings.get_output_format()
        return encode_image(image, filename, output_format)
