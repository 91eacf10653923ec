"""
Per-composition cache of decoded source images.

Several output channels commonly read from the same file, so each filename
is decoded at most once per composition pass. The cache also records the
size of the first image it loads and rejects any later image whose size
differs. A new cache is created for every composition; source files may
change between passes.
"""

import logging
from typing import Callable, Dict, Optional

from RC_Libs.ComposeLib.channel_config import ImageSize
from RC_Libs.ComposeLib.errors import SizeMismatchError
from RC_Libs.ComposeLib.image_io import DecodedImage, decode_image

logger = logging.getLogger(__name__)

# Type alias for the decode collaborator
DecoderFunction = Callable[[str], DecodedImage]


class ImageCache:
    """
    Loads and memoizes decoded images by filename for one composition pass.

    Example:
        >>> cache = ImageCache()
        >>> red_source = cache.get_image("a.png")
        >>> cache.get_image("a.png") is red_source
        True
        >>> cache.working_size
        ImageSize(width=2, height=2)
    """

    def __init__(self, decoder: Optional[DecoderFunction] = None):
        self._decoder = decoder or decode_image
        self._images: Dict[str, DecodedImage] = {}
        self._working_size: Optional[ImageSize] = None

    @property
    def working_size(self) -> Optional[ImageSize]:
        """Size of the first image loaded in this pass, or None."""
        return self._working_size

    def __len__(self) -> int:
        return len(self._images)

    def __contains__(self, filename: str) -> bool:
        return str(filename) in self._images

    def get_image(self, filename: str) -> DecodedImage:
        """
        Return the decoded image for a filename, decoding it on first use.

        Args:
            filename: Path to the source image

        Returns:
            DecodedImage for the file

        Raises:
            DecodeError: If the decoder cannot read the file
            SizeMismatchError: If the image size differs from the working size
        """
        key = str(filename)
        cached = self._images.get(key)
        if cached is not None:
            logger.debug(f"Image cache hit: {key}")
            return cached

        image = self._decoder(key)
        size = ImageSize(image.width, image.height)

        if self._working_size is None:
            self._working_size = size
            logger.debug(f"Working size set to {size} by {key}")
        elif size != self._working_size:
            raise SizeMismatchError(key, self._working_size, size)

        self._images[key] = image
        return image
