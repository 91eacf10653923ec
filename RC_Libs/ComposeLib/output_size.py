"""
Output size resolution for compositions without any source image.

When every channel is a constant there is no image to take the size from,
so the user is asked. The prompt is seeded with the last size they chose.
"""

import logging
from typing import Callable, Optional

from RC_Libs.ComposeLib.channel_config import ImageSize

logger = logging.getLogger(__name__)

# Type alias for the interactive size prompt; returns None on cancel
AskSizeFunction = Callable[[ImageSize], Optional[ImageSize]]


def resolve_output_size(settings, ask_size: AskSizeFunction) -> Optional[ImageSize]:
    """
    Ask for the output size, remembering the answer for next time.

    Args:
        settings: ComposerSettings providing get/set_output_size
        ask_size: Prompt called with the initial size

    Returns:
        The chosen ImageSize, or None if the user cancelled
    """
    initial = settings.get_output_size()
    chosen = ask_size(initial)
    if chosen is None:
        logger.info("Output size prompt cancelled")
        return None

    size = ImageSize(int(chosen[0]), int(chosen[1]))
    if size.width < 1 or size.height < 1:
        raise ValueError(f"Output size must be positive, got {size}")

    settings.set_output_size(size)
    return size
