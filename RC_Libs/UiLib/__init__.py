"""
UiLib - PyQt5 windows and dialogs

This module provides the main composer window, the per-channel panels
and the output size dialog.
"""

from RC_Libs.UiLib.channel_panel import ChannelPanel
from RC_Libs.UiLib.composer_window import ComposerWindow
from RC_Libs.UiLib.image_size_dialog import ImageSizeDialog

__all__ = [
    "ChannelPanel",
    "ComposerWindow",
    "ImageSizeDialog",
]
