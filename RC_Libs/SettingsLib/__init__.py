"""
SettingsLib - Persistent application settings

This module stores the per-channel configuration and the remembered
directories, output size and output format between runs.
"""

from RC_Libs.SettingsLib.settings_store import (
    ComposerSettings,
    JsonSettingsStore,
    MemorySettingsStore,
)

__all__ = [
    "ComposerSettings",
    "JsonSettingsStore",
    "MemorySettingsStore",
]
