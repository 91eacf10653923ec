"""
RC_Libs - RGBA Composer Library Modules

This package contains core functionality for the RGBA Composer project,
organized into specialized sub-packages:

- ComposeLib: Channel configuration, image cache, pixel readers and composition
- SettingsLib: Persistent key-value settings storage
- UiLib: PyQt5 windows and dialogs
"""

__version__ = "0.1.0"
