"""
Persistent settings for RGBA Composer.

Settings live in a flat key-value store. Per output channel values are kept
under an ``outputChannel_<n>/`` prefix. Stored values are never trusted:
every getter clamps or defaults whatever it finds.

Classes:
    MemorySettingsStore: In-memory key-value store
    JsonSettingsStore: Key-value store persisted as a JSON file
    ComposerSettings: Typed accessors over a key-value store
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from RC_Libs.ComposeLib.channel_config import (
    DEFAULT_OUTPUT_SIZE,
    ImageSize,
    InputSource,
    OutputChannelConfig,
    SourceChannel,
    validate_output_channel,
)
from RC_Libs.constants import (
    CHANNEL_COUNT,
    DEFAULT_INPUT_SOURCE,
    DEFAULT_OUTPUT_FORMAT,
    KEY_CONSTANT_VALUE,
    KEY_INPUT_CHANNEL,
    KEY_INPUT_DIR,
    KEY_INPUT_IMAGE_FILENAME,
    KEY_INPUT_IMAGE_INVERT,
    KEY_INPUT_SOURCE,
    KEY_OUTPUT_CHANNEL,
    KEY_OUTPUT_DIR,
    KEY_OUTPUT_FORMAT,
    KEY_OUTPUT_SIZE,
    MAX_BYTE_VALUE,
    MIN_BYTE_VALUE,
)

logger = logging.getLogger(__name__)


class MemorySettingsStore:
    """Dictionary-backed key-value store."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def value(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value

    def contains(self, key: str) -> bool:
        return key in self._values

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)


class JsonSettingsStore(MemorySettingsStore):
    """
    Key-value store persisted to a JSON file.

    The whole file is rewritten on every change. A missing, unreadable or
    corrupt file reads as an empty store.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> Dict[str, Any]:
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return {}

        if not isinstance(payload, dict):
            logger.warning(f"Ignoring settings file {self.path}: not a JSON object")
            return {}
        return payload

    def set_value(self, key: str, value: Any) -> None:
        super().set_value(key, value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._values, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Couldn't write settings file {self.path}: {e}")


def _clamp_int(value: Any, low: int, high: int, default: int, key: str) -> int:
    try:
        number = int(value)
    except OverflowError:
        # +/-Infinity
        clamped = high if value > 0 else low
        logger.warning(f"Stored value for {key} out of range: {value!r}, clamped to {clamped}")
        return clamped
    except (TypeError, ValueError):
        logger.warning(f"Invalid stored value for {key}: {value!r}, using {default}")
        return default

    clamped = max(low, min(high, number))
    if clamped != number:
        logger.warning(f"Stored value for {key} out of range: {number}, clamped to {clamped}")
    return clamped


class ComposerSettings:
    """
    Typed settings accessors over a key-value store.

    Output channels are indexed 0-3 in R, G, B, A order. Invalid indices
    raise IndexError.
    """

    def __init__(self, store=None):
        self.store = store if store is not None else MemorySettingsStore()

    def _channel_key(self, output_channel: int, key: str) -> str:
        index = validate_output_channel(output_channel)
        return f"{KEY_OUTPUT_CHANNEL}_{index}/{key}"

    # Per output channel settings

    def get_input_source(self, output_channel: int) -> InputSource:
        key = self._channel_key(output_channel, KEY_INPUT_SOURCE)
        value = self.store.value(key, DEFAULT_INPUT_SOURCE)
        try:
            return InputSource(value)
        except ValueError:
            logger.warning(f"Invalid stored value for {key}: {value!r}, using {DEFAULT_INPUT_SOURCE}")
            return InputSource(DEFAULT_INPUT_SOURCE)

    def set_input_source(self, output_channel: int, input_source: InputSource) -> None:
        key = self._channel_key(output_channel, KEY_INPUT_SOURCE)
        self.store.set_value(key, InputSource(input_source).value)

    def get_input_constant(self, output_channel: int) -> int:
        key = self._channel_key(output_channel, KEY_CONSTANT_VALUE)
        return _clamp_int(self.store.value(key, 0), MIN_BYTE_VALUE, MAX_BYTE_VALUE, 0, key)

    def set_input_constant(self, output_channel: int, constant: int) -> None:
        key = self._channel_key(output_channel, KEY_CONSTANT_VALUE)
        self.store.set_value(key, max(MIN_BYTE_VALUE, min(MAX_BYTE_VALUE, int(constant))))

    def get_input_image_filename(self, output_channel: int) -> str:
        key = self._channel_key(output_channel, KEY_INPUT_IMAGE_FILENAME)
        value = self.store.value(key, "")
        return value if isinstance(value, str) else ""

    def set_input_image_filename(self, output_channel: int, filename: str) -> None:
        key = self._channel_key(output_channel, KEY_INPUT_IMAGE_FILENAME)
        self.store.set_value(key, str(filename) if filename else "")

    def get_input_channel(self, output_channel: int) -> SourceChannel:
        key = self._channel_key(output_channel, KEY_INPUT_CHANNEL)
        value = self.store.value(key, int(SourceChannel.RED))
        try:
            return SourceChannel(int(value))
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Invalid stored value for {key}: {value!r}, using red")
            return SourceChannel.RED

    def set_input_channel(self, output_channel: int, input_channel: SourceChannel) -> None:
        key = self._channel_key(output_channel, KEY_INPUT_CHANNEL)
        self.store.set_value(key, int(SourceChannel(input_channel)))

    def get_input_image_invert(self, output_channel: int) -> bool:
        key = self._channel_key(output_channel, KEY_INPUT_IMAGE_INVERT)
        value = self.store.value(key, False)
        return value if isinstance(value, bool) else False

    def set_input_image_invert(self, output_channel: int, invert: bool) -> None:
        key = self._channel_key(output_channel, KEY_INPUT_IMAGE_INVERT)
        self.store.set_value(key, bool(invert))

    def get_channel_config(self, output_channel: int) -> OutputChannelConfig:
        filename = self.get_input_image_filename(output_channel)
        return OutputChannelConfig(
            input_source=self.get_input_source(output_channel),
            constant_value=self.get_input_constant(output_channel),
            image_filename=filename or None,
            source_channel=self.get_input_channel(output_channel),
            invert_image=self.get_input_image_invert(output_channel),
        )

    def set_channel_config(self, output_channel: int, config: OutputChannelConfig) -> None:
        self.set_input_source(output_channel, config.input_source)
        self.set_input_constant(output_channel, config.constant_value)
        self.set_input_image_filename(output_channel, config.image_filename or "")
        self.set_input_channel(output_channel, config.source_channel)
        self.set_input_image_invert(output_channel, config.invert_image)

    def get_channel_configs(self) -> List[OutputChannelConfig]:
        """Snapshot of all four channel configs, ordered R, G, B, A."""
        return [self.get_channel_config(channel) for channel in range(CHANNEL_COUNT)]

    # Global settings

    def get_output_size(self) -> ImageSize:
        value = self.store.value(KEY_OUTPUT_SIZE)
        if value is None:
            return DEFAULT_OUTPUT_SIZE

        if not isinstance(value, (list, tuple)) or len(value) != 2:
            logger.warning(f"Invalid stored value for {KEY_OUTPUT_SIZE}: {value!r}, using {DEFAULT_OUTPUT_SIZE}")
            return DEFAULT_OUTPUT_SIZE

        try:
            width, height = int(value[0]), int(value[1])
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Invalid stored value for {KEY_OUTPUT_SIZE}: {value!r}, using {DEFAULT_OUTPUT_SIZE}")
            return DEFAULT_OUTPUT_SIZE

        if width < 1 or height < 1:
            logger.warning(f"Invalid stored value for {KEY_OUTPUT_SIZE}: {value!r}, using {DEFAULT_OUTPUT_SIZE}")
            return DEFAULT_OUTPUT_SIZE
        return ImageSize(width, height)

    def set_output_size(self, size: ImageSize) -> None:
        width, height = size
        self.store.set_value(KEY_OUTPUT_SIZE, [int(width), int(height)])

    def get_output_format(self) -> str:
        value = self.store.value(KEY_OUTPUT_FORMAT, DEFAULT_OUTPUT_FORMAT)
        return value if isinstance(value, str) and value else DEFAULT_OUTPUT_FORMAT

    def set_output_format(self, output_format: str) -> None:
        self.store.set_value(KEY_OUTPUT_FORMAT, str(output_format))

    def get_input_dir(self) -> str:
        value = self.store.value(KEY_INPUT_DIR)
        if isinstance(value, str) and value and Path(value).is_dir():
            return value
        return Path.cwd().anchor or "/"

    def set_input_dir(self, input_dir: str) -> None:
        self.store.set_value(KEY_INPUT_DIR, str(input_dir))

    def get_output_dir(self) -> str:
        value = self.store.value(KEY_OUTPUT_DIR)
        if isinstance(value, str) and value and Path(value).is_dir():
            return value
        return self.get_input_dir()

    def set_output_dir(self, output_dir: str) -> None:
        self.store.set_value(KEY_OUTPUT_DIR, str(output_dir))
