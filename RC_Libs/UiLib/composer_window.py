import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from PyQt5.QtWidgets import (
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from RC_Libs.ComposeLib.channel_config import ImageSize
from RC_Libs.ComposeLib.composer import RgbaComposer
from RC_Libs.ComposeLib.errors import DecodeError, EncodeError, SizeMismatchError
from RC_Libs.ComposeLib.image_io import get_output_image_filename_filter
from RC_Libs.SettingsLib.settings_store import ComposerSettings
from RC_Libs.UiLib.channel_panel import ChannelPanel
from RC_Libs.UiLib.image_size_dialog import ImageSizeDialog
from RC_Libs.constants import APPLICATION_NAME, CHANNEL_COUNT, SAVE_BUTTON_POINT_SIZE

logger = logging.getLogger(__name__)


@contextmanager
def disabled_while(widget: QWidget):
    """Disable a widget for the duration of the block."""
    widget.setDisabled(True)
    try:
        yield
    finally:
        widget.setDisabled(False)


class ComposerWindow(QMainWindow):
    def __init__(self, settings: ComposerSettings) -> None:
        super().__init__()
        self.setWindowTitle(APPLICATION_NAME)

        self.settings = settings
        self.composer = RgbaComposer(settings, ask_size=self.ask_image_size)

        self._build_ui()
        self._connect_signals()

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QVBoxLayout(central)

        self.channel_panels = [
            ChannelPanel(output_channel, self.settings, central)
            for output_channel in range(CHANNEL_COUNT)
        ]
        for panel in self.channel_panels:
            root.addWidget(panel)

        self.btn_save = QPushButton("Save Composite Image...")
        font = self.btn_save.font()
        font.setPointSize(SAVE_BUTTON_POINT_SIZE)
        self.btn_save.setFont(font)
        root.addWidget(self.btn_save)

        self.adjustSize()
        self.setFixedHeight(self.size().height())

    def _connect_signals(self) -> None:
        self.btn_save.clicked.connect(self.save_composite)

    def ask_image_size(self, initial: ImageSize) -> Optional[ImageSize]:
        dialog = ImageSizeDialog(
            "What image size?",
            "Since no input images were selected, you must tell me what size to make the output image.",
            initial,
            self,
        )
        return dialog.get_image_size_modal()

    def save_composite(self) -> None:
        with disabled_while(self):
            try:
                composition = self.composer.compose()
            except DecodeError as e:
                logger.error(str(e))
                self._show_error("Error reading image file", str(e))
                return
            except SizeMismatchError as e:
                logger.error(str(e))
                self._show_error(
                    "Image size mismatch",
                    f"The input images must be the same size but are different sizes.\n\n"
                    f"{e.filename} is {e.actual_size}, expected {e.expected_size}.",
                )
                return

            if composition is None:
                return

            filename, output_format = QFileDialog.getSaveFileName(
                self,
                "Composite image output filename",
                self.settings.get_output_dir(),
                get_output_image_filename_filter(),
                self.settings.get_output_format(),
            )
            if not filename:
                return

            self.settings.set_output_dir(str(Path(filename).parent))
            if output_format:
                self.settings.set_output_format(output_format)

            try:
                self.composer.save(composition, filename, output_format or None)
            except EncodeError as e:
                logger.error(str(e))
                self._show_error("Error saving image file", f"Couldn't save image to file {filename}\n\n{e.reason}")

    def _show_error(self, title: str, message: str) -> None:
        QMessageBox.critical(self, title, message)
