from typing import Optional

from PyQt5.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from RC_Libs.ComposeLib.channel_config import ImageSize
from RC_Libs.constants import MAX_IMAGE_DIMENSION


class ImageSizeDialog(QDialog):
    """Modal prompt for an output image size."""

    def __init__(self, title: str, body_text: str, image_size: ImageSize, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)

        self._build_ui(body_text)
        self.spin_width.setValue(image_size.width)
        self.spin_height.setValue(image_size.height)

        self.adjustSize()
        self.setFixedSize(self.size())

    def _build_ui(self, body_text: str) -> None:
        root = QVBoxLayout(self)

        self.label_body = QLabel(body_text)
        self.label_body.setWordWrap(True)
        root.addWidget(self.label_body)

        form = QFormLayout()
        self.spin_width = QSpinBox()
        self.spin_width.setRange(1, MAX_IMAGE_DIMENSION)
        self.spin_height = QSpinBox()
        self.spin_height.setRange(1, MAX_IMAGE_DIMENSION)
        form.addRow("Width", self.spin_width)
        form.addRow("Height", self.spin_height)
        root.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        root.addWidget(buttons)

    def get_image_size_modal(self) -> Optional[ImageSize]:
        """Show the dialog; return the entered size, or None if cancelled."""
        if self.exec_() == QDialog.Accepted:
            return ImageSize(self.spin_width.value(), self.spin_height.value())
        return None
