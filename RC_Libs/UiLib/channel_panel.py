from pathlib import Path

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QFileDialog,
    QFrame,
    QGridLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QSpinBox,
    QWidget,
)

from RC_Libs.ComposeLib.channel_config import InputSource, SourceChannel
from RC_Libs.ComposeLib.image_io import get_input_image_filename_filter
from RC_Libs.SettingsLib.settings_store import ComposerSettings
from RC_Libs.constants import (
    CHANNEL_COLOR_NAMES,
    CHANNEL_NAME_MINIMUM_WIDTH,
    CHANNEL_NAME_POINT_SIZE,
    CHANNEL_NAMES,
    MAX_BYTE_VALUE,
    MIN_BYTE_VALUE,
    SOURCE_CHANNEL_LABELS,
)

NO_FILENAME_TEXT = "<choose filename>"


class ChannelPanel(QFrame):
    """
    Controls for one output channel.

    R  ( ) constant |___________|
       (*) image    |filename.png|
           [r,g,b,a]  [ ] invert

    Every change is written straight to the settings store.
    """

    def __init__(self, output_channel: int, settings: ComposerSettings, parent: QWidget = None) -> None:
        super().__init__(parent)
        self.output_channel = output_channel
        self.settings = settings

        self._build_ui()
        self._load_from_settings()
        self._connect_signals()

    def _build_ui(self) -> None:
        self.setFrameShape(QFrame.Box)
        self.setStyleSheet(f".ChannelPanel{{color: {CHANNEL_COLOR_NAMES[self.output_channel]}}}")

        grid = QGridLayout(self)
        grid.setColumnStretch(0, 0)
        grid.setColumnStretch(1, 0)
        grid.setColumnStretch(3, 1)

        label = QLabel(CHANNEL_NAMES[self.output_channel])
        font = label.font()
        font.setPointSize(CHANNEL_NAME_POINT_SIZE)
        label.setFont(font)
        label.setMinimumWidth(CHANNEL_NAME_MINIMUM_WIDTH)
        grid.addWidget(label, 0, 0, 3, 1, Qt.AlignHCenter | Qt.AlignVCenter)

        self.radio_constant = QRadioButton("constant", self)
        self.spin_constant = QSpinBox(self)
        self.spin_constant.setRange(MIN_BYTE_VALUE, MAX_BYTE_VALUE)
        self.spin_constant.setAlignment(Qt.AlignHCenter)
        grid.addWidget(self.radio_constant, 0, 1)
        grid.addWidget(self.spin_constant, 0, 2)
        grid.addWidget(QLabel("in [0, 255]"), 0, 3)

        self.radio_image = QRadioButton("image", self)
        self.btn_filename = QPushButton(NO_FILENAME_TEXT, self)
        grid.addWidget(self.radio_image, 1, 1)
        grid.addWidget(self.btn_filename, 1, 2, 1, 2)

        self.combo_channel = QComboBox(self)
        self.combo_channel.addItems(list(SOURCE_CHANNEL_LABELS))
        self.check_invert = QCheckBox("invert image", self)
        grid.addWidget(self.combo_channel, 2, 2)
        grid.addWidget(self.check_invert, 2, 3)

        self.source_group = QButtonGroup(self)
        self.source_group.addButton(self.radio_constant)
        self.source_group.addButton(self.radio_image)

    def _load_from_settings(self) -> None:
        channel = self.output_channel
        if self.settings.get_input_source(channel) == InputSource.IMAGE:
            self.radio_image.setChecked(True)
        else:
            self.radio_constant.setChecked(True)

        self.spin_constant.setValue(self.settings.get_input_constant(channel))
        self.combo_channel.setCurrentIndex(int(self.settings.get_input_channel(channel)))
        self.check_invert.setChecked(self.settings.get_input_image_invert(channel))
        self._show_filename(self.settings.get_input_image_filename(channel))

    def _connect_signals(self) -> None:
        self.radio_constant.toggled.connect(self.on_constant_toggled)
        self.radio_image.toggled.connect(self.on_image_toggled)
        self.spin_constant.valueChanged.connect(self.on_constant_value)
        self.btn_filename.clicked.connect(self.choose_filename)
        self.combo_channel.currentIndexChanged.connect(self.on_combo_channel)
        self.check_invert.toggled.connect(self.on_invert_toggled)

    def _show_filename(self, filename: str) -> None:
        self.btn_filename.setText(str(Path(filename)) if filename else NO_FILENAME_TEXT)

    def on_constant_toggled(self, checked: bool) -> None:
        if checked:
            self.settings.set_input_source(self.output_channel, InputSource.CONSTANT)

    def on_image_toggled(self, checked: bool) -> None:
        if checked:
            self.settings.set_input_source(self.output_channel, InputSource.IMAGE)

    def on_constant_value(self, value: int) -> None:
        self.settings.set_input_constant(self.output_channel, value)
        self.radio_constant.setChecked(True)

    def on_combo_channel(self, index: int) -> None:
        if index >= 0:
            self.settings.set_input_channel(self.output_channel, SourceChannel(index))

    def on_invert_toggled(self, checked: bool) -> None:
        self.settings.set_input_image_invert(self.output_channel, checked)

    def choose_filename(self) -> None:
        filename, _ = QFileDialog.getOpenFileName(
            self,
            "Select an input image",
            self.settings.get_input_dir(),
            get_input_image_filename_filter(),
        )
        if not filename:
            return

        self.settings.set_input_image_filename(self.output_channel, filename)
        self.settings.set_input_dir(str(Path(filename).parent))
        self._show_filename(filename)
        self.radio_image.setChecked(True)
