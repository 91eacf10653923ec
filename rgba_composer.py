import logging
import sys

from PyQt5.QtWidgets import QApplication

from RC_Libs.SettingsLib.settings_store import ComposerSettings, JsonSettingsStore
from RC_Libs.UiLib.composer_window import ComposerWindow
from RC_Libs.constants import APPLICATION_NAME, ORGANIZATION_NAME, get_default_settings_path


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationName(APPLICATION_NAME)

    settings = ComposerSettings(JsonSettingsStore(get_default_settings_path()))
    window = ComposerWindow(settings)
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
