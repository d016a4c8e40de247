from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import sys
import os

from keypadcalc.config import APP_ID, ORG_ID, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)


def create_app() -> QApplication:
    """Create and configure the QApplication instance (or reuse the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    else:
        logger.debug("Reusing existing QApplication instance.")

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
