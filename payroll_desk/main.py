#!/usr/bin/env python3
"""
Point d'entrée de Payroll Desk : charge l'environnement, configure le logging
puis ouvre la fenêtre principale.
"""

import logging
import sys

from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication

from payroll_desk.config import settings
from payroll_desk.services.session import Session
from payroll_desk.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Fonction principale de lancement"""
    settings.bootstrap_env()
    cfg = settings.get_runtime_config()
    logging.getLogger().setLevel(cfg["log_level"])

    QCoreApplication.setOrganizationName(cfg["org_name"])
    QCoreApplication.setApplicationName(cfg["app_name"])

    app = QApplication(sys.argv if argv is None else argv)

    session = Session(config=cfg)
    window = MainWindow(session)
    window.show()
    logger.info("Fenêtre principale ouverte (%s)", cfg["env"])

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
