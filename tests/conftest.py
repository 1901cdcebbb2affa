import os

import pytest


@pytest.fixture(scope="session")
def qapp():
    """QApplication unique, sans affichage (plateforme offscreen)."""
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
