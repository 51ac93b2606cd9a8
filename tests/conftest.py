"""
Shared fixtures for the Qt tests.
"""

import os
import random

import pytest

# Must be set before the first QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtCore, QtWidgets  # noqa: E402

import securepasswordgenerator as spg  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    return QtCore.QSettings(str(tmp_path / "settings.ini"), QtCore.QSettings.IniFormat)


@pytest.fixture
def message_boxes(monkeypatch):
    """Record QMessageBox calls instead of blocking on them."""
    calls = []

    def recorder(kind):
        def fake(parent, title, text, *args, **kwargs):
            calls.append((kind, title, text))
            return QtWidgets.QMessageBox.Ok
        return fake

    for kind in ("critical", "information", "warning"):
        monkeypatch.setattr(QtWidgets.QMessageBox, kind, recorder(kind))
    return calls


@pytest.fixture
def window(qapp, settings):
    win = spg.MainWindow(core=spg.PasswordGeneratorCore(random.Random(1234)), settings=settings)
    yield win
    win.deleteLater()
