# -*- coding: utf-8 -*-
"""
Secure Password Generator (PyQt5)

Key features
- Length selector bounded to 8-30 characters.
- Every password contains at least one digit, one symbol, one lowercase and one
  uppercase letter; the rest is drawn from the union of all pools.
- Fisher-Yates shuffle so the guaranteed characters land anywhere.
- One-click copy to the system clipboard, with a dialog when nothing was generated yet.
- Last used length and window geometry remembered via QSettings.

Notes
- Randomness comes from random.Random, a general-purpose PRNG. Inject a seeded
  instance into PasswordGeneratorCore for reproducible output.
"""

from __future__ import annotations

import logging
import random
import sys
from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Tuple

from PyQt5 import QtCore, QtGui, QtWidgets

# -------------------------
# Application Constants
# -------------------------

APP_ORG = "SecurePasswordTools"
APP_NAME = "SecurePasswordGenerator"
APP_TITLE = "Secure Password Generator"

DEFAULT_LENGTH = 8
MIN_LENGTH = 8
MAX_LENGTH = 30

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?"
ALL_CHARS = LOWERCASE + UPPERCASE + NUMBERS + SYMBOLS

# Shown in the output field until the first password is generated.
PROMPT_TEXT = "Click 'Generate Password'"

STATUS_TIMEOUT_MS = 5000


# -------------------------
# Logging (quiet by default)
# -------------------------

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CharacterPool:
    name: str
    chars: str


# Draw order for the guaranteed characters.
CHARACTER_POOLS: Tuple[CharacterPool, ...] = (
    CharacterPool("digits", NUMBERS),
    CharacterPool("symbols", SYMBOLS),
    CharacterPool("lowercase", LOWERCASE),
    CharacterPool("uppercase", UPPERCASE),
)


# =========================
#   CORE PASSWORD ENGINE
# =========================

class PasswordGeneratorCore:
    """
    Password generator with a pool-coverage guarantee.

    Generation
    - One random character from each pool in CHARACTER_POOLS.
    - The remaining positions filled uniformly from ALL_CHARS.
    - In-place Fisher-Yates shuffle of the whole buffer.

    The PRNG is injectable; two cores built from identically seeded
    random.Random instances produce the same passwords.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng: random.Random = rng if rng is not None else random.Random()

    @staticmethod
    def _validate_length(length: int) -> None:
        # bool is an int subclass; True would otherwise pass as 1.
        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError(f"Password length must be an integer, got {type(length).__name__}.")
        if not MIN_LENGTH <= length <= MAX_LENGTH:
            raise ValueError(
                f"Password length must be between {MIN_LENGTH} and {MAX_LENGTH} characters, got {length}."
            )

    def _pick(self, chars: str) -> str:
        return chars[self._rng.randrange(len(chars))]

    def shuffle(self, chars: MutableSequence[str]) -> None:
        """Fisher-Yates shuffle of ``chars`` in place."""
        for i in range(len(chars) - 1, 0, -1):
            j = self._rng.randint(0, i)
            chars[i], chars[j] = chars[j], chars[i]

    def generate_password(self, length: int) -> str:
        """
        Generate a password of ``length`` characters.

        Raises:
            TypeError if length is not an integer.
            ValueError if length is outside MIN_LENGTH..MAX_LENGTH.
        """
        self._validate_length(length)

        chars: List[str] = [self._pick(pool.chars) for pool in CHARACTER_POOLS]
        for _ in range(length - len(chars)):
            chars.append(self._pick(ALL_CHARS))

        self.shuffle(chars)
        logger.debug("Generated password of length %d.", length)
        return "".join(chars)


# =========================
#        MAIN WINDOW
# =========================

class MainWindow(QtWidgets.QMainWindow):
    """
    Length selector, generate button, read-only output and copy button.

    Settings persistence (length, geometry) goes through QSettings.
    """

    def __init__(
        self,
        core: Optional[PasswordGeneratorCore] = None,
        settings: Optional[QtCore.QSettings] = None,
    ) -> None:
        super().__init__()

        self.core = core if core is not None else PasswordGeneratorCore()
        self.settings = settings if settings is not None else QtCore.QSettings(APP_ORG, APP_NAME)

        self.setWindowTitle(APP_TITLE)

        self._build_ui()
        self._build_menu_bar()
        self._load_settings()

    # ---------- UI CONSTRUCTION ----------

    def _build_ui(self) -> None:
        central = QtWidgets.QWidget(self)
        self.setCentralWidget(central)

        layout = QtWidgets.QGridLayout(central)
        layout.setContentsMargins(5, 5, 5, 5)
        layout.setSpacing(5)

        # Row 0: length + generate
        self.length_label = QtWidgets.QLabel("Password Length:")
        self.length_spin = QtWidgets.QSpinBox()
        self.length_spin.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_spin.setSingleStep(1)
        self.length_spin.setValue(DEFAULT_LENGTH)
        self.generate_btn = QtWidgets.QPushButton("Generate Password")

        layout.addWidget(self.length_label, 0, 0, QtCore.Qt.AlignLeft)
        layout.addWidget(self.length_spin, 0, 1)
        layout.addWidget(self.generate_btn, 0, 2)

        # Row 1: output + copy
        mono_font = QtGui.QFont("Monospace", 14)
        mono_font.setStyleHint(QtGui.QFont.TypeWriter)
        mono_font.setBold(True)

        self.password_edit = QtWidgets.QLineEdit(PROMPT_TEXT)
        self.password_edit.setReadOnly(True)
        self.password_edit.setFont(mono_font)
        self.copy_btn = QtWidgets.QPushButton("Copy to Clipboard")

        layout.addWidget(self.password_edit, 1, 0, 1, 2)
        layout.addWidget(self.copy_btn, 1, 2)

        layout.setColumnStretch(1, 1)
        layout.setColumnStretch(2, 2)

        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready.")

        self.generate_btn.clicked.connect(self.on_generate_clicked)
        self.copy_btn.clicked.connect(self.on_copy_clicked)

    def _build_menu_bar(self) -> None:
        menubar = self.menuBar()

        def add_action(menu: QtWidgets.QMenu, text: str, shortcut: str, handler, status_tip: str) -> QtWidgets.QAction:
            action = QtWidgets.QAction(text, self)
            if shortcut:
                action.setShortcut(shortcut)
            action.setStatusTip(status_tip)
            action.triggered.connect(handler)
            menu.addAction(action)
            return action

        # File
        file_menu = menubar.addMenu("&File")
        self.generate_action = add_action(
            file_menu, "&Generate password", "Ctrl+G", self.on_generate_clicked, "Generate a new password"
        )
        # Ctrl+C stays with the line edit's own text selection copy.
        self.copy_action = add_action(
            file_menu, "&Copy to clipboard", "Ctrl+Shift+C", self.on_copy_clicked, "Copy the current password"
        )
        file_menu.addSeparator()
        add_action(file_menu, "E&xit", "Ctrl+Q", self.close, "Quit the application")

        # Help
        help_menu = menubar.addMenu("&Help")
        add_action(help_menu, "&About", "F1", self.show_about_dialog, "About this application")

    def _center_on_screen(self) -> None:
        screen = QtWidgets.QApplication.primaryScreen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())

    # ---------- SETTINGS ----------

    def _load_settings(self) -> None:
        # QSpinBox clamps anything outside MIN_LENGTH..MAX_LENGTH.
        self.length_spin.setValue(self.settings.value("length", DEFAULT_LENGTH, type=int))

        geometry = self.settings.value("geometry", QtCore.QByteArray(), type=QtCore.QByteArray)
        if geometry.isEmpty() or not self.restoreGeometry(geometry):
            self.adjustSize()
            self._center_on_screen()

    def _save_settings(self) -> None:
        self.settings.setValue("geometry", self.saveGeometry())
        self.settings.setValue("length", self.length_spin.value())
        self.settings.sync()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._save_settings()
        super().closeEvent(event)

    # ---------- ACTIONS ----------

    def has_password(self) -> bool:
        text = self.password_edit.text()
        return bool(text) and text != PROMPT_TEXT

    def on_generate_clicked(self) -> None:
        length = self.length_spin.value()

        try:
            password = self.core.generate_password(length)
        except ValueError as e:
            logger.warning("Password generation failed: %s", e)
            QtWidgets.QMessageBox.critical(self, "Generation error", f"Password generation failed:\n{e}")
            return

        self.password_edit.setText(password)
        self.status_bar.showMessage(f"Generated a {length}-character password.", STATUS_TIMEOUT_MS)

    def on_copy_clicked(self) -> None:
        if not self.has_password():
            logger.debug("Copy requested before a password was generated.")
            QtWidgets.QMessageBox.critical(self, "Error", "Please generate a password first.")
            return

        clipboard = QtWidgets.QApplication.clipboard()
        clipboard.setText(self.password_edit.text())

        self.status_bar.showMessage("Password copied to clipboard.", STATUS_TIMEOUT_MS)
        QtWidgets.QMessageBox.information(self, "Success", "Password copied to clipboard!")

    def show_about_dialog(self) -> None:
        QtWidgets.QMessageBox.about(
            self,
            f"About {APP_TITLE}",
            (
                f"{APP_TITLE}\n\n"
                f"• Lengths from {MIN_LENGTH} to {MAX_LENGTH} characters\n"
                "• At least one digit, symbol, lowercase and uppercase letter\n"
                "• One-click copy to the clipboard\n\n"
                "Randomness comes from a general-purpose PRNG. For high-value accounts, "
                "prefer a password manager's generator."
            ),
        )


# =========================
#          ENTRY
# =========================

def main() -> None:
    # High-DPI friendliness (must be set before app creation)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
    QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    app = QtWidgets.QApplication(sys.argv)
    app.setOrganizationName(APP_ORG)
    app.setApplicationName(APP_NAME)

    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
