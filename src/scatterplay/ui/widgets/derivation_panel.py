"""
File: derivation_panel.py
Description: Read-only panel showing a step-by-step calculation
"""

from PyQt6.QtWidgets import QGroupBox, QVBoxLayout, QTextEdit
from PyQt6.QtGui import QFont
from typing import List


class DerivationPanel(QGroupBox):
    """Titled text panel for derivation lines."""

    def __init__(self, title: str, width: int = 340):
        super().__init__(title)

        self.display = QTextEdit()
        self.display.setReadOnly(True)
        self.display.setLineWrapMode(QTextEdit.LineWrapMode.NoWrap)
        self.display.setFont(QFont("Courier New", 9))
        self.setMinimumWidth(width)

        layout = QVBoxLayout(self)
        layout.addWidget(self.display)

    def set_lines(self, lines: List[str]):
        self.display.setPlainText('\n'.join(lines))

    def toPlainText(self) -> str:
        return self.display.toPlainText()
