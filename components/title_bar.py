from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PyQt6.QtGui import QFont

from constants import WINDOW_TITLE


class TitleBar(QWidget):
    """顶部标题"""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.layout = QHBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)
        self.layout.addStretch()

        self.title_label = QLabel(WINDOW_TITLE)
        font = QFont()
        font.setPointSize(20)
        self.title_label.setFont(font)
        self.layout.addWidget(self.title_label)
        self.layout.addStretch()
