from PyQt6.QtWidgets import QLineEdit

from constants import FIELD_BG


class StyledLineEdit(QLineEdit):
    """圆角灰底输入框"""
    def __init__(self, placeholder: str, parent=None):
        super().__init__(parent)
        self.setPlaceholderText(placeholder)
        self.setStyleSheet(f"""
            QLineEdit {{
                background: {FIELD_BG};
                border: 1px solid transparent;
                border-radius: 8px;
                padding: 8px;
            }}
        """)
