#styles.py
# Theme colours
PRIMARY_COLOR = "#4CAF50"
PRIMARY_COLOR_LIGHT = "#81c784"
SECONDARY_COLOR = "#2196F3"
SECONDARY_COLOR_LIGHT = "#64b5f6"

# Text colours
TEXT_COLOR = "#212121"
GRAY_COLOR = "#757575"
WHITE_COLOR = "#FFFFFF"

PRIMARY_BUTTON_STYLE = f"""
    QPushButton {{
        background-color: {PRIMARY_COLOR};
        color: {WHITE_COLOR};
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-size: 14px;
    }}
    QPushButton:hover {{
        background-color: {PRIMARY_COLOR_LIGHT};
    }}
    QPushButton:pressed {{
        background-color: {PRIMARY_COLOR};
    }}
"""

RED_BUTTON_STYLE = f"""
    QPushButton {{
        background-color: #FF4D4D;
        color: {WHITE_COLOR};
        border: none;
        border-radius: 4px;
        padding: 2px 8px;
        font-size: 12px;
    }}
    QPushButton:hover {{
        background-color: #FF8080;
    }}
    QPushButton:pressed {{
        background-color: #FF4D4D;
    }}
"""

LINE_EDIT_STYLE = """
    QLineEdit {
        border: 1px solid #ddd;
        border-radius: 4px;
        background-color: #e5e5e5;
        padding: 4px;
        font-size: 18px;
    }
    QLineEdit:focus {
        border: 1px solid #444;
    }
    QLineEdit:disabled {
        color: #757575;
    }
"""

FORM_ROW_STYLE = f"""
    QFrame#formRow {{
        border: 2px solid {SECONDARY_COLOR};
        border-radius: 6px;
        background-color: #f7fbff;
    }}
"""

LIST_ROW_STYLE = """
    QFrame#listRow {
        border-bottom: 1px solid #e0e0e0;
    }
"""

MESSAGE_BAR_STYLE = f"""
    QLabel {{
        color: {GRAY_COLOR};
        padding: 4px 8px;
        font-size: 13px;
    }}
"""
