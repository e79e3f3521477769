"""
Theme definitions for the Class Registration window.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#2563EB"
    PRIMARY_BLUE_HOVER = "#1D4ED8"
    PRIMARY_BLUE_PRESSED = "#1E40AF"
    PRIMARY_TINT = "#EFF6FF"
    PRIMARY_TINT_BORDER = "#BFDBFE"
    PRIMARY_DARK = "#1E3A8A"

    # Backgrounds
    BACKGROUND = "#f8fafc"
    SURFACE = "#ffffff"
    SURFACE_MUTED = "#f1f5f9"
    HOVER = "#f0f0f0"
    DISABLED_BG = "#94a3b8"

    # Text
    TEXT_PRIMARY = "#1e293b"
    TEXT_SECONDARY = "#64748b"
    TEXT_DISABLED = "#f8fafc"
    TEXT_ON_PRIMARY = "#ffffff"

    # Borders & Dividers
    BORDER = "#e2e8f0"
    BORDER_INPUT = "#cbd5e1"
    BORDER_FOCUS = "#3B82F6"

    # Status
    ERROR = "#d32f2f"
    ERROR_BG = "#FEF2F2"
    ERROR_BORDER = "#FECACA"
    ERROR_TEXT = "#991B1B"
    SUCCESS = "#388e3c"
    SUCCESS_BG = "#F0FDF4"
    SUCCESS_BORDER = "#BBF7D0"
    SUCCESS_TEXT = "#166534"
    WARNING = "#f57c00"
    INFO = "#1976d2"

    # Selection
    SELECTION_BG = "#DBEAFE"
    SELECTION_TEXT = "#1e293b"


class Fonts:
    # Font Families
    UI_FONT = "-apple-system, 'SF Pro Text', 'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Monaco, Menlo, 'Courier New', monospace"

    # Sizes
    TITLE = "22pt"
    H1 = "18pt"
    H2 = "15pt"
    BODY = "13pt"
    SMALL = "10pt"
    CONSOLE = "11pt"

    # Weights
    WEIGHT_REGULAR = "400"
    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "600"


class Styles:
    # Common QSS fragments

    BUTTON_PRIMARY = f"""
        QPushButton {{
            background-color: {Colors.PRIMARY_BLUE};
            color: {Colors.TEXT_ON_PRIMARY};
            border-radius: 10px;
            padding: 14px 24px;
            font-size: {Fonts.H2};
            font-weight: {Fonts.WEIGHT_BOLD};
            border: none;
            text-align: center;
            qproperty-iconSize: 20px 20px;
        }}
        QPushButton:hover {{
            background-color: {Colors.PRIMARY_BLUE_HOVER};
        }}
        QPushButton:pressed {{
            background-color: {Colors.PRIMARY_BLUE_PRESSED};
        }}
        QPushButton:disabled {{
            background-color: {Colors.DISABLED_BG};
            color: {Colors.TEXT_DISABLED};
        }}
    """

    INPUT_FIELD = f"""
        QLineEdit {{
            border: 1px solid {Colors.BORDER_INPUT};
            border-radius: 6px;
            padding: 8px;
            background: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
            selection-background-color: {Colors.SELECTION_BG};
            selection-color: {Colors.SELECTION_TEXT};
        }}
        QLineEdit:focus {{
            border: 1px solid {Colors.BORDER_FOCUS};
        }}
        QLineEdit:disabled {{
            background: {Colors.BACKGROUND};
        }}
    """

    INPUT_FIELD_INVALID = f"""
        QLineEdit {{
            border: 2px solid {Colors.ERROR};
            border-radius: 6px;
            padding: 7px;
            background: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
        }}
    """

    COMBOBOX = f"""
        QComboBox {{
            border: 1px solid {Colors.BORDER_INPUT};
            border-radius: 8px;
            padding: 10px 12px;
            background: {Colors.SURFACE};
            color: {Colors.TEXT_PRIMARY};
            min-height: 20px;
        }}
        QComboBox:focus {{
            border: 1px solid {Colors.BORDER_FOCUS};
        }}
        QComboBox QAbstractItemView {{
            border: 1px solid {Colors.BORDER};
            selection-background-color: {Colors.SELECTION_BG};
            selection-color: {Colors.SELECTION_TEXT};
            outline: none;
            padding: 4px;
        }}
    """

    CARD = f"""
        QFrame#card {{
            background-color: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER};
            border-radius: 12px;
        }}
    """

    ROUND_CARD = f"""
        QFrame#roundCard {{
            background-color: {Colors.SURFACE_MUTED};
            border: 1px solid {Colors.BORDER};
            border-radius: 12px;
        }}
        QFrame#slotCard {{
            background-color: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER};
            border-radius: 8px;
        }}
    """

    DETAILS_CARD = f"""
        QFrame#detailsCard {{
            background-color: {Colors.PRIMARY_TINT};
            border: 1px solid {Colors.PRIMARY_TINT_BORDER};
            border-radius: 12px;
        }}
    """

    BANNER_SUCCESS = f"""
        QFrame#statusBanner {{
            background-color: {Colors.SUCCESS_BG};
            border: 1px solid {Colors.SUCCESS_BORDER};
            border-radius: 8px;
        }}
        QLabel {{ color: {Colors.SUCCESS_TEXT}; font-weight: {Fonts.WEIGHT_MEDIUM}; }}
    """

    BANNER_ERROR = f"""
        QFrame#statusBanner {{
            background-color: {Colors.ERROR_BG};
            border: 1px solid {Colors.ERROR_BORDER};
            border-radius: 8px;
        }}
        QLabel {{ color: {Colors.ERROR_TEXT}; font-weight: {Fonts.WEIGHT_MEDIUM}; }}
    """


GLOBAL_STYLESHEET = f"""
    * {{
        font-family: {Fonts.UI_FONT};
        font-size: {Fonts.BODY};
        color: {Colors.TEXT_PRIMARY};
    }}

    QMainWindow, QWidget {{
        background-color: {Colors.BACKGROUND};
    }}

    QLabel {{
        background-color: transparent;
        color: {Colors.TEXT_PRIMARY};
    }}

    QStatusBar {{
        background-color: {Colors.SURFACE};
        color: {Colors.TEXT_SECONDARY};
    }}

    QGroupBox {{
        background-color: {Colors.SURFACE};
        border: 1px solid {Colors.BORDER};
        border-radius: 6px;
        margin-top: 12px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        top: -2px;
        padding: 0 4px;
        background-color: {Colors.BACKGROUND};
        color: {Colors.TEXT_PRIMARY};
    }}

    QScrollArea {{
        background: {Colors.BACKGROUND};
        border: none;
    }}
    QScrollArea > QWidget > QWidget {{
        background: {Colors.BACKGROUND};
    }}

    QPlainTextEdit {{
        background-color: {Colors.SURFACE};
        color: {Colors.TEXT_PRIMARY};
        border: 1px solid {Colors.BORDER};
        border-radius: 6px;
    }}

    #mainTitle {{
        color: {Colors.TEXT_PRIMARY};
        font-size: {Fonts.TITLE};
        font-weight: {Fonts.WEIGHT_BOLD};
    }}
    #mainSubtitle {{
        color: {Colors.TEXT_SECONDARY};
    }}
"""


def apply_shadow(widget, blur_radius=20, x_offset=2, y_offset=4, color=None):
    """Apply a soft shadow to a widget."""
    from PySide6.QtWidgets import QGraphicsDropShadowEffect
    from PySide6.QtGui import QColor

    if color is None:
        color = QColor(0, 0, 0, 30)

    shadow = QGraphicsDropShadowEffect(widget)
    shadow.setBlurRadius(blur_radius)
    shadow.setXOffset(x_offset)
    shadow.setYOffset(y_offset)
    shadow.setColor(color)
    widget.setGraphicsEffect(shadow)
