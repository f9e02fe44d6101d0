"""Single slot of the month grid."""

from datetime import date
from typing import List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout

from deskcalendar.config.settings import UI_CONFIG
from deskcalendar.ui.styles.base import px
from deskcalendar.ui.theme.colors import get_color
from deskcalendar.ui.theme.scales import BORDER_RADIUS, SPACING_SCALE, TYPOGRAPHY_SCALE


class DayCell(QFrame):
    """A numbered day cell with event chips, or a leading blank.

    Emits ``clicked`` with the cell's date; blank cells never emit.
    """

    clicked = pyqtSignal(object)

    def __init__(
        self,
        day: Optional[date] = None,
        chips: Optional[List[str]] = None,
        is_today: bool = False,
        parent=None,
    ):
        super().__init__(parent)
        self.day = day
        self.chips = list(chips or [])
        self.is_today = is_today
        self.chip_labels: List[QLabel] = []

        self.setObjectName("dayCell" if day is not None else "blankCell")
        self.setFixedHeight(UI_CONFIG.day_cell_height)
        self._build()
        self.setStyleSheet(self._style())

    def _build(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING_SCALE["xs"], SPACING_SCALE["xxs"],
            SPACING_SCALE["xs"], SPACING_SCALE["xxs"]
        )
        layout.setSpacing(2)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        if self.day is None:
            return

        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.number_label = QLabel(str(self.day.day))
        self.number_label.setObjectName("dayNumber")
        layout.addWidget(self.number_label)

        visible = self.chips[:UI_CONFIG.max_chips_per_cell]
        for text in visible:
            chip = QLabel(text)
            chip.setObjectName("eventChip")
            chip.setToolTip(text)
            layout.addWidget(chip)
            self.chip_labels.append(chip)

        hidden = len(self.chips) - len(visible)
        if hidden > 0:
            more = QLabel(f"+{hidden} more")
            more.setObjectName("moreChip")
            layout.addWidget(more)

    def _style(self) -> str:
        if self.day is None:
            return f"""
                #blankCell {{
                    background-color: {get_color('cell_blank')};
                    border-radius: {px(BORDER_RADIUS["xs"])};
                }}
            """

        border = get_color("today_outline") if self.is_today else get_color("border_light")
        border_width = 2 if self.is_today else 1
        chip_style = TYPOGRAPHY_SCALE["chip"]
        return f"""
            #dayCell {{
                background-color: {get_color('cell_background')};
                border: {px(border_width)} solid {border};
                border-radius: {px(BORDER_RADIUS["xs"])};
            }}
            #dayCell:hover {{
                background-color: {get_color('cell_hover')};
            }}
            #dayNumber {{
                color: {get_color('text_primary')};
                font-weight: 600;
                background: transparent;
                border: none;
            }}
            #eventChip {{
                background-color: {get_color('event_chip')};
                color: {get_color('event_chip_text')};
                font-size: {px(chip_style["size_px"])};
                border: none;
                border-radius: {px(BORDER_RADIUS["xs"])};
                padding: 1px 4px;
            }}
            #moreChip {{
                color: {get_color('text_tertiary')};
                font-size: {px(chip_style["size_px"])};
                background: transparent;
                border: none;
            }}
        """

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if self.day is not None and event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.day)
        super().mouseReleaseEvent(event)
