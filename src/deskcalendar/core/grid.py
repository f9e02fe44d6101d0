"""Month grid calculation and pure month navigation.

Columns run Sunday (0) through Saturday (6). A month is laid out as
``first_day_of_month`` leading blanks followed by one cell per day.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from dateutil.relativedelta import relativedelta

GridCell = Optional[date]


def days_in_month(year: int, month: int) -> int:
    """Count the days in a month.

    Steps back one day from the first of the following month, so month
    length and leap years come from the calendar itself.
    """
    following = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return (following - timedelta(days=1)).day


def first_day_of_month(year: int, month: int) -> int:
    """Weekday index of day 1, with 0=Sunday and 6=Saturday."""
    # date.weekday() is Monday-based
    return (date(year, month, 1).weekday() + 1) % 7


@dataclass(frozen=True)
class MonthGrid:
    """Layout of one month in a fixed 7-column grid."""

    year: int
    month: int
    days_in_month: int
    first_day_of_month: int

    COLUMNS = 7

    @property
    def cell_count(self) -> int:
        return self.first_day_of_month + self.days_in_month

    def cells(self) -> List[GridCell]:
        """Leading blanks (None) followed by each date of the month."""
        blanks: List[GridCell] = [None] * self.first_day_of_month
        days: List[GridCell] = [
            date(self.year, self.month, day) for day in range(1, self.days_in_month + 1)
        ]
        return blanks + days

    def weeks(self) -> List[List[GridCell]]:
        """Cells split into rows of seven, the last row padded with None."""
        cells = self.cells()
        remainder = len(cells) % self.COLUMNS
        if remainder:
            cells.extend([None] * (self.COLUMNS - remainder))
        return [cells[i:i + self.COLUMNS] for i in range(0, len(cells), self.COLUMNS)]


def month_grid(reference: date) -> MonthGrid:
    """Build the grid for the month containing ``reference``."""
    return MonthGrid(
        year=reference.year,
        month=reference.month,
        days_in_month=days_in_month(reference.year, reference.month),
        first_day_of_month=first_day_of_month(reference.year, reference.month),
    )


def previous_month(reference: date) -> date:
    """Same day one month earlier, clamped to the shorter month's last day."""
    return reference - relativedelta(months=1)


def next_month(reference: date) -> date:
    """Same day one month later, clamped to the shorter month's last day."""
    return reference + relativedelta(months=1)
