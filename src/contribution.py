"""
Day contribution record shared by the grid, labeler and renderer.
"""

from dataclasses import dataclass


class InvalidDateError(ValueError):
    """Raised when a contribution date is not in YYYY-MM-DD shape."""

    def __init__(self, date: str):
        self.date = date
        super().__init__(f"Invalid contribution date: {date!r}")


@dataclass(frozen=True)
class DayContribution:
    """One calendar day: ISO date and the hex color of its intensity."""

    date: str
    color: str

    @property
    def month(self) -> int:
        """
        Month number (1-12) taken from the middle part of the date.

        Raises:
            InvalidDateError: If the date has no numeric month segment
        """
        parts = self.date.split("-")
        if len(parts) != 3:
            raise InvalidDateError(self.date)

        try:
            month = int(parts[1])
        except ValueError:
            raise InvalidDateError(self.date) from None

        if not 1 <= month <= 12:
            raise InvalidDateError(self.date)

        return month
