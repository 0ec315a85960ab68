"""
Month labels aligned to the columns of a transposed contribution grid.
"""

from src.contribution import DayContribution
from src.grid_builder import count_columns

LABEL_WIDTH = 2


def dominant_month(column: list[DayContribution]) -> int | None:
    """
    Find the month with the most days in a column.

    Ties go to the lowest month number.

    Args:
        column: Days present in one week column

    Returns:
        Month number 1-12, or None for an empty column

    Raises:
        InvalidDateError: If any day has a malformed date
    """
    if not column:
        return None

    months_count = [0] * 12
    for day in column:
        months_count[day.month - 1] += 1

    # max() keeps the first maximum, so lower months win ties
    most_appeared = max(range(12), key=lambda idx: months_count[idx])
    return most_appeared + 1


def build_month_line(rows: list[list[DayContribution]], cell_width: int = 2) -> str:
    """
    Build the month label line printed above the heatmap.

    Each column gets a cell of cell_width characters. A zero-padded month
    number is written only where the column's dominant month differs from
    the previous labelled column; every other cell is blank. Empty columns
    are blank and do not reset the previous month.

    Args:
        rows: Weekday rows from grid_builder.transpose()
        cell_width: Character width of one heatmap cell

    Returns:
        The label line, one cell per column

    Raises:
        InvalidDateError: If any day has a malformed date (the whole line fails)
        ValueError: If cell_width is too narrow for a two-digit month label
    """
    if cell_width < LABEL_WIDTH:
        raise ValueError(
            f"Cell width {cell_width} is too narrow for month labels "
            f"(needs at least {LABEL_WIDTH})"
        )

    cells = []
    previous_month = 0

    for col_idx in range(count_columns(rows)):
        column = [row[col_idx] for row in rows if col_idx < len(row)]
        month = dominant_month(column)

        if month is None:
            cells.append(" " * cell_width)
            continue

        if month != previous_month:
            cells.append(f"{month:02}".ljust(cell_width))
        else:
            cells.append(" " * cell_width)

        previous_month = month

    return "".join(cells)
