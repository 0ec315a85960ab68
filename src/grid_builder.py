"""
Reshape week-major contribution data into weekday rows.
"""

from src.contribution import DayContribution

DAYS_PER_WEEK = 7


def transpose(weeks: list[list[DayContribution]]) -> list[list[DayContribution]]:
    """
    Turn a list of weeks into a list of weekday rows.

    Row r holds the day at position r of every week, in week order.
    Weeks shorter than r + 1 days (partial first or last week) simply
    contribute nothing to row r.

    Args:
        weeks: Week-major contributions, each week in weekday order

    Returns:
        Exactly 7 rows of DayContribution
    """
    rows = []
    for weekday in range(DAYS_PER_WEEK):
        row = [week[weekday] for week in weeks if len(week) > weekday]
        rows.append(row)

    return rows


def count_columns(rows: list[list[DayContribution]]) -> int:
    """Number of week columns in a transposed grid."""
    return max((len(row) for row in rows), default=0)
