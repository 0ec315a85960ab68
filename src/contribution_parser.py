"""
Parse the contribution calendar returned by the GitHub GraphQL API.
"""

from src.contribution import DayContribution


def parse_contribution_calendar(calendar: dict) -> list[list[DayContribution]]:
    """
    Extract week-major day contributions from a contribution calendar.

    Args:
        calendar: contributionCalendar object from the GraphQL response

    Returns:
        One list per week, each holding that week's days in weekday order
    """
    weeks = []

    for week in calendar.get("weeks", []):
        days = [
            DayContribution(date=day["date"], color=day["color"])
            for day in week.get("contributionDays", [])
        ]
        weeks.append(days)

    return weeks


def total_contributions(calendar: dict) -> int:
    """Total contributions reported for the calendar's date range."""
    return calendar.get("totalContributions", 0)
