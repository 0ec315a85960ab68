"""
Tests for transposing week-major contributions into weekday rows.
"""

from datetime import date, timedelta

from src.contribution import DayContribution
from src.grid_builder import count_columns, transpose


def _make_weeks(start: str, week_lengths: list[int]) -> list[list[DayContribution]]:
    """Build consecutive weeks of the given lengths starting at start."""
    current = date.fromisoformat(start)
    weeks = []
    for length in week_lengths:
        week = []
        for _ in range(length):
            week.append(DayContribution(date=current.isoformat(), color="#ebedf0"))
            current += timedelta(days=1)
        weeks.append(week)
    return weeks


def test_full_weeks_produce_seven_equal_rows():
    weeks = _make_weeks("2024-01-07", [7, 7, 7])

    rows = transpose(weeks)

    assert len(rows) == 7
    assert all(len(row) == 3 for row in rows)


def test_cell_matches_week_position():
    weeks = _make_weeks("2024-01-07", [7, 7, 7, 7])

    rows = transpose(weeks)

    for r in range(7):
        for c in range(4):
            assert rows[r][c] == weeks[c][r]


def test_rows_stay_in_chronological_order():
    weeks = _make_weeks("2024-01-07", [7, 7, 7])

    rows = transpose(weeks)

    for row in rows:
        dates = [day.date for day in row]
        assert dates == sorted(dates)


def test_partial_leading_week_shortens_missing_rows():
    """A 4-day first week leaves rows 4-6 one entry short, with no placeholders."""
    weeks = _make_weeks("2024-01-03", [4, 7, 7])

    rows = transpose(weeks)

    assert [len(row) for row in rows] == [3, 3, 3, 3, 2, 2, 2]
    assert all(day is not None for row in rows for day in row)


def test_partial_trailing_week():
    weeks = _make_weeks("2024-01-07", [7, 7, 2])

    rows = transpose(weeks)

    assert [len(row) for row in rows] == [3, 3, 2, 2, 2, 2, 2]
    assert rows[1][-1] == weeks[2][1]


def test_empty_input_gives_seven_empty_rows():
    assert transpose([]) == [[], [], [], [], [], [], []]


def test_input_is_not_modified():
    weeks = _make_weeks("2024-01-07", [7, 3])
    snapshot = [list(week) for week in weeks]

    transpose(weeks)

    assert weeks == snapshot


def test_count_columns_uses_longest_row():
    rows = transpose(_make_weeks("2024-01-03", [4, 7, 7]))

    assert count_columns(rows) == 3


def test_count_columns_empty():
    assert count_columns(transpose([])) == 0
