"""
Draw the contribution grid as colored terminal cells.
"""

from rich.cells import cell_len
from rich.color import Color
from rich.console import Console
from rich.style import Style
from rich.text import Text

from src.color import MalformedColorError, hex_to_rgb
from src.contribution import DayContribution
from src.grid_builder import transpose
from src.month_labeler import build_month_line


class InvalidGlyphWidthError(ValueError):
    """Raised when the cell glyph does not have the expected display width."""

    def __init__(self, glyph: str, expected: int, actual: int):
        self.glyph = glyph
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Heatmap glyph should be width of {expected}, "
            f"but width of {glyph!r} is {actual}"
        )


def validate_glyph(glyph: str, width: int = 2) -> None:
    """
    Check the glyph's terminal display width.

    Wide characters count as two columns, combining marks as zero.

    Raises:
        InvalidGlyphWidthError: If the measured width differs from width
    """
    actual = cell_len(glyph)
    if actual != width:
        raise InvalidGlyphWidthError(glyph, width, actual)


def _cell_style(rgb: tuple[int, int, int]) -> Style:
    color = Color.from_rgb(*rgb)
    # Paint both layers so blank and solid glyphs show the same color
    return Style(color=color, bgcolor=color)


def _build_lines(
    rows: list[list[DayContribution]], glyph: str, fallback_color: str | None
) -> tuple[list[Text], int]:
    lines = []
    substituted = 0
    fallback_rgb = hex_to_rgb(fallback_color) if fallback_color else None

    for row in rows:
        line = Text()
        for day in row:
            try:
                rgb = hex_to_rgb(day.color)
            except MalformedColorError:
                if fallback_rgb is None:
                    raise
                rgb = fallback_rgb
                substituted += 1
            line.append(glyph, style=_cell_style(rgb))
        lines.append(line)

    return lines, substituted


def draw_heatmap(
    rows: list[list[DayContribution]],
    glyph: str,
    console: Console,
    width: int = 2,
    fallback_color: str | None = None,
) -> int:
    """
    Print one colored glyph per day, one line per weekday row.

    Every cell color is resolved before anything is written, so a failure
    leaves the console untouched.

    Args:
        rows: Weekday rows from grid_builder.transpose()
        glyph: Text painted for each cell
        console: Rich console to write to
        width: Required display width of the glyph
        fallback_color: Hex color used for days with a malformed color.
            When None, a malformed color aborts the render.

    Returns:
        Number of cells painted with the fallback color

    Raises:
        InvalidGlyphWidthError: If the glyph width is wrong
        MalformedColorError: If a day's color is malformed and no fallback is set
    """
    validate_glyph(glyph, width)
    lines, substituted = _build_lines(rows, glyph, fallback_color)

    for line in lines:
        console.print(line, soft_wrap=True)

    return substituted


def render_calendar(
    weeks: list[list[DayContribution]],
    glyph: str,
    console: Console,
    width: int = 2,
    fallback_color: str | None = None,
) -> int:
    """
    Render the month label line followed by the heatmap grid.

    Returns:
        Number of cells painted with the fallback color
    """
    validate_glyph(glyph, width)
    rows = transpose(weeks)
    month_line = build_month_line(rows, cell_width=width)
    lines, substituted = _build_lines(rows, glyph, fallback_color)

    console.print(Text(month_line), soft_wrap=True)
    for line in lines:
        console.print(line, soft_wrap=True)

    return substituted
