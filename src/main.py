"""
gh-heatmap: GitHub contribution calendar in the terminal

Entry point for the application.
"""

from typing import Annotated

import typer
from rich.console import Console

from src.color import EMPTY_DAY_COLOR
from src.config import (
    CELL_WIDTH,
    DEFAULT_GLYPH,
    GITHUB_API_TOKEN,
    GITHUB_USERNAME,
    validate_config,
)
from src.contribution import InvalidDateError
from src.contribution_parser import parse_contribution_calendar, total_contributions
from src.github_client import GitHubClient, GitHubClientError
from src.heatmap_renderer import InvalidGlyphWidthError, render_calendar, validate_glyph

app = typer.Typer(
    help="Draw a GitHub contribution heatmap in the terminal",
    add_completion=False,
)


@app.command()
def main(
    user_name: Annotated[
        str | None,
        typer.Option(
            "--user-name",
            "-u",
            help="GitHub user to draw (defaults to GITHUB_USERNAME)",
        ),
    ] = None,
    repre: Annotated[
        str,
        typer.Option(
            "--repre",
            "-r",
            help=f"Glyph painted for each day, {CELL_WIDTH} columns wide",
        ),
    ] = DEFAULT_GLYPH,
):
    console = Console()

    # Validate configuration
    try:
        validate_config(user_name)
        validate_glyph(repre, CELL_WIDTH)
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}")
        raise typer.Exit(code=1)

    user_name = user_name or GITHUB_USERNAME
    client = GitHubClient(GITHUB_API_TOKEN, user_name)

    try:
        print(f"Fetching contributions for {user_name}...\n")
        calendar = client.get_contribution_calendar()
    except GitHubClientError as e:
        print(f"\nError: {e}")
        raise typer.Exit(code=1)

    weeks = parse_contribution_calendar(calendar)
    total = total_contributions(calendar)
    plural = "contribution" if total == 1 else "contributions"
    print(f"{total} {plural} in the last year\n")

    try:
        substituted = render_calendar(
            weeks, repre, console, width=CELL_WIDTH, fallback_color=EMPTY_DAY_COLOR
        )
    except (InvalidDateError, InvalidGlyphWidthError) as e:
        print(f"\nError: {e}")
        raise typer.Exit(code=1)

    if substituted:
        day_word = "day" if substituted == 1 else "days"
        verb = "was" if substituted == 1 else "were"
        print(
            f"\nWarning: {substituted} {day_word} had a malformed color "
            f"and {verb} drawn as {EMPTY_DAY_COLOR}"
        )


if __name__ == "__main__":
    app()
