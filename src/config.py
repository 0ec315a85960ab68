"""
Configuration management for gh-heatmap.

Loads GitHub credentials from environment variables.
"""

import os
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

GITHUB_API_TOKEN = os.getenv("GITHUB_API_TOKEN")
GITHUB_USERNAME = os.getenv("GITHUB_USERNAME")

DEFAULT_GLYPH = "  "
CELL_WIDTH = 2


def validate_config(username: str | None = None):
    """
    Validate that required configuration is present.

    Args:
        username: Username given on the command line. Falls back to
            GITHUB_USERNAME when not provided.
    """
    missing = []

    if not GITHUB_API_TOKEN or GITHUB_API_TOKEN == "your_token_here":
        missing.append("GITHUB_API_TOKEN")

    username = username or GITHUB_USERNAME
    if not username or username == "your_username_here":
        missing.append("GITHUB_USERNAME (or --user-name)")

    if missing:
        raise ValueError(
            f"Missing required configuration: {', '.join(missing)}\n"
            "Please copy .env.example to .env and fill in your values.\n"
            "Get a GitHub token at: https://github.com/settings/tokens"
        )
