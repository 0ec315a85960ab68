"""
GitHub GraphQL client for fetching a user's contribution calendar.
"""

import requests

CONTRIBUTION_CALENDAR_QUERY = """
query HeatmapQuery($userName: String!) {
  user(login: $userName) {
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            color
          }
        }
      }
    }
  }
}
"""


class GitHubClientError(Exception):
    """Base exception for GitHub client errors."""

    pass


class GitHubClient:
    """Client for interacting with the GitHub GraphQL API."""

    GRAPHQL_URL = "https://api.github.com/graphql"

    def __init__(self, token: str, username: str):
        """
        Initialize the GitHub client.

        Args:
            token: GitHub personal access token
            username: GitHub username whose calendar is fetched
        """
        self.token = token
        self.username = username
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "User-Agent": "gh-heatmap",
            }
        )

    def get_contribution_calendar(self) -> dict:
        """
        Fetch the contribution calendar for the configured user.

        Returns:
            The contributionCalendar object (totalContributions and weeks)

        Raises:
            GitHubClientError: If the request fails, the response is malformed
                or the user does not exist
        """
        payload = {
            "query": CONTRIBUTION_CALENDAR_QUERY,
            "variables": {"userName": self.username},
        }

        try:
            response = self.session.post(self.GRAPHQL_URL, json=payload)
        except requests.RequestException as e:
            raise GitHubClientError(f"Network error: {e}") from e

        if response.status_code == 401:
            raise GitHubClientError(
                "Authentication failed. Check your GITHUB_API_TOKEN is valid."
            )
        elif response.status_code == 403:
            # Check for rate limiting
            remaining = response.headers.get("X-RateLimit-Remaining", "unknown")
            raise GitHubClientError(
                f"API rate limit exceeded or access forbidden. "
                f"Remaining requests: {remaining}"
            )
        elif not response.ok:
            raise GitHubClientError(
                f"GitHub API error: {response.status_code} - {response.text}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise GitHubClientError(f"GitHub API returned invalid JSON: {e}") from e
        data = body.get("data")

        # GraphQL reports a missing login as an error alongside a null user
        if data is not None and "user" in data and data["user"] is None:
            raise GitHubClientError(f"User '{self.username}' not found on GitHub.")

        if body.get("errors"):
            messages = "; ".join(
                error.get("message", "unknown error") for error in body["errors"]
            )
            raise GitHubClientError(f"GitHub GraphQL error: {messages}")

        if data is None:
            raise GitHubClientError("GitHub API returned no data.")

        user = data.get("user") or {}
        collection = user.get("contributionsCollection") or {}
        calendar = collection.get("contributionCalendar")
        if calendar is None:
            raise GitHubClientError("Unexpected response shape from GitHub API.")

        return calendar
