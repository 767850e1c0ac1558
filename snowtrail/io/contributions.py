"""GitHub contribution-calendar data provider and JSON grid persistence.

The calendar is laid out as ``7 x weeks``: row = day of week, column = week.
Every failure mode (transport, HTTP status, GraphQL errors, malformed
payload) is reported as :class:`DataUnavailable`.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import requests
from dotenv import load_dotenv

from snowtrail.config.constants import CALENDAR_ROWS
from snowtrail.domain.grid import ActivityGrid
from snowtrail.errors import DataUnavailable

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

CONTRIBUTIONS_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        weeks {
          contributionDays {
            contributionCount
          }
        }
      }
    }
  }
}
"""


def resolve_token(token: str | None = None) -> str:
    """Return ``token`` or ``GITHUB_TOKEN`` from the environment (``.env`` honoured)."""
    if token:
        return token
    load_dotenv()
    env_token = os.environ.get("GITHUB_TOKEN")
    if not env_token:
        raise DataUnavailable("GITHUB_TOKEN is not set")
    return env_token


def calendar_to_grid(weeks: list[dict[str, Any]]) -> ActivityGrid:
    """Convert GraphQL ``weeks`` into a ``7 x len(weeks)`` activity grid.

    Days are placed by their position within the week; weeks with fewer than
    seven days leave the remaining cells at zero.
    """
    if not weeks:
        raise DataUnavailable("contribution calendar has no weeks")
    rows: list[list[int]] = [[0] * len(weeks) for _ in range(CALENDAR_ROWS)]
    for col, week in enumerate(weeks):
        days = week.get("contributionDays") if isinstance(week, dict) else None
        if not isinstance(days, list) or len(days) > CALENDAR_ROWS:
            raise DataUnavailable(f"malformed week at index {col}")
        for row, day in enumerate(days):
            count = day.get("contributionCount") if isinstance(day, dict) else None
            if not isinstance(count, int) or count < 0:
                raise DataUnavailable(f"malformed contribution count at week {col}, day {row}")
            rows[row][col] = count
    try:
        return ActivityGrid.from_rows(rows)
    except ValueError as exc:
        raise DataUnavailable(f"malformed contribution calendar: {exc}") from exc


def fetch_contributions(
    user: str,
    year: int,
    token: str | None = None,
    session: requests.Session | None = None,
    timeout: float = 30.0,
) -> ActivityGrid:
    """Fetch one calendar year of contributions for ``user``."""
    auth = resolve_token(token)
    variables = {
        "username": user,
        "from": f"{year}-01-01T00:00:00Z",
        "to": f"{year}-12-31T23:59:59Z",
    }
    post = session.post if session is not None else requests.post
    logger.info("Fetching contributions for %s in %d", user, year)
    try:
        response = post(
            GITHUB_GRAPHQL_URL,
            json={"query": CONTRIBUTIONS_QUERY, "variables": variables},
            headers={"Authorization": f"Bearer {auth}"},
            timeout=timeout,
        )
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        raise DataUnavailable(f"contribution request failed: {exc}") from exc

    if not isinstance(payload, dict):
        raise DataUnavailable("contribution response is not a JSON object")
    if payload.get("errors"):
        errors = payload["errors"]
        if not isinstance(errors, list):
            errors = [errors]
        messages = "; ".join(
            str(err.get("message", err) if isinstance(err, dict) else err) for err in errors
        )
        raise DataUnavailable(f"GraphQL errors: {messages}")
    try:
        user_node = payload["data"]["user"]
        if user_node is None:
            raise DataUnavailable(f"user {user!r} not found")
        weeks = user_node["contributionsCollection"]["contributionCalendar"]["weeks"]
    except (KeyError, TypeError) as exc:
        raise DataUnavailable(f"unexpected contribution payload shape: {exc}") from exc
    grid = calendar_to_grid(weeks)
    logger.info("Fetched %dx%d contribution grid", grid.rows, grid.cols)
    return grid


def save_grid_json(grid: ActivityGrid, path: Path, **metadata: object) -> Path:
    """Write ``grid`` as ``{"contributions": [[...]], **metadata}``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {**metadata, "contributions": grid.to_lists()}
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    return path


def load_grid_json(path: Path) -> ActivityGrid:
    """Read a grid written by :func:`save_grid_json`."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise DataUnavailable(f"cannot read grid from {path}: {exc}") from exc
    rows = payload.get("contributions") if isinstance(payload, dict) else None
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise DataUnavailable(f"{path} must contain a 'contributions' list of rows")
    if not all(isinstance(v, int) and not isinstance(v, bool) for row in rows for v in row):
        raise DataUnavailable(f"{path} contains non-integer contribution counts")
    try:
        return ActivityGrid.from_rows(rows)
    except ValueError as exc:
        raise DataUnavailable(f"malformed grid in {path}: {exc}") from exc
