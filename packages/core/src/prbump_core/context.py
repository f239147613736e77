"""Build the RunContext from the GitHub Actions environment.

Actions exposes the repository as ``GITHUB_REPOSITORY`` (``owner/name``) and
writes the triggering webhook payload to the file named by
``GITHUB_EVENT_PATH``. For ``pull_request`` events the payload carries the PR
number under ``pull_request.number``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from prbump_core.models import RunContext


def split_repo(full_name: str) -> tuple[str, str]:
    """Split ``owner/name`` into its two parts, raising ValueError otherwise."""
    owner, sep, name = (full_name or "").partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ValueError(f"Repository must be in owner/name format, got {full_name!r}.")
    return owner, name


def read_pr_number(event_path: str) -> int:
    """Return the pull request number from a GitHub event payload file."""
    path = Path(event_path)
    if not path.exists():
        raise ValueError(f"Event payload not found: {event_path}")
    payload = json.loads(path.read_text(encoding="utf-8"))
    pull_request = payload.get("pull_request") or {}
    number = pull_request.get("number") or payload.get("number")
    if not number:
        raise ValueError("The triggering event is not a pull request; no pull request number in the payload.")
    return int(number)


def build_run_context(
    repo: str | None = None,
    pr_number: int | None = None,
    token: str | None = None,
    event_path: str | None = None,
) -> RunContext:
    """Return a RunContext, filling missing values from the Actions environment.

    Explicit arguments win over the environment so the same command works both
    inside a workflow and from a developer's terminal.
    """
    full_name = repo or os.environ.get("GITHUB_REPOSITORY")
    if not full_name:
        raise ValueError("No repository given. Pass --repo or set GITHUB_REPOSITORY.")
    owner, name = split_repo(full_name)

    if pr_number is None:
        event_path = event_path or os.environ.get("GITHUB_EVENT_PATH")
        if not event_path:
            raise ValueError("No pull request given. Pass --pr or run from a pull_request workflow.")
        pr_number = read_pr_number(event_path)

    return RunContext(owner=owner, repo=name, pr_number=pr_number, token=token)
