from __future__ import annotations

from itertools import islice

import requests
from github import Github, GithubException

from prbump_core.errors import ApiError
from prbump_core.models import Commit

# PyGithub raises GithubException for API responses; transport failures surface from requests.
API_ERRORS = (GithubException, requests.exceptions.RequestException)


def get_repo(repo_name: str, token: str | None, page_size: int = 100):
    # retry=None: a failed call ends the run; callers wrap the whole run if they want retries.
    try:
        return Github(token, per_page=page_size, retry=None).get_repo(repo_name)
    except API_ERRORS as e:
        raise ApiError(f"Could not fetch repository {repo_name}: {e}") from e


def get_pull(repo, pr_number: int):
    try:
        return repo.get_pull(pr_number)
    except API_ERRORS as e:
        raise ApiError(f"Could not fetch PR #{pr_number}: {e}") from e


def get_commits(pr, limit: int) -> list[Commit]:
    """Return the first ``limit`` commits of the PR, oldest first."""
    try:
        return [Commit(sha=c.sha, message=c.commit.message or "") for c in islice(pr.get_commits(), limit)]
    except API_ERRORS as e:
        raise ApiError(f"Could not list commits of PR #{pr.number}: {e}") from e
