"""Tests for GitHub pull request helper functions."""

import types
from unittest.mock import MagicMock

import pytest
from github import GithubException

from prbump_core.errors import ApiError
from prbump_core.gh.pull_request import get_commits, get_pull, get_repo
from prbump_core.models import Commit


def _gh_commit(sha, message):
    return types.SimpleNamespace(sha=sha, commit=types.SimpleNamespace(message=message))


class TestGetCommits:
    def test_maps_to_commit_models(self):
        pr = MagicMock()
        pr.get_commits.return_value = [_gh_commit("a" * 40, "feat: x"), _gh_commit("b" * 40, "fix: y")]

        assert get_commits(pr, 250) == [Commit("a" * 40, "feat: x"), Commit("b" * 40, "fix: y")]

    def test_stops_at_limit(self):
        pr = MagicMock()
        pr.get_commits.return_value = [_gh_commit(str(i), f"fix: {i}") for i in range(10)]

        result = get_commits(pr, 3)

        assert [c.sha for c in result] == ["0", "1", "2"]

    def test_none_message_becomes_empty(self):
        pr = MagicMock()
        pr.get_commits.return_value = [_gh_commit("a", None)]
        assert get_commits(pr, 5)[0].message == ""

    def test_api_failure_raises_api_error(self):
        pr = MagicMock()
        pr.number = 3
        pr.get_commits.side_effect = GithubException(500, "Server Error")

        with pytest.raises(ApiError, match="PR #3"):
            get_commits(pr, 250)


class TestGetPull:
    def test_returns_pull(self):
        repo = MagicMock()
        assert get_pull(repo, 5) is repo.get_pull.return_value
        repo.get_pull.assert_called_once_with(5)

    def test_not_found_raises_api_error(self):
        repo = MagicMock()
        repo.get_pull.side_effect = GithubException(404, "Not Found")
        with pytest.raises(ApiError, match="PR #5"):
            get_pull(repo, 5)


class TestGetRepo:
    def test_builds_client_without_retries(self, mocker):
        mock_github = mocker.patch("prbump_core.gh.pull_request.Github")

        repo = get_repo("owner/repo", "tok", page_size=50)

        mock_github.assert_called_once_with("tok", per_page=50, retry=None)
        mock_github.return_value.get_repo.assert_called_once_with("owner/repo")
        assert repo is mock_github.return_value.get_repo.return_value

    def test_missing_repo_raises_api_error(self, mocker):
        mock_github = mocker.patch("prbump_core.gh.pull_request.Github")
        mock_github.return_value.get_repo.side_effect = GithubException(404, "Not Found")
        with pytest.raises(ApiError, match="owner/repo"):
            get_repo("owner/repo", "tok")
