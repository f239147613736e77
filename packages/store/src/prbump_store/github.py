"""GitHubCommentStore — pull request comments through the GitHub issues API.

Pull request conversation comments are issue comments on GitHub, so the store
talks to ``repo.get_issue(number)`` rather than the review-comment endpoints.
"""

from __future__ import annotations

import logging

from prbump_core.errors import ApiError
from prbump_core.gh.pull_request import API_ERRORS
from prbump_store.base import BaseCommentStore
from prbump_store.models import Comment

logger = logging.getLogger(__name__)


class GitHubCommentStore(BaseCommentStore):
    """Comment store backed by a PyGithub ``Repository``.

    Comment handles returned by list_comments() are kept so delete_comment()
    needs no extra lookup for comments it has already seen.
    """

    def __init__(self, repo):
        self._repo = repo
        self._issues: dict = {}
        self._handles: dict = {}

    def _get_issue(self, pr_number: int):
        if pr_number not in self._issues:
            self._issues[pr_number] = self._repo.get_issue(pr_number)
        return self._issues[pr_number]

    def list_comments(self, pr_number: int) -> list[Comment]:
        try:
            handles = list(self._get_issue(pr_number).get_comments())
        except API_ERRORS as e:
            raise ApiError(f"Could not list comments of PR #{pr_number}: {e}") from e
        comments = []
        for handle in handles:
            self._handles[handle.id] = handle
            comments.append(Comment(id=handle.id, body=handle.body or ""))
        return comments

    def delete_comment(self, pr_number: int, comment_id: int) -> None:
        try:
            handle = self._handles.pop(comment_id, None) or self._get_issue(pr_number).get_comment(comment_id)
            handle.delete()
        except API_ERRORS as e:
            raise ApiError(f"Could not delete comment {comment_id}: {e}") from e

    def create_comment(self, pr_number: int, body: str) -> Comment:
        try:
            handle = self._get_issue(pr_number).create_comment(body)
        except API_ERRORS as e:
            raise ApiError(f"Could not comment on PR #{pr_number}: {e}") from e
        logger.debug("Created comment %s on PR #%d", handle.id, pr_number)
        return Comment(id=handle.id, body=handle.body or body)
