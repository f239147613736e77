"""In-memory comment store.

Holds comments in a dict keyed by pull request number. Useful wherever a real
pull request is not available, for example to exercise publish() repeatedly
and inspect the resulting comment list.
"""

from __future__ import annotations

from itertools import count

from prbump_store.base import BaseCommentStore
from prbump_store.models import Comment


class InMemoryCommentStore(BaseCommentStore):
    def __init__(self, comments: dict[int, list[Comment]] | None = None):
        self._comments: dict[int, list[Comment]] = {pr: list(items) for pr, items in (comments or {}).items()}
        existing = [c.id for items in self._comments.values() for c in items]
        self._ids = count(max(existing, default=0) + 1)

    def list_comments(self, pr_number: int) -> list[Comment]:
        return list(self._comments.get(pr_number, []))

    def delete_comment(self, pr_number: int, comment_id: int) -> None:
        items = self._comments.get(pr_number, [])
        remaining = [c for c in items if c.id != comment_id]
        if len(remaining) == len(items):
            raise KeyError(f"No comment {comment_id} on PR #{pr_number}")
        self._comments[pr_number] = remaining

    def create_comment(self, pr_number: int, body: str) -> Comment:
        comment = Comment(id=next(self._ids), body=body)
        self._comments.setdefault(pr_number, []).append(comment)
        return comment
