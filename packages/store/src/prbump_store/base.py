"""Abstract comment store and the tracked-comment protocol.

The code-hosting API offers list, delete and create for pull request comments
but no edit we rely on, so "update the status comment" is implemented as a
keyed overwrite: the key is a hidden marker at the top of the body, and
publish() deletes every comment carrying it before creating the new one.

Backends implement the three primitives only. publish() is concrete here so
every backend follows the same ordering:

    list → delete every tracked comment (best-effort) → create

No lock is held across runs. Two concurrent runs may briefly leave two tracked
comments (or none); the next run converges back to exactly one.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prbump_store.models import Comment

logger = logging.getLogger(__name__)

# Rendered as an HTML comment, so it is invisible on the pull request page.
TRACKED_MARKER = "<!--prbump-version-->"


class BaseCommentStore(ABC):
    """Pluggable access to a pull request's comment collection.

    list_comments and create_comment raise prbump_core.errors.ApiError on
    failure. delete_comment may raise anything; publish() tolerates it.
    """

    @abstractmethod
    def list_comments(self, pr_number: int) -> list[Comment]:
        """Return every comment on the pull request, oldest first."""

    @abstractmethod
    def delete_comment(self, pr_number: int, comment_id: int) -> None:
        """Delete one comment."""

    @abstractmethod
    def create_comment(self, pr_number: int, body: str) -> Comment:
        """Create a comment and return it."""

    def tracked_comments(self, pr_number: int, marker: str = TRACKED_MARKER) -> list[Comment]:
        return [c for c in self.list_comments(pr_number) if c.is_tracked(marker)]

    def publish(self, pr_number: int, markdown: str, marker: str = TRACKED_MARKER) -> Comment:
        """Replace the tracked comment on the pull request with ``markdown``.

        Deletions are independent of each other: a failed delete is logged and
        the remaining deletes and the final create still run. Every delete has
        returned before the create is issued.
        """
        stale = self.tracked_comments(pr_number, marker)
        for comment in stale:
            try:
                self.delete_comment(pr_number, comment.id)
            except Exception as e:
                logger.warning("Could not delete tracked comment %s on PR #%d: %s", comment.id, pr_number, e)
        if stale:
            logger.debug("Removed %d stale tracked comment(s) on PR #%d", len(stale), pr_number)

        return self.create_comment(pr_number, f"{marker}\n{markdown}")
