"""Exceptions raised by a prbump run.

Every failure that ends a run derives from PrbumpError so the CLI can turn
any of them into a single job failure with a readable message.
"""

from __future__ import annotations


class PrbumpError(Exception):
    """Base class for all prbump run failures."""


class MissingTag(PrbumpError):
    """No semantic-version tag is reachable from the repository history."""


class ClassificationError(PrbumpError):
    """The commit classifier failed, e.g. because of a malformed configuration."""


class NonCompliantCommits(PrbumpError):
    """Substantially all commits are unconventional or merges.

    A business-rule failure rather than a system fault: it is raised only after
    the rejection comment has been published.
    """


class ApiError(PrbumpError):
    """A call to the code-hosting API failed (commit list, list/delete/create comment)."""
