"""Comment data model shared by every comment store backend."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Comment:
    """A single pull request (issue) comment."""

    id: int
    body: str

    def is_tracked(self, marker: str) -> bool:
        return (self.body or "").startswith(marker)
