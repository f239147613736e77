"""Shadow (dry-run) comment store.

Reads existing comments from an optional source store but never writes:
deletes and creates are printed to the terminal instead, so a run can be
previewed against a live pull request without touching it.
"""

from __future__ import annotations

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from prbump_store.base import BaseCommentStore
from prbump_store.models import Comment

console = Console()


class ShadowCommentStore(BaseCommentStore):
    def __init__(self, source: BaseCommentStore | None = None):
        self._source = source

    def list_comments(self, pr_number: int) -> list[Comment]:
        if self._source is None:
            return []
        return self._source.list_comments(pr_number)

    def delete_comment(self, pr_number: int, comment_id: int) -> None:
        console.print(f"[yellow]Shadow mode: would delete comment {comment_id} on PR #{pr_number}[/yellow]")

    def create_comment(self, pr_number: int, body: str) -> Comment:
        console.print(f"\n[bold]Shadow mode: would comment on PR #{pr_number}[/bold]\n")
        console.print(Panel(Markdown(body), expand=False))
        return Comment(id=0, body=body)
