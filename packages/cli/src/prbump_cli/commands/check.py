"""check command — recommend a version bump and publish the PR status comment."""

from __future__ import annotations

import click
from rich.console import Console

from prbump_cli.actions import report_failure, set_output
from prbump_core.context import build_run_context
from prbump_core.errors import PrbumpError
from prbump_core.gh.pull_request import get_repo
from prbump_core.pipeline import run_check
from prbump_store.github import GitHubCommentStore
from prbump_store.shadow import ShadowCommentStore

console = Console()


def _build_store(repo_obj, shadow: bool):
    """Real GitHub store, or a shadow store that reads from it but never writes."""
    store = GitHubCommentStore(repo_obj)
    if shadow:
        return ShadowCommentStore(source=store)
    return store


@click.command("check")
@click.option("--repo", default=None, help="GitHub repository in owner/name format. Defaults to GITHUB_REPOSITORY.")
@click.option(
    "--pr",
    "pr_number",
    type=int,
    default=None,
    help="Pull request number. Defaults to the PR of the triggering workflow event.",
)
@click.option(
    "--event-path",
    default=None,
    type=click.Path(dir_okay=False),
    help="GitHub event payload to read the PR number from. Defaults to GITHUB_EVENT_PATH.",
)
@click.option(
    "--shadow",
    "-s",
    is_flag=True,
    help="Dry-run mode: print the comment changes without touching the pull request.",
)
@click.pass_context
def check_cmd(ctx, repo: str | None, pr_number: int | None, event_path: str | None, shadow: bool):
    """Recommend the next semantic version for a pull request.

    Classifies the PR's commits as conventional commits, applies the
    resulting bump to the last version tag of the local clone, and keeps a
    single status comment on the PR up to date. The target version is
    exposed as the `version` step output.

    \b
    Required environment:
      GITHUB_TOKEN    GitHub token (or INPUT_GITHUB_TOKEN, or the gh CLI session)
    The checkout must include tags (fetch-depth: 0).
    """
    config = ctx.obj["config"]
    token = config.get("github_token")
    if not token:
        raise click.UsageError(
            "No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.\n"
            "Create a token at https://github.com/settings/tokens"
        )

    try:
        run_ctx = build_run_context(repo=repo, pr_number=pr_number, token=token, event_path=event_path)
    except ValueError as e:
        raise click.UsageError(str(e))

    try:
        this_repo = get_repo(run_ctx.full_name, token, config.get("page_size", 100))
        store = _build_store(this_repo, shadow)
        result = run_check(
            run_ctx,
            config,
            store,
            repo_obj=this_repo,
            on_version=lambda version: set_output("version", version),
        )
    except PrbumpError as e:
        report_failure(str(e))
        raise click.ClickException(str(e))

    console.print(f"[bold]Recommended bump:[/bold] {result.recommendation.level.name.lower()}")
