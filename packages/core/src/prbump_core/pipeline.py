"""Core version-check orchestration.

States of a run:

    Start ──(commits ∥ last tag)──> Classified ──> Recommended ─┬─> Rejected  (publish rejection, raise)
                                                               └─> Done      (set output, publish)

Any failed external call ends the run with that error. Nothing is retried.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Callable

from rich.console import Console

from prbump_core.classifier import CommitClassifier, ConventionalClassifier
from prbump_core.errors import NonCompliantCommits
from prbump_core.gh.pull_request import get_commits, get_pull, get_repo
from prbump_core.message import render, render_rejection
from prbump_core.models import RunContext, RunResult
from prbump_core.recommendation import is_non_compliant, recommend
from prbump_core.tags import GitTagResolver
from prbump_core.versioning import compute_target

if TYPE_CHECKING:
    from prbump_store.base import BaseCommentStore

console = Console()
logger = logging.getLogger(__name__)


def run_check(
    ctx: RunContext,
    config: dict,
    store: BaseCommentStore,
    repo_obj=None,
    tag_resolver=None,
    classifier: CommitClassifier | None = None,
    on_version: Callable[[str], None] | None = None,
) -> RunResult:
    """Run the version check for one pull request and return the outcome.

    ``on_version`` receives the target version as soon as it is known, before
    the comment is published; a failed publish therefore leaves it set.

    Raises MissingTag or ClassificationError before anything is posted,
    NonCompliantCommits after the rejection comment is posted, and ApiError
    for any failed GitHub call.
    """
    threshold = config.get("commit_threshold", 250)
    prefix = config.get("tag_prefix") or ""
    classifier = classifier if classifier is not None else ConventionalClassifier.from_config(config)
    resolver = tag_resolver if tag_resolver is not None else GitTagResolver(prefix=prefix)

    this_repo = (
        repo_obj if repo_obj is not None else get_repo(ctx.full_name, ctx.token, config.get("page_size", 100))
    )
    this_pr = get_pull(this_repo, ctx.pr_number)

    # Independent reads; the tag error surfaces first.
    with ThreadPoolExecutor(max_workers=2) as pool:
        commits_future = pool.submit(get_commits, this_pr, threshold)
        tag_future = pool.submit(resolver.resolve_last_tag)
        last_tag = tag_future.result()
        commits = commits_future.result()

    total = this_pr.commits or len(commits)
    console.print(f"[cyan]Analyzing {len(commits)} commit(s) of PR #{ctx.pr_number} since {last_tag}[/cyan]")

    recommendation = recommend(commits, classifier)
    stats = recommendation.stats
    logger.debug(
        "Recommendation: %s (commits=%d unset=%d merge=%d)",
        recommendation.level.name,
        stats.commits,
        stats.unset,
        stats.merge,
    )

    if is_non_compliant(stats):
        store.publish(ctx.pr_number, render_rejection())
        console.print("[red]Commit messages are not compliant; rejection comment posted.[/red]")
        raise NonCompliantCommits("The commits messages are not compliant")

    versions = compute_target(last_tag, recommendation.level, prefix)
    if versions.target_version and on_version is not None:
        on_version(versions.target_version)

    body = render(recommendation, versions, total, threshold)
    store.publish(ctx.pr_number, body)

    if versions.target_version:
        console.print(f"[green]Version {versions.last_version} → {versions.target_version} posted.[/green]")
    else:
        console.print(f"[yellow]No version bump proposed on top of {versions.last_version}.[/yellow]")

    return RunResult(recommendation=recommendation, versions=versions, body=body)
