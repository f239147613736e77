"""Markdown bodies for the tracked pull request comment.

Rendering is a pure function of its inputs (no timestamps, no run IDs) so a
re-run with the same commits produces a byte-identical comment.
"""

from __future__ import annotations

from prbump_core.models import BumpLevel, Recommendation, VersionPair

HEADING = "### Version"
CONVENTIONAL_COMMITS_URL = "https://www.conventionalcommits.org/en/v1.0.0/"


def render(
    recommendation: Recommendation,
    versions: VersionPair,
    total_commit_count: int,
    threshold: int = 250,
) -> str:
    lines = [HEADING]

    if total_commit_count > threshold:
        lines.append(
            f"⚠️ This pull request has {total_commit_count} commits; only the first {threshold} were analyzed."
        )

    if recommendation.level is BumpLevel.MAJOR:
        lines.append("🚨 Your pull request contains a BREAKING CHANGE, please be sure to communicate it")

    unset = recommendation.stats.unset
    if unset > 0:
        lines.append(
            f"❕ {unset} commit(s) are not using the conventional commits format. "
            "They will be ignored in version management."
        )

    lines.append(f"| Target version | {versions.target_version or ''} |")
    lines.append("| --- | --- |")
    lines.append(f"| Last version | {versions.last_version} |")

    lines.append(recommendation.reason)
    return "\n".join(lines)


def render_rejection() -> str:
    return (
        "❌ The commits messages are not compliant with the "
        f"[conventional commits]({CONVENTIONAL_COMMITS_URL}) format!"
    )
