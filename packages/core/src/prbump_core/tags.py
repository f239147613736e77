"""Resolve the most recent version tag reachable from HEAD.

Reads the local clone, so the CI checkout must fetch tags
(``actions/checkout`` with ``fetch-depth: 0``).
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

from prbump_core.errors import MissingTag

logger = logging.getLogger(__name__)

# Deliberately loose: calendar tags such as 2024.03.1 must get through so the
# version calculator can recognise and skip them.
_VERSION_TAG_RE = re.compile(r"^[v=]?\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$")
_TAG_DECORATION = "tag: "
_TAGS_REF = "refs/tags/"


def is_version_tag(tag: str, prefix: str = "") -> bool:
    if prefix:
        if not tag.startswith(prefix):
            return False
        tag = tag[len(prefix) :]
    return bool(_VERSION_TAG_RE.match(tag))


def parse_decorations(log_output: str, prefix: str = "") -> list[str]:
    """Extract version tags from ``git log --decorate=full --format=%D`` output.

    Lines come newest commit first; several tags on one commit keep git's order.
    """
    tags = []
    for line in log_output.splitlines():
        for ref in line.split(","):
            ref = ref.strip()
            if not ref.startswith(_TAG_DECORATION):
                continue
            tag = ref[len(_TAG_DECORATION) :]
            if tag.startswith(_TAGS_REF):
                tag = tag[len(_TAGS_REF) :]
            if is_version_tag(tag, prefix):
                tags.append(tag)
    return tags


class GitTagResolver:
    """Lists version tags decorated on the local history, newest first."""

    def __init__(self, repo_path: str | Path | None = None, prefix: str = ""):
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()
        self.prefix = prefix

    def list_tags(self) -> list[str]:
        try:
            result = subprocess.run(
                ["git", "log", "--decorate=full", "--simplify-by-decoration", "--format=%D", "HEAD"],
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise MissingTag("git is not installed; cannot resolve the last tag") from e
        except subprocess.CalledProcessError as e:
            raise MissingTag(f"Unable to read tags: {e.stderr.strip() or e}") from e
        return parse_decorations(result.stdout, self.prefix)

    def resolve_last_tag(self) -> str:
        tags = self.list_tags()
        if not tags:
            raise MissingTag("no tag found")
        logger.debug("Last tag: %s (%d version tag(s) reachable)", tags[0], len(tags))
        return tags[0]
