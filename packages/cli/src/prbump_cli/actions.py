"""GitHub Actions job plumbing: step outputs and failure annotations."""

from __future__ import annotations

import os

import click


def in_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def set_output(name: str, value: str) -> None:
    """Expose ``name=value`` as a step output.

    Appends to the file named by GITHUB_OUTPUT; outside Actions the pair is
    printed so the value is still visible.
    """
    output_path = os.environ.get("GITHUB_OUTPUT")
    if output_path:
        with open(output_path, "a", encoding="utf-8") as f:
            f.write(f"{name}={value}\n")
    else:
        click.echo(f"{name}={value}")


def report_failure(message: str) -> None:
    """Annotate the workflow run with an error; no-op outside Actions."""
    if in_actions():
        # Workflow commands need newlines escaped to stay on one line.
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        click.echo(f"::error::{escaped}")
