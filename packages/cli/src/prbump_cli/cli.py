"""CLI entry point for prbump.

Commands:
  check   — recommend the next version for a pull request and keep its status comment current
"""

from __future__ import annotations

import importlib.metadata
import logging

import click
from rich.logging import RichHandler

from prbump_cli.commands.check import check_cmd


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(
    version=importlib.metadata.version("prbump"),
    prog_name="prbump",
)
@click.option(
    "--config",
    "config_path",
    default=".prbump.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PRBUMP_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Recommend semantic version bumps for GitHub pull requests."""
    from prbump_cli.auth import resolve_github_token
    from prbump_core.config import load_config

    _configure_logging(verbose)
    ctx.ensure_object(dict)

    config = load_config(config_path)

    # Resolve token early so all subcommands share the same resolution.
    token = resolve_github_token()
    if token:
        config["github_token"] = token

    ctx.obj["config"] = config


main.add_command(check_cmd)
