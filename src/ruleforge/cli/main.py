"""Ruleforge CLI entry point."""

import logging

import click

from ruleforge.config import RuleforgeConfig


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (overrides RULEFORGE_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Ruleforge: declarative data validation CLI."""
    config = RuleforgeConfig.from_env()
    if log_level:
        config.log_level = log_level.upper()
    logging.basicConfig(level=config.level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


# Register subcommands
from ruleforge.cli.rule_cmd import check, lint, show  # noqa: E402

cli.add_command(check)
cli.add_command(lint)
cli.add_command(show)
