"""Rule CLI commands: check, lint and show.

Exit codes:
    0: success
    1: the data failed validation
    2: the rule file or data file is unusable (unreadable, unparsable, or a
       malformed rule tree)
"""

import json
from pathlib import Path
from typing import NoReturn

import click

from ruleforge.config import RuleforgeConfig
from ruleforge.errors import SchemaError, ValidationError
from ruleforge.loader import LoadError, load_data_file, load_rule_file
from ruleforge.schema import Schema
from ruleforge.serialization import rule_to_dict

EXIT_INVALID_DATA = 1
EXIT_BAD_INPUT = 2

_existing_file = click.Path(exists=True, dir_okay=False, path_type=Path)


def _echo(config: RuleforgeConfig, text: str, err: bool = False, **style) -> None:
    if config.color and style:
        text = click.style(text, **style)
    click.echo(text, err=err)


def _fail(config: RuleforgeConfig, text: str, code: int) -> NoReturn:
    _echo(config, text, err=True, fg="red")
    raise SystemExit(code)


def _load_schema(config: RuleforgeConfig, rule_file: Path) -> Schema:
    try:
        return Schema(load_rule_file(rule_file))
    except LoadError as e:
        _fail(config, f"Error: {e}", EXIT_BAD_INPUT)
    except SchemaError as e:
        _fail(config, f"Schema error in {rule_file}:\n{e}", EXIT_BAD_INPUT)


@click.command()
@click.argument("rule_file", type=_existing_file)
@click.argument("data_file", type=_existing_file)
@click.pass_obj
def check(config: RuleforgeConfig, rule_file: Path, data_file: Path):
    """Validate DATA_FILE against the rule tree in RULE_FILE."""
    schema = _load_schema(config, rule_file)

    try:
        data = load_data_file(data_file)
    except LoadError as e:
        _fail(config, f"Error: {e}", EXIT_BAD_INPUT)

    try:
        schema.validate(data)
    except ValidationError as e:
        _fail(config, f"Invalid: {e}", EXIT_INVALID_DATA)

    _echo(config, "Valid.", fg="green", bold=True)


@click.command()
@click.argument("rule_file", type=_existing_file)
@click.pass_obj
def lint(config: RuleforgeConfig, rule_file: Path):
    """Compile RULE_FILE and report schema errors."""
    schema = _load_schema(config, rule_file)
    _echo(config, f"Rule tree is valid (root: {schema.rule.kind}).", fg="green", bold=True)


@click.command()
@click.argument("rule_file", type=_existing_file)
@click.option("--indent", default=2, show_default=True, help="JSON indentation.")
@click.pass_obj
def show(config: RuleforgeConfig, rule_file: Path, indent: int):
    """Print the rule tree in RULE_FILE as normalized JSON."""
    try:
        rule = load_rule_file(rule_file)
    except LoadError as e:
        _fail(config, f"Error: {e}", EXIT_BAD_INPUT)
    except SchemaError as e:
        _fail(config, f"Schema error in {rule_file}:\n{e}", EXIT_BAD_INPUT)

    click.echo(json.dumps(rule_to_dict(rule), indent=indent))
