"""Load rule trees and input documents from YAML or JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ruleforge.rules.types import Rule
from ruleforge.serialization import rule_from_dict

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """A file could not be read or parsed."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


def load_document(path: Path) -> Any:
    """Read a YAML or JSON file.

    ``.json`` files are parsed with the json module; everything else with
    ``yaml.safe_load`` (JSON is valid YAML, so unknown suffixes still work).

    Raises:
        LoadError: If the file is missing or does not parse
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(path, e.strerror or str(e)) from e

    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise LoadError(path, f"cannot parse file: {e}") from e


def load_rule_file(path: Path) -> Rule:
    """Load a rule tree from its dictionary form in a YAML or JSON file.

    Raises:
        LoadError: If the file cannot be read or parsed
        SchemaError: If the document is not a valid rule tree description
    """
    document = load_document(path)
    rule = rule_from_dict(document)
    logger.debug("Loaded %r rule tree from %s", rule.kind, path)
    return rule


def load_data_file(path: Path) -> Any:
    """Load the value to validate from a YAML or JSON file."""
    return load_document(path)
