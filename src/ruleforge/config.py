"""Runtime configuration for the ruleforge CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class RuleforgeConfig:
    """CLI configuration.

    Attributes:
        log_level: Name of the logging level (DEBUG, INFO, WARNING, ...)
        color: Whether CLI output is colored
    """

    log_level: str = "WARNING"
    color: bool = True

    @classmethod
    def from_env(cls) -> RuleforgeConfig:
        """Create config from environment variables.

        - RULEFORGE_LOG_LEVEL: logging level name (default: WARNING)
        - RULEFORGE_COLOR: "0", "false", "no" or "off" disables colors
        - NO_COLOR: any value disables colors
        """
        log_level = os.environ.get("RULEFORGE_LOG_LEVEL", "WARNING").upper()
        color = os.environ.get("RULEFORGE_COLOR", "1").lower() not in _FALSE_VALUES
        if os.environ.get("NO_COLOR"):
            color = False
        return cls(log_level=log_level, color=color)

    @property
    def level(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING
