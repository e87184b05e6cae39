"""
Process-wide prompt configuration.

The prompt template is shared by every render call. It starts at
DEFAULT_TEMPLATE and only changes through set_template() (directly or via
ConfigManager.apply()), normally once before any question is asked.
"""

import logging
import os
from configparser import ConfigParser
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "{prompt:strong} (default={default:accent}) > "
TEMPLATE_ENV_VAR = "WEEZARD_TEMPLATE"

_template = DEFAULT_TEMPLATE


def get_template() -> str:
    """Get the current prompt template."""
    return _template


def set_template(template: str) -> None:
    """
    Replace the prompt template used by all subsequent renders.

    Args:
        template: ``str.format`` template, see weezard.question.render_template.
    """
    global _template
    logger.debug(f"Prompt template set to {template!r}")
    _template = template


def reset_template() -> None:
    """Restore the default prompt template."""
    set_template(DEFAULT_TEMPLATE)


class ConfigManager:
    """Manages weezard configuration from an INI file."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else None
        self.config = ConfigParser(interpolation=None)

    def load(self) -> ConfigParser:
        """Load the config file, if one was given and exists."""
        if self.config_path is not None:
            read = self.config.read(self.config_path)
            if read:
                logger.debug(f"Loaded config from {self.config_path}")
            else:
                logger.warning(f"Config file not found: {self.config_path}")
        return self.config

    def get(self, section: str, key: str, fallback: Optional[str] = None) -> str:
        """Get config value with fallback."""
        return self.config.get(section, key, fallback=fallback if fallback else "")

    def template(self) -> str:
        """Effective template: environment, then file, then the default."""
        env_template = os.environ.get(TEMPLATE_ENV_VAR)
        if env_template:
            return env_template
        value = self.get("prompt", "template", DEFAULT_TEMPLATE)
        # INI values lose surrounding whitespace; quotes keep a trailing space
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        if not value:
            logger.warning("Empty [prompt] template in config, using the default")
            return DEFAULT_TEMPLATE
        return value

    def log_level(self) -> str:
        return self.get("logging", "log_level", "WARNING")

    def log_file(self) -> Optional[str]:
        return self.get("logging", "log_file") or None

    def apply(self) -> None:
        """Push the configured template into the process-wide state."""
        set_template(self.template())
