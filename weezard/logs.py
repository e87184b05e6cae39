"""Logging setup for weezard front ends."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogManager:
    """Attach console (and optionally file) handlers to the weezard logger."""

    def __init__(self, name: str = "weezard", level: str = "WARNING", log_file: Optional[Path] = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        # Prompts go to stdout, so diagnostics go to stderr
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(formatter)
        self.logger.addHandler(ch)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(log_path)
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

    def get_logger(self) -> logging.Logger:
        """Get configured logger."""
        return self.logger
