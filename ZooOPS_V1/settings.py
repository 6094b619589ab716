"""
Logging configuration for the ZooOPS console game.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional


def init_logging(level: int = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """Configure basic logging to console and optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=handlers,
    )

    logging.getLogger(__name__).info("Logging initialized (level=%s)", logging.getLevelName(level))
