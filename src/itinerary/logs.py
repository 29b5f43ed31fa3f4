# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def configure_logging(level: str = "WARNING") -> None:
    """
    Route all log records to stderr through rich.

    Raises:
        ValueError: If the level is not a standard logging level name
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. "
            f"Valid: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level_upper)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Replace existing handlers to avoid duplicate lines
    root.handlers.clear()
    root.addHandler(handler)
