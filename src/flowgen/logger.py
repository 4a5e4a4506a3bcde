"""Unified logging system for flowgen with CLI output support."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class FlowgenLogger(logging.Logger):
    """
    Logger that combines Python logging with a few CLI formatting methods.

    Standard logging levels (debug, info, warning, error, critical) go through
    a RichHandler; print and success write straight to the console.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        """
        Initialize the flowgen logger.

        Args:
            name: Logger name
            level: Initial log level
        """
        super().__init__(name, level)
        self.console = Console(stderr=True)

        handler = RichHandler(
            console=self.console,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.addHandler(handler)

    def print(self, message: str) -> None:
        """Print a plain message (with Rich markup support)."""
        self.console.print(message)

    def success(self, message: str) -> None:
        """Print a success message in green with checkmark icon."""
        self.print(f"[green]✓[/green] {message}")


def get_logger(name: str = "flowgen") -> FlowgenLogger:
    """
    Get or create a flowgen logger instance.

    Args:
        name: Logger name (default: "flowgen")

    Returns:
        FlowgenLogger instance
    """
    logging.setLoggerClass(FlowgenLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(logging.Logger)

    return logger  # type: ignore[return-value]
