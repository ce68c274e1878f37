"""Package logger with a Rich console handler and a few CLI output helpers."""

import logging

from rich.console import Console
from rich.logging import RichHandler


class CodegenLogger(logging.Logger):
    """
    Logger used across the code generator.

    Standard logging levels go through a RichHandler; the extra methods print
    straight to the console and are meant for CLI feedback only.
    """

    def __init__(self, name: str, level: int = logging.INFO) -> None:
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
        """Print a success message in green with a checkmark icon."""
        self.print(f"[green]✓[/green] {message}")

    def rule(self, title: str, style: str = "bold blue") -> None:
        """
        Print a horizontal rule with a title.

        Args:
            title: Title text for the rule
            style: Rich style string (default: "bold blue")
        """
        self.console.rule(f"[{style}]{title}")

    def key_value(self, key: str, value: object, key_style: str = "dim") -> None:
        """Print a formatted `key: value` pair."""
        self.print(f"[{key_style}]{key}:[/{key_style}] {value}")


def get_logger(name: str = "gqlcodegen") -> CodegenLogger:
    """
    Get or create a CodegenLogger instance.

    Args:
        name: Logger name (default: "gqlcodegen")

    Returns:
        CodegenLogger instance
    """
    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(CodegenLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    return logger  # type: ignore[return-value]
