import logging

from rich.console import Console
from rich.logging import RichHandler

# Logs and progress share stderr so stdout only ever carries report data
# (the --json array, the summary table).
log_console = Console(stderr=True)


def setup_logger(name: str = "s3walker", level: int = logging.INFO) -> logging.Logger:
    """Configures and returns a logger writing to stderr through RichHandler."""

    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = RichHandler(
            console=log_console, rich_tracebacks=True, markup=True, show_path=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# Global logger instance (INFO so per-bucket progress is visible)
logger = setup_logger()
