"""
Logging for Cohesion Lens.

Library modules only create loggers under the ``cohesion_lens`` namespace.
The CLI decides where records go by calling setup_logging() with the
verbosity from AnalysisConfig, so ``--verbose``, ``verbosity = "verbose"`` in
a config file and ``COHESION_VERBOSITY=verbose`` all end up here.
"""

import logging
from typing import Literal, Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "cohesion_lens"

Verbosity = Literal["quiet", "normal", "verbose"]

# quiet: errors only; normal: skipped classes and failed metrics; verbose: per-metric values
LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: Verbosity = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route cohesion_lens records to a rich handler on stderr.

    Args:
        verbosity: One of LEVELS; "verbose" also shows the emitting module
        log_file: Optional path that receives the same records as plain text

    Returns:
        The cohesion_lens logger

    Raises:
        ValueError: If verbosity is not a known level
    """
    try:
        level = LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"Unknown verbosity '{verbosity}', expected one of {', '.join(LEVELS)}") from None
    verbose = level == logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            markup=False,
            rich_tracebacks=True,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        handlers.append(file_handler)

    # Only our namespace is tuned; other libraries keep the root's WARNING.
    logging.basicConfig(level=logging.WARNING, format="%(message)s", handlers=handlers, force=True)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, always placed under the cohesion_lens namespace."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
