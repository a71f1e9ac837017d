"""Package-wide logging for fwgraph.

All modules log through children of the ``fwgraph`` logger obtained with
`get_logger`. The root gets one stdout handler on import; the algorithms log
run summaries at DEBUG, cancellation at INFO and cycle failures at WARNING.
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "fwgraph"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install a single handler on the ``fwgraph`` logger.

    Later calls are no-ops until `reset_logging()` runs.

    Args:
        level: Root level (default: INFO).
        format_string: Formatter pattern; `DEFAULT_FORMAT` when omitted.
        handler: Destination; a stdout StreamHandler when omitted.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees our records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module ``name`` under the fwgraph root."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the fwgraph root logger and its handlers.

    Args:
        level: A logging level number or name such as ``"DEBUG"``.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'.")
        level = resolved

    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the root handler and level so the next setup starts fresh."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
