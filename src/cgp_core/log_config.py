# --- src/cgp_core/log_config.py ---
import logging
import os
import sys
from typing import IO, Optional, Union

#: Environment variable read on package import to pick the initial log level.
LOG_LEVEL_ENV_VAR = "CGP_CORE_LOG_LEVEL"


def resolve_level(level: Union[int, str]) -> int:
    """Accepts a numeric level or a level name such as 'debug' or 'WARNING'."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'.")
    return resolved


def setup_logging(level: Union[int, str, None] = None, stream: Optional[IO[str]] = None):
    """
    Configures the root logger with a single console handler.
    Without an explicit level, CGP_CORE_LOG_LEVEL is used, falling back to INFO.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, logging.INFO)
    try:
        numeric_level = resolve_level(level)
    except ValueError:
        numeric_level = logging.INFO
        logging.getLogger(__name__).warning(f"Ignoring invalid log level '{level}'; using INFO.")

    log_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"
    )
    root_logger = logging.getLogger()

    # Replace any handlers installed by an earlier call
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(console_handler)
    logging.debug("Logging configured at level %s.", logging.getLevelName(numeric_level))
