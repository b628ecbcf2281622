import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def to_logging_level(level: Union[int, str], default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` to a :mod:`logging` level."""
    if isinstance(level, int):
        return level
    value = getattr(logging, level.strip().upper(), None)
    return value if isinstance(value, int) else default


def configure_split_stream_logging(
    *,
    level: Union[int, str] = logging.INFO,
    stderr_level: Union[int, str] = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """Configure logging for schema walks:

    - DEBUG/INFO go to stdout
    - WARNING/ERROR/CRITICAL go to stderr

    Diagnostics mirrored by a logging report therefore land on stderr when they
    are warnings or worse, while walk tracing stays on stdout.
    """

    target = logging.getLogger(logger_name)
    target.handlers.clear()
    target.setLevel(to_logging_level(level))

    if formatter is None:
        formatter = logging.Formatter(DEFAULT_FORMAT)

    stderr_level = to_logging_level(stderr_level, default=logging.WARNING)
    if stderr_level < logging.DEBUG:
        stderr_level = logging.DEBUG

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    target.addHandler(stdout_handler)
    target.addHandler(stderr_handler)
    return target
