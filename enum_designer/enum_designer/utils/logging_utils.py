import logging
import sys
from typing import Optional, Union


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


def resolve_level(level: Union[int, str], default: int = logging.INFO) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), default)


def configure_split_stream_logging(
    *,
    level: Union[int, str] = logging.INFO,
    stderr_level: Union[int, str] = logging.WARNING,
    formatter: Optional[logging.Formatter] = None,
) -> None:
    """Configure root logging:

    - records below ``stderr_level`` go to stdout
    - records at or above ``stderr_level`` go to stderr

    Generated-file notices stay on stdout so scripts can capture them while
    validation and I/O errors remain visible on the terminal.
    """

    level = resolve_level(level, logging.INFO)
    stderr_level = max(resolve_level(stderr_level, logging.WARNING), logging.DEBUG)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(stderr_level - 1))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(stderr_level)
    stderr_handler.setFormatter(formatter)

    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)
