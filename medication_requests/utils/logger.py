"""Loguru setup for medication request processing."""

import sys
from typing import Any, TextIO

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>{extra[context]}"
)


def _render_context(record: dict[str, Any]) -> None:
    """Flatten values bound with ``logger.bind`` into ``extra["context"]``.

    Produces `` | key=value ...`` sorted by key, or an empty string.
    """
    extra = record["extra"]
    pairs = sorted((k, v) for k, v in extra.items() if k != "context")
    extra["context"] = (
        " | " + " ".join(f"{key}={value}" for key, value in pairs) if pairs else ""
    )


def setup_logger(
    console_level: str = "INFO",
    serialize: bool = False,
    sink: TextIO = sys.stderr,
) -> None:
    """Replace loguru handlers with a single console handler.

    Request context bound through ``log_operation`` (request_id,
    medication_id, remaining stock...) is appended to each console line.
    With ``serialize`` the handler writes one JSON object per line instead,
    for job runners that collect structured logs.

    Args:
        console_level: Minimum level to emit (default: INFO)
        serialize: Emit JSON lines instead of formatted text
        sink: Stream to write to (default: stderr)

    Raises:
        ValueError: If console_level is not a loguru level
    """
    logger.remove()
    logger.configure(patcher=_render_context)

    if serialize:
        logger.add(sink, level=console_level, serialize=True, backtrace=False)
    else:
        logger.add(
            sink,
            format=CONSOLE_FORMAT,
            level=console_level,
            backtrace=True,
            diagnose=False,
        )

    logger.debug(f"Logging at {console_level} ({'json' if serialize else 'text'})")


__all__ = ["setup_logger", "logger"]
