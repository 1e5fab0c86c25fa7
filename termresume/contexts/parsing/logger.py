"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[parse]"


# Wrapper functions with automatic [parse] prefix


def _log_info(message: str) -> None:
    """Log info message with [parse] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level parsing-specific logging helpers


def log_skipped_line(line_number: int, content: str, reason: str) -> None:
    """Log a line the lenient parser ignored."""
    _log_debug(f"Skipping line {line_number} ({reason}): {content!r}")


def log_parse_result(num_lines: int, root_type: str, num_entries: int, strict: bool) -> None:
    """Log summary of a completed parse."""
    mode = "strict" if strict else "lenient"
    _log_debug(f"Parsed {num_lines} lines ({mode} mode): root {root_type} with {num_entries} entries")
