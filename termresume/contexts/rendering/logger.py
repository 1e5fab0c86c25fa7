"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_config_source(config_path: Path = None) -> None:
    """Log where render settings came from."""
    if config_path is None:
        _log_debug("Using default render settings")
    else:
        _log_debug(f"Render settings: {config_path}")


def log_render_result(sections: list, num_lines: int) -> None:
    """Log which sections were rendered."""
    _log_debug(f"Rendered {num_lines} lines")
    _log_debug(f"  Sections: {', '.join(sections) if sections else '(none)'}")
