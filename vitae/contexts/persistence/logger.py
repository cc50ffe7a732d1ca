"""
Persistence context logger.

Provides logging interface for persistence context with automatic [store] prefix.
All persistence modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[store]"


def setup_persistence_logger(
    log_dir: Optional[Path] = None,
    store_path: Optional[Path] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Setup logger for persistence context.

    Args:
        log_dir: Directory for this session (defaults to LOGS_PATH)
        store_path: Store location, recorded in the provenance header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="store",
        log_dir=log_dir,
        extra_provenance={"Store": store_path},
        console_level=console_level,
    )


# Wrapper functions with automatic [store] prefix


def _log_info(message: str) -> None:
    """Log info message with [store] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [store] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [store] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level persistence-specific logging helpers


def log_load_result(key: str, outcome: str, applied_migrations: Sequence[str] = ()) -> None:
    """
    Log how a load resolved.

    Args:
        key: Store key that was read
        outcome: "missing", "unparsable", "wrong-shape" or "loaded"
        applied_migrations: Names of migration steps that changed the payload
    """
    if outcome in ("unparsable", "wrong-shape"):
        _log_warning(f"Stored record under '{key}' is {outcome}; falling back to empty resume")
    elif outcome == "missing":
        _log_debug(f"No record stored under '{key}'")
    else:
        _log_debug(f"Loaded record from '{key}'")

    for name in applied_migrations:
        _log_info(f"  Migrated legacy shape: {name}")


def log_preference_fallback(key: str, raw_value: Optional[str], default: str) -> None:
    """Log that a stored preference was unrecognized and the default was used."""
    if raw_value is None:
        _log_debug(f"No preference stored under '{key}', using default {default!r}")
    else:
        _log_warning(f"Unrecognized value {raw_value!r} under '{key}', using default {default!r}")
