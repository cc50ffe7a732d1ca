"""
Export context logger.

Provides logging interface for export context with automatic [export] prefix.
All export modules should import from this module, not from utils.logger directly.
"""

from typing import List

from loguru import logger

CONTEXT_PREFIX = "[export]"


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [export] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_export_result(exported: bool, warnings: List[str], confirmed: bool, chars: int = 0) -> None:
    """
    Log the outcome of a gated export.

    Args:
        exported: Whether the export ran
        warnings: Validation warnings raised before export
        confirmed: Whether the caller confirmed exporting an incomplete resume
        chars: Length of the exported document
    """
    for warning in warnings:
        _log_warning(f"  Validation: {warning}")

    if exported:
        suffix = " (incomplete, confirmed)" if warnings and confirmed else ""
        _log_success(f"Exported plain text: {chars} characters{suffix}")
    else:
        _log_info("Export cancelled: resume incomplete and not confirmed")
