"""
Marshalling context logger.

Provides logging interface for marshalling context with automatic [marshal] prefix.
All marshalling modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import List

from loguru import logger

from vcardio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[marshal]"


def setup_marshalling_logger(log_dir: Path, output_format: str, target_version: str) -> Path:
    """
    Setup logger for marshalling context.

    Args:
        log_dir: Directory for this marshalling session
        output_format: "xml", "json" or "text"
        target_version: vCard version being produced

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="marshal",
        log_dir=log_dir,
        extra_provenance={"Format": output_format, "Target version": target_version},
    )


# Wrapper functions with automatic [marshal] prefix


def _log_info(message: str) -> None:
    """Log info message with [marshal] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [marshal] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [marshal] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [marshal] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [marshal] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level marshalling-specific logging helpers


def log_record_result(record_label: str, output_format: str, warnings: List[str]) -> None:
    """Log the outcome of marshalling one vCard."""
    for warning in warnings:
        _log_warning(f"{record_label}: {warning}")
    _log_debug(f"{record_label}: added to {output_format} document ({len(warnings)} warnings)")


def log_document_written(output_format: str, num_records: int, destination: str) -> None:
    _log_success(f"Wrote {num_records} vCard(s) as {output_format} to {destination}")


def log_vcards_loaded(num_records: int, source: str) -> None:
    _log_info(f"Loaded {num_records} vCard(s) from {source}")


def log_load_failed(source: str, error: Exception) -> None:
    _log_error(f"Could not load {source}: {error}")
