"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from compass.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path, source: str = "text") -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session
        source: Description of the text source for provenance

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_result(extracted, line_count: int) -> None:
    """
    Log a summary of an extraction pass.

    Args:
        extracted: ExtractedFields from extract_fields()
        line_count: Number of non-blank lines scanned
    """
    populated = extracted.populated_fields()
    if not populated:
        _log_warning(f"No fields recovered from {line_count} lines")
        return
    _log_debug(f"Recovered {len(populated)} fields from {line_count} lines: {', '.join(populated)}")
