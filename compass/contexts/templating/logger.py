"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from compass.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, document_type: str = "letter") -> Path:
    """
    Setup logger for templating context.

    Configures loguru with provenance tracking and templating-specific context.

    Args:
        log_dir: Directory for this templating session
        document_type: Document being generated ("letter" or "resume")

    Returns:
        Path to log file

    Example:
        from compass.contexts.templating.logger import setup_templating_logger, _log_debug

        log_file = setup_templating_logger(log_dir, document_type="resume")
        _log_debug("Rendering resume...")
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Document": document_type},
    )


# Wrapper functions with automatic [template] prefix


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_generation_result(result, variant: str) -> None:
    """
    Log the outcome of one generation call.

    Args:
        result: GenerationResult from generate_letter()/generate_resume()
        variant: Letter structure or resume template name
    """
    if result.success:
        _log_debug(
            f"Rendered {result.document_type} ({variant}, {len(result.document)} chars) "
            f"in {result.time_s:.3f}s"
        )
    elif result.missing_fields:
        _log_warning(
            f"Rejected {result.document_type} ({variant}): missing {', '.join(result.missing_fields)}"
        )
    else:
        _log_error(f"Failed to render {result.document_type} ({variant}): {result.error}")
