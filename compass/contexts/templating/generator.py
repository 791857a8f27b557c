"""
Document generation orchestration.

generate_letter() and generate_resume() wrap the renderers in the document
lifecycle and never raise for missing fields:

    EMPTY -> VALIDATED -> RENDERED
    EMPTY -> VALIDATED -> REJECTED   (required fields missing; terminal)

A rejected result names every missing field so the caller can ask for them
and start a new generation. A template failure after validation leaves the
result at VALIDATED with the error message set.
"""

import time
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple

from compass.contexts.templating.exceptions import TemplateRenderError, ValidationError
from compass.contexts.templating.letter_generator import render_letter
from compass.contexts.templating.logger import log_generation_result
from compass.contexts.templating.nomenclature import DocumentStatus
from compass.contexts.templating.registries import TemplateRegistry
from compass.contexts.templating.request_structures import LetterRequest, ResumeRequest
from compass.contexts.templating.resume_generator import render_resume


@dataclass
class GenerationResult:
    """Result from generate_letter() or generate_resume()."""

    success: bool
    document_type: str
    status: DocumentStatus = DocumentStatus.EMPTY
    document: str = ""
    missing_fields: Tuple[str, ...] = field(default_factory=tuple)
    error: Optional[str] = None
    time_s: float = 0.0


def _rejected(document_type: str, error: ValidationError, start_time: float) -> GenerationResult:
    return GenerationResult(
        success=False,
        document_type=document_type,
        status=DocumentStatus.REJECTED,
        missing_fields=error.missing_fields,
        error=str(error),
        time_s=time.time() - start_time,
    )


def generate_letter(request: LetterRequest, today: Optional[date] = None) -> GenerationResult:
    """
    Generate a cover letter.

    Args:
        request: Letter request
        today: Date for the date line (defaults to the current local date)

    Returns:
        GenerationResult with the letter text on success, or the missing
        fields when the request is rejected

    Example:
        >>> result = generate_letter(LetterRequest(full_name="Jane Doe"))
        >>> result.status, result.missing_fields
        (<DocumentStatus.REJECTED: 'rejected'>, ('company_name', 'position_title'))
    """
    start_time = time.time()

    try:
        letter = render_letter(request, today=today)
    except ValidationError as e:
        result = _rejected("letter", e, start_time)
    else:
        result = GenerationResult(
            success=True,
            document_type="letter",
            status=DocumentStatus.RENDERED,
            document=letter,
            time_s=time.time() - start_time,
        )

    log_generation_result(result, variant=request.structure.value)
    return result


def generate_resume(
    request: ResumeRequest, registry: Optional[TemplateRegistry] = None
) -> GenerationResult:
    """
    Generate a resume HTML fragment.

    Args:
        request: Resume request
        registry: Optional template registry (defaults to the packaged layouts)

    Returns:
        GenerationResult with the HTML fragment on success, the missing
        fields when the request is rejected, or the template error when the
        layout fails to render
    """
    start_time = time.time()

    try:
        html = render_resume(request, registry=registry)
    except ValidationError as e:
        result = _rejected("resume", e, start_time)
    except TemplateRenderError as e:
        result = GenerationResult(
            success=False,
            document_type="resume",
            status=DocumentStatus.VALIDATED,
            error=str(e),
            time_s=time.time() - start_time,
        )
    else:
        result = GenerationResult(
            success=True,
            document_type="resume",
            status=DocumentStatus.RENDERED,
            document=html,
            time_s=time.time() - start_time,
        )

    log_generation_result(result, variant=request.template.value)
    return result
