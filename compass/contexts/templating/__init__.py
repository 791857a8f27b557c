"""
Templating Context

Responsibilities:
- Defines the immutable letter and resume request records
- Validates required fields before generation
- Renders cover letters (standard, story-based, achievement-focused)
- Renders resumes (professional, modern, creative Jinja2 layouts)
- Seeds requests from career-phase defaults and stored career profiles

Owns: Request structures, document generation logic, resume layout templates
Never: Parses uploaded text or packages documents for download/print
"""

from compass.contexts.templating.exceptions import TemplateRenderError, ValidationError
from compass.contexts.templating.generator import (
    GenerationResult,
    generate_letter,
    generate_resume,
)
from compass.contexts.templating.letter_generator import render_letter
from compass.contexts.templating.nomenclature import (
    CareerPhase,
    Closing,
    DocumentStatus,
    FollowUpTimeframe,
    Greeting,
    LetterStructure,
    ResumeTemplate,
)
from compass.contexts.templating.prefill import prefill_letter_request, prefill_resume_request
from compass.contexts.templating.request_structures import (
    CareerProfile,
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    LetterRequest,
    PersonalInfo,
    ProjectEntry,
    ResumeRequest,
)
from compass.contexts.templating.resume_generator import render_resume

__all__ = [
    "CareerPhase",
    "CareerProfile",
    "CertificationEntry",
    "Closing",
    "ContactInfo",
    "DocumentStatus",
    "EducationEntry",
    "ExperienceEntry",
    "FollowUpTimeframe",
    "GenerationResult",
    "Greeting",
    "LetterRequest",
    "LetterStructure",
    "PersonalInfo",
    "ProjectEntry",
    "ResumeRequest",
    "ResumeTemplate",
    "TemplateRenderError",
    "ValidationError",
    "generate_letter",
    "generate_resume",
    "prefill_letter_request",
    "prefill_resume_request",
    "render_letter",
    "render_resume",
]
