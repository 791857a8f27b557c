"""
Intake Context

Responsibilities:
- Ingests decoded resume text from uploads
- Normalizes text into trimmed, non-blank lines
- Locates resume sections heuristically
- Extracts best-effort fields (name, contact details, skills, achievements, degree, title)

Owns: Raw text field extraction logic
Never: Builds letter/resume requests or renders documents
"""

from compass.contexts.intake.field_extractor import (
    ExtractedFields,
    extract_fields,
    extract_fields_from_file,
    extract_skills,
)
from compass.contexts.intake.section_finder import find_section, looks_like_section_header

__all__ = [
    "ExtractedFields",
    "extract_fields",
    "extract_fields_from_file",
    "extract_skills",
    "find_section",
    "looks_like_section_header",
]
