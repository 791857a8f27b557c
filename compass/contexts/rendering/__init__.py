"""
Rendering Context

Responsibilities:
- Wraps generated letters into printable standalone HTML pages
- Wraps resume fragments into downloadable standalone HTML pages
- Proposes download file names and output paths for generated documents

Owns: Print/download packaging of finished documents
Never: Modifies document content or writes files
"""

from compass.contexts.rendering.document_wrapper import (
    letter_filename,
    resolve_output_path,
    resume_filename,
    wrap_letter_for_print,
    wrap_resume_for_download,
)

__all__ = [
    "letter_filename",
    "resolve_output_path",
    "resume_filename",
    "wrap_letter_for_print",
    "wrap_resume_for_download",
]
