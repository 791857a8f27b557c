"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Iterable, Optional


class ValidationError(ValueError):
    """
    Exception raised when a request is missing required fields.

    Generation aborts and no partial document is produced. The caller must
    supply the missing fields and generate again.

    Attributes:
        missing_fields: Names of the required fields that were empty
        document_type: "letter" or "resume"
    """

    def __init__(self, missing_fields: Iterable[str], document_type: str):
        self.missing_fields = tuple(missing_fields)
        self.document_type = document_type
        super().__init__(
            f"Cannot generate {document_type}: missing required field(s): "
            f"{', '.join(self.missing_fields)}"
        )


class TemplateRenderError(Exception):
    """
    Exception raised when template loading or rendering fails.

    Attributes:
        message: Error description
        template_name: Name of the template being rendered
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_name = template_name
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_name and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Name: {template_name}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
