"""
Required-field validation for letter and resume requests.

Validation is a pure function of a complete request. It never partially
renders; callers either get an empty result (valid) or a list of every
missing field.
"""

from typing import List

from compass.contexts.templating.exceptions import ValidationError
from compass.contexts.templating.request_structures import LetterRequest, ResumeRequest

LETTER_REQUIRED_FIELDS = ("full_name", "company_name", "position_title")
RESUME_REQUIRED_FIELDS = ("full_name", "email")


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def missing_letter_fields(request: LetterRequest) -> List[str]:
    """
    List required letter fields that are blank.

    Example:
        >>> missing_letter_fields(LetterRequest(full_name="Jane Doe"))
        ['company_name', 'position_title']
    """
    return [name for name in LETTER_REQUIRED_FIELDS if _is_blank(getattr(request, name))]


def missing_resume_fields(request: ResumeRequest) -> List[str]:
    """List required resume fields (full_name, email) that are blank."""
    return [
        name for name in RESUME_REQUIRED_FIELDS if _is_blank(getattr(request.personal, name))
    ]


def validate_letter_request(request: LetterRequest) -> None:
    """
    Ensure a letter request has a name, a company and a position.

    Raises:
        ValidationError: Naming every missing field
    """
    missing = missing_letter_fields(request)
    if missing:
        raise ValidationError(missing, document_type="letter")


def validate_resume_request(request: ResumeRequest) -> None:
    """
    Ensure a resume request has a name and an email address.

    Raises:
        ValidationError: Naming every missing field
    """
    missing = missing_resume_fields(request)
    if missing:
        raise ValidationError(missing, document_type="resume")
