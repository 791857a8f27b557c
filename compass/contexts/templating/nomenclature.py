"""
Named choices for letter and resume generation.

Each enum value is the string the form layer submits, so requests built
from submitted data can coerce values with the enum constructor.
"""

from enum import Enum
from typing import Optional, Type, TypeVar, Union


class CareerPhase(str, Enum):
    """The user's self-selected career stage."""

    STUDENT = "student"
    ENTRY_LEVEL = "entry-level"
    CAREER_SWITCHER = "career-switcher"
    EXPERIENCED = "experienced"
    UNSURE = "unsure"


class Greeting(str, Enum):
    DEAR = "Dear"
    HELLO = "Hello"
    GREETINGS = "Greetings"
    TO = "To"


class Closing(str, Enum):
    SINCERELY = "Sincerely"
    BEST_REGARDS = "Best regards"
    KIND_REGARDS = "Kind regards"
    THANK_YOU = "Thank you"
    RESPECTFULLY = "Respectfully"


class FollowUpTimeframe(str, Enum):
    ONE_WEEK = "one week"
    TWO_WEEKS = "two weeks"
    A_FEW_DAYS = "a few days"


class LetterStructure(str, Enum):
    """Body-paragraph strategy for a cover letter."""

    STANDARD = "standard"
    STORY_BASED = "story-based"
    ACHIEVEMENT_FOCUSED = "achievement-focused"


class ResumeTemplate(str, Enum):
    """Visual layout for a resume."""

    PROFESSIONAL = "professional"
    MODERN = "modern"
    CREATIVE = "creative"


class DocumentStatus(str, Enum):
    """
    Lifecycle of a single generation call.

    EMPTY -> VALIDATED -> RENDERED, or VALIDATED -> REJECTED when required
    fields are missing. REJECTED is terminal; the caller must resubmit.
    """

    EMPTY = "empty"
    VALIDATED = "validated"
    RENDERED = "rendered"
    REJECTED = "rejected"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: Type[E], value: Union[E, str]) -> E:
    """
    Convert a submitted string to an enum member.

    Args:
        enum_cls: Target enum class
        value: Enum member or its string value

    Returns:
        Enum member

    Raises:
        ValueError: If value is not a valid member value
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = [member.value for member in enum_cls]
        raise ValueError(
            f"Invalid {enum_cls.__name__} '{value}'. Valid values: {valid}"
        ) from None


def coerce_optional_phase(value: Union[CareerPhase, str, None]) -> Optional[CareerPhase]:
    """Like coerce_enum for CareerPhase, but None and "" mean no phase selected."""
    if value is None or value == "":
        return None
    return coerce_enum(CareerPhase, value)
