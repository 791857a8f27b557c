"""
Reusable patterns and constants for resume text field extraction.

Pattern classes follow the convention from the templating context:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact details in the header block of a resume.
    """

    EMAIL: re.Pattern = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

    # At least 10 digit tokens, each optionally wrapped in a leading "+" or "("
    # and a trailing ")" and followed by a single space, dot or dash separator.
    # Accepts "(555) 123-4567", "+1 555 123 4567" and "555.123.4567".
    PHONE: re.Pattern = re.compile(r"(?:\+?\(?[0-9]\)?[ .-]?){10,}")

    # Scheme plus host only; paths are not captured
    WEBSITE: re.Pattern = re.compile(r"https?://[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

    LINKEDIN_MARKER: str = "linkedin"


# =============================================================================
# SECTION KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class SectionKeywords:
    """
    Keywords that open a resume section when found anywhere in a line.
    """

    SKILLS: tuple = ("skills",)
    ACHIEVEMENTS: tuple = ("achievements", "accomplishments")
    EDUCATION: tuple = ("education",)
    EXPERIENCE: tuple = ("experience", "work experience")


# =============================================================================
# SECTION HEADER HEURISTIC
# =============================================================================


@dataclass(frozen=True)
class SectionHeaderRules:
    """
    Thresholds for deciding whether a line looks like a section header.

    Headers are short and either fully uppercase or colon-terminated.
    Lines opening with a bullet marker are list items, never headers.
    """

    MAX_HEADER_LENGTH: int = 30
    HEADER_SUFFIX: str = ":"
    LIST_ITEM_PREFIXES: tuple = ("•", "-")


# =============================================================================
# ENTRY HEURISTICS
# =============================================================================


@dataclass(frozen=True)
class EntryHeuristics:
    """
    Markers used to pick single entries out of education/experience sections.
    """

    DEGREE_MARKERS: tuple = ("bachelor", "master", "ph.d", "certificate")

    # A job title line is short and carries no contact details
    MAX_TITLE_LENGTH: int = 60
    TITLE_EXCLUDED_MARKERS: tuple = ("@", "http")

    # Separators for splitting a skills section body into raw items
    SKILL_ITEM_SPLIT: re.Pattern = re.compile(r"[,•\n]")


def first_match(lines: list, pattern: re.Pattern):
    """
    Return the first regex match from the first line that matches.

    Args:
        lines: Lines to scan in order
        pattern: Compiled pattern

    Returns:
        Matched substring, or None if no line matches
    """
    for line in lines:
        match = pattern.search(line)
        if match:
            return match.group(0)
    return None
