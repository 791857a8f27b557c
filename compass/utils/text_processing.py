"""
Text processing utilities for formatting and display.
"""

import re
from typing import Iterable, List, Optional

BULLET_MARKERS = ("•", "-", "*")
VOWELS = ("a", "e", "i", "o", "u")


def title_case_words(text: str) -> str:
    """
    Capitalize the first letter of each space-separated word.

    Unlike str.title(), the rest of each word is left untouched and only
    spaces delimit words, so punctuation inside a word does not start a new one.

    Example:
        >>> title_case_words("machine learning")
        'Machine Learning'
        >>> title_case_words("ci/cd")
        'Ci/cd'
        >>> title_case_words("c++")
        'C++'
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def lower_first(text: str) -> str:
    """
    Lower-case only the first character of text.

    Used when a user-supplied sentence is spliced into the middle of another one.

    Example:
        >>> lower_first("Lead a team at NASA")
        'lead a team at NASA'
    """
    return text[:1].lower() + text[1:]


def as_clause(text: Optional[str]) -> str:
    """
    Prepare free text for embedding mid-sentence.

    Strips surrounding whitespace and trailing periods, then lower-cases the
    first character. Returns an empty string for None/blank input.

    Example:
        >>> as_clause("  Build accessible products. ")
        'build accessible products'
    """
    if not text:
        return ""
    return lower_first(text.strip().rstrip(".").rstrip())


def as_sentence_fragment(text: Optional[str]) -> str:
    """
    Strip whitespace and trailing periods without changing case.

    Example:
        >>> as_sentence_fragment("your mission resonates with me.")
        'your mission resonates with me'
    """
    if not text:
        return ""
    return text.strip().rstrip(".").rstrip()


def as_sentence(text: Optional[str]) -> str:
    """
    Strip whitespace and make sure the text ends with terminal punctuation.

    Example:
        >>> as_sentence("This role matches my goals")
        'This role matches my goals.'
    """
    if not text:
        return ""
    stripped = text.strip()
    if stripped and stripped[-1] not in ".!?":
        stripped += "."
    return stripped


def join_limited(items: Iterable[str], limit: int, separator: str = ", ") -> str:
    """
    Join the first `limit` non-blank items with a separator.

    Example:
        >>> join_limited(["Python", "SQL", "React", "Go"], 3)
        'Python, SQL, React'
        >>> join_limited(["Python"], 2, " and ")
        'Python'
    """
    selected = [item.strip() for item in items if item and item.strip()][:limit]
    return separator.join(selected)


def strip_bullet_marker(line: str) -> str:
    """
    Remove a leading bullet marker ('•', '-', '*') and following whitespace.

    Example:
        >>> strip_bullet_marker("• Led a team of five")
        'Led a team of five'
    """
    stripped = line.strip()
    if stripped.startswith(BULLET_MARKERS):
        stripped = stripped[1:].lstrip()
    return stripped


def non_blank_lines(text: Optional[str]) -> List[str]:
    """
    Split text into trimmed lines, dropping blank ones.

    Example:
        >>> non_blank_lines("  first \\n\\n second\\n")
        ['first', 'second']
    """
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines, 1 for standard
                        normalization (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
    """
    if max_consecutive == 0:
        pattern = r"\n\s*\n(\s*\n)*"
    else:
        pattern = r"\n\s*\n(\s*\n)+"

    replacement = "\n" * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)


def underscore_spaces(text: str) -> str:
    """
    Collapse each whitespace run into a single underscore.

    Example:
        >>> underscore_spaces("Acme  Corp Labs")
        'Acme_Corp_Labs'
    """
    return re.sub(r"\s+", "_", text.strip())


def with_indefinite_article(phrase: str) -> str:
    """
    Prefix a phrase with 'a' or 'an' based on its first letter.

    Example:
        >>> with_indefinite_article("Adaptable")
        'an Adaptable'
        >>> with_indefinite_article("dedicated")
        'a dedicated'
    """
    article = "an" if phrase[:1].lower() in VOWELS else "a"
    return f"{article} {phrase}"
