"""
Section finder for plain-text resumes.

Resumes decoded from uploads have no reliable markup, so sections are located
heuristically: a section opens at the first line mentioning one of its
keywords and closes at the next line that looks like a header.

The header test is deliberately loose and is known to misfire. A short line
with no lowercase letters (a date range such as "2019 - 2021", or an acronym
like "AWS") reads as a header and ends the section early. A short
colon-terminated line inside the body ("Languages:") does the same. Callers
must treat section bodies as suggestions.
"""

from typing import List, Optional

from compass.contexts.intake.extraction_patterns import SectionHeaderRules


def looks_like_section_header(line: str) -> bool:
    """
    Check whether a line looks like a resume section header.

    A header is shorter than 30 characters, is either identical to its own
    uppercase form or ends with ':', and does not start with '•' or '-'.

    Args:
        line: Trimmed line of resume text

    Returns:
        True if the line reads as a header

    Example:
        >>> looks_like_section_header("EDUCATION")
        True
        >>> looks_like_section_header("Work History:")
        True
        >>> looks_like_section_header("- SQL:")
        False
    """
    rules = SectionHeaderRules()

    if len(line) >= rules.MAX_HEADER_LENGTH:
        return False
    if line.startswith(rules.LIST_ITEM_PREFIXES):
        return False
    return line == line.upper() or line.endswith(rules.HEADER_SUFFIX)


def find_section(lines: List[str], *keywords: str) -> Optional[List[str]]:
    """
    Find the body of the first section introduced by any keyword.

    The section starts on the line after the first line whose lowercase text
    contains any keyword. It ends before the next header-looking line,
    searching from the second body line onward (the first body line is always
    kept), or at the end of the document.

    Args:
        lines: Trimmed, non-blank resume lines in document order
        *keywords: Case-insensitive keywords that open the section

    Returns:
        Section body lines, or None if no line mentions a keyword or the
        keyword line is the last line of the document

    Example:
        >>> find_section(["Jane Doe", "SKILLS", "Python, SQL", "EDUCATION", "BSc"], "skills")
        ['Python, SQL']
    """
    lower_keywords = [keyword.lower() for keyword in keywords]

    start_index = None
    for index, line in enumerate(lines):
        lower_line = line.lower()
        if any(keyword in lower_line for keyword in lower_keywords):
            start_index = index + 1
            break

    if start_index is None or start_index >= len(lines):
        return None

    end_index = len(lines)
    for index in range(start_index + 1, len(lines)):
        if looks_like_section_header(lines[index]):
            end_index = index
            break

    return lines[start_index:end_index]
