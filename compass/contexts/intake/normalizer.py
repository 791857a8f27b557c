"""
Raw resume text normalizer for the Intake context.

Cleans decoded upload text before field extraction: unicode oddities that
break regex matching are replaced, then the text is split into trimmed,
non-blank lines. Bullet characters are kept because the section finder
uses them to tell list items from headers.
"""

import unicodedata
from typing import List, Optional

# Unicode replacements: problematic char → ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u2009": " ",  # thin space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
}


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause parsing issues.

    Applies NFC normalization and replaces invisible or non-standard
    spacing characters.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode
    """
    text = unicodedata.normalize("NFC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def preprocess_resume_text(text: Optional[str]) -> List[str]:
    """
    Turn raw resume text into the line list the extractor scans.

    Args:
        text: Decoded resume text (None is treated as empty)

    Returns:
        Lines in original order, each trimmed, blank lines removed
    """
    if not text:
        return []

    text = normalize_unicode(text)
    return [line.strip() for line in text.splitlines() if line.strip()]
