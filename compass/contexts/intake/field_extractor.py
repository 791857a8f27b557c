"""
Best-effort field extraction from plain-text resumes.

Takes decoded upload text and recovers whatever structured fields it can:
name, contact details, skills, achievements, a degree and a job title.
Every step is independent; a step that finds nothing leaves its field unset.
Nothing here raises for string input.

This module has no knowledge of letter or resume requests. It returns
ExtractedFields, which the templating context folds into its requests.
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from compass.contexts.intake.extraction_patterns import (
    ContactPatterns,
    EntryHeuristics,
    SectionKeywords,
    first_match,
)
from compass.contexts.intake.logger import log_extraction_result
from compass.contexts.intake.normalizer import preprocess_resume_text
from compass.contexts.intake.section_finder import find_section
from compass.utils.config import SKILL_VOCABULARY_PATH, load_skill_vocabulary
from compass.utils.text_processing import title_case_words


@dataclass
class ExtractedFields:
    """
    Partial structured data recovered from raw resume text.

    All fields are suggestions for human review. None (or an empty list)
    means the extractor found nothing for that field.

    Attributes:
        full_name: First non-blank line of the document
        email: First email address found
        phone: First phone-number-like run found
        linkedin: Whole first line mentioning LinkedIn
        portfolio: First non-LinkedIn http(s) URL (scheme and host)
        skills: Known skill keywords found in the skills section, title-cased
        skill_items: Skills section body split on commas, bullets and newlines
        achievements: Achievements/accomplishments section body, newline-joined
        degree: First education line naming a degree or certificate
        job_title: First short experience line without contact details
    """

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    portfolio: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    skill_items: List[str] = field(default_factory=list)
    achievements: Optional[str] = None
    degree: Optional[str] = None
    job_title: Optional[str] = None

    def populated_fields(self) -> Dict[str, object]:
        """Fields that were recovered, in declaration order."""
        return {name: value for name, value in asdict(self).items() if value}

    @property
    def is_empty(self) -> bool:
        """True when the extractor recovered nothing."""
        return not self.populated_fields()


# =============================================================================
# SINGLE-FIELD EXTRACTORS
# =============================================================================


def extract_email(lines: List[str]) -> Optional[str]:
    """First email address on the first line that has one."""
    return first_match(lines, ContactPatterns.EMAIL)


def extract_phone(lines: List[str]) -> Optional[str]:
    """First phone-number-like run, trimmed of a trailing separator."""
    match = first_match(lines, ContactPatterns.PHONE)
    if match is None:
        return None
    return match.strip(" .-")


def extract_linkedin(lines: List[str]) -> Optional[str]:
    """Whole first line mentioning LinkedIn (not just the URL)."""
    for line in lines:
        if ContactPatterns.LINKEDIN_MARKER in line.lower():
            return line
    return None


def extract_portfolio(lines: List[str]) -> Optional[str]:
    """First http(s) URL on a line that does not mention LinkedIn."""
    candidates = [
        line for line in lines if ContactPatterns.LINKEDIN_MARKER not in line.lower()
    ]
    return first_match(candidates, ContactPatterns.WEBSITE)


def extract_skills(
    text: str,
    vocabulary_path: Path = SKILL_VOCABULARY_PATH,
) -> List[str]:
    """
    Match known skill keywords against free text.

    Matching is a case-insensitive substring test, so short keywords also
    hit inside longer words ("java" inside "javascript"). Matches come back
    in vocabulary order, title-cased per word.

    Args:
        text: Text to scan (typically a joined skills section)
        vocabulary_path: Optional path to the skill vocabulary YAML

    Returns:
        Title-cased skills found in the text

    Example:
        >>> extract_skills("Proficient in Python, React, and SQL")
        ['Python', 'React', 'Sql']
    """
    lower_text = text.lower()
    return [
        title_case_words(skill)
        for skill in load_skill_vocabulary(vocabulary_path)
        if skill in lower_text
    ]


def split_skill_items(section: List[str]) -> List[str]:
    """
    Split a skills section body into raw items.

    Example:
        >>> split_skill_items(["Python, SQL", "• Docker"])
        ['Python', 'SQL', 'Docker']
    """
    joined = " ".join(section)
    items = EntryHeuristics.SKILL_ITEM_SPLIT.split(joined)
    return [item.strip() for item in items if item.strip()]


def extract_degree(section: List[str]) -> Optional[str]:
    """First education line naming a degree or certificate."""
    for line in section:
        lower_line = line.lower()
        if any(marker in lower_line for marker in EntryHeuristics.DEGREE_MARKERS):
            return line
    return None


def extract_job_title(section: List[str]) -> Optional[str]:
    """First experience line short enough to be a title and free of contact details."""
    for line in section:
        if len(line) >= EntryHeuristics.MAX_TITLE_LENGTH:
            continue
        if any(marker in line for marker in EntryHeuristics.TITLE_EXCLUDED_MARKERS):
            continue
        return line
    return None


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


def extract_fields_from_lines(
    lines: List[str],
    vocabulary_path: Path = SKILL_VOCABULARY_PATH,
) -> ExtractedFields:
    """
    Extract fields from already-preprocessed resume lines.

    Args:
        lines: Trimmed, non-blank lines in document order
        vocabulary_path: Optional path to the skill vocabulary YAML

    Returns:
        ExtractedFields with whatever could be recovered
    """
    extracted = ExtractedFields(
        full_name=lines[0] if lines else None,
        email=extract_email(lines),
        phone=extract_phone(lines),
        linkedin=extract_linkedin(lines),
        portfolio=extract_portfolio(lines),
    )

    skills_section = find_section(lines, *SectionKeywords.SKILLS)
    if skills_section:
        extracted.skills = extract_skills(" ".join(skills_section), vocabulary_path)
        extracted.skill_items = split_skill_items(skills_section)

    achievements_section = find_section(lines, *SectionKeywords.ACHIEVEMENTS)
    if achievements_section:
        extracted.achievements = "\n".join(achievements_section)

    education_section = find_section(lines, *SectionKeywords.EDUCATION)
    if education_section:
        extracted.degree = extract_degree(education_section)

    experience_section = find_section(lines, *SectionKeywords.EXPERIENCE)
    if experience_section:
        extracted.job_title = extract_job_title(experience_section)

    return extracted


def extract_fields(
    raw_text: Optional[str],
    vocabulary_path: Path = SKILL_VOCABULARY_PATH,
) -> ExtractedFields:
    """
    Extract best-effort structured fields from raw resume text.

    This is the main extraction function. It never fails; text with nothing
    recognizable yields an empty ExtractedFields.

    Args:
        raw_text: Decoded resume text (None is treated as empty)
        vocabulary_path: Optional path to the skill vocabulary YAML

    Returns:
        ExtractedFields with whatever could be recovered

    Example:
        >>> fields = extract_fields("Jane Doe\\njane.doe@example.com")
        >>> fields.full_name, fields.email
        ('Jane Doe', 'jane.doe@example.com')
    """
    lines = preprocess_resume_text(raw_text)
    extracted = extract_fields_from_lines(lines, vocabulary_path)
    log_extraction_result(extracted, len(lines))
    return extracted


def extract_fields_from_file(file_path: Path) -> ExtractedFields:
    """
    Extract fields from a UTF-8 text file.

    Args:
        file_path: Path to an already-decoded plain-text resume

    Returns:
        ExtractedFields with whatever could be recovered
    """
    text = file_path.read_text(encoding="utf-8", errors="replace")
    return extract_fields(text)
