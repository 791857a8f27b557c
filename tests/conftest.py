"""Shared fixtures for unit and integration tests."""

from datetime import date

import pytest

SAMPLE_RESUME_TEXT = """Jane Doe
jane.doe@example.com | (555) 123-4567
linkedin.com/in/janedoe
https://janedoe.dev

SUMMARY
Analyst who turns data into decisions

SKILLS
Python, SQL, Tableau
• Machine Learning

EXPERIENCE
Data Analyst
Acme Corp, 2021 - Present
Built dashboards used by 40 teams

EDUCATION
State University
Bachelor of Science in Statistics

ACHIEVEMENTS
Cut reporting time by 50%
Led migration to cloud warehouse
"""


@pytest.fixture
def sample_resume_text():
    """Plain-text resume with every extractable section."""
    return SAMPLE_RESUME_TEXT


@pytest.fixture
def letter_date():
    """Fixed date so letters compare byte-for-byte."""
    return date(2025, 1, 5)
