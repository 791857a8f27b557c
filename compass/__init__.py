"""
COMPASS - Career Onboarding: Matching Phases to Application Support Sheets

A career-assistance core that turns structured career data into cover letters
and resumes, and recovers structured fields from uploaded resume text.

Architecture:
- Intake Context: Raw resume text ingestion and best-effort field extraction
- Templating Context: Letter and resume request structures, validation, and generation
- Rendering Context: Print and download packaging of generated documents
"""

__version__ = "0.1.0"
