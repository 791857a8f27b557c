"""
Seed letter and resume requests from a stored career profile.

The career profile is collected earlier in the guided flow. Prefill copies
what it can into a fresh request; the user reviews and edits the result
before generating.
"""

from dataclasses import replace

from compass.contexts.templating.defaults import phase_defaults
from compass.contexts.templating.nomenclature import CareerPhase
from compass.contexts.templating.request_structures import (
    CareerProfile,
    EducationEntry,
    ExperienceEntry,
    LetterRequest,
    ResumeRequest,
)

# Phases whose current role is worth listing as an ongoing job
CURRENT_ROLE_PHASES = (CareerPhase.ENTRY_LEVEL, CareerPhase.EXPERIENCED)


def prefill_letter_request(profile: CareerProfile, **overrides) -> LetterRequest:
    """
    Build a starting LetterRequest from a career profile.

    Key skills come from the profile, short-term goal, work styles and work
    values from the phase defaults, and the long-term goal from the profile's
    goals. Keyword overrides are applied last.

    Args:
        profile: Stored career profile
        **overrides: LetterRequest fields to set explicitly

    Returns:
        New LetterRequest

    Example:
        >>> profile = CareerProfile(career_phase="student", skills=["Python"], goals="Lead a lab")
        >>> request = prefill_letter_request(profile, company_name="Acme")
        >>> request.key_skills, request.long_term_goals
        (('Python',), 'Lead a lab')
    """
    defaults = phase_defaults(profile.career_phase)

    request = LetterRequest(
        key_skills=tuple(profile.skills),
        short_term_goals=defaults.short_term_goals,
        work_style=defaults.work_style,
        work_values=defaults.work_values,
        long_term_goals=profile.goals or "",
        career_phase=profile.career_phase,
    )
    return replace(request, **overrides) if overrides else request


def prefill_resume_request(profile: CareerProfile, **overrides) -> ResumeRequest:
    """
    Build a starting ResumeRequest from a career profile.

    Skills always carry over. Students with an education entry get it as
    their first education entry (graduation year as the date, relevant
    courses as highlights). Entry-level and experienced users with a current
    role get it as a current experience entry, described by their
    accomplishments (or key achievements).

    Args:
        profile: Stored career profile
        **overrides: ResumeRequest fields to set explicitly

    Returns:
        New ResumeRequest
    """
    education = ()
    if profile.career_phase is CareerPhase.STUDENT and profile.education:
        education = (
            EducationEntry(
                degree=profile.education,
                graduation_date=str(profile.graduation_year) if profile.graduation_year else "",
                highlights=profile.relevant_courses or "",
            ),
        )

    experience = ()
    if profile.career_phase in CURRENT_ROLE_PHASES and profile.current_role:
        experience = (
            ExperienceEntry(
                title=profile.current_role,
                current=True,
                description=profile.accomplishments or profile.key_achievements or "",
            ),
        )

    request = ResumeRequest(
        skills=tuple(profile.skills),
        education=education,
        experience=experience,
        career_phase=profile.career_phase,
    )
    return replace(request, **overrides) if overrides else request
