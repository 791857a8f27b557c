"""
Career-phase phrasing for cover letters.

Each letter structure frames the applicant differently depending on the
selected career phase. Phrases live here so the paragraph builders stay free
of phase branching. Experienced applicants, "unsure" applicants and requests
with no phase selected all share the general phrasing.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from compass.contexts.templating.nomenclature import CareerPhase


@dataclass(frozen=True)
class PhasePhrasing:
    """
    Phase-specific fragments used by the letter structures.

    Attributes:
        background: Standard opening, "With {background} in ..."
        hook_setting: Story opening, "the impact of X in {hook_setting}"
        journey: Story body, "Throughout my {journey}, ..."
        descriptor: Achievement opening, "As a {descriptor} with expertise in ..."
        track_record: Achievement opening, "throughout my {track_record}"
    """

    background: str
    hook_setting: str
    journey: str
    descriptor: str
    track_record: str


GENERAL_PHRASING = PhasePhrasing(
    background="my extensive professional experience",
    hook_setting="my professional life",
    journey="career",
    descriptor="seasoned professional",
    track_record="professional journey",
)

PHASE_PHRASING = {
    CareerPhase.STUDENT: PhasePhrasing(
        background="my educational background and coursework",
        hook_setting="my studies",
        journey="academic journey",
        descriptor="promising graduate",
        track_record="academic career",
    ),
    CareerPhase.ENTRY_LEVEL: PhasePhrasing(
        background="my early career experience",
        hook_setting="my professional life",
        journey="early career",
        descriptor="motivated professional",
        track_record="professional journey",
    ),
    CareerPhase.CAREER_SWITCHER: PhasePhrasing(
        background="my diverse professional background",
        hook_setting="my professional life",
        journey="professional transitions",
        descriptor="versatile professional",
        track_record="professional journey",
    ),
    CareerPhase.EXPERIENCED: GENERAL_PHRASING,
}


def phrasing_for(phase: Optional[CareerPhase]) -> PhasePhrasing:
    """Phrasing for a career phase, falling back to the general phrasing."""
    return PHASE_PHRASING.get(phase, GENERAL_PHRASING)


def _nth(values: Sequence[str], index: int) -> Optional[str]:
    """The index-th non-blank value, or None."""
    present = [value.strip() for value in values if value and value.strip()]
    return present[index] if len(present) > index else None


def generic_achievement_bullets(
    phase: Optional[CareerPhase],
    key_skills: Sequence[str],
    work_values: Sequence[str],
) -> List[str]:
    """
    Two stand-in achievements for applicants who listed none.

    Bullets are templated from the first two key skills (or the first work
    value for general phrasing), with a fixed phrase standing in for any that
    are missing.

    Args:
        phase: Selected career phase (None for no selection)
        key_skills: Applicant's key skills, in order
        work_values: Applicant's work values, in order

    Returns:
        Exactly two bullet texts, without bullet markers

    Example:
        >>> generic_achievement_bullets(CareerPhase.STUDENT, ["Python"], [])[0]
        'Completed coursework in Python with excellent academic standing'
    """
    first_skill = _nth(key_skills, 0)
    second_skill = _nth(key_skills, 1)

    if phase is CareerPhase.STUDENT:
        return [
            f"Completed coursework in {first_skill or 'relevant subject areas'} "
            "with excellent academic standing",
            "Led a student project that demonstrated skills in "
            f"{second_skill or 'problem-solving and teamwork'}",
        ]
    if phase is CareerPhase.ENTRY_LEVEL:
        return [
            f"Successfully applied {first_skill or 'key skills'} "
            "to improve processes in my current role",
            "Collaborated with team members to achieve departmental goals through "
            f"{second_skill or 'effective communication'}",
        ]
    if phase is CareerPhase.CAREER_SWITCHER:
        return [
            f"Transferred skills in {first_skill or 'previous field'} to tackle new challenges",
            "Quickly adapted to new environments while maintaining high performance standards",
        ]
    return [
        "Led initiatives that resulted in improved outcomes through "
        f"{first_skill or 'strategic planning'}",
        f"Mentored team members and fostered a culture of {_nth(work_values, 0) or 'excellence'}",
    ]
