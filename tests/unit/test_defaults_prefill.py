"""Unit tests for career-phase defaults and profile prefill."""

import pytest

from compass.contexts.templating.defaults import PhaseDefaults, phase_defaults
from compass.contexts.templating.nomenclature import CareerPhase
from compass.contexts.templating.prefill import prefill_letter_request, prefill_resume_request
from compass.contexts.templating.request_structures import (
    CareerProfile,
    EducationEntry,
    ExperienceEntry,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "phase, work_style, work_values",
    [
        (CareerPhase.STUDENT, ("Collaborative", "Eager to learn", "Detail-oriented"), ("Growth", "Learning opportunities", "Mentorship")),
        (CareerPhase.ENTRY_LEVEL, ("Adaptable", "Team-oriented", "Proactive"), ("Growth", "Impact", "Collaboration")),
        (CareerPhase.CAREER_SWITCHER, ("Adaptable", "Quick learner", "Resilient"), ("New challenges", "Growth", "Applying diverse experiences")),
        (CareerPhase.EXPERIENCED, ("Strategic", "Leadership-oriented", "Results-driven"), ("Innovation", "Excellence", "Impact")),
    ],
)
def test_phase_defaults(phase, work_style, work_values):
    defaults = phase_defaults(phase)
    assert defaults.short_term_goals
    assert defaults.work_style == work_style
    assert defaults.work_values == work_values


@pytest.mark.unit
@pytest.mark.parametrize("phase", [CareerPhase.UNSURE, None])
def test_phase_defaults_empty_without_entry(phase):
    assert phase_defaults(phase) == PhaseDefaults()


@pytest.mark.unit
def test_phase_defaults_custom_config(tmp_path):
    config = tmp_path / "defaults.yaml"
    config.write_text(
        "phases:\n"
        "  student:\n"
        "    short_term_goals: Finish my thesis\n"
        "    work_style: [Focused]\n"
        "    work_values: [Curiosity]\n"
    )
    defaults = phase_defaults(CareerPhase.STUDENT, config_path=config)
    assert defaults == PhaseDefaults("Finish my thesis", ("Focused",), ("Curiosity",))


@pytest.mark.unit
def test_prefill_letter_request():
    profile = CareerProfile(career_phase="entry-level", skills=["Python", "SQL"], goals="Lead a data team")

    request = prefill_letter_request(profile, company_name="Acme", full_name="Jane Doe")

    assert request.key_skills == ("Python", "SQL")
    assert request.long_term_goals == "Lead a data team"
    assert request.work_style == ("Adaptable", "Team-oriented", "Proactive")
    assert request.short_term_goals.startswith("Develop my skills")
    assert request.career_phase is CareerPhase.ENTRY_LEVEL
    assert request.company_name == "Acme"
    assert request.full_name == "Jane Doe"


@pytest.mark.unit
def test_prefill_letter_request_without_phase():
    request = prefill_letter_request(CareerProfile())
    assert request.work_style == ()
    assert request.short_term_goals == ""
    assert request.career_phase is None


@pytest.mark.unit
def test_prefill_resume_for_student():
    profile = CareerProfile(
        career_phase="student",
        skills=["Python"],
        education="BSc Computer Science",
        graduation_year=2026,
        relevant_courses="Algorithms, Databases",
        current_role="Teaching Assistant",
    )

    request = prefill_resume_request(profile)

    assert request.skills == ("Python",)
    assert request.education == (
        EducationEntry(
            degree="BSc Computer Science",
            graduation_date="2026",
            highlights="Algorithms, Databases",
        ),
    )
    assert request.experience == ()


@pytest.mark.unit
@pytest.mark.parametrize("phase", ["entry-level", "experienced"])
def test_prefill_resume_current_role(phase):
    profile = CareerProfile(
        career_phase=phase,
        education="BSc",
        current_role="Data Analyst",
        key_achievements="Cut reporting time by 50%",
    )

    request = prefill_resume_request(profile, template="modern")

    assert request.experience == (
        ExperienceEntry(title="Data Analyst", current=True, description="Cut reporting time by 50%"),
    )
    assert request.education == ()
    assert request.template.value == "modern"


@pytest.mark.unit
def test_prefill_resume_prefers_accomplishments():
    profile = CareerProfile(
        career_phase="experienced",
        current_role="Director",
        accomplishments="Grew team to 20",
        key_achievements="Other",
    )
    assert prefill_resume_request(profile).experience[0].description == "Grew team to 20"


@pytest.mark.unit
def test_prefill_resume_career_switcher_has_no_entries():
    profile = CareerProfile(career_phase="career-switcher", current_role="Librarian", education="BA")
    request = prefill_resume_request(profile)
    assert request.experience == ()
    assert request.education == ()
