"""Unit tests for cover letter rendering."""

from datetime import date

import pytest

from compass.contexts.templating.exceptions import ValidationError
from compass.contexts.templating.letter_generator import (
    ACHIEVEMENTS_INTRO,
    achievement_bullets,
    format_recipient,
    render_letter,
)
from compass.contexts.templating.nomenclature import LetterStructure
from compass.contexts.templating.request_structures import LetterRequest
from compass.utils.timestamp import format_long_date

ALL_STRUCTURES = list(LetterStructure)


def _minimal(**overrides):
    fields = {"full_name": "Jane Doe", "company_name": "Acme", "position_title": "Analyst"}
    fields.update(overrides)
    return LetterRequest(**fields)


def _full(**overrides):
    fields = {
        "recipient_name": "Smith",
        "recipient_title": "Dr.",
        "company_name": "Acme Corp",
        "position_title": "Data Analyst",
        "source_of_listing": "LinkedIn",
        "full_name": "Jane Doe",
        "contact": {"email": "jane@example.com", "phone": "555-123-4567"},
        "short_term_goals": "Build accessible products.",
        "long_term_goals": "Lead a data team",
        "company_interest": "your mission resonates with me.",
        "role_alignment": "This role matches my goals",
        "key_skills": ["Python", "SQL", "Tableau", "Excel", "Statistics", "R"],
        "relevant_achievements": "• Cut reporting time by 50%\n- Led migration to cloud warehouse\n",
        "work_style": ["Adaptable", "Curious", "Organized", "Calm"],
        "work_values": ["Growth", "Impact", "Collaboration", "Balance"],
        "career_phase": "entry-level",
    }
    fields.update(overrides)
    return LetterRequest(**fields)


def _blocks(letter):
    return letter.rstrip("\n").split("\n\n")


# =============================================================================
# LAYOUT
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("structure", ALL_STRUCTURES)
def test_letter_layout(structure, letter_date):
    """Date, recipient, body, closing and contact blocks in order."""
    letter = render_letter(_full(structure=structure), today=letter_date)
    lines = letter.splitlines()

    assert lines[0] == "January 5, 2025"
    assert lines[2] == "Dear Dr. Smith,"
    assert letter.endswith("Sincerely,\nJane Doe\n\nEmail: jane@example.com\nPhone: 555-123-4567\n")
    assert "Acme Corp" in letter
    assert "Data Analyst" in letter


@pytest.mark.unit
@pytest.mark.parametrize("structure", ALL_STRUCTURES)
def test_contact_block_omitted_when_empty(structure, letter_date):
    letter = render_letter(_minimal(structure=structure), today=letter_date)
    assert letter.endswith("Sincerely,\nJane Doe\n")
    assert "Email:" not in letter


@pytest.mark.unit
@pytest.mark.parametrize("structure", ALL_STRUCTURES)
def test_minimal_letter_has_no_dangling_tokens(structure, letter_date):
    """Blank optional fields never leave empty tokens or stray separators."""
    letter = render_letter(_minimal(structure=structure), today=letter_date)

    for fragment in ("  ", " ,", " .", "..", ",,", "{", "}", "None", " in ."):
        assert fragment not in letter


@pytest.mark.unit
@pytest.mark.parametrize("structure", ALL_STRUCTURES)
def test_rendering_is_deterministic(structure, letter_date):
    request = _full(structure=structure)
    assert render_letter(request, today=letter_date) == render_letter(request, today=letter_date)


@pytest.mark.unit
@pytest.mark.parametrize("structure", ALL_STRUCTURES)
def test_missing_required_fields(structure):
    with pytest.raises(ValidationError) as exc_info:
        render_letter(LetterRequest(full_name="Jane Doe", structure=structure))
    assert exc_info.value.missing_fields == ("company_name", "position_title")


@pytest.mark.unit
@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({}, "Dear Hiring Manager,"),
        ({"greeting": "Hello"}, "Hello Hiring Manager,"),
        ({"recipient_title": "Dr."}, "Dear Hiring Manager,"),
        ({"recipient_name": "Smith"}, "Dear Smith,"),
        ({"recipient_name": "Smith", "recipient_title": "Ms.", "greeting": "To"}, "To Ms. Smith,"),
    ],
)
def test_format_recipient(overrides, expected):
    assert format_recipient(LetterRequest(**overrides)) == expected


@pytest.mark.unit
def test_closing_phrase(letter_date):
    letter = render_letter(_minimal(closing="Best regards"), today=letter_date)
    assert "Best regards,\nJane Doe" in letter


# =============================================================================
# STANDARD
# =============================================================================


@pytest.mark.unit
def test_standard_full_letter(letter_date):
    first, second, third, fourth = _blocks(render_letter(_full(), today=letter_date))[2:6]

    assert first == (
        "I am writing to express my interest in the Data Analyst position at Acme Corp "
        "that I saw advertised on LinkedIn. With my early career experience in Python, SQL, "
        "Tableau, I am confident in my ability to make valuable contributions to your team."
    )
    assert second == (
        "This role matches my goals. My short-term career goal is to build accessible products "
        "while working toward lead a data team. "
        "I'm particularly drawn to Acme Corp because your mission resonates with me."
    )
    assert third.startswith(
        "My key strengths include Python, SQL, Tableau, Excel, Statistics, and I value a work "
        "environment that promotes Growth, Impact, Collaboration. "
        "My approach to work is Adaptable, Curious, Organized."
    )
    assert "Some of my notable achievements include: • Cut reporting time by 50%" in third
    assert fourth == (
        "I am excited about the possibility of bringing my Python and SQL to Acme Corp and would "
        "welcome the opportunity to discuss how my background aligns with your needs in more "
        "detail. I will follow up in one week if I don't hear back before then."
    )


@pytest.mark.unit
def test_standard_minimal_letter(letter_date):
    first, second, third, fourth = _blocks(render_letter(_minimal(), today=letter_date))[2:6]

    assert "With my extensive professional experience, I am confident" in first
    assert second == (
        "My goal is to contribute meaningfully while developing professionally. "
        "I'm excited about the opportunity to join Acme and contribute to your innovative work."
    )
    assert third == "I bring a strong work ethic and a commitment to continuous improvement."
    assert "bringing my skills and experience to Acme" in fourth


@pytest.mark.unit
def test_standard_values_without_skills(letter_date):
    letter = render_letter(_minimal(work_values=["Growth"]), today=letter_date)
    assert "I value a work environment that promotes Growth." in letter
    assert "My key strengths include" not in letter


@pytest.mark.unit
@pytest.mark.parametrize("structure", ALL_STRUCTURES)
def test_follow_up_disabled(structure, letter_date):
    letter = render_letter(_full(structure=structure, follow_up=False), today=letter_date)
    assert "follow up" not in letter


@pytest.mark.unit
def test_follow_up_timeframe(letter_date):
    letter = render_letter(_minimal(follow_up_timeframe="a few days"), today=letter_date)
    assert "I will follow up in a few days" in letter


@pytest.mark.unit
def test_student_phrasing(letter_date):
    letter = render_letter(_minimal(career_phase="student"), today=letter_date)
    assert "With my educational background and coursework, I am confident" in letter


# =============================================================================
# STORY-BASED
# =============================================================================


@pytest.mark.unit
def test_story_based_full_letter(letter_date):
    request = _full(structure="story-based", career_phase="student")
    first, second, third, fourth = _blocks(render_letter(request, today=letter_date))[2:6]

    assert first == (
        "I still remember the moment when I realized the impact of Python in my studies. "
        "This pivotal experience has guided my career path and led me to apply for the "
        "Data Analyst role at Acme Corp, which I discovered on LinkedIn."
    )
    assert second == (
        "Throughout my academic journey, I've cultivated an Adaptable approach to challenges. "
        "One example that demonstrates my ability to deliver results is Cut reporting time by 50%. "
        "This experience reinforced my commitment to Growth and my desire to build accessible products."
    )
    assert third == (
        "What resonates with me about Acme Corp is your mission resonates with me. "
        "This role matches my goals. I believe my background in Python, SQL, Tableau positions "
        "me well to help your team tackle challenges while working toward my long-term goal to "
        "lead a data team."
    )
    assert fourth == (
        "I would welcome the opportunity to discuss how my unique journey and skills in Python "
        "and SQL can benefit Acme Corp. I'll follow up in one week if I don't hear from you "
        "before then."
    )


@pytest.mark.unit
def test_story_based_minimal_letter(letter_date):
    letter = render_letter(_minimal(structure="story-based"), today=letter_date)
    assert "the impact of effective work in my professional life" in letter
    assert "I've cultivated a dedicated approach to challenges." in letter
    assert "One example" not in letter
    assert "my commitment to excellence and my desire to contribute meaningfully" in letter
    assert "your reputation for innovation and excellence" in letter
    assert "long-term goal to grow professionally" in letter


@pytest.mark.unit
def test_story_based_manager_leads_initiatives(letter_date):
    request = _minimal(structure="story-based", position_title="Engineering Manager")
    letter = render_letter(request, today=letter_date)
    assert "help your team lead initiatives" in letter
    assert "tackle challenges" not in letter


# =============================================================================
# ACHIEVEMENT-FOCUSED
# =============================================================================


@pytest.mark.unit
def test_achievement_bullets_from_lines():
    request = _full()
    assert achievement_bullets(request) == [
        "Cut reporting time by 50%",
        "Led migration to cloud warehouse",
    ]


@pytest.mark.unit
def test_achievement_focused_full_letter(letter_date):
    request = _full(structure="achievement-focused")
    letter = render_letter(request, today=letter_date)

    assert (
        "As a motivated professional with expertise in Python, SQL, Tableau, I have consistently "
        "delivered measurable results throughout my professional journey."
    ) in letter
    assert (
        f"{ACHIEVEMENTS_INTRO}\n\n• Cut reporting time by 50%\n\n• Led migration to cloud warehouse"
    ) in letter
    assert (
        "My approach to work, which is Adaptable and Curious, aligns with my goal to build "
        "accessible products while working toward lead a data team."
    ) in letter
    assert "can contribute to Acme Corp's success. I will follow up in one week" in letter


@pytest.mark.unit
@pytest.mark.parametrize(
    "phase, skills, expected",
    [
        (
            "student",
            [],
            [
                "Completed coursework in relevant subject areas with excellent academic standing",
                "Led a student project that demonstrated skills in problem-solving and teamwork",
            ],
        ),
        (
            "student",
            ["Python", "SQL"],
            [
                "Completed coursework in Python with excellent academic standing",
                "Led a student project that demonstrated skills in SQL",
            ],
        ),
        (
            "entry-level",
            ["Python"],
            [
                "Successfully applied Python to improve processes in my current role",
                "Collaborated with team members to achieve departmental goals through "
                "effective communication",
            ],
        ),
        (
            "career-switcher",
            [],
            [
                "Transferred skills in previous field to tackle new challenges",
                "Quickly adapted to new environments while maintaining high performance standards",
            ],
        ),
        (
            None,
            [],
            [
                "Led initiatives that resulted in improved outcomes through strategic planning",
                "Mentored team members and fostered a culture of excellence",
            ],
        ),
    ],
)
def test_generic_bullets_when_no_achievements(phase, skills, expected, letter_date):
    """Exactly two phase-specific bullets stand in for missing achievements."""
    request = _minimal(structure="achievement-focused", career_phase=phase, key_skills=skills)
    letter = render_letter(request, today=letter_date)

    bullet_lines = [line for line in letter.splitlines() if line.startswith("• ")]
    assert bullet_lines == [f"• {text}" for text in expected]


@pytest.mark.unit
def test_achievement_focused_minimal_letter(letter_date):
    letter = render_letter(_minimal(structure="achievement-focused"), today=letter_date)
    assert "As a seasoned professional, I have consistently" in letter
    assert "because of your reputation in the industry." in letter
    assert (
        "My approach to work aligns with my goal to continue delivering excellent results "
        "while working toward greater professional impact."
    ) in letter
    assert "my achievement-oriented approach and expertise can contribute to Acme's success" in letter


@pytest.mark.unit
def test_default_date_is_today():
    letter = render_letter(_minimal())
    assert letter.splitlines()[0] == format_long_date(date.today())


@pytest.mark.unit
def test_achievement_bullets_skip_blank_and_bare_markers():
    request = _minimal(relevant_achievements="• Won award\n\n   \n•\n- Shipped v2")
    assert achievement_bullets(request) == ["Won award", "Shipped v2"]


@pytest.mark.unit
def test_achievement_bullets_skip_punctuation_only_lines():
    request = _minimal(relevant_achievements="• .\n...\n- Shipped v2")
    assert achievement_bullets(request) == ["Shipped v2"]


@pytest.mark.unit
def test_punctuation_only_achievements_fall_back_to_generic_bullets(letter_date):
    request = _minimal(structure="achievement-focused", relevant_achievements="• .")
    assert len(achievement_bullets(request)) == 2
    assert "• ." not in render_letter(request, today=letter_date)


@pytest.mark.unit
def test_story_based_skips_punctuation_only_achievement(letter_date):
    request = _minimal(structure="story-based", relevant_achievements="• .")
    letter = render_letter(request, today=letter_date)
    assert "One example" not in letter
    assert " is ." not in letter


@pytest.mark.unit
@pytest.mark.parametrize("submitted", ["false", "False", "0", "no"])
def test_follow_up_false_string_from_form(submitted, letter_date):
    request = LetterRequest.from_dict(
        {
            "fullName": "Jane Doe",
            "companyName": "Acme",
            "positionTitle": "Analyst",
            "followUp": submitted,
        }
    )
    assert "follow up" not in render_letter(request, today=letter_date)
