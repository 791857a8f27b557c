"""Integration tests: resume text through extraction, generation and packaging."""

import pytest

from compass.contexts.intake import extract_fields
from compass.contexts.rendering import (
    letter_filename,
    resume_filename,
    wrap_letter_for_print,
    wrap_resume_for_download,
)
from compass.contexts.templating import (
    CareerProfile,
    DocumentStatus,
    LetterRequest,
    LetterStructure,
    ResumeRequest,
    ResumeTemplate,
    generate_letter,
    generate_resume,
    prefill_letter_request,
    prefill_resume_request,
)


@pytest.mark.integration
@pytest.mark.parametrize("structure", list(LetterStructure))
def test_uploaded_resume_to_printable_letter(sample_resume_text, letter_date, structure):
    """Extracted fields fill a letter that renders and wraps for print."""
    extracted = extract_fields(sample_resume_text)
    request = LetterRequest(
        company_name="Globex",
        position_title="Senior Data Analyst",
        key_skills=["Python"],
        structure=structure,
    ).with_extracted_fields(extracted)

    result = generate_letter(request, today=letter_date)

    assert result.status is DocumentStatus.RENDERED
    letter = result.document
    assert letter.startswith("January 5, 2025\n\nDear Hiring Manager,\n\n")
    assert "Senior Data Analyst" in letter
    assert "Globex" in letter
    assert "Sincerely,\nJane Doe\n\n" in letter
    assert "Email: jane.doe@example.com" in letter
    assert "Phone: (555) 123-4567" in letter
    assert "LinkedIn: linkedin.com/in/janedoe" in letter
    assert "Portfolio: https://janedoe.dev" in letter
    assert request.key_skills == ("Python", "Sql", "Machine Learning", "Tableau")

    page = wrap_letter_for_print(letter, request.company_name)
    assert "<title>Cover Letter - Globex</title>" in page
    assert letter_filename(request.company_name) == "Cover_Letter_Globex.txt"


@pytest.mark.integration
def test_extracted_achievements_become_bullets(sample_resume_text, letter_date):
    extracted = extract_fields(sample_resume_text)
    request = LetterRequest(
        company_name="Globex",
        position_title="Analyst",
        structure="achievement-focused",
    ).with_extracted_fields(extracted)

    letter = generate_letter(request, today=letter_date).document

    assert "• Cut reporting time by 50%\n\n• Led migration to cloud warehouse" in letter


@pytest.mark.integration
@pytest.mark.parametrize("template", list(ResumeTemplate))
def test_uploaded_resume_to_downloadable_resume(sample_resume_text, template):
    """Extracted fields fill a resume that renders in every layout."""
    extracted = extract_fields(sample_resume_text)
    request = ResumeRequest(template=template, career_phase="entry-level").with_extracted_fields(
        extracted
    )

    result = generate_resume(request)

    assert result.status is DocumentStatus.RENDERED
    html = result.document
    assert "Jane Doe" in html
    assert "Data Analyst" in html
    assert "Bachelor of Science in Statistics" in html
    assert "Machine Learning" in html
    assert 'data-section="experience"' in html
    assert 'data-section="education"' in html
    assert 'data-section="projects"' not in html

    page = wrap_resume_for_download(html, request.full_name)
    assert "<title>Jane Doe - Resume</title>" in page
    assert html.strip() in page
    assert resume_filename(request.full_name) == "Jane_Doe_resume.html"


@pytest.mark.integration
def test_profile_prefill_to_documents(letter_date):
    """A stored profile seeds both documents; user edits complete them."""
    profile = CareerProfile.from_dict(
        {
            "careerPhase": "student",
            "skills": ["Python", "Statistics"],
            "goals": "Lead a research group",
            "education": "BSc Statistics",
            "graduationYear": 2026,
            "relevantCourses": "Regression, Probability",
        }
    )

    letter_result = generate_letter(
        prefill_letter_request(
            profile,
            full_name="Jane Doe",
            company_name="Initech",
            position_title="Research Intern",
            structure="story-based",
        ),
        today=letter_date,
    )
    resume_result = generate_resume(
        prefill_resume_request(
            profile,
            personal={"full_name": "Jane Doe", "email": "jane@example.com"},
            template="creative",
        )
    )

    assert letter_result.status is DocumentStatus.RENDERED
    assert "I've cultivated a Collaborative approach to challenges." in letter_result.document
    assert "my long-term goal to lead a research group" in letter_result.document

    assert resume_result.status is DocumentStatus.RENDERED
    assert "Aspiring Professional" in resume_result.document
    assert "BSc Statistics" in resume_result.document
    assert "Regression, Probability" in resume_result.document


@pytest.mark.integration
def test_incomplete_upload_is_rejected_until_completed(letter_date):
    """Rejection names every missing field; supplying them allows a new generation."""
    extracted = extract_fields("Jane Doe\njane.doe@example.com")
    request = LetterRequest().with_extracted_fields(extracted)

    rejected = generate_letter(request, today=letter_date)
    assert rejected.status is DocumentStatus.REJECTED
    assert rejected.missing_fields == ("company_name", "position_title")

    completed = LetterRequest.from_dict(
        {
            "fullName": request.full_name,
            "email": request.contact.email,
            "companyName": "Acme",
            "positionTitle": "Analyst",
        }
    )
    assert generate_letter(completed, today=letter_date).status is DocumentStatus.RENDERED
