"""
Resume Generator

Renders a ResumeRequest into an HTML fragment using one of three layouts
(professional, modern, creative). Each layout is a Jinja2 template under
template/types/{layout}/template.html.jinja.

Content rules are shared by every layout and applied here, before any
template sees the data:
- Entries without an identifying field are dropped individually
  (experience: title or company; education: degree or institution;
  projects: title; certifications: name).
- A section is present in the context only as a non-empty list, so layouts
  render a section exactly when it has something to show.
- Date ranges are preformatted ("2020 - 2022", "2021 - Present").
- Modern and creative layouts get a career-phase role label.

Templates are rendered with autoescape on, so every submitted value is
HTML-escaped.
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional

from jinja2 import TemplateError

from compass.contexts.templating.exceptions import TemplateRenderError
from compass.contexts.templating.nomenclature import CareerPhase, ResumeTemplate
from compass.contexts.templating.registries import TemplateRegistry
from compass.contexts.templating.request_structures import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRequest,
)
from compass.contexts.templating.validation import validate_resume_request
from compass.utils.text_processing import set_max_consecutive_blank_lines

DEFAULT_ROLE_LABEL = "Professional"

ROLE_LABELS = {
    ResumeTemplate.MODERN: {
        CareerPhase.STUDENT: "Student",
        CareerPhase.ENTRY_LEVEL: "Early Career Professional",
        CareerPhase.CAREER_SWITCHER: "Career Transition Professional",
        CareerPhase.EXPERIENCED: "Experienced Professional",
    },
    ResumeTemplate.CREATIVE: {
        CareerPhase.STUDENT: "Aspiring Professional",
        CareerPhase.ENTRY_LEVEL: "Rising Talent",
        CareerPhase.CAREER_SWITCHER: "Career Transformer",
        CareerPhase.EXPERIENCED: "Seasoned Expert",
    },
}

CONTACT_LABELS = (
    ("email", "Email"),
    ("phone", "Phone"),
    ("location", "Location"),
    ("linkedin", "LinkedIn"),
    ("website", "Website"),
)


def format_date_range(start: str, end: str = "", current: bool = False) -> str:
    """
    Format an entry's date range.

    Args:
        start: Start date as entered
        end: End date as entered
        current: Whether the entry is ongoing

    Returns:
        "{start}" alone, "{start} - {end}" when an end date is given, or
        "{start} - Present" when current with no end date. A missing start
        leaves only the end part.

    Example:
        >>> format_date_range("2020", "2022")
        '2020 - 2022'
        >>> format_date_range("2021", current=True)
        '2021 - Present'
        >>> format_date_range("2019")
        '2019'
    """
    start = start.strip()
    end = end.strip() or ("Present" if current else "")

    if start and end:
        return f"{start} - {end}"
    return start or end


def role_label(template: ResumeTemplate, phase: Optional[CareerPhase]) -> Optional[str]:
    """
    Career-phase subtitle for a layout.

    Returns:
        Label for modern/creative layouts ("Professional" when the phase has
        no label), None for the professional layout

    Example:
        >>> role_label(ResumeTemplate.CREATIVE, CareerPhase.ENTRY_LEVEL)
        'Rising Talent'
    """
    labels = ROLE_LABELS.get(template)
    if labels is None:
        return None
    return labels.get(phase, DEFAULT_ROLE_LABEL)


# =============================================================================
# VIEW MODEL
# =============================================================================


def _experience_view(entry: ExperienceEntry) -> Dict[str, str]:
    return {
        "title": entry.title.strip(),
        "company": entry.company.strip(),
        "location": entry.location.strip(),
        "date_range": format_date_range(entry.start_date, entry.end_date, entry.current),
        "description": entry.description.strip(),
    }


def _education_view(entry: EducationEntry) -> Dict[str, str]:
    return {
        "degree": entry.degree.strip(),
        "institution": entry.institution.strip(),
        "location": entry.location.strip(),
        "date_range": format_date_range(entry.graduation_date),
        "gpa": entry.gpa.strip(),
        "highlights": entry.highlights.strip(),
    }


def _project_view(entry: ProjectEntry) -> Dict[str, str]:
    return {
        "title": entry.title.strip(),
        "description": entry.description.strip(),
        "technologies": entry.technologies.strip(),
        "url": entry.url.strip(),
    }


def _certification_view(entry: CertificationEntry) -> Dict[str, str]:
    return {
        "name": entry.name.strip(),
        "issuer": entry.issuer.strip(),
        "date": entry.date.strip(),
    }


def build_resume_context(request: ResumeRequest) -> Dict[str, Any]:
    """
    Build the template context shared by all resume layouts.

    Args:
        request: Resume request

    Returns:
        Dict with personal details, contact items, role label and one list
        per section holding only the entries that should render
    """
    personal = {name: getattr(request.personal, name).strip() for name in (
        "full_name", "email", "phone", "location", "linkedin", "website"
    )}
    contact_items = [
        {"key": key, "label": label, "value": personal[key]}
        for key, label in CONTACT_LABELS
        if personal[key]
    ]

    return {
        "personal": personal,
        "contact_items": contact_items,
        "role_label": role_label(request.template, request.career_phase),
        "summary": request.summary.strip(),
        "experience": [_experience_view(e) for e in request.experience if e.is_visible],
        "education": [_education_view(e) for e in request.education if e.is_visible],
        "skills": [skill.strip() for skill in request.skills if skill.strip()],
        "projects": [_project_view(p) for p in request.projects if p.is_visible],
        "certifications": [
            _certification_view(c) for c in request.certifications if c.is_visible
        ],
    }


# =============================================================================
# ENTRY POINT
# =============================================================================


@lru_cache(maxsize=1)
def get_default_registry() -> TemplateRegistry:
    """Shared registry for the packaged resume layouts."""
    return TemplateRegistry()


def render_resume(request: ResumeRequest, registry: Optional[TemplateRegistry] = None) -> str:
    """
    Render a resume as an HTML fragment.

    Args:
        request: Resume request
        registry: Optional template registry (defaults to the packaged layouts)

    Returns:
        HTML fragment for the selected layout, ending in a newline

    Raises:
        ValidationError: If full_name or email is blank
        TemplateRenderError: If the layout template fails to load or render
    """
    validate_resume_request(request)

    if registry is None:
        registry = get_default_registry()

    layout = request.template.value
    try:
        template = registry.get_template(layout)
        html = template.render(**build_resume_context(request))
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to render resume layout",
            template_name=layout,
            template_path=registry.get_template_path(layout),
            original_error=e,
        ) from e

    return set_max_consecutive_blank_lines(html, max_consecutive=0).strip() + "\n"


def visible_sections(request: ResumeRequest) -> List[str]:
    """Names of the sections a resume for this request would render."""
    context = build_resume_context(request)
    sections = ["summary"] if context["summary"] else []
    for name in ("experience", "education", "skills", "projects", "certifications"):
        if context[name]:
            sections.append(name)
    return sections
