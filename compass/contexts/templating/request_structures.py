"""
Letter and Resume Request Structures

Immutable records consumed by the letter and resume generators. This module is
the interface between the Intake context (which suggests field values) and the
Templating context (which renders documents).

Records are never edited in place. Every update returns a new record, either
through dataclasses.replace() or one of the with_*/toggle_* methods, so a
record handed to a generator is always complete and consistent.

Records can be built from plain mappings (form submissions, YAML request
files). Both snake_case keys and the form layer's camelCase keys are accepted.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from compass.contexts.templating.nomenclature import (
    CareerPhase,
    Closing,
    FollowUpTimeframe,
    Greeting,
    LetterStructure,
    ResumeTemplate,
    coerce_enum,
    coerce_optional_phase,
)

# Maximum number of work styles or work values a letter may carry
MAX_SELECTIONS = 5

# Form fields that are collected upstream but play no part in generation
IGNORED_KEYS = frozenset({"tone", "length", "jobDescription", "job_description", "uploadedResume"})


def _camel_to_snake(key: str) -> str:
    """Convert 'recipientName' to 'recipient_name'."""
    return "".join(f"_{char.lower()}" if char.isupper() else char for char in key)


def _normalize_keys(
    data: Mapping[str, Any],
    allowed: Iterable[str],
    aliases: Optional[Dict[str, str]] = None,
    record_name: str = "record",
) -> Dict[str, Any]:
    """
    Map submitted keys onto dataclass field names.

    Args:
        data: Submitted mapping (snake_case or camelCase keys)
        allowed: Field names accepted by the target record
        aliases: Extra key -> field name mappings
        record_name: Record name for error messages

    Returns:
        Dict keyed by field name

    Raises:
        ValueError: If a key matches no field and is not a known ignored key
    """
    allowed = set(allowed)
    aliases = aliases or {}
    normalized = {}

    for key, value in data.items():
        if key in IGNORED_KEYS:
            continue
        name = aliases.get(key, _camel_to_snake(key))
        if name not in allowed:
            raise ValueError(f"Unknown {record_name} field '{key}'")
        normalized[name] = value

    return normalized


def _text(value: Any) -> str:
    """Submitted scalar as a string; None becomes ''."""
    if value is None:
        return ""
    return str(value)


# Submitted string spellings of a boolean flag
TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


def _flag(value: Any, name: str) -> bool:
    """
    Submitted boolean flag as a bool.

    Raises:
        ValueError: If a string value is not a recognised true/false spelling
    """
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
        raise ValueError(
            f"Invalid {name} '{value}'. Valid values: {sorted(TRUE_STRINGS | FALSE_STRINGS)}"
        )
    return bool(value)


def _string_tuple(values: Any) -> Tuple[str, ...]:
    """Submitted list (or single string) as a tuple of strings."""
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(_text(value) for value in values)


def _dedupe(values: Iterable[str]) -> Tuple[str, ...]:
    """Drop repeated values, keeping the first occurrence."""
    return tuple(dict.fromkeys(values))


def _field_names(record_cls) -> List[str]:
    return [f.name for f in fields(record_cls)]


def _set(record, name: str, value: Any) -> None:
    """Assign to a frozen dataclass field during __post_init__."""
    object.__setattr__(record, name, value)


# =============================================================================
# COVER LETTER
# =============================================================================


@dataclass(frozen=True)
class ContactInfo:
    """Contact block printed under the letter closing."""

    email: str = ""
    phone: str = ""
    linkedin: str = ""
    portfolio: str = ""

    LABELS = (
        ("email", "Email"),
        ("phone", "Phone"),
        ("linkedin", "LinkedIn"),
        ("portfolio", "Portfolio"),
    )

    def __post_init__(self):
        for name in ("email", "phone", "linkedin", "portfolio"):
            _set(self, name, _text(getattr(self, name)))

    def labelled_lines(self) -> List[str]:
        """One 'Label: value' line per non-blank field, in fixed order."""
        return [
            f"{label}: {getattr(self, name).strip()}"
            for name, label in self.LABELS
            if getattr(self, name).strip()
        ]

    @property
    def is_empty(self) -> bool:
        return not self.labelled_lines()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContactInfo":
        return cls(**_normalize_keys(data, _field_names(cls), record_name="contact"))


@dataclass(frozen=True)
class LetterRequest:
    """
    Everything needed to render one cover letter.

    company_name, position_title and full_name are required at generation
    time (see validation.py); every other field is optional and degrades to
    generic phrasing when blank.

    Attributes:
        greeting: Salutation word
        recipient_name: Hiring contact name; blank means "Hiring Manager"
        recipient_title: Honorific placed before the recipient name (e.g., "Dr.")
        company_name: Company applied to
        position_title: Position applied for
        source_of_listing: Where the listing was found (e.g., "LinkedIn")
        full_name: Applicant name, used in the closing block
        contact: Applicant contact block
        short_term_goals: Short-term career goal sentence
        long_term_goals: Long-term career goal sentence
        company_interest: Why this company (completes "because ...")
        role_alignment: How this role fits the applicant, as a full sentence
        key_skills: Ordered skills, duplicates removed (first occurrence wins)
        relevant_achievements: Newline-delimited achievements
        work_style: Up to 5 work-style adjectives
        work_values: Up to 5 valued workplace qualities
        closing: Sign-off phrase
        follow_up: Whether to promise a follow-up
        follow_up_timeframe: When to follow up (used only if follow_up)
        structure: Body-paragraph strategy
        career_phase: Career stage steering the phrasing (None = not selected)
    """

    greeting: Greeting = Greeting.DEAR
    recipient_name: str = ""
    recipient_title: str = ""
    company_name: str = ""
    position_title: str = ""
    source_of_listing: str = ""
    full_name: str = ""
    contact: ContactInfo = field(default_factory=ContactInfo)
    short_term_goals: str = ""
    long_term_goals: str = ""
    company_interest: str = ""
    role_alignment: str = ""
    key_skills: Tuple[str, ...] = ()
    relevant_achievements: str = ""
    work_style: Tuple[str, ...] = ()
    work_values: Tuple[str, ...] = ()
    closing: Closing = Closing.SINCERELY
    follow_up: bool = True
    follow_up_timeframe: FollowUpTimeframe = FollowUpTimeframe.ONE_WEEK
    structure: LetterStructure = LetterStructure.STANDARD
    career_phase: Optional[CareerPhase] = None

    def __post_init__(self):
        _set(self, "greeting", coerce_enum(Greeting, self.greeting))
        _set(self, "closing", coerce_enum(Closing, self.closing))
        _set(self, "follow_up_timeframe", coerce_enum(FollowUpTimeframe, self.follow_up_timeframe))
        _set(self, "structure", coerce_enum(LetterStructure, self.structure))
        _set(self, "career_phase", coerce_optional_phase(self.career_phase))

        if isinstance(self.contact, Mapping):
            _set(self, "contact", ContactInfo.from_dict(self.contact))

        for name in (
            "recipient_name",
            "recipient_title",
            "company_name",
            "position_title",
            "source_of_listing",
            "full_name",
            "short_term_goals",
            "long_term_goals",
            "company_interest",
            "role_alignment",
            "relevant_achievements",
        ):
            _set(self, name, _text(getattr(self, name)))

        _set(self, "key_skills", _dedupe(_string_tuple(self.key_skills)))
        _set(self, "work_style", _string_tuple(self.work_style))
        _set(self, "work_values", _string_tuple(self.work_values))
        _set(self, "follow_up", _flag(self.follow_up, "follow_up"))

        for name in ("work_style", "work_values"):
            selected = getattr(self, name)
            if len(selected) > MAX_SELECTIONS:
                raise ValueError(
                    f"At most {MAX_SELECTIONS} {name.replace('_', ' ')} entries may be selected, "
                    f"got {len(selected)}"
                )

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    FIELD_ALIASES = {
        "where": "source_of_listing",
        "sourceOfListing": "source_of_listing",
    }

    CONTACT_KEYS = ("email", "phone", "linkedin", "portfolio")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LetterRequest":
        """
        Build a LetterRequest from a submitted mapping.

        Contact details may be given as a nested "contact" mapping or as flat
        email/phone/linkedin/portfolio keys, the way the letter form submits them.

        Args:
            data: Submitted letter fields

        Returns:
            LetterRequest

        Raises:
            ValueError: On unknown keys, invalid enum values, or more than
                        5 work styles/values

        Example:
            >>> request = LetterRequest.from_dict({
            ...     "fullName": "Jane Doe",
            ...     "companyName": "Acme",
            ...     "positionTitle": "Data Analyst",
            ...     "structure": "story-based",
            ...     "email": "jane@example.com",
            ... })
            >>> request.structure, request.contact.email
            (<LetterStructure.STORY_BASED: 'story-based'>, 'jane@example.com')
        """
        data = dict(data)
        contact = dict(data.pop("contact", None) or {})
        for key in cls.CONTACT_KEYS:
            if key in data:
                contact[key] = data.pop(key)

        kwargs = _normalize_keys(
            data, _field_names(cls), aliases=cls.FIELD_ALIASES, record_name="letter"
        )
        kwargs["contact"] = ContactInfo.from_dict(contact)
        return cls(**kwargs)

    # -------------------------------------------------------------------------
    # Updates (each returns a new record)
    # -------------------------------------------------------------------------

    def with_extracted_fields(self, extracted) -> "LetterRequest":
        """
        Fold fields recovered from an uploaded resume into this request.

        Recovered name, contact details and achievements replace the current
        values. Recovered skills are appended to key_skills, skipping ones
        already selected.

        Args:
            extracted: ExtractedFields from the intake context

        Returns:
            New LetterRequest
        """
        contact = replace(
            self.contact,
            email=extracted.email or self.contact.email,
            phone=extracted.phone or self.contact.phone,
            linkedin=extracted.linkedin or self.contact.linkedin,
            portfolio=extracted.portfolio or self.contact.portfolio,
        )
        return replace(
            self,
            full_name=extracted.full_name or self.full_name,
            contact=contact,
            key_skills=self.key_skills + tuple(extracted.skills),
            relevant_achievements=extracted.achievements or self.relevant_achievements,
        )

    def with_key_skill(self, skill: str) -> "LetterRequest":
        """Append a custom skill unless it is blank or already selected."""
        skill = skill.strip()
        if not skill or skill in self.key_skills:
            return self
        return replace(self, key_skills=self.key_skills + (skill,))

    def toggle_key_skill(self, skill: str) -> "LetterRequest":
        """Deselect the skill if selected, otherwise append it."""
        return replace(self, key_skills=_toggle(self.key_skills, skill))

    def toggle_work_style(self, style: str) -> "LetterRequest":
        """
        Deselect the work style if selected, otherwise append it.

        Raises:
            ValueError: If selecting would exceed 5 work styles
        """
        return replace(self, work_style=_toggle(self.work_style, style))

    def toggle_work_value(self, value: str) -> "LetterRequest":
        """
        Deselect the work value if selected, otherwise append it.

        Raises:
            ValueError: If selecting would exceed 5 work values
        """
        return replace(self, work_values=_toggle(self.work_values, value))


def _toggle(selected: Tuple[str, ...], item: str) -> Tuple[str, ...]:
    if item in selected:
        return tuple(value for value in selected if value != item)
    return selected + (item,)


# =============================================================================
# RESUME
# =============================================================================


@dataclass(frozen=True)
class PersonalInfo:
    """Resume header block."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""

    def __post_init__(self):
        for f in fields(self):
            _set(self, f.name, _text(getattr(self, f.name)))


@dataclass(frozen=True)
class ExperienceEntry:
    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""

    def __post_init__(self):
        for f in fields(self):
            if f.name != "current":
                _set(self, f.name, _text(getattr(self, f.name)))
        _set(self, "current", _flag(self.current, "current"))

    @property
    def is_visible(self) -> bool:
        """Rendered only when it has a title or a company."""
        return bool(self.title.strip() or self.company.strip())


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    institution: str = ""
    location: str = ""
    graduation_date: str = ""
    gpa: str = ""
    highlights: str = ""

    def __post_init__(self):
        for f in fields(self):
            _set(self, f.name, _text(getattr(self, f.name)))

    @property
    def is_visible(self) -> bool:
        """Rendered only when it has a degree or an institution."""
        return bool(self.degree.strip() or self.institution.strip())


@dataclass(frozen=True)
class ProjectEntry:
    title: str = ""
    description: str = ""
    technologies: str = ""
    url: str = ""

    def __post_init__(self):
        for f in fields(self):
            _set(self, f.name, _text(getattr(self, f.name)))

    @property
    def is_visible(self) -> bool:
        return bool(self.title.strip())


@dataclass(frozen=True)
class CertificationEntry:
    name: str = ""
    issuer: str = ""
    date: str = ""

    def __post_init__(self):
        for f in fields(self):
            _set(self, f.name, _text(getattr(self, f.name)))

    @property
    def is_visible(self) -> bool:
        return bool(self.name.strip())


ENTRY_TYPES = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "projects": ProjectEntry,
    "certifications": CertificationEntry,
}


def _entries(entry_cls, values: Any) -> tuple:
    """Coerce a submitted list of mappings (or entries) into an entry tuple."""
    if values is None:
        return ()
    entries = []
    for value in values:
        if isinstance(value, entry_cls):
            entries.append(value)
        else:
            kwargs = _normalize_keys(
                value, _field_names(entry_cls), record_name=entry_cls.__name__
            )
            entries.append(entry_cls(**kwargs))
    return tuple(entries)


@dataclass(frozen=True)
class ResumeRequest:
    """
    Everything needed to render one resume.

    personal.full_name and personal.email are required at generation time.
    Repeatable sections keep their entries in submission order; entries with
    no identifying field are kept here and skipped at render time.

    Attributes:
        personal: Header block (name, contact details, location)
        summary: Professional summary paragraph
        experience: Work history entries
        education: Education entries
        skills: Skills in display order (duplicates allowed)
        projects: Project entries
        certifications: Certification entries
        template: Visual layout
        career_phase: Career stage driving the modern/creative role label
    """

    personal: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[str, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    certifications: Tuple[CertificationEntry, ...] = ()
    template: ResumeTemplate = ResumeTemplate.PROFESSIONAL
    career_phase: Optional[CareerPhase] = None

    PERSONAL_KEYS = ("full_name", "email", "phone", "location", "linkedin", "website")

    def __post_init__(self):
        if isinstance(self.personal, Mapping):
            _set(
                self,
                "personal",
                PersonalInfo(**_normalize_keys(self.personal, self.PERSONAL_KEYS, record_name="personal")),
            )
        for name, entry_cls in ENTRY_TYPES.items():
            _set(self, name, _entries(entry_cls, getattr(self, name)))

        _set(self, "summary", _text(self.summary))
        _set(self, "skills", _string_tuple(self.skills))
        _set(self, "template", coerce_enum(ResumeTemplate, self.template))
        _set(self, "career_phase", coerce_optional_phase(self.career_phase))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeRequest":
        """
        Build a ResumeRequest from a submitted mapping.

        Personal details may be given as a nested "personal" mapping or as
        flat fullName/email/phone/location/linkedin/website keys.

        Raises:
            ValueError: On unknown keys or invalid enum values
        """
        data = dict(data)
        personal = dict(data.pop("personal", None) or {})
        for key in list(data):
            if _camel_to_snake(key) in cls.PERSONAL_KEYS:
                personal[key] = data.pop(key)

        kwargs = _normalize_keys(data, _field_names(cls), record_name="resume")
        kwargs["personal"] = personal
        return cls(**kwargs)

    @property
    def full_name(self) -> str:
        return self.personal.full_name

    @property
    def email(self) -> str:
        return self.personal.email

    def with_extracted_fields(self, extracted) -> "ResumeRequest":
        """
        Fold fields recovered from an uploaded resume into this request.

        Recovered name and contact details replace the current values. Raw
        skill items are appended to skills without deduplication. A recovered
        degree replaces the first education entry's degree and a recovered job
        title replaces the first experience entry's title (creating the entry
        if there is none).

        Args:
            extracted: ExtractedFields from the intake context

        Returns:
            New ResumeRequest
        """
        personal = replace(
            self.personal,
            full_name=extracted.full_name or self.personal.full_name,
            email=extracted.email or self.personal.email,
            phone=extracted.phone or self.personal.phone,
            linkedin=extracted.linkedin or self.personal.linkedin,
        )

        education = self.education
        if extracted.degree:
            first = education[0] if education else EducationEntry()
            education = (replace(first, degree=extracted.degree),) + education[1:]

        experience = self.experience
        if extracted.job_title:
            first = experience[0] if experience else ExperienceEntry()
            experience = (replace(first, title=extracted.job_title),) + experience[1:]

        return replace(
            self,
            personal=personal,
            skills=self.skills + tuple(extracted.skill_items),
            education=education,
            experience=experience,
        )


# =============================================================================
# CAREER PROFILE
# =============================================================================


@dataclass
class CareerProfile:
    """
    Stored career profile used to prefill requests.

    Supplied by the persistence layer; only the fields used for prefill are
    modelled here.
    """

    career_phase: Optional[CareerPhase] = None
    skills: List[str] = field(default_factory=list)
    goals: str = ""
    education: str = ""
    graduation_year: Optional[int] = None
    relevant_courses: str = ""
    current_role: str = ""
    accomplishments: str = ""
    key_achievements: str = ""

    def __post_init__(self):
        self.career_phase = coerce_optional_phase(self.career_phase)
        if isinstance(self.skills, str):
            self.skills = [self.skills]
        self.skills = list(self.skills or [])

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CareerProfile":
        """Build a profile from a stored record, ignoring columns not used for prefill."""
        names = set(_field_names(cls))
        kwargs = {}
        for key, value in data.items():
            name = _camel_to_snake(key)
            if name in names:
                kwargs[name] = value
        return cls(**kwargs)
