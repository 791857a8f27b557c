"""
Cover Letter Generator

Renders a LetterRequest into a plain-text cover letter:

    date line
    recipient line
    four body paragraphs
    closing block
    contact block (omitted when no contact field is set)

Blocks are separated by one blank line. The three body-paragraph strategies
(standard, story-based, achievement-focused) are registered in
LETTER_STRUCTURES; each one receives the request and the career-phase phrasing
and returns its four paragraphs.

Missing optional fields drop their clause or fall back to a generic phrase,
so no letter ever contains an empty token or a dangling separator.
"""

from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from compass.contexts.templating.nomenclature import LetterStructure
from compass.contexts.templating.phrasing import (
    PhasePhrasing,
    generic_achievement_bullets,
    phrasing_for,
)
from compass.contexts.templating.request_structures import LetterRequest
from compass.contexts.templating.validation import validate_letter_request
from compass.utils.text_processing import (
    as_clause,
    as_sentence,
    as_sentence_fragment,
    join_limited,
    non_blank_lines,
    strip_bullet_marker,
    with_indefinite_article,
)
from compass.utils.timestamp import format_long_date

Paragraphs = Tuple[str, str, str, str]

ACHIEVEMENTS_INTRO = "Here are some specific achievements that demonstrate my qualifications:"
BULLET = "•"


# =============================================================================
# SHARED ELEMENTS
# =============================================================================


def format_recipient(request: LetterRequest) -> str:
    """
    Salutation line.

    Example:
        >>> format_recipient(LetterRequest(recipient_title="Dr.", recipient_name="Smith"))
        'Dear Dr. Smith,'
        >>> format_recipient(LetterRequest(greeting="Hello"))
        'Hello Hiring Manager,'
    """
    name = request.recipient_name.strip()
    if not name:
        return f"{request.greeting.value} Hiring Manager,"

    title = request.recipient_title.strip()
    addressee = f"{title} {name}" if title else name
    return f"{request.greeting.value} {addressee},"


def format_closing(request: LetterRequest) -> str:
    return f"{request.closing.value},\n{request.full_name.strip()}"


def format_contact_block(request: LetterRequest) -> str:
    """Labelled contact lines, or '' when no contact field is set."""
    return "\n".join(request.contact.labelled_lines())


def _role_alignment(request: LetterRequest) -> str:
    """Role alignment as a leading sentence plus a trailing space, or ''."""
    sentence = as_sentence(request.role_alignment)
    return f"{sentence} " if sentence else ""


def _listing_source(request: LetterRequest, lead: str) -> str:
    source = request.source_of_listing.strip()
    return f"{lead} {source}" if source else ""


def _two_skills(request: LetterRequest) -> str:
    return join_limited(request.key_skills, 2, " and ")


def _achievement_lines(request: LetterRequest) -> List[str]:
    """Achievement lines with any leading bullet marker removed, skipping lines with no words."""
    lines = [strip_bullet_marker(line) for line in non_blank_lines(request.relevant_achievements)]
    return [line for line in lines if as_sentence_fragment(line)]


# =============================================================================
# STANDARD
# =============================================================================


def standard_paragraphs(request: LetterRequest, phrasing: PhasePhrasing) -> Paragraphs:
    """Interest, goals, strengths, then a closing paragraph."""
    company = request.company_name.strip()
    position = request.position_title.strip()

    # Paragraph 1: interest and framing
    top_skills = join_limited(request.key_skills, 3)
    background = f"{phrasing.background} in {top_skills}" if top_skills else phrasing.background
    first = (
        f"I am writing to express my interest in the {position} position at {company}"
        f"{_listing_source(request, ' that I saw advertised on')}. "
        f"With {background}, I am confident in my ability to make valuable contributions "
        "to your team."
    )

    # Paragraph 2: alignment, goals and company interest
    short_term = as_clause(request.short_term_goals)
    long_term = as_clause(request.long_term_goals)
    goal = f"My short-term career goal is to {short_term}" if short_term else (
        "My goal is to contribute meaningfully"
    )
    horizon = f"working toward {long_term}" if long_term else "developing professionally"

    interest = as_sentence_fragment(request.company_interest)
    if interest:
        company_sentence = f"I'm particularly drawn to {company} because {interest}."
    else:
        company_sentence = (
            f"I'm excited about the opportunity to join {company} "
            "and contribute to your innovative work."
        )
    second = f"{_role_alignment(request)}{goal} while {horizon}. {company_sentence}"

    # Paragraph 3: strengths, values, work style, achievements
    skills = join_limited(request.key_skills, 5)
    values = join_limited(request.work_values, 3)
    styles = join_limited(request.work_style, 3)

    sentences = []
    if skills and values:
        sentences.append(
            f"My key strengths include {skills}, and I value a work environment "
            f"that promotes {values}."
        )
    elif skills:
        sentences.append(f"My key strengths include {skills}.")
    elif values:
        sentences.append(f"I value a work environment that promotes {values}.")
    if styles:
        sentences.append(f"My approach to work is {styles}.")
    if not sentences:
        sentences.append(
            "I bring a strong work ethic and a commitment to continuous improvement."
        )

    achievements = request.relevant_achievements.strip()
    if achievements:
        sentences.append(f"Some of my notable achievements include: {achievements}")
    third = " ".join(sentences)

    # Paragraph 4: reiteration and follow-up
    strengths = _two_skills(request) or "skills and experience"
    follow_up = (
        f" in more detail. I will follow up in {request.follow_up_timeframe.value} "
        "if I don't hear back before then"
        if request.follow_up
        else ""
    )
    fourth = (
        f"I am excited about the possibility of bringing my {strengths} to {company} "
        "and would welcome the opportunity to discuss how my background aligns with "
        f"your needs{follow_up}."
    )

    return first, second, third, fourth


# =============================================================================
# STORY-BASED
# =============================================================================


def story_based_paragraphs(request: LetterRequest, phrasing: PhasePhrasing) -> Paragraphs:
    """A pivotal-moment hook, a career journey, company fit, then a closing."""
    company = request.company_name.strip()
    position = request.position_title.strip()
    skills = request.key_skills

    # Paragraph 1: hook
    first_skill = join_limited(skills, 1) or "effective work"
    first = (
        f"I still remember the moment when I realized the impact of {first_skill} "
        f"in {phrasing.hook_setting}. This pivotal experience has guided my career path "
        f"and led me to apply for the {position} role at {company}"
        f"{_listing_source(request, ', which I discovered on')}."
    )

    # Paragraph 2: journey
    style = join_limited(request.work_style, 1) or "dedicated"
    sentences = [
        f"Throughout my {phrasing.journey}, I've cultivated "
        f"{with_indefinite_article(style)} approach to challenges."
    ]
    achievement_lines = _achievement_lines(request)
    if achievement_lines:
        sentences.append(
            "One example that demonstrates my ability to deliver results is "
            f"{as_sentence_fragment(achievement_lines[0])}."
        )
    value = join_limited(request.work_values, 1) or "excellence"
    desire = as_clause(request.short_term_goals) or "contribute meaningfully"
    sentences.append(
        f"This experience reinforced my commitment to {value} and my desire to {desire}."
    )
    second = " ".join(sentences)

    # Paragraph 3: company fit and long-term goal
    interest = as_sentence_fragment(request.company_interest) or (
        "your reputation for innovation and excellence"
    )
    top_skills = join_limited(skills, 3)
    background = f"my background in {top_skills}" if top_skills else "my background"
    contribution = "lead initiatives" if "manager" in position.lower() else "tackle challenges"
    long_term = as_clause(request.long_term_goals) or "grow professionally"
    third = (
        f"What resonates with me about {company} is {interest}. "
        f"{_role_alignment(request)}I believe {background} positions me well to help "
        f"your team {contribution} while working toward my long-term goal to {long_term}."
    )

    # Paragraph 4: closing
    two_skills = _two_skills(request)
    journey = f"my unique journey and skills in {two_skills}" if two_skills else (
        "my unique journey and skills"
    )
    follow_up = (
        f". I'll follow up in {request.follow_up_timeframe.value} "
        "if I don't hear from you before then"
        if request.follow_up
        else ""
    )
    fourth = (
        f"I would welcome the opportunity to discuss how {journey} can benefit "
        f"{company}{follow_up}."
    )

    return first, second, third, fourth


# =============================================================================
# ACHIEVEMENT-FOCUSED
# =============================================================================


def achievement_bullets(request: LetterRequest) -> List[str]:
    """
    Bullet texts for the achievement-focused letter.

    One bullet per non-empty achievement line. With no achievements listed,
    exactly two generic bullets for the applicant's career phase.
    """
    lines = _achievement_lines(request)
    if lines:
        return lines
    return generic_achievement_bullets(
        request.career_phase, request.key_skills, request.work_values
    )


def achievement_focused_paragraphs(
    request: LetterRequest, phrasing: PhasePhrasing
) -> Paragraphs:
    """Framing, a bulleted achievement list, goal alignment, then a closing."""
    company = request.company_name.strip()
    position = request.position_title.strip()

    # Paragraph 1: framing
    top_skills = join_limited(request.key_skills, 3)
    expertise = f" with expertise in {top_skills}" if top_skills else ""
    first = (
        f"I am excited to apply for the {position} position at {company}"
        f"{_listing_source(request, ' that I discovered on')}. "
        f"As {with_indefinite_article(phrasing.descriptor)}{expertise}, I have consistently "
        f"delivered measurable results throughout my {phrasing.track_record}."
    )

    # Paragraph 2: achievement bullets
    bullets = "\n\n".join(f"{BULLET} {point}" for point in achievement_bullets(request))
    second = f"{ACHIEVEMENTS_INTRO}\n\n{bullets}"

    # Paragraph 3: company interest and goals
    interest = as_sentence_fragment(request.company_interest) or (
        "of your reputation in the industry"
    )
    styles = join_limited(request.work_style, 2, " and ")
    approach = f"My approach to work, which is {styles}," if styles else "My approach to work"
    short_term = as_clause(request.short_term_goals) or "continue delivering excellent results"
    long_term = as_clause(request.long_term_goals) or "greater professional impact"
    third = (
        f"I am particularly interested in joining {company} because {interest}. "
        f"{_role_alignment(request)}{approach} aligns with my goal to {short_term} "
        f"while working toward {long_term}."
    )

    # Paragraph 4: closing
    two_skills = _two_skills(request)
    expertise = f"expertise in {two_skills}" if two_skills else "expertise"
    follow_up = (
        f". I will follow up in {request.follow_up_timeframe.value} if I haven't heard back"
        if request.follow_up
        else ""
    )
    fourth = (
        "I would welcome the opportunity to discuss how my achievement-oriented approach "
        f"and {expertise} can contribute to {company}'s success{follow_up}."
    )

    return first, second, third, fourth


# =============================================================================
# REGISTRY AND ENTRY POINT
# =============================================================================

ParagraphBuilder = Callable[[LetterRequest, PhasePhrasing], Paragraphs]

LETTER_STRUCTURES: Dict[LetterStructure, ParagraphBuilder] = {
    LetterStructure.STANDARD: standard_paragraphs,
    LetterStructure.STORY_BASED: story_based_paragraphs,
    LetterStructure.ACHIEVEMENT_FOCUSED: achievement_focused_paragraphs,
}


def assemble_letter(
    request: LetterRequest, paragraphs: Paragraphs, today: Optional[date] = None
) -> str:
    """
    Join the letter blocks with blank lines.

    Args:
        request: Letter request (recipient, closing and contact come from here)
        paragraphs: Four body paragraphs
        today: Date for the date line (defaults to the current local date)

    Returns:
        Full letter text ending in a newline
    """
    blocks = [format_long_date(today), format_recipient(request), *paragraphs]
    blocks.append(format_closing(request))

    contact = format_contact_block(request)
    if contact:
        blocks.append(contact)

    return "\n\n".join(blocks) + "\n"


def render_letter(request: LetterRequest, today: Optional[date] = None) -> str:
    """
    Render a cover letter from a validated request.

    The body paragraphs come from the strategy registered for
    request.structure. Output depends only on the request and the date, so
    two calls on the same day with the same request are byte-identical.

    Args:
        request: Letter request
        today: Date for the date line (defaults to the current local date)

    Returns:
        Plain-text cover letter

    Raises:
        ValidationError: If full_name, company_name or position_title is blank

    Example:
        >>> letter = render_letter(
        ...     LetterRequest(full_name="Jane Doe", company_name="Acme", position_title="Analyst"),
        ...     today=date(2025, 1, 5),
        ... )
        >>> letter.splitlines()[0]
        'January 5, 2025'
    """
    validate_letter_request(request)

    build_paragraphs = LETTER_STRUCTURES[request.structure]
    paragraphs = build_paragraphs(request, phrasing_for(request.career_phase))
    return assemble_letter(request, paragraphs, today)
