"""
Print/download packaging for generated documents.

Generated letters are plain text and generated resumes are HTML fragments.
Before they reach a printer or a download, both are wrapped into standalone
HTML pages here. These are pure string transformations; writing files and
opening print dialogs belong to the caller.
"""

from functools import lru_cache
from pathlib import Path

from compass.contexts.rendering.logger import _log_debug
from compass.contexts.templating.registries import TemplateRegistry
from compass.utils.config import RENDERING_TEMPLATES_PATH
from compass.utils.text_processing import underscore_spaces

LETTER_PAGE = "letter_print"
RESUME_PAGE = "resume_download"


@lru_cache(maxsize=1)
def get_page_registry() -> TemplateRegistry:
    """Registry for the standalone page templates."""
    return TemplateRegistry(RENDERING_TEMPLATES_PATH, template_pattern="{name}.html.jinja")


def wrap_letter_for_print(letter: str, company_name: str) -> str:
    """
    Wrap a plain-text letter into a printable HTML page.

    The page uses a serif font with 1in margins. Letter text is HTML-escaped
    and each line break becomes a <br>.

    Args:
        letter: Letter text from render_letter()/generate_letter()
        company_name: Company name for the page title

    Returns:
        Standalone HTML document
    """
    template = get_page_registry().get_template(LETTER_PAGE)
    page = template.render(
        company_name=company_name.strip(),
        letter_lines=letter.rstrip("\n").split("\n"),
    )
    _log_debug(f"Wrapped letter for {company_name!r} into a {len(page)}-char print page")
    return page


def wrap_resume_for_download(fragment: str, full_name: str) -> str:
    """
    Wrap a resume HTML fragment into a standalone HTML page.

    The fragment is inserted as-is (it is already escaped by the resume
    layouts); the name in the page title is escaped.

    Args:
        fragment: HTML fragment from render_resume()/generate_resume()
        full_name: Applicant name for the page title

    Returns:
        Standalone HTML document
    """
    template = get_page_registry().get_template(RESUME_PAGE)
    page = template.render(full_name=full_name.strip(), fragment=fragment)
    _log_debug(f"Wrapped resume for {full_name!r} into a {len(page)}-char download page")
    return page


def letter_filename(company_name: str) -> str:
    """
    Proposed download name for a cover letter.

    Example:
        >>> letter_filename("Acme Corp")
        'Cover_Letter_Acme_Corp.txt'
    """
    return f"Cover_Letter_{underscore_spaces(company_name)}.txt"


def resume_filename(full_name: str) -> str:
    """
    Proposed download name for a resume page.

    Example:
        >>> resume_filename("Jane Doe")
        'Jane_Doe_resume.html'
    """
    return f"{underscore_spaces(full_name)}_resume.html"


def resolve_output_path(output: Path, default_name: str) -> Path:
    """
    File path for a document written to `output`.

    An existing directory, or a path without a file suffix, is treated as a
    directory and the document goes inside it under `default_name`. Any other
    path is used as the file path itself.

    Example:
        >>> resolve_output_path(Path("outs/letters"), "Cover_Letter_Acme.txt")
        PosixPath('outs/letters/Cover_Letter_Acme.txt')
    """
    if output.is_dir() or not output.suffix:
        return output / default_name
    return output
