"""
Career-phase starting values for new cover letters.

Values come from config/career_defaults.yaml. Phases without an entry
("unsure", or no phase at all) start with empty values.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from compass.contexts.templating.nomenclature import CareerPhase
from compass.utils.config import CAREER_DEFAULTS_PATH, load_career_defaults


@dataclass(frozen=True)
class PhaseDefaults:
    short_term_goals: str = ""
    work_style: Tuple[str, ...] = ()
    work_values: Tuple[str, ...] = ()


def phase_defaults(
    phase: Optional[CareerPhase],
    config_path: Path = CAREER_DEFAULTS_PATH,
) -> PhaseDefaults:
    """
    Default short-term goal, work styles and work values for a career phase.

    Args:
        phase: Career phase (None for no selection)
        config_path: Optional path to career_defaults.yaml

    Returns:
        PhaseDefaults (empty when the phase has no configured defaults)

    Example:
        >>> phase_defaults(CareerPhase.STUDENT).work_values
        ('Growth', 'Learning opportunities', 'Mentorship')
    """
    if phase is None:
        return PhaseDefaults()

    entry = load_career_defaults(config_path).get(CareerPhase(phase).value)
    if not entry:
        return PhaseDefaults()

    return PhaseDefaults(
        short_term_goals=entry.get("short_term_goals", ""),
        work_style=tuple(entry.get("work_style", ())),
        work_values=tuple(entry.get("work_values", ())),
    )
