"""
Configuration loading for COMPASS.

Paths come from environment variables (loaded from .env by python-dotenv) and
fall back to the files shipped inside the package. YAML files are read with
OmegaConf and handed out as plain containers.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PACKAGE_ROOT / "config"

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
SKILL_VOCABULARY_PATH = Path(
    os.getenv("SKILL_VOCABULARY_PATH", str(CONFIG_DIR / "skill_vocabulary.yaml"))
)
CAREER_DEFAULTS_PATH = Path(
    os.getenv("CAREER_DEFAULTS_PATH", str(CONFIG_DIR / "career_defaults.yaml"))
)
RESUME_TEMPLATES_PATH = Path(
    os.getenv(
        "RESUME_TEMPLATES_PATH",
        str(PACKAGE_ROOT / "contexts" / "templating" / "template" / "types"),
    )
)
RENDERING_TEMPLATES_PATH = Path(
    os.getenv(
        "RENDERING_TEMPLATES_PATH",
        str(PACKAGE_ROOT / "contexts" / "rendering" / "template"),
    )
)


def load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """
    Load a YAML config file into a plain dict.

    Args:
        config_path: Path to the YAML file

    Returns:
        Resolved config as nested dicts/lists

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


@lru_cache(maxsize=None)
def load_skill_vocabulary(config_path: Path = SKILL_VOCABULARY_PATH) -> tuple:
    """
    Load the known-skill keyword list used by the skills extractor.

    Keywords are lower-cased and returned in file order.

    Args:
        config_path: Optional path to skill_vocabulary.yaml

    Returns:
        Tuple of lower-case skill keywords
    """
    config = load_yaml_config(config_path)
    return tuple(str(skill).lower() for skill in config["skills"])


@lru_cache(maxsize=None)
def load_career_defaults(config_path: Path = CAREER_DEFAULTS_PATH) -> Dict[str, Any]:
    """
    Load per-career-phase defaults (short-term goal, work styles, work values).

    Args:
        config_path: Optional path to career_defaults.yaml

    Returns:
        Dict keyed by career phase value (e.g., "student")
    """
    return load_yaml_config(config_path)["phases"]
