"""Configuration management for CircleMatch."""

import os
from pathlib import Path
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv

from circlematch.profile.models import InvalidProfileError, Profile, coerce_profile

load_dotenv()

# Default paths
DATA_DIR = Path(
    os.getenv("CIRCLEMATCH_DATA_DIR", Path(__file__).parent.parent / "data")
)
DEFAULT_PROFILE_PATH = DATA_DIR / "profile.yaml"
DEFAULT_CANDIDATES_PATH = DATA_DIR / "candidates.yaml"
MATCHMAKING_LOG_PATH = DATA_DIR / "matchmaking.log"

# Simulated computation time for "Find New Matches"
RECOMPUTE_DELAY_SECONDS = 2.0


def ensure_data_dir() -> None:
    """Ensure the data directory exists."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def _read_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_profile(path: Optional[Path] = None) -> Profile:
    """Load the reference profile from a YAML file.

    Args:
        path: Optional path to profile file. Defaults to data/profile.yaml.

    Returns:
        Validated Profile.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        InvalidProfileError: If the file doesn't describe a valid profile.
    """
    if path is None:
        path = DEFAULT_PROFILE_PATH

    data = _read_yaml(path)
    if data is None:
        raise InvalidProfileError(f"Profile file {path} is empty")

    return coerce_profile(data)


def save_profile(profile: Profile, path: Optional[Path] = None) -> Path:
    """Save a profile to a YAML file.

    Args:
        profile: Profile instance to save.
        path: Optional path to save to. Defaults to data/profile.yaml.

    Returns:
        Path where profile was saved.
    """
    if path is None:
        path = DEFAULT_PROFILE_PATH
        ensure_data_dir()

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(profile.to_dict(), f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    return path


def profile_exists(path: Optional[Path] = None) -> bool:
    """Check if a profile file exists."""
    if path is None:
        path = DEFAULT_PROFILE_PATH

    return path.exists()


def load_candidates(path: Optional[Path] = None) -> List[Profile]:
    """Load the candidate pool from a YAML file.

    The document is either a list of profiles or a mapping with a
    ``candidates`` list. File order is preserved, since it decides ties.

    Args:
        path: Optional path to candidates file. Defaults to data/candidates.yaml.

    Returns:
        List of validated profiles. Empty if the file doesn't exist.

    Raises:
        InvalidProfileError: If any entry is malformed.
    """
    if path is None:
        path = DEFAULT_CANDIDATES_PATH

    if not path.exists():
        return []

    data = _read_yaml(path)
    if data is None:
        return []

    if isinstance(data, dict):
        data = data.get("candidates") or []

    if not isinstance(data, list):
        raise InvalidProfileError(f"Candidates file {path} must contain a list")

    return [coerce_profile(entry) for entry in data]


def save_candidates(candidates: List[Profile], path: Optional[Path] = None) -> Path:
    """Save a candidate pool to a YAML file."""
    if path is None:
        path = DEFAULT_CANDIDATES_PATH
        ensure_data_dir()

    data = {"candidates": [c.to_dict() for c in candidates]}
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    return path
