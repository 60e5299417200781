"""
Global Configuration and Navigation Defaults.

This module centralizes the tunable parts of the engine: the geometric
constants, the fallback policy for stale destinations and the key map.

Configuration is loaded once at startup from (first match wins):
1. An explicit path passed to ``load_config``
2. The ``FOCUSNAV_CONFIG`` environment variable
3. ``./.focusnav/config.yaml``
4. Built-in defaults
"""

import logging
import os
from enum import StrEnum
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.exceptions import ConfigError
from .core.types import Direction

logger = logging.getLogger(__name__)

# --- Geometry ---
# Fraction of a candidate allowed to sit behind the exit edge
DEFAULT_OVERLAP_THRESHOLD = 0.3

# Float comparison tolerance when ordering candidates
EPSILON = 1e-6

# --- Files ---
CONFIG_DIR = ".focusnav"
CONFIG_FILE = "config.yaml"
CONFIG_ENV_VAR = "FOCUSNAV_CONFIG"


class StaleDestinationPolicy(StrEnum):
    """
    What to do when none of a non-autofocus container's destinations exist.

    GEOMETRIC reproduces the behaviour observed on TV platforms: the
    container is entered as if it were a plain scope. NO_MATCH keeps focus
    where it is.
    """
    GEOMETRIC = "geometric"
    NO_MATCH = "no_match"


class NavigatorConfig(BaseModel):
    """
    Settings for the navigation engine and its collaborators.

    Attributes:
        default_overlap_threshold: Threshold used when a node sets none.
        epsilon: Tolerance for float comparisons during ranking.
        stale_destination_policy: Fallback for unresolvable destinations.
        default_entry_direction: Direction used for geometric entry into an
            autofocus container when establishing first focus without input.
        key_map: Replacement key -> direction table. ``None`` keeps the
            built-in remote-control table.
    """
    default_overlap_threshold: float = Field(default=DEFAULT_OVERLAP_THRESHOLD, ge=0.0, le=1.0)
    epsilon: float = Field(default=EPSILON, gt=0.0)
    stale_destination_policy: StaleDestinationPolicy = StaleDestinationPolicy.GEOMETRIC
    default_entry_direction: Direction = Direction.DOWN
    key_map: Optional[Dict[str, Direction]] = None

    model_config = ConfigDict(extra="forbid")

    def to_yaml_dict(self) -> dict:
        """Plain data suitable for ``yaml.safe_dump``."""
        return self.model_dump(mode="json", exclude_none=True)


def get_config_path(root_dir: Optional[Path] = None) -> Path:
    """Default config location for a project directory."""
    return (root_dir or Path.cwd()) / CONFIG_DIR / CONFIG_FILE


def load_config(path: Optional[Path] = None) -> NavigatorConfig:
    """
    Load the navigator configuration.

    Args:
        path: Explicit config file. Missing explicit files are an error;
            a missing default file simply yields the defaults.

    Raises:
        ConfigError: If the file is not valid YAML or holds invalid values.
    """
    explicit = path is not None
    if path is None and os.environ.get(CONFIG_ENV_VAR):
        path = Path(os.environ[CONFIG_ENV_VAR])
        explicit = True
    if path is None:
        path = get_config_path()

    if not path.exists():
        if explicit:
            raise ConfigError(str(path), "file does not exist")
        logger.debug("No config at %s, using defaults", path)
        return NavigatorConfig()

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ConfigError(str(path), f"not valid YAML ({e})") from e

    if not isinstance(data, dict):
        raise ConfigError(str(path), "top level must be a mapping")

    # YAML reads numeric key codes as ints
    if isinstance(data.get("key_map"), dict):
        data["key_map"] = {str(k): v for k, v in data["key_map"].items()}

    try:
        config = NavigatorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(str(path), str(e)) from e

    logger.debug("Loaded config from %s", path)
    return config
