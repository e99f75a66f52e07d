"""
Configuration for triggerwrap.

Include/exclude patterns come from, in order of precedence:
1. An explicit config file (YAML, or a TOML file such as pyproject.toml)
2. .triggerwrap.yaml / .triggerwrap.yml in the working directory
3. The [tool.triggerwrap] table of pyproject.toml in the working directory
4. TRIGGERWRAP_INCLUDE / TRIGGERWRAP_EXCLUDE environment variables (or .env)
"""

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.exceptions import ConfigLoadError
from .domain.models import TransformOptions

YAML_CONFIG_NAMES = (".triggerwrap.yaml", ".triggerwrap.yml")
PYPROJECT_NAME = "pyproject.toml"


class Settings(BaseSettings):
    # JSON list or comma-separated glob patterns
    INCLUDE: str = ""
    EXCLUDE: str = ""

    # Explicit config file, same as --config
    CONFIG: str = ""

    # Loads from .env file automatically
    model_config = SettingsConfigDict(
        env_prefix="TRIGGERWRAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_options(self) -> TransformOptions:
        return TransformOptions(
            include=_split_patterns(self.INCLUDE),
            exclude=_split_patterns(self.EXCLUDE),
        )


# Private singleton instance
_settings = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


def _split_patterns(value: str) -> Optional[List[str]]:
    """Parse `["a/**", "b/**"]` or `a/**, b/**` into a pattern list."""
    if value.strip().startswith("["):
        try:
            patterns = json.loads(value)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON pattern list {value!r}: {e}") from e
        if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
            raise ValueError(f"Pattern list must contain only strings: {value!r}")
        return patterns or None

    patterns = [part.strip() for part in value.split(",") if part.strip()]
    return patterns or None


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"{path.name} must contain a mapping at the top level")
    return data


def _read_toml(path: Path) -> Dict[str, Any]:
    with open(path, "rb") as f:
        data = tomllib.load(f)

    if path.name == PYPROJECT_NAME:
        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigLoadError(f"[tool] in {path.name} must be a table")
        section = tool.get("triggerwrap", {})
        if not isinstance(section, dict):
            raise ConfigLoadError(f"[tool.triggerwrap] in {path.name} must be a table")
        return section
    return data


def _options_from_file(path: Path) -> TransformOptions:
    """
    Parse include/exclude options from a config file.

    Raises:
        ConfigLoadError: If the file cannot be read or has invalid content
    """
    try:
        if path.suffix == ".toml":
            data = _read_toml(path)
        else:
            data = _read_yaml(path)
        return TransformOptions(**data)
    except ConfigLoadError:
        # Re-raise our own exceptions without wrapping
        raise
    except FileNotFoundError as e:
        raise ConfigLoadError(f"Config file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"YAML syntax error in {path.name}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigLoadError(f"TOML syntax error in {path.name}: {e}") from e
    except (ValidationError, TypeError) as e:
        raise ConfigLoadError(f"Invalid options in {path.name}: {e}") from e


def _has_pyproject_section(path: Path) -> bool:
    if not path.is_file():
        return False
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigLoadError(f"TOML syntax error in {path.name}: {e}") from e
    tool = data.get("tool", {})
    return isinstance(tool, dict) and "triggerwrap" in tool


def find_config_file(cwd: Optional[Path] = None) -> Optional[Path]:
    """
    Find the config file that applies to a directory.

    Returns:
        Path of the YAML config or pyproject.toml, or None if there is none
    """
    base = cwd or Path.cwd()
    for name in YAML_CONFIG_NAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate

    pyproject = base / PYPROJECT_NAME
    if _has_pyproject_section(pyproject):
        return pyproject
    return None


def load_options(path: Optional[Path] = None, cwd: Optional[Path] = None) -> TransformOptions:
    """
    Resolve the transform options for a run.

    Args:
        path: Explicit config file. Falls back to TRIGGERWRAP_CONFIG.
        cwd: Directory searched for config files. Defaults to the current one.

    Returns:
        TransformOptions, empty (transform everything) if nothing is configured

    Raises:
        ConfigLoadError: If a config file is invalid
    """
    settings = get_settings()

    if path is None and settings.CONFIG:
        path = Path(settings.CONFIG)

    if path is None:
        path = find_config_file(cwd)

    if path is not None:
        return _options_from_file(Path(path))

    try:
        return settings.to_options()
    except ValueError as e:
        raise ConfigLoadError(f"Invalid TRIGGERWRAP_* environment settings: {e}") from e
