"""Configuration loading for a reporting run."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from .exceptions import ConfigurationError
from .models import ReportConfig


def load_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load optional settings from a YAML file.

    Args:
        config_path: Path to the YAML file, or None to use no file

    Returns:
        Parsed settings, empty when no file is given

    Raises:
        ConfigurationError: If the file is missing or is not a YAML mapping
    """
    if config_path is None:
        return {}

    config_file = Path(config_path)
    if not config_file.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            settings = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc

    if settings is None:
        return {}
    if not isinstance(settings, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    return settings


def _describe(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "config"
        problems.append(f"{field}: {item['msg']}")
    return "; ".join(problems)


def build_config(
    settings: Dict[str, Any],
    owner: Optional[str] = None,
    repo: Optional[str] = None,
    issue_number: Optional[str] = None,
    token: Optional[str] = None
) -> ReportConfig:
    """
    Resolve the run configuration.

    Explicit arguments (CLI options or their environment variables) take
    precedence over the ``repository`` section of the settings file;
    ``ranking`` settings only come from the file.

    Raises:
        ConfigurationError: If owner, repo or issue number is missing or malformed
    """
    repository = settings.get("repository") or {}
    ranking = settings.get("ranking") or {}
    if not isinstance(repository, dict) or not isinstance(ranking, dict):
        raise ConfigurationError("repository and ranking settings must be mappings")

    values = {
        "owner": owner or repository.get("owner"),
        "repo": repo or repository.get("name"),
        "issue_number": issue_number or repository.get("issue_number"),
        "token": token or None,
        "min_upvotes": ranking.get("min_upvotes"),
        "max_per_label": ranking.get("max_per_label"),
    }

    try:
        return ReportConfig(**{key: value for key, value in values.items() if value is not None})
    except ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc
