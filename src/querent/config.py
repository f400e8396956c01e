"""Configuration discovery, loading and precedence resolution.

This module handles all persistent configuration for querent:

* **Project config** -- a ``querent.yaml`` (or ``querent.yml`` /
  ``querent.json``) file in the module directory, deserialised into a
  :class:`~querent.models.ProjectConfig`. See :func:`find_config_file`
  and :func:`load_config`.
* **Precedence resolution** -- :func:`resolve_config` merges CLI flags,
  environment variables and the config file into the effective
  configuration.
* **Data directory** -- XDG compliant location for crash logs, see
  :func:`get_data_dir`.

Writes go through :func:`~querent.utils.files.atomic_write`.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from querent.exceptions import ConfigError
from querent.models import ModuleKind, ProjectConfig
from querent.utils.files import atomic_write

_APP_NAME = "querent"

CONFIG_FILENAMES = ("querent.yaml", "querent.yml", "querent.json")
"""Config file names searched in the project directory, in priority order."""

ENV_CONFIG = "QUERENT_CONFIG"
ENV_OUTPUT_DIR = "QUERENT_OUTPUT_DIR"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/querent/`` (default ``~/.local/share/querent/``).
    On macOS/Windows: ``~/.querent/``.
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Project config ---


def find_config_file(project_dir: Path) -> Optional[Path]:
    """Return the first of :data:`CONFIG_FILENAMES` present in *project_dir*."""
    for filename in CONFIG_FILENAMES:
        candidate = project_dir / filename
        if candidate.is_file():
            return candidate
    return None


def _parse_document(path: Path, text: str) -> Any:
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def load_config(path: Path) -> ProjectConfig:
    """Load and validate a project config file.

    Args:
        path: A YAML (``.yaml``/``.yml``) or JSON (``.json``) file.

    Returns:
        The validated :class:`~querent.models.ProjectConfig`. An empty
        file yields the defaults.

    Raises:
        ConfigError: If the file is missing, cannot be parsed, or fails
            validation (including malformed locale identifiers).
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
        data = _parse_document(path, text)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read config at {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config at {path}: expected a mapping at top level")

    try:
        return ProjectConfig.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Invalid config at {path}: {exc}") from exc


def save_config(data: dict[str, Any], path: Path) -> None:
    """Validate *data* and write it atomically to *path* (YAML or JSON by suffix).

    Raises:
        ConfigError: If *data* is not a valid project config.
    """
    try:
        ProjectConfig.model_validate(data)
    except ValueError as exc:
        raise ConfigError(f"Refusing to write invalid config: {exc}") from exc

    if path.suffix == ".json":
        text = json.dumps(data, indent=2) + "\n"
    else:
        text = yaml.safe_dump(data, sort_keys=False, default_flow_style=False)
    atomic_write(path, text)


def starter_config(
    namespace: str,
    kind: Union[ModuleKind, str] = ModuleKind.APPLICATION,
    version_name: str = "1.0.0",
) -> dict[str, Any]:
    """Return a starter config document with every built-in blueprint enabled."""
    kind = ModuleKind(kind)
    default_config: dict[str, Any] = {"version_code": 1, "version_name": version_name}
    if kind is ModuleKind.APPLICATION:
        default_config = {"application_id": namespace, **default_config}
    return {
        "android": {
            "kind": kind.value,
            "namespace": namespace,
            "default_config": default_config,
            "build_types": [
                {"name": "debug", "debuggable": True},
                {"name": "release"},
            ],
        },
        "querent": {
            "build_features": {
                "build_profile": True,
                "xml_resources": True,
                "languages_schema": True,
            },
            "languages_schema_options": {
                "default_locale": "en-US",
                "supported_locales": [],
            },
        },
    }


# --- Precedence resolution ---


def resolve_config(
    project_dir: Path,
    cli_config: Optional[Path] = None,
    cli_output_dir: Optional[Path] = None,
) -> tuple[ProjectConfig, Optional[Path]]:
    """Resolve the effective configuration.

    Precedence (high to low):
        1. CLI flags (``cli_config``, ``cli_output_dir``)
        2. Environment variables (``QUERENT_CONFIG``, ``QUERENT_OUTPUT_DIR``)
        3. Config file discovered in *project_dir*
        4. Defaults (every blueprint disabled, no module configuration)

    Relative paths are resolved against *project_dir*.

    Returns:
        A tuple of ``(config, config_path_or_None)``.

    Raises:
        ConfigError: If an explicitly requested config file does not exist
            or any config file is invalid.
    """
    config_path: Optional[Path] = None
    env_config = os.environ.get(ENV_CONFIG)
    if cli_config is not None:
        config_path = cli_config
    elif env_config:
        config_path = Path(env_config)

    if config_path is not None:
        if not config_path.is_absolute():
            config_path = project_dir / config_path
        config = load_config(config_path)
    else:
        config_path = find_config_file(project_dir)
        config = load_config(config_path) if config_path else ProjectConfig()

    env_output_dir = os.environ.get(ENV_OUTPUT_DIR)
    if cli_output_dir is not None:
        config.querent.output_dir = str(cli_output_dir)
    elif env_output_dir:
        config.querent.output_dir = env_output_dir

    return config, config_path
