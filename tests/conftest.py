"""Shared test fixtures for querent.

Provides isolated environments, a ready-made application module, a factory
for querent options, and helpers to write config files. Discovered
automatically by pytest.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from querent.host.project import Project
from querent.models import (
    ApplicationModule,
    BuildFeatures,
    DefaultConfig,
    LanguagesSchemaOptions,
    QuerentOptions,
)
from querent.output import reset_output

FAKE_GIT_HASH = "0123456789abcdef0123456789abcdef01234567"


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager and the CLI's log handler after every test.

    Both hold references to the streams CliRunner swapped in; once the test
    ends those streams are closed.
    """
    yield
    reset_output()
    logger = logging.getLogger("querent")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def _fixed_git_hash(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make generated build profiles independent of the surrounding repository."""
    monkeypatch.setattr(
        "querent.blueprints.build_profile.git_commit_hash", lambda cwd=None: FAKE_GIT_HASH
    )


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Clear QUERENT_* variables, redirect XDG data and chdir into tmp_path."""
    monkeypatch.delenv("QUERENT_CONFIG", raising=False)
    monkeypatch.delenv("QUERENT_OUTPUT_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app_module() -> ApplicationModule:
    """An application module with namespace, version and the default build types."""
    return ApplicationModule(
        namespace="com.example.app",
        default_config=DefaultConfig(
            application_id="com.example.app",
            version_code=7,
            version_name="1.2.3",
        ),
    )


@pytest.fixture
def make_options() -> Callable[..., QuerentOptions]:
    """Factory for QuerentOptions; keyword flags map onto BuildFeatures."""

    def _make(
        build_profile: bool = False,
        xml_resources: bool = False,
        languages_schema: bool = False,
        default_locale: str = "en-US",
        supported_locales: tuple[str, ...] = ("ro-RO", "en-GB", "ja"),
    ) -> QuerentOptions:
        return QuerentOptions(
            build_features=BuildFeatures(
                build_profile=build_profile,
                xml_resources=xml_resources,
                languages_schema=languages_schema,
            ),
            languages_schema_options=LanguagesSchemaOptions.model_validate(
                {
                    "default_locale": default_locale,
                    "supported_locales": list(supported_locales),
                }
            ),
        )

    return _make


@pytest.fixture
def project(tmp_path: Path, app_module: ApplicationModule) -> Project:
    """An unevaluated project rooted in tmp_path."""
    return Project(tmp_path, extension=app_module, name="app")


# ---------------------------------------------------------------------------
# Config file helpers
# ---------------------------------------------------------------------------


def _sample_config(**features: bool) -> dict[str, Any]:
    return {
        "android": {
            "kind": "application",
            "namespace": "com.example.app",
            "default_config": {
                "application_id": "com.example.app",
                "version_code": 3,
                "version_name": "2.0.0",
            },
            "build_types": [{"name": "debug"}, {"name": "release"}],
        },
        "querent": {
            "build_features": {
                "build_profile": features.get("build_profile", False),
                "xml_resources": features.get("xml_resources", False),
                "languages_schema": features.get("languages_schema", False),
            },
            "languages_schema_options": {
                "default_locale": "en-US",
                "supported_locales": ["ro-RO", "ja"],
            },
        },
    }


@pytest.fixture
def sample_config() -> Callable[..., dict[str, Any]]:
    """Factory for a com.example.app config document with the given feature flags."""
    return _sample_config


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a config document as querent.yaml (or another name) in tmp_path."""

    def _write(data: dict[str, Any], name: str = "querent.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
