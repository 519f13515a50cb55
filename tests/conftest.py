"""Shared pytest fixtures for the cppgen test suite.

Provides reusable fixtures for:
- A clean environment without ``CPPGEN_*`` overrides
- Rich consoles that never wrap long paths
- Sample project configurations for both languages
- Expected output layouts
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cppgen import utils
from cppgen.config import Language, ProjectConfig, Settings


# ---------------------------------------------------------------------------
# Environment & console
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any ``CPPGEN_*`` variables inherited from the developer's shell."""
    for variable in (
        "CPPGEN_OUTPUT_DIR",
        "CPPGEN_CMAKE_MINIMUM_VERSION",
        "CPPGEN_CMAKE_GENERATOR",
        "CPPGEN_BUILD_SCRIPT",
        "CPPGEN_PROMPT_ATTEMPTS",
    ):
        monkeypatch.delenv(variable, raising=False)


@pytest.fixture(autouse=True)
def unwrapped_consoles(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep each message on one line so assertions can match substrings."""
    monkeypatch.setattr(utils.console, "soft_wrap", True)
    monkeypatch.setattr(utils.err_console, "soft_wrap", True)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from inside an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def c_config() -> ProjectConfig:
    return ProjectConfig(name="hello-c", language=Language.C)


@pytest.fixture
def cpp_config() -> ProjectConfig:
    return ProjectConfig(name="hello-cpp", language=Language.CPP)


@pytest.fixture
def default_settings() -> Settings:
    return Settings()


# ---------------------------------------------------------------------------
# Layout helpers
# ---------------------------------------------------------------------------

def _expected_layout(language: Language) -> set[str]:
    return {
        "include",
        "build",
        "src",
        f"src/{language.main_file}",
        "CMakeLists.txt",
        ".gitignore",
    }


def _actual_layout(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


@pytest.fixture
def expected_layout():
    """Callable returning the relative paths a default run creates for a language."""
    return _expected_layout


@pytest.fixture
def actual_layout():
    """Callable returning the relative POSIX paths of everything below a root."""
    return _actual_layout
