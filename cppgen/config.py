"""cppgen configuration.

Typed models for the two inputs of a run: the ``ProjectConfig`` describing
the project to generate, and the ``Settings`` holding everything else that can
be tuned from the environment or the command line. Both are Pydantic v2 models
so invalid values are rejected at construction time.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cppgen.exceptions import InvalidInputError


# ---------------------------------------------------------------------------
# Language
# ---------------------------------------------------------------------------


class Language(str, Enum):
    """Source language of the generated project."""

    C = "c"
    CPP = "cpp"

    @classmethod
    def parse(cls, token: str) -> "Language":
        """Map a user-supplied token to a ``Language``.

        Matching is case-insensitive and ignores surrounding whitespace.
        ``c`` selects C; ``cpp``, ``c++`` and ``cxx`` select C++.

        Raises:
            InvalidInputError: If the token names neither language.
        """
        key = (token or "").strip().lower()
        try:
            return _LANGUAGE_ALIASES[key]
        except KeyError:
            raise InvalidInputError(
                f"Unknown language {token!r}: only C and CPP (C++) are available."
            ) from None

    @property
    def source_suffix(self) -> str:
        return ".c" if self is Language.C else ".cpp"

    @property
    def main_file(self) -> str:
        """Name of the entry-point source file, e.g. ``main.cpp``."""
        return f"main{self.source_suffix}"

    @property
    def cmake_language(self) -> str:
        """Language identifier passed to CMake's ``project()`` command."""
        return "C" if self is Language.C else "CXX"

    @property
    def display_name(self) -> str:
        return "C" if self is Language.C else "C++"


_LANGUAGE_ALIASES: dict[str, Language] = {
    "c": Language.C,
    "cpp": Language.CPP,
    "c++": Language.CPP,
    "cxx": Language.CPP,
}


# ---------------------------------------------------------------------------
# Project name validation
# ---------------------------------------------------------------------------


def forbidden_name_chars(platform: str | None = None) -> str:
    """Return the characters a project name may not contain on *platform*.

    *platform* follows ``sys.platform`` values and defaults to the running
    interpreter's.  ``;`` is refused everywhere: CMake reads it as a list
    separator, so ``project(a;b C)`` would declare a language ``b``.
    """
    platform = platform or sys.platform
    if platform.startswith("win"):
        return '<>:"/\\|?*;\0'
    if platform == "darwin":
        return "/:;\0"
    return "/;\0"


def validate_project_name(name: str, platform: str | None = None) -> str:
    """Strip *name* and check that it can be used as a directory name.

    Returns:
        The stripped name.

    Raises:
        ValueError: If the name is empty, reserved, or contains a character
            the filesystem does not allow.
    """
    cleaned = name.strip()
    if not cleaned:
        raise ValueError("Project name is required.")
    if cleaned in (".", ".."):
        raise ValueError(f"{cleaned!r} is not a valid project name.")
    bad = sorted({ch for ch in cleaned if ch in forbidden_name_chars(platform)})
    if bad:
        shown = ", ".join(repr(ch) for ch in bad)
        raise ValueError(f"Invalid character in project name: {shown}.")
    return cleaned


# ---------------------------------------------------------------------------
# ProjectConfig
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """The validated (name, language) pair that drives generation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, also the directory name")
    language: Language = Field(..., description="C or C++")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("language", mode="before")
    @classmethod
    def _coerce_language(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, Language):
            try:
                return Language.parse(value)
            except InvalidInputError as exc:
                raise ValueError(str(exc)) from None
        return value

    @classmethod
    def create(cls, name: str, language: str | Language) -> "ProjectConfig":
        """Build a config from raw user input.

        Raises:
            InvalidInputError: If either value fails validation.
        """
        try:
            return cls(name=name, language=language)
        except ValidationError as exc:
            raise InvalidInputError(_first_error(exc)) from None


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}
_GENERATOR_FORBIDDEN = '"$`\\\n'


class Settings(BaseModel):
    """Per-run tunables.

    Defaults reproduce the bare layout: no build script, projects created in
    the current directory.
    """

    output_dir: Path = Field(default=Path("."))
    cmake_minimum_version: str = Field(default="3.11", pattern=r"^\d+\.\d+(\.\d+)*$")
    cmake_generator: str = Field(default="Ninja", min_length=1)
    build_script: bool = Field(default=False, description="Also emit build.sh")
    prompt_attempts: int = Field(
        default=3, ge=1, description="Invalid answers tolerated per prompt"
    )

    @field_validator("cmake_generator")
    @classmethod
    def _check_generator(cls, value: str) -> str:
        # Pasted into a double-quoted string in build.sh.
        if not value.strip():
            raise ValueError("CMake generator name must not be empty.")
        bad = sorted({ch for ch in value if ch in _GENERATOR_FORBIDDEN})
        if bad:
            shown = ", ".join(repr(ch) for ch in bad)
            raise ValueError(f"Invalid character in CMake generator name: {shown}.")
        return value

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Return a copy with *overrides* applied and validated.

        Raises:
            InvalidInputError: If an override holds a malformed value.
        """
        try:
            return self.model_validate({**self.model_dump(), **overrides})
        except ValidationError as exc:
            raise InvalidInputError(_first_error(exc)) from None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CPPGEN_OUTPUT_DIR, CPPGEN_CMAKE_MINIMUM_VERSION,
            CPPGEN_CMAKE_GENERATOR, CPPGEN_BUILD_SCRIPT,
            CPPGEN_PROMPT_ATTEMPTS.

        Raises:
            InvalidInputError: If a variable holds a malformed value.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        if env.get("CPPGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(env["CPPGEN_OUTPUT_DIR"])
        if env.get("CPPGEN_CMAKE_MINIMUM_VERSION"):
            kwargs["cmake_minimum_version"] = env["CPPGEN_CMAKE_MINIMUM_VERSION"]
        if env.get("CPPGEN_CMAKE_GENERATOR"):
            kwargs["cmake_generator"] = env["CPPGEN_CMAKE_GENERATOR"]
        if "CPPGEN_BUILD_SCRIPT" in env:
            kwargs["build_script"] = _parse_flag(
                "CPPGEN_BUILD_SCRIPT", env["CPPGEN_BUILD_SCRIPT"]
            )
        if env.get("CPPGEN_PROMPT_ATTEMPTS"):
            raw = env["CPPGEN_PROMPT_ATTEMPTS"]
            try:
                kwargs["prompt_attempts"] = int(raw)
            except ValueError:
                raise InvalidInputError(
                    f"CPPGEN_PROMPT_ATTEMPTS must be an integer, got {raw!r}."
                ) from None

        try:
            return cls(**kwargs)
        except ValidationError as exc:
            raise InvalidInputError(_first_error(exc)) from None


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _parse_flag(variable: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise InvalidInputError(f"{variable} must be a boolean, got {raw!r}.")


def _first_error(exc: ValidationError) -> str:
    """Return a readable message for the first error in *exc*."""
    error = exc.errors()[0]
    message = error.get("msg", str(exc))
    # Pydantic prefixes messages raised from validators.
    message = message.removeprefix("Value error, ")
    field = ".".join(str(part) for part in error.get("loc", ()))
    if field and field not in ("name", "language"):
        return f"{field}: {message}"
    return message
