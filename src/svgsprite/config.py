# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Injector options and ``pyproject.toml`` configuration loading."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "svgsprite"


class ConfigError(Exception):
    """Raised when configuration input cannot be read."""


class InjectorOptions(BaseModel):
    """Options recognised by :class:`svgsprite.injector.SpriteInjector`.

    Attributes:
        prefix: Text prepended to every derived icon identifier.
        file_name: Name of a single asset receiving every discovered icon.
            When unset, icons are grouped per output file instead.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    prefix: str = ""
    file_name: str | None = Field(default=None, alias="fileName")

    @field_validator("prefix", mode="before")
    @classmethod
    def _coerce_prefix(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""

    @field_validator("file_name", mode="before")
    @classmethod
    def _coerce_file_name(cls, value: Any) -> str | None:
        if isinstance(value, str) and value.strip():
            return value
        return None

    def merged(self, overrides: Mapping[str, Any]) -> InjectorOptions:
        """Return a copy with non-``None`` ``overrides`` applied.

        Args:
            overrides: Mapping of field names or aliases to new values.

        Returns:
            InjectorOptions: Options combining ``self`` and ``overrides``.
        """

        data: dict[str, Any] = self.model_dump()
        for key, value in overrides.items():
            if value is None:
                continue
            data["file_name" if key == "fileName" else key] = value
        return InjectorOptions.model_validate(data)


def configure(options: InjectorOptions | Mapping[str, Any] | None = None) -> InjectorOptions:
    """Normalise user-supplied options into :class:`InjectorOptions`.

    Unknown keys are ignored and invalid values fall back to the defaults.

    Args:
        options: Existing options, a raw mapping, or ``None``.

    Returns:
        InjectorOptions: Validated options.
    """

    if isinstance(options, InjectorOptions):
        return options
    if not isinstance(options, Mapping):
        return InjectorOptions()
    return InjectorOptions.model_validate(dict(options))


def load_pyproject_options(project_root: Path) -> InjectorOptions:
    """Read ``[tool.svgsprite]`` from ``pyproject.toml`` under ``project_root``.

    Args:
        project_root: Directory expected to contain ``pyproject.toml``.

    Returns:
        InjectorOptions: Options from the table, or defaults when absent.

    Raises:
        ConfigError: If the file exists but is not valid TOML.
    """

    path = project_root / PYPROJECT_FILENAME
    if not path.is_file():
        return InjectorOptions()
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return InjectorOptions()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return InjectorOptions()
    normalised = {key.replace("-", "_"): value for key, value in section.items()}
    return configure(normalised)


__all__ = [
    "ConfigError",
    "InjectorOptions",
    "PYPROJECT_SECTION_KEY",
    "configure",
    "load_pyproject_options",
]
