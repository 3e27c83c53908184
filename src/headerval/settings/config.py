# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the headerval settings file."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from headerval.entity.streamed import DEFAULT_CHUNK_SIZE
from headerval.parser.value_parser import HeaderValueParser

# ###############
# Public Interface
# ###############

SETTINGS_FILE_NAME = ".headerval.yaml"


class ParserSettingsError(Exception):
    """Raised when a settings file cannot be read or is invalid."""


class ParserSettings(BaseModel):
    """User-tunable behavior of the parser and the command-line front end.

    Attributes:
        strict: Reject malformed header values instead of parsing leniently.
        output: Output format of the CLI, ``text`` or ``json``.
        log_level: Name of the logging level used by the CLI.
        chunk_size: Copy buffer size for streamed entities.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    strict: bool = False
    output: Literal["text", "json"] = "text"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(alias="log-level", default="WARNING")
    chunk_size: int = Field(alias="chunk-size", default=DEFAULT_CHUNK_SIZE, gt=0)

    def build_parser(self) -> HeaderValueParser:
        """Return a parser configured according to these settings."""
        return HeaderValueParser(strict=self.strict)


def load_parser_settings(path: Path) -> ParserSettings:
    """Load and validate a settings file.

    An empty file yields the default settings.

    Args:
        path: Path to the YAML settings file.

    Returns:
        A validated ParserSettings instance.

    Raises:
        ParserSettingsError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ParserSettingsError(f"Settings file not found: {path}") from None
    except OSError as exc:
        raise ParserSettingsError(f"Cannot read settings file '{path}': {exc}") from exc

    return _parse_parser_settings(raw, source_label=str(path))


# ################
# Implementation
# ################


def _parse_parser_settings(text: str, source_label: str = "<string>") -> ParserSettings:
    """Parse settings YAML text into a ParserSettings."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParserSettingsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ParserSettingsError(f"{source_label}: settings must be a YAML mapping")

    try:
        return ParserSettings.model_validate(data)
    except ValidationError as exc:
        raise ParserSettingsError(f"Invalid settings in {source_label}: {exc}") from exc
