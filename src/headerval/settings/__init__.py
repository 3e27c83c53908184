# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Settings file support for headerval."""

from headerval.settings.config import (
    SETTINGS_FILE_NAME,
    ParserSettings,
    ParserSettingsError,
    load_parser_settings,
)

__all__ = [
    "SETTINGS_FILE_NAME",
    "ParserSettings",
    "ParserSettingsError",
    "load_parser_settings",
]
