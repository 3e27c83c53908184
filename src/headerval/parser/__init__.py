# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cursor and tokenizer for HTTP header values."""

from headerval.parser.cursor import ParserCursor
from headerval.parser.value_parser import (
    DEFAULT,
    HeaderParseError,
    HeaderValueParser,
    parse_elements,
    parse_header_element,
    parse_name_value_pair,
    parse_parameters,
)

__all__ = [
    "DEFAULT",
    "HeaderParseError",
    "HeaderValueParser",
    "ParserCursor",
    "parse_elements",
    "parse_header_element",
    "parse_name_value_pair",
    "parse_parameters",
]
