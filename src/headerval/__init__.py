# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer for HTTP header values: elements, parameters and name-value pairs."""

from headerval.entity import EntityStateError, StreamedEntity
from headerval.model import HeaderElement, NameValuePair
from headerval.parser import (
    DEFAULT,
    HeaderParseError,
    HeaderValueParser,
    ParserCursor,
    parse_elements,
    parse_header_element,
    parse_name_value_pair,
    parse_parameters,
)

__all__ = [
    "DEFAULT",
    "EntityStateError",
    "HeaderElement",
    "HeaderParseError",
    "HeaderValueParser",
    "NameValuePair",
    "ParserCursor",
    "StreamedEntity",
    "parse_elements",
    "parse_header_element",
    "parse_name_value_pair",
    "parse_parameters",
]
