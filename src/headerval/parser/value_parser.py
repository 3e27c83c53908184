# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer that splits header values into elements, parameters and pairs.

The parser is lenient by default: every input maps to some sequence of
elements, possibly with empty names or missing values. A strict variant can be
requested to reject unterminated quoted strings and values without a name.

Parser instances hold no mutable state; all progress is recorded in the
caller-owned ParserCursor, so one instance (such as DEFAULT) can be shared
freely between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass

from headerval.model.entities import HeaderElement, NameValuePair
from headerval.parser.cursor import ParserCursor

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

PARAM_DELIMITER = ";"
ELEM_DELIMITER = ","
ALL_DELIMITERS: tuple[str, ...] = (PARAM_DELIMITER, ELEM_DELIMITER)

ElementFactory = Callable[[str, str | None, Sequence[NameValuePair]], HeaderElement]
PairFactory = Callable[[str, str | None], NameValuePair]


class HeaderParseError(Exception):
    """Raised by a strict parser when a header value is malformed.

    Attributes:
        position: Index into the buffer where the problem was detected.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"Position {position}: {message}")
        self.position = position


def create_header_element(name: str, value: str | None, parameters: Sequence[NameValuePair]) -> HeaderElement:
    """Default element factory: build a plain HeaderElement."""
    return HeaderElement(name=name, value=value, parameters=tuple(parameters))


def create_name_value_pair(name: str, value: str | None) -> NameValuePair:
    """Default pair factory: build a plain NameValuePair."""
    return NameValuePair(name=name, value=value)


@dataclass(frozen=True)
class HeaderValueParser:
    """Parses header values into HeaderElement and NameValuePair objects.

    Attributes:
        element_factory: Builds an element from its name, value and parameters.
        pair_factory: Builds a pair from its name and value.
        strict: Reject unterminated quoted strings and pairs that have a value
            but no name, instead of degrading to best-effort tokens.
    """

    element_factory: ElementFactory = create_header_element
    pair_factory: PairFactory = create_name_value_pair
    strict: bool = False

    def parse_elements(self, buffer: str, cursor: ParserCursor) -> list[HeaderElement]:
        """Parse all comma-separated elements between the cursor and its bound.

        Elements with an empty name and no value, produced by consecutive or
        trailing commas, are skipped.
        """
        _check_arguments(buffer, cursor)
        elements: list[HeaderElement] = []
        while not cursor.at_end():
            element = self.parse_header_element(buffer, cursor)
            if not (element.name == "" and element.value is None):
                elements.append(element)
        logger.debug("Parsed %d header element(s) from %r", len(elements), buffer)
        return elements

    def parse_header_element(self, buffer: str, cursor: ParserCursor) -> HeaderElement:
        """Parse one element and, unless it ended with a comma, its parameters."""
        _check_arguments(buffer, cursor)
        pair = self.parse_name_value_pair(buffer, cursor)
        params: Sequence[NameValuePair] = ()
        if not cursor.at_end() and buffer[cursor.pos - 1] != ELEM_DELIMITER:
            params = self.parse_parameters(buffer, cursor)
        return self.element_factory(pair.name, pair.value, params)

    def parse_parameters(self, buffer: str, cursor: ParserCursor) -> list[NameValuePair]:
        """Parse ``;``-separated parameters up to the end of the current element.

        The run stops after the first parameter terminated by the element
        delimiter ``,``, or at the cursor bound.
        """
        _check_arguments(buffer, cursor)
        pos = cursor.pos
        while pos < cursor.upper_bound and is_whitespace(buffer[pos]):
            pos += 1
        cursor.update_pos(pos)

        params: list[NameValuePair] = []
        while not cursor.at_end():
            params.append(self.parse_name_value_pair(buffer, cursor))
            if buffer[cursor.pos - 1] == ELEM_DELIMITER:
                break
        return params

    def parse_name_value_pair(
        self,
        buffer: str,
        cursor: ParserCursor,
        delimiters: Collection[str] = ALL_DELIMITERS,
    ) -> NameValuePair:
        """Parse ``name [= value]`` up to the next unquoted delimiter.

        Args:
            buffer: The text being parsed.
            cursor: Current position; advanced past the consumed delimiter, or
                to the upper bound if the input ran out first.
            delimiters: Characters that end the pair when seen outside quotes.

        Returns:
            The pair, with value None if no ``=`` was found. Surrounding quotes
            are removed from the value; backslash escapes are kept verbatim.

        Raises:
            HeaderParseError: In strict mode only, for malformed input.
        """
        _check_arguments(buffer, cursor)
        start = cursor.pos
        pos = start
        upper = cursor.upper_bound

        # name
        terminated = False
        while pos < upper:
            ch = buffer[pos]
            if ch == "=":
                break
            if ch in delimiters:
                terminated = True
                break
            pos += 1

        if pos == upper:
            terminated = True
            name = buffer[start:upper].strip(_WHITESPACE)
        else:
            name = buffer[start:pos].strip(_WHITESPACE)
            pos += 1

        if terminated:
            cursor.update_pos(pos)
            return self.pair_factory(name, None)

        # value
        value_start = pos
        quoted = False
        escaped = False
        while pos < upper:
            ch = buffer[pos]
            if ch == '"' and not escaped:
                quoted = not quoted
            if not quoted and not escaped and ch in delimiters:
                terminated = True
                break
            if escaped:
                escaped = False
            else:
                escaped = quoted and ch == "\\"
            pos += 1

        if self.strict:
            if quoted:
                logger.debug("Rejecting unterminated quoted string at %d in %r", value_start, buffer)
                raise HeaderParseError("Unterminated quoted string", value_start)
            if not name:
                logger.debug("Rejecting value without a name at %d in %r", start, buffer)
                raise HeaderParseError("Value without a name", start)

        value = _unquote(buffer[value_start:pos].strip(_WHITESPACE))
        if terminated:
            pos += 1
        cursor.update_pos(pos)
        return self.pair_factory(name, value)


DEFAULT = HeaderValueParser()
"""Shared parser with non-customized, lenient behavior."""


def is_whitespace(ch: str) -> bool:
    """Return True for the HTTP whitespace characters: space, tab, CR and LF."""
    return ch in _WHITESPACE


def parse_elements(value: str, parser: HeaderValueParser | None = None) -> list[HeaderElement]:
    """Parse a complete header value into its elements.

    Args:
        value: The header value to parse.
        parser: The parser to use, or None for DEFAULT.

    Returns:
        The elements in source order; never None.

    Raises:
        ValueError: If ``value`` is None.
    """
    return (parser or DEFAULT).parse_elements(value, _cursor_over(value))


def parse_header_element(value: str, parser: HeaderValueParser | None = None) -> HeaderElement:
    """Parse a single header element, e.g. ``text/html; level=1``."""
    return (parser or DEFAULT).parse_header_element(value, _cursor_over(value))


def parse_parameters(value: str, parser: HeaderValueParser | None = None) -> list[NameValuePair]:
    """Parse a parameter list, e.g. ``q=0.5; level=1``."""
    return (parser or DEFAULT).parse_parameters(value, _cursor_over(value))


def parse_name_value_pair(value: str, parser: HeaderValueParser | None = None) -> NameValuePair:
    """Parse a single ``name[=value]`` pair."""
    return (parser or DEFAULT).parse_name_value_pair(value, _cursor_over(value))


# ################
# Implementation
# ################

_WHITESPACE = " \t\r\n"


def _cursor_over(value: str) -> ParserCursor:
    """Return a cursor spanning the whole of ``value``."""
    if value is None:
        raise ValueError("Value to parse may not be None")
    return ParserCursor(0, len(value))


def _check_arguments(buffer: str, cursor: ParserCursor) -> None:
    if buffer is None:
        raise ValueError("Buffer may not be None")
    if cursor is None:
        raise ValueError("Parser cursor may not be None")
    if not isinstance(buffer, str):
        raise TypeError(f"Buffer must be a str, not {type(buffer).__name__}")
    if cursor.upper_bound > len(buffer):
        raise ValueError(f"Cursor upper bound {cursor.upper_bound} exceeds buffer length {len(buffer)}")


def _unquote(value: str) -> str:
    """Strip one pair of surrounding double quotes, leaving the content verbatim."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value
