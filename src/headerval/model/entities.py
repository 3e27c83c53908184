# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Header elements and name-value pairs produced by the header value parser.

A header value such as ``text/html; q=0.9, */*; q=0.1`` decomposes into
elements, each of which carries a name, an optional value and an ordered list
of parameters::

    header  = [ element ] *( "," [ element ] )
    element = name [ "=" [ value ] ] *( ";" [ param ] )
    param   = name [ "=" [ value ] ]

A missing value (``name=``) is stored as the empty string; if the ``=`` is also
missing the value is ``None``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

# ###############
# Public Interface
# ###############


class NameValuePair(BaseModel):
    """A name with an optional value, e.g. a single header element parameter."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name}={self.value}"


class HeaderElement(BaseModel):
    """One comma-separated element of a header value.

    Attributes:
        name: The element name. Never ``None``, but may be empty.
        value: The element value, ``""`` for ``name=``, ``None`` without ``=``.
        parameters: The ``;``-separated parameters in source order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str | None = None
    parameters: tuple[NameValuePair, ...] = ()

    @field_validator("parameters", mode="before")
    @classmethod
    def _none_means_no_parameters(cls, value: object) -> object:
        return () if value is None else value

    @property
    def parameter_count(self) -> int:
        """Number of parameters attached to this element."""
        return len(self.parameters)

    def get_parameters(self) -> list[NameValuePair]:
        """Return a fresh list of the parameters.

        The list is created for each call and may be modified by the caller
        without affecting this element.
        """
        return list(self.parameters)

    def get_parameter(self, index: int) -> NameValuePair:
        """Return the parameter at the 0-based ``index``; raises IndexError when out of range."""
        return self.parameters[index]

    def get_parameter_by_name(self, name: str) -> NameValuePair | None:
        """Return the first parameter whose name matches ``name`` case-insensitively.

        Args:
            name: The parameter name to look for.

        Returns:
            The matching parameter, or None if the element has no such parameter.

        Raises:
            ValueError: If ``name`` is None.
        """
        if name is None:
            raise ValueError("Name may not be None")
        wanted = name.casefold()
        for param in self.parameters:
            if param.name.casefold() == wanted:
                return param
        return None

    def __str__(self) -> str:
        text = self.name if self.value is None else f"{self.name}={self.value}"
        for param in self.parameters:
            text += f"; {param}"
        return text
