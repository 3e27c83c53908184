# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for header elements and name-value pairs."""

import pytest
from pydantic import ValidationError

from headerval.model import HeaderElement, NameValuePair

# ###############
# Name-Value Pairs
# ###############


def test_pair_without_value_renders_name_only() -> None:
    assert str(NameValuePair(name="no-cache")) == "no-cache"


def test_pair_with_empty_value_keeps_equals_sign() -> None:
    assert str(NameValuePair(name="a", value="")) == "a="


def test_absent_and_empty_values_are_distinct() -> None:
    assert NameValuePair(name="a") != NameValuePair(name="a", value="")


def test_pair_name_is_required() -> None:
    with pytest.raises(ValidationError):
        NameValuePair(name=None)  # type: ignore[arg-type]


def test_pair_is_immutable() -> None:
    pair = NameValuePair(name="a", value="1")
    with pytest.raises(ValidationError):
        pair.value = "2"  # type: ignore[misc]


# ###############
# Header Elements
# ###############


def _element() -> HeaderElement:
    return HeaderElement(
        name="text/html",
        value=None,
        parameters=[NameValuePair(name="charset", value="utf-8"), NameValuePair(name="level", value="1")],
    )


def test_element_renders_canonical_form() -> None:
    assert str(_element()) == "text/html; charset=utf-8; level=1"


def test_element_with_value_and_no_parameters() -> None:
    assert str(HeaderElement(name="max-age", value="60")) == "max-age=60"


def test_none_parameters_mean_no_parameters() -> None:
    element = HeaderElement(name="gzip", value=None, parameters=None)
    assert element.parameters == ()
    assert element.parameter_count == 0


def test_element_name_is_required() -> None:
    with pytest.raises(ValidationError):
        HeaderElement(name=None)  # type: ignore[arg-type]


def test_get_parameters_returns_a_copy() -> None:
    element = _element()
    params = element.get_parameters()
    params.clear()
    assert element.parameter_count == 2


def test_get_parameter_by_index() -> None:
    element = _element()
    assert element.get_parameter(1) == NameValuePair(name="level", value="1")
    with pytest.raises(IndexError):
        element.get_parameter(2)


@pytest.mark.parametrize("name", ["charset", "CHARSET", "CharSet"])
def test_get_parameter_by_name_ignores_case(name: str) -> None:
    param = _element().get_parameter_by_name(name)
    assert param is not None
    assert param.value == "utf-8"


def test_get_parameter_by_name_returns_first_match() -> None:
    element = HeaderElement(
        name="a",
        parameters=[NameValuePair(name="q", value="1"), NameValuePair(name="Q", value="2")],
    )
    assert element.get_parameter_by_name("q") == NameValuePair(name="q", value="1")


def test_get_parameter_by_name_missing_returns_none() -> None:
    assert _element().get_parameter_by_name("boundary") is None


def test_get_parameter_by_name_rejects_none() -> None:
    with pytest.raises(ValueError):
        _element().get_parameter_by_name(None)  # type: ignore[arg-type]


def test_elements_compare_structurally() -> None:
    assert _element() == _element()
    assert hash(_element()) == hash(_element())
    reordered = HeaderElement(name="text/html", parameters=list(reversed(_element().parameters)))
    assert reordered != _element()


def test_elements_are_usable_in_sets() -> None:
    assert len({_element(), _element(), HeaderElement(name="other")}) == 2
