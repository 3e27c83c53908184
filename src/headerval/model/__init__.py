# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for parsed header values (elements and their parameters)."""

from headerval.model.entities import HeaderElement, NameValuePair

__all__ = [
    "HeaderElement",
    "NameValuePair",
]
