# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Streamed message entities."""

from headerval.entity.streamed import DEFAULT_CHUNK_SIZE, EntityStateError, StreamedEntity

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "EntityStateError",
    "StreamedEntity",
]
