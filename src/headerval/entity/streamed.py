# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""A generic streamed entity received on a connection.

The entity wraps a single binary stream that can be handed out exactly once.
Whoever obtains it owns it; instances are not safe for concurrent use.
"""

from __future__ import annotations

import logging
import shutil
from typing import BinaryIO

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DEFAULT_CHUNK_SIZE = 2048


class EntityStateError(Exception):
    """Raised when content is requested before it was provided or after it was consumed."""


class StreamedEntity:
    """Non-repeatable entity whose content is read from a stream once.

    Attributes:
        content_type: The Content-Type header value, if known.
        content_encoding: The Content-Encoding header value, if known.
        chunked: Whether the entity is sent with chunked transfer coding.
        chunk_size: Buffer size used by write_to().
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size = chunk_size
        self.content_type: str | None = None
        self.content_encoding: str | None = None
        self.chunked = False
        self._content: BinaryIO | None = None
        self._content_obtained = False
        self._length = -1

    @property
    def content_length(self) -> int:
        """Number of bytes in the content, or a negative number if unknown."""
        return self._length

    @content_length.setter
    def content_length(self, length: int) -> None:
        self._length = length

    def set_content(self, stream: BinaryIO | None) -> None:
        """Provide the stream returned by the next call to get_content()."""
        self._content = stream
        self._content_obtained = False

    def get_content(self) -> BinaryIO:
        """Obtain the content stream, once only.

        Raises:
            EntityStateError: If no content was provided, or it was already obtained.
        """
        if self._content is None:
            raise EntityStateError("Content has not been provided")
        if self._content_obtained:
            raise EntityStateError("Content has been consumed")
        self._content_obtained = True
        logger.debug("Handing out entity content (length=%d)", self._length)
        return self._content

    def is_repeatable(self) -> bool:
        return False

    def is_streaming(self) -> bool:
        return not self._content_obtained and self._content is not None

    def write_to(self, sink: BinaryIO) -> None:
        """Copy the content to ``sink`` chunk by chunk.

        I/O errors from either stream propagate unchanged.

        Raises:
            ValueError: If ``sink`` is None.
            EntityStateError: If the content is unavailable (see get_content()).
        """
        if sink is None:
            raise ValueError("Output stream may not be None")
        shutil.copyfileobj(self.get_content(), sink, self.chunk_size)

    def consume_content(self) -> None:
        """Close the content stream, discarding whatever has not been read."""
        if self._content is not None and not self._content.closed:
            logger.debug("Closing entity content")
            self._content.close()
