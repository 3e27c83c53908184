# Copyright 2026 headerval Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the single-use streamed entity."""

import io

import pytest

from headerval.entity import EntityStateError, StreamedEntity

# ###############
# Test Helpers
# ###############


class _RecordingSink(io.BytesIO):
    """A sink that remembers the size of every write."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[int] = []

    def write(self, data) -> int:  # type: ignore[override]
        self.writes.append(len(data))
        return super().write(data)


class _BrokenSink(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, data) -> int:  # type: ignore[override]
        raise OSError("disk full")


# ###############
# Content Handling
# ###############


class TestContent:
    def test_new_entity_has_unknown_length_and_no_content(self) -> None:
        entity = StreamedEntity()
        assert entity.content_length == -1
        assert not entity.is_streaming()
        assert not entity.is_repeatable()

    def test_content_length_is_settable(self) -> None:
        entity = StreamedEntity()
        entity.content_length = 42
        assert entity.content_length == 42

    def test_get_content_without_content_fails(self) -> None:
        with pytest.raises(EntityStateError, match="not been provided"):
            StreamedEntity().get_content()

    def test_content_is_handed_out_once(self) -> None:
        stream = io.BytesIO(b"payload")
        entity = StreamedEntity()
        entity.set_content(stream)
        assert entity.get_content() is stream
        with pytest.raises(EntityStateError, match="consumed"):
            entity.get_content()

    def test_is_streaming_until_content_obtained(self) -> None:
        entity = StreamedEntity()
        entity.set_content(io.BytesIO(b"x"))
        assert entity.is_streaming()
        entity.get_content()
        assert not entity.is_streaming()

    def test_set_content_resets_obtained_flag(self) -> None:
        entity = StreamedEntity()
        entity.set_content(io.BytesIO(b"first"))
        entity.get_content()
        second = io.BytesIO(b"second")
        entity.set_content(second)
        assert entity.is_streaming()
        assert entity.get_content() is second

    def test_metadata_defaults(self) -> None:
        entity = StreamedEntity()
        assert entity.content_type is None
        assert entity.content_encoding is None
        assert entity.chunked is False


# ###############
# Writing and Consuming
# ###############


class TestWriteTo:
    def test_write_to_copies_everything_in_chunks(self) -> None:
        entity = StreamedEntity(chunk_size=4)
        entity.set_content(io.BytesIO(b"0123456789"))
        sink = _RecordingSink()
        entity.write_to(sink)
        assert sink.getvalue() == b"0123456789"
        assert sink.writes == [4, 4, 2]
        assert not entity.is_streaming()

    def test_write_to_twice_fails(self) -> None:
        entity = StreamedEntity()
        entity.set_content(io.BytesIO(b"abc"))
        entity.write_to(io.BytesIO())
        with pytest.raises(EntityStateError):
            entity.write_to(io.BytesIO())

    def test_write_to_none_sink_is_rejected_before_obtaining(self) -> None:
        entity = StreamedEntity()
        entity.set_content(io.BytesIO(b"abc"))
        with pytest.raises(ValueError):
            entity.write_to(None)  # type: ignore[arg-type]
        assert entity.is_streaming()

    def test_write_errors_propagate(self) -> None:
        entity = StreamedEntity()
        entity.set_content(io.BytesIO(b"abc"))
        with pytest.raises(OSError, match="disk full"):
            entity.write_to(_BrokenSink())

    def test_chunk_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            StreamedEntity(chunk_size=0)


class TestConsumeContent:
    def test_consume_closes_stream(self) -> None:
        stream = io.BytesIO(b"abc")
        entity = StreamedEntity()
        entity.set_content(stream)
        entity.consume_content()
        assert stream.closed

    def test_consume_is_idempotent(self) -> None:
        entity = StreamedEntity()
        entity.set_content(io.BytesIO(b"abc"))
        entity.consume_content()
        entity.consume_content()

    def test_consume_without_content_is_a_no_op(self) -> None:
        StreamedEntity().consume_content()

    def test_consume_closes_stream_already_handed_out(self) -> None:
        stream = io.BytesIO(b"abc")
        entity = StreamedEntity()
        entity.set_content(stream)
        assert entity.get_content() is stream
        entity.consume_content()
        assert stream.closed
        assert not entity.is_streaming()
