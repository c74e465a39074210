"""Tests for the delimited reader and residual errors."""

from __future__ import annotations

import io

import pytest
from kungfu import Error, Ok

from lazyseq import ResidualError, error_buffer, error_buffer_string
from lazyseq.io import MIN_BUFFER_SIZE, BufferFullError, PartialRead, Reader

# ─────────────────────────────────────────────────────────────────────────────
# Clean input
# ─────────────────────────────────────────────────────────────────────────────


class TestReadString:
    def test_leftover_is_last_element(self) -> None:
        reader = Reader(io.BytesIO(b"hello\nworld\nexample"))
        assert reader.read_string("\n").collect() == [(0, "hello\n"), (1, "world\n"), (2, "example")]
        assert reader.err is None

    def test_trailing_delimiter_has_no_empty_tail(self) -> None:
        reader = Reader(io.BytesIO(b"a\nb\n"))
        assert reader.read_string("\n").collect() == [(0, "a\n"), (1, "b\n")]

    def test_empty_input(self) -> None:
        reader = Reader(io.BytesIO(b""))
        assert reader.read_string("\n").collect() == []
        assert reader.err is None

    def test_no_delimiter_at_all(self) -> None:
        reader = Reader(io.BytesIO(b"just one chunk"))
        assert reader.read_string("\n").collect() == [(0, "just one chunk")]

    def test_break_leaves_no_error(self) -> None:
        reader = Reader(io.BytesIO(b"".join(b"line %d\n" % i for i in range(10))))
        got: list[str] = []
        reader.read_string("\n").run(lambda i, line: got.append(line) is None and i < 3)
        assert len(got) == 4
        assert reader.err is None

    def test_resumes_from_current_position(self) -> None:
        reader = Reader(io.BytesIO(b"a\nb\nc\nd\n"))
        seq = reader.read_string("\n")
        seq.run(lambda i, _: i < 1)
        assert seq.collect() == [(0, "c\n"), (1, "d\n")]

    def test_custom_delimiter(self) -> None:
        reader = Reader(io.BytesIO(b"k=v;x=y"))
        assert reader.read_string(";").collect() == [(0, "k=v;"), (1, "x=y")]


class TestReadBytes:
    def test_chunks_keep_delimiter(self) -> None:
        reader = Reader(io.BytesIO(b"\x00ab\x00cd"))
        assert reader.read_bytes(0).collect() == [(0, b"\x00"), (1, b"ab\x00"), (2, b"cd")]

    def test_small_buffer_long_lines(self) -> None:
        line = b"x" * 100 + b"\n"
        reader = Reader(io.BytesIO(line * 3), size=MIN_BUFFER_SIZE)
        assert [chunk for _, chunk in reader.read_bytes(b"\n")] == [line] * 3

    def test_size_is_clamped(self) -> None:
        assert Reader(io.BytesIO(b""), size=1).size == MIN_BUFFER_SIZE

    @pytest.mark.parametrize("delim", [b"", b"ab", 256, -1])
    def test_invalid_delimiter(self, delim) -> None:
        with pytest.raises(ValueError):
            Reader(io.BytesIO(b"")).read_bytes(delim)


class TestReadSlice:
    def test_chunk_that_fits_exactly(self) -> None:
        line = b"a" * 15 + b"\n"
        reader = Reader(io.BytesIO(line), size=MIN_BUFFER_SIZE)
        assert reader.read_slice(b"\n").collect() == [(0, line)]
        assert reader.err is None

    def test_overlong_chunk_keeps_residual(self) -> None:
        reader = Reader(io.BytesIO(b"ab\n" + b"y" * 20 + b"\n"), size=MIN_BUFFER_SIZE)
        assert reader.read_slice(b"\n").collect() == [(0, b"ab\n")]

        err = reader.err
        assert err is not None
        assert isinstance(err.err, BufferFullError)
        assert err.err.size == MIN_BUFFER_SIZE
        assert err.buffer == b"y" * MIN_BUFFER_SIZE

    def test_next_run_continues_after_residual(self) -> None:
        reader = Reader(io.BytesIO(b"y" * 20 + b"\nz\n"), size=MIN_BUFFER_SIZE)
        seq = reader.read_slice(b"\n")
        assert seq.collect() == []
        assert seq.collect() == [(0, b"yyyy\n"), (1, b"z\n")]

    def test_short_leftover_at_end(self) -> None:
        reader = Reader(io.BytesIO(b"k\ntail"), size=MIN_BUFFER_SIZE)
        assert reader.read_slice(b"\n").collect() == [(0, b"k\n"), (1, b"tail")]
        assert reader.err is None

    def test_bounded_primitive(self) -> None:
        reader = Reader(io.BytesIO(b"z" * 40), size=MIN_BUFFER_SIZE)
        match reader.read_until(b"\n", limit=MIN_BUFFER_SIZE):
            case Error(PartialRead(data, BufferFullError())):
                assert data == b"z" * MIN_BUFFER_SIZE
            case other:
                pytest.fail(f"unexpected {other!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Failures
# ─────────────────────────────────────────────────────────────────────────────


class TestFailures:
    def test_residual_is_captured(self, failing_stream) -> None:
        reader = Reader(failing_stream(b"hello\nworld\nexample", OSError("forced")))
        assert [line for _, line in reader.read_string("\n")] == ["hello\n", "world\n"]

        err = reader.err
        assert isinstance(err, ResidualError)
        assert isinstance(err.err, OSError)
        assert err.__cause__ is err.err
        assert str(err) == "forced"
        assert err.buffer == b"example"
        assert error_buffer_string(err) == "example"

    def test_failure_with_nothing_pending(self, failing_stream) -> None:
        reader = Reader(failing_stream(b"a\n", OSError("gone")))
        assert reader.read_string("\n").collect() == [(0, "a\n")]
        assert reader.err is not None
        assert reader.err.buffer == b""

    def test_later_failure_overwrites(self, failing_stream) -> None:
        reader = Reader(failing_stream(b"tail", OSError("first")))
        reader.read_string("\n").collect()
        assert reader.err is not None and reader.err.buffer == b"tail"

        reader.read_string("\n").collect()
        assert reader.err is not None
        assert reader.err.buffer == b""

    def test_result(self, failing_stream) -> None:
        clean = Reader(io.BytesIO(b"x"))
        clean.read_bytes(b"\n").collect()
        match clean.result():
            case Ok(None):
                pass
            case _:
                pytest.fail("clean read should not fail")

        broken = Reader(failing_stream(b"x", ValueError("bad")))
        broken.read_bytes(b"\n").collect()
        match broken.result():
            case Error(ResidualError() as err):
                assert err.buffer == b"x"
            case _:
                pytest.fail("expected a residual error")

    def test_read_until(self, failing_stream) -> None:
        reader = Reader(failing_stream(b"ab\ncd", OSError("x")))
        match reader.read_until(b"\n"):
            case Ok(chunk):
                assert chunk == b"ab\n"
            case other:
                pytest.fail(f"unexpected {other!r}")
        match reader.read_until(b"\n"):
            case Error(PartialRead(data, OSError())):
                assert data == b"cd"
            case other:
                pytest.fail(f"unexpected {other!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Buffer lookup
# ─────────────────────────────────────────────────────────────────────────────


class TestErrorBuffer:
    def test_plain_error_has_no_buffer(self) -> None:
        assert error_buffer(ValueError("x")) is None
        assert error_buffer_string(ValueError("x")) == ""
        assert error_buffer(None) is None

    def test_direct(self) -> None:
        assert error_buffer(ResidualError(OSError(), b"abc")) == b"abc"

    def test_through_chain(self) -> None:
        residual = ResidualError(OSError("inner"), b"partial")
        try:
            try:
                raise residual
            except ResidualError as exc:
                raise RuntimeError("outer") from exc
        except RuntimeError as outer:
            assert error_buffer(outer) == b"partial"
            assert error_buffer_string(outer) == "partial"

    def test_buffer_string_decodes(self) -> None:
        assert ResidualError(OSError(), "é".encode()).buffer_string() == "é"
