"""Tests for keyboard input."""

import os

import pytest

from terminal_snake.terminal import Key, KeyReader, decode_key

pytestmark = pytest.mark.skipif(
    os.name == "nt", reason="pipe-based input needs select on POSIX",
)


class TestDecodeKey:
    def test_arrows(self):
        assert decode_key("\x1b[A") is Key.UP
        assert decode_key("\x1b[B") is Key.DOWN
        assert decode_key("\x1b[C") is Key.RIGHT
        assert decode_key("\x1b[D") is Key.LEFT

    def test_other(self):
        assert decode_key("x") is Key.OTHER
        assert decode_key("H") is Key.OTHER
        assert decode_key("\x1b") is Key.OTHER


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    stream = os.fdopen(read_fd, "r")
    yield stream, write_fd
    stream.close()
    os.close(write_fd)


class TestKeyReader:
    def test_nothing_pending(self, pipe):
        stream, _ = pipe
        with KeyReader(stream) as keys:
            assert not keys.key_available()

    def test_reads_arrow(self, pipe):
        stream, write_fd = pipe
        os.write(write_fd, b"\x1b[A")
        with KeyReader(stream) as keys:
            assert keys.key_available()
            assert keys.read_key() is Key.UP
            assert not keys.key_available()

    def test_reads_one_key_at_a_time(self, pipe):
        stream, write_fd = pipe
        os.write(write_fd, b"\x1b[Bq\x1b[C")
        keys = KeyReader(stream)
        assert keys.read_key() is Key.DOWN
        assert keys.read_key() is Key.OTHER
        assert keys.read_key() is Key.RIGHT

    def test_lone_escape(self, pipe):
        stream, write_fd = pipe
        os.write(write_fd, b"\x1b")
        keys = KeyReader(stream)
        assert keys.read_key() is Key.OTHER
        assert not keys.key_available()
