import io
import os

import pytest

from raymaze.linereader import LineReader, read_lines

CONTENT = "NO ./north.xpm\nSO ./south.xpm\n\nF 220,100,0\n111\n1N1\n111"


@pytest.fixture
def content_fd(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text(CONTENT)
    fd = os.open(path, os.O_RDONLY)
    yield fd
    os.close(fd)


@pytest.mark.parametrize("size", [1, 2, 3, 7, 1000])
def test_reads_all_lines_from_fd(content_fd, size):
    lines = list(read_lines(content_fd, size))
    assert "".join(lines) == CONTENT
    assert lines == CONTENT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 64])
def test_reads_from_bytes_object(size):
    lines = list(LineReader(io.BytesIO(CONTENT.encode()), size))
    assert lines == CONTENT.splitlines(keepends=True)


def test_reads_from_text_object():
    lines = list(LineReader(io.StringIO(CONTENT), 5))
    assert lines == CONTENT.splitlines(keepends=True)


def test_every_line_but_last_ends_with_newline():
    lines = list(read_lines(io.BytesIO(CONTENT.encode()), 3))
    assert all(line.endswith("\n") for line in lines[:-1])
    assert not lines[-1].endswith("\n")


def test_empty_input_gives_no_lines():
    reader = LineReader(io.BytesIO(b""), 8)
    assert reader.readline() is None
    assert list(reader) == []


def test_readline_returns_none_after_end():
    reader = LineReader(io.BytesIO(b"only\n"), 2)
    assert reader.readline() == "only\n"
    assert reader.readline() is None
    assert reader.readline() is None


def test_multibyte_split_across_chunks():
    text = "é→x\nñ\n"
    assert list(read_lines(io.BytesIO(text.encode()), 1)) == ["é→x\n", "ñ\n"]


def test_pipe_input():
    read_end, write_end = os.pipe()
    os.write(write_end, b"a\nbb\n")
    os.close(write_end)
    try:
        assert list(read_lines(read_end, 2)) == ["a\n", "bb\n"]
    finally:
        os.close(read_end)


@pytest.mark.parametrize("size", [0, -5])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), size)


def test_negative_fd():
    with pytest.raises(ValueError):
        LineReader(-1, 4)


def test_closed_fd_raises(tmp_path):
    path = tmp_path / "f"
    path.write_text("x\n")
    fd = os.open(path, os.O_RDONLY)
    os.close(fd)
    with pytest.raises(OSError):
        LineReader(fd, 4).readline()