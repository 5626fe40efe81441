"""Unit tests for content serialization."""

import io

import pytest

from concat.content_counter import ContentCounter
from concat.exceptions import FileReadError
from concat.output_strategies import XMLOutputStrategy
from concat.serializer import ContentSerializer, read_content, serialize
from concat.types import FileEntry


@pytest.fixture
def files(tmp_path):
    first = tmp_path / "first.rs"
    first.write_text("fn main() {}\n")
    second = tmp_path / "second.txt"
    second.write_text("a < b & c")
    return [FileEntry(str(first)), FileEntry(str(second))]


def render(entries, tree_lines, plain_text):
    buffer = io.StringIO()
    serialize(entries, tree_lines, plain_text, buffer)
    return buffer.getvalue()


def test_plain_text_output(files):
    assert render(files, None, True) == "fn main() {}\n\na < b & c\n"


def test_plain_text_output_with_tree(files):
    output = render(files, ["Directory tree:", "first.rs"], True)
    assert output == "fn main() {}\n\na < b & c\nDirectory tree:\nfirst.rs\n"


def test_xml_output(files):
    first, second = files
    expected = (
        "<files>\n"
        f'<file path="{first.path}"><![CDATA[fn main() {{}}\n]]></file>\n'
        f'<file path="{second.path}"><![CDATA[a &lt; b &amp; c]]></file>\n'
        "</files>\n"
    )
    assert render(files, None, False) == expected


def test_xml_output_with_tree(files):
    output = render(files[:1], ["Directory tree:", "first.rs"], False)
    assert output.endswith("]]></file>\n<tree>\nDirectory tree:\nfirst.rs\n\n</tree>\n</files>\n")


def test_empty_selection():
    assert render([], None, False) == "<files>\n</files>\n"
    assert render([], None, True) == ""
    assert render([], ["Directory tree:"], True) == "Directory tree:\n"


def test_line_endings_preserved(tmp_path):
    path = tmp_path / "windows.txt"
    path.write_bytes(b"one\r\ntwo\rthree\n")

    assert read_content(FileEntry(str(path))) == "one\r\ntwo\rthree\n"
    assert render([FileEntry(str(path))], None, True) == "one\r\ntwo\rthree\n\n"


def test_non_utf8_file_raises(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")

    with pytest.raises(FileReadError) as exc_info:
        read_content(FileEntry(str(path)))

    assert exc_info.value.file_path == str(path)
    assert "UTF-8" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileReadError):
        read_content(FileEntry(str(tmp_path / "gone.txt")))


def test_read_error_stops_output(files, tmp_path):
    bad = tmp_path / "bad.bin"
    bad.write_bytes(b"\xff\xfe")
    buffer = io.StringIO()

    with pytest.raises(FileReadError):
        serialize([files[0], FileEntry(str(bad)), files[1]], None, False, buffer)

    output = buffer.getvalue()
    assert "fn main()" in output
    assert "a &lt; b" not in output
    assert not output.endswith("</files>\n")


def test_serializer_updates_counter(files):
    counter = ContentCounter()
    ContentSerializer(XMLOutputStrategy(), counter=counter).write(io.StringIO(), files)

    assert counter.file_count == 2
    assert counter.line_count == 1
    assert counter.character_count == len("fn main() {}\n") + len("a < b & c")


def test_unicode_content_round_trips(tmp_path):
    path = tmp_path / "unicode.txt"
    path.write_text("héllo wörld ✓\n", encoding="utf-8")
    assert render([FileEntry(str(path))], None, True) == "héllo wörld ✓\n\n"
