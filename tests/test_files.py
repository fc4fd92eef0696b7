from pathlib import Path

import pytest

from reqopts.files import Body, File, Files


def test_files_from_paths():
    files = Files(["a.txt", Path("b.txt")])
    assert list(files) == [File("a.txt"), File("b.txt")]
    assert len(files) == 2


def test_file_normalises_path_like():
    assert File(Path("dir") / "x.bin").filepath == str(Path("dir") / "x.bin")


def test_files_append_pop_and_index():
    files = Files()
    files.append(File("one"))
    files.append(File("two"))
    assert files[0] == File("one")
    assert files.pop() == File("two")
    assert list(files) == [File("one")]


def test_files_equality():
    assert Files(["a"]) == Files([File("a")])
    assert not Files(["a"]) == Files(["b"])


def test_body_from_text_round_trip():
    text = "{'foo': 'bar'}"
    body = Body(text)
    assert str(body) == text
    assert bytes(body) == text.encode()
    assert len(body) == len(text)


def test_body_from_bytes_round_trip():
    raw = bytes(range(256))
    body = Body(raw)
    assert bytes(body) == raw
    assert bytes(Body(str(body))) == raw


def test_body_empty_by_default():
    assert bytes(Body()) == b""
    assert len(Body()) == 0


def test_body_from_file(tmp_path):
    path = tmp_path / "payload.bin"
    content = b"\x00binary\r\ncontent\xff"
    path.write_bytes(content)
    assert bytes(Body(File(path))) == content
    assert Body.from_file(path) == Body(content)
    assert Body.from_file(str(path)) == Body(content)


def test_body_missing_file(tmp_path):
    with pytest.raises(ValueError, match="Can't open the file for HTTP request body!"):
        Body(File(tmp_path / "missing.bin"))
    with pytest.raises(ValueError):
        Body.from_file(tmp_path / "missing.bin")