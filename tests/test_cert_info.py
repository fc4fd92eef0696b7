import pytest

from reqopts.cert_info import CertInfo


def test_initial_entries_in_order():
    info = CertInfo(["Subject:CN=localhost", "Issuer:CN=localhost"])
    assert list(info) == ["Subject:CN=localhost", "Issuer:CN=localhost"]
    assert len(info) == 2


def test_empty_by_default():
    info = CertInfo()
    assert len(info) == 0
    assert list(info) == []


def test_index_read_and_write():
    info = CertInfo(["first", "second"])
    assert info[1] == "second"
    info[0] = "replaced"
    assert info[0] == "replaced"
    assert list(info) == ["replaced", "second"]


def test_append_and_pop():
    info = CertInfo()
    info.append("one")
    info.append("two")
    assert len(info) == 2
    assert info.pop() == "two"
    assert list(info) == ["one"]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        CertInfo().pop()


def test_equality():
    assert CertInfo(["a"]) == CertInfo(["a"])
    assert not CertInfo(["a"]) == CertInfo(["b"])