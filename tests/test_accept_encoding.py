import pytest

from reqopts.accept_encoding import AcceptEncoding, AcceptEncodingMethod


def test_method_renders_its_name():
    assert str(AcceptEncoding([AcceptEncodingMethod.GZIP])) == "gzip"


def test_strings_and_methods_collapse_to_one_entry():
    assert str(AcceptEncoding([AcceptEncodingMethod.GZIP, "gzip"])) == "gzip"


def test_several_methods_are_joined():
    encoding = AcceptEncoding([AcceptEncodingMethod.DEFLATE, AcceptEncodingMethod.GZIP, "br"])
    assert set(str(encoding).split(", ")) == {"deflate", "gzip", "br"}


def test_empty_is_falsy():
    assert not AcceptEncoding()
    assert bool(AcceptEncoding(["identity"])) is True


def test_disabled_alone():
    assert AcceptEncoding([AcceptEncodingMethod.DISABLED]).disabled() is True
    assert AcceptEncoding(["disabled"]).disabled() is True


def test_not_disabled():
    assert AcceptEncoding([AcceptEncodingMethod.ZLIB]).disabled() is False
    assert AcceptEncoding().disabled() is False


def test_disabled_with_others_raises():
    encoding = AcceptEncoding([AcceptEncodingMethod.DISABLED, AcceptEncodingMethod.GZIP])
    with pytest.raises(ValueError, match="disabled"):
        encoding.disabled()


@pytest.mark.parametrize(
    "method, expected",
    [
        (AcceptEncodingMethod.IDENTITY, "identity"),
        (AcceptEncodingMethod.DEFLATE, "deflate"),
        (AcceptEncodingMethod.ZLIB, "zlib"),
        (AcceptEncodingMethod.GZIP, "gzip"),
        (AcceptEncodingMethod.DISABLED, "disabled"),
    ],
)
def test_each_method_renders_fixed_name(method, expected):
    assert str(AcceptEncoding([method])) == expected