from __future__ import annotations

import pytest

from rcli.errors import FormatError
from rcli.utils import b64_decode, b64_decode_standard, b64_encode, get_reader


def test_b64_encode_is_urlsafe_without_padding():
    data = b"\xfb\xff\xfe"
    assert b64_encode(data) == "-__-"
    assert b64_encode(b"a") == "YQ"


def test_b64_decode_tolerates_padding_and_whitespace():
    assert b64_decode("YQ") == b"a"
    assert b64_decode("YQ==") == b"a"
    assert b64_decode(b" YQ\n") == b"a"
    assert b64_decode("-__-") == b"\xfb\xff\xfe"


@pytest.mark.parametrize("text", ["Y", "a+b/", "abc$", "YQ===", "é"])
def test_b64_decode_rejects_malformed_input(text: str):
    with pytest.raises(FormatError):
        b64_decode(text)


def test_b64_decode_standard_validates():
    assert b64_decode_standard("aGk=\n") == b"hi"
    with pytest.raises(FormatError):
        b64_decode_standard("aGk")


def test_get_reader_closes_files(tmp_path):
    path = tmp_path / "in.bin"
    path.write_bytes(b"abc")
    with get_reader(str(path)) as reader:
        assert reader.read() == b"abc"
    assert reader.closed
