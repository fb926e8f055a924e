from __future__ import annotations

import base64
import string
import zlib

import pytest
from hypothesis import given, strategies as st

from statpipe.codec import decode, encode, stringify
from statpipe.errors import DecodeError


@given(st.text())
def test_round_trip_any_text(s):
    assert decode(encode(s)) == s


@pytest.mark.parametrize(
    "s",
    [
        "",
        "14.0",
        "\x00\x01\x02\x7f\xff",
        "ünïcödé ✓ 𝔘",
        "\ud800 lone surrogate",
    ],
)
def test_round_trip_edge_strings(s):
    assert decode(encode(s)) == s


def test_encoded_form_is_printable_ascii():
    enc = encode("\x00\x1b[31m" * 20)
    assert enc.isascii()
    assert set(enc) <= set(string.ascii_letters + string.digits + "+/=")


def test_encoding_is_deterministic():
    assert encode("2358.6666666666665") == encode("2358.6666666666665")


def test_level_does_not_change_decoded_value():
    s = "1.632993161855452" * 10
    assert decode(encode(s, level=0)) == s
    assert decode(encode(s, level=1)) == s


def test_encode_rejects_non_text():
    with pytest.raises(TypeError):
        encode(b"bytes")  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "bad",
    [
        "not base64!!",
        "é",
        base64.b64encode(b"plain, not zlib").decode("ascii"),
        base64.b64encode(zlib.compress(b"\xff\xfe")).decode("ascii"),
        encode("14.0")[:-4],
    ],
)
def test_decode_malformed_raises_decode_error(bad):
    with pytest.raises(DecodeError) as ei:
        decode(bad)
    assert ei.value.code == "DECODE"


def test_decode_non_str_raises_decode_error():
    with pytest.raises(DecodeError):
        decode(None)  # type: ignore[arg-type]


def test_stringify_is_shortest_round_trip_repr():
    assert stringify(14.0) == "14.0"
    assert stringify(14152 / 6) == "2358.6666666666665"
    assert float(stringify(0.1 + 0.2)) == 0.1 + 0.2
