from __future__ import annotations

import pytest

from stepnhash import hash_code


@pytest.mark.parametrize(
    "data, expected",
    [
        ("fghfgh@ggg.ggf", 1997399150),
        ("yakof12530@satedly.com", 1124795257),
        ("a", 726),
        ("", 17),
        # long enough to wrap the 64-bit accumulator many times
        ("the quick brown fox jumps over the lazy dog", 1900671578),
    ],
)
def test_hash_code_matches_reference_values(data: str, expected: int) -> None:
    assert hash_code(data) == expected


def test_hash_code_accepts_bytes_and_str_alike() -> None:
    assert hash_code(b"fghfgh@ggg.ggf") == hash_code("fghfgh@ggg.ggf")
    assert hash_code(bytearray(b"fghfgh@ggg.ggf")) == 1997399150


def test_hash_code_stays_within_31_bits() -> None:
    samples = [bytes([b]) * n for b in (0, 1, 127, 255) for n in (1, 7, 64, 500)]
    samples.append(bytes(range(256)))

    for data in samples:
        assert 0 <= hash_code(data) <= 0x7FFFFFFF


def test_hash_code_encodes_text_as_utf8() -> None:
    assert hash_code("é") == hash_code("é".encode("utf-8"))
    assert hash_code("é") != hash_code("é".encode("latin-1"))
