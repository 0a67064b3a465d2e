import pytest
from rscode.coding.errors import ReedSolomonError
from rscode.shared.demo_payloads import generate_terminal_status
from rscode.shared.utils import (
    InvalidEncoding,
    bytes_to_text,
    interpolation_points,
    parse_bit_string,
    parse_polynomial,
    text_to_bytes,
)


def test_text_round_trip():
    assert bytes_to_text(text_to_bytes("héllo")) == "héllo"


def test_invalid_utf8_raises_invalid_encoding():
    with pytest.raises(InvalidEncoding) as excinfo:
        bytes_to_text(b"\xff\xfe")
    assert not isinstance(excinfo.value, ReedSolomonError)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("bits, expected", [
    ("01001101", 0x4D),
    ("0b0100_1101", 0x4D),
    ("11101", 0x1D),
    ("0", 0),
])
def test_parse_bit_string(bits, expected):
    assert parse_bit_string(bits) == expected


@pytest.mark.parametrize("bits", ["", "0b", "012", "111111111", "0x1D"])
def test_parse_bit_string_rejects_garbage(bits):
    with pytest.raises(ValueError):
        parse_bit_string(bits)


@pytest.mark.parametrize("text, expected", [
    ("0x4D", 0x4D),
    ("77", 77),
    ("01001101", 0x4D),
    ("0b00011101", 0x1D),
])
def test_parse_polynomial(text, expected):
    assert parse_polynomial(text) == expected


@pytest.mark.parametrize("text", ["0x11D", "-1", "poly"])
def test_parse_polynomial_rejects(text):
    with pytest.raises(ValueError):
        parse_polynomial(text)


def test_interpolation_points():
    assert interpolation_points(5) == b"\x00\x01\x02\x03\x04"
    assert interpolation_points(256) == bytes(range(256))
    with pytest.raises(ValueError):
        interpolation_points(0)
    with pytest.raises(ValueError):
        interpolation_points(257)


def test_terminal_status_fits_one_message():
    payload = generate_terminal_status()
    assert 0 < len(payload) <= 255
    assert payload == generate_terminal_status()


def test_terminal_status_rejects_oversized_report():
    with pytest.raises(ValueError):
        generate_terminal_status([{"note": "x" * 200}])
