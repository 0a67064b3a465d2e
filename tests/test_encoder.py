"""
Tests for the polynomial-evaluation encoder.
"""
import pytest
from rscode.coding.encoder import encode, evaluate
from rscode.coding.field import multiply
from rscode.shared.metrics import CodingMetrics

POL = 0x1D


def test_evaluate_constant_polynomial():
    for x in (0, 1, 2, 0x80, 0xFF):
        assert evaluate([0x33], x, POL) == 0x33


def test_evaluate_at_zero_and_one():
    message = [0x48, 0x49, 0x10, 0x07]
    assert evaluate(message, 0, POL) == 0x48
    assert evaluate(message, 1, POL) == 0x48 ^ 0x49 ^ 0x10 ^ 0x07


def test_evaluate_matches_expanded_sum():
    message = [5, 9, 200]
    x = 0x35
    x2 = multiply(x, x, POL)
    expected = 5 ^ multiply(9, x, POL) ^ multiply(200, x2, POL)
    assert evaluate(message, x, POL) == expected


def test_encode_emits_one_symbol_per_point_in_order():
    message = b"HI"
    points = [4, 0, 1]
    symbols = encode(message, points, POL)
    assert isinstance(symbols, bytes)
    assert list(symbols) == [evaluate(message, x, POL) for x in points]
    assert symbols[1] == ord("H")


def test_encode_records_metrics():
    metrics = CodingMetrics()
    encode(b"abc", range(10), POL, metrics=metrics)
    assert metrics.encode_calls == 1
    assert metrics.symbols_encoded == 10


@pytest.mark.parametrize("message, points", [
    (b"", [0, 1]),                       # empty message
    (b"abc", [0, 1]),                    # fewer points than symbols
    (bytes(256), list(range(256))),      # message longer than 255
    (b"a", list(range(256)) + [0]),      # more than 256 points
    ([1, 300], [0, 1]),                  # value outside the field
    (b"ab", [0, 256]),                   # point outside the field
])
def test_encode_rejects_bad_input(message, points):
    with pytest.raises(ValueError):
        encode(message, points, POL)


def test_encode_rejects_bad_polynomial():
    with pytest.raises(ValueError):
        encode(b"ab", [0, 1], 0x11D)
