"""
Simulation flow tests ensuring the encode/erase/decode path survives losses.

These take the sample status report through the encoder, knock out
contiguous windows of symbols the way missed QR frames would, and verify
that the decoder reconstructs the original text exactly.
"""

import random

from rscode import InsufficientSymbols, bytes_to_text, decode, encode, text_to_bytes
from rscode.coding.sim import burst_erasures
from rscode.shared.demo_payloads import generate_terminal_status
from rscode.shared.metrics import CodingMetrics
from rscode.shared.utils import interpolation_points


def _burst_positions(bursts):
    """
    Expand (start, length) windows into a set of erased positions.

    Parameters
    ----------
    bursts:
        Iterable of (start, length) tuples. Positions refer to symbol order.
    """
    erased = set()
    for start, length in bursts:
        erased.update(range(start, start + length))
    return erased


def test_reference_text_round_trip():
    """Points 0..N+9 under 0x4D, five known erasures."""
    text = "TEST String for Encoding and decoding"
    message = text_to_bytes(text)
    points = interpolation_points(len(message) + 10)

    symbols = encode(message, points, 0x4D)
    recovered = decode(symbols, len(message), points, 0x4D, {3, 7, 8, 9, 10})

    assert bytes_to_text(recovered) == text


def test_status_report_survives_burst_windows():
    """Ensure Encode → Erase → Decode survives burst loss."""
    payload = generate_terminal_status()
    redundancy = 24
    points = interpolation_points(len(payload) + redundancy)
    metrics = CodingMetrics()

    symbols = encode(payload, points, 0x1D, metrics=metrics)

    # Three bursts totalling 21 of the 24 spare symbols.
    erased = _burst_positions([(2, 3), (40, 10), (100, 8)])
    assert len(erased) <= redundancy

    recovered = decode(symbols, len(payload), points, 0x1D, erased, metrics=metrics)
    assert recovered == payload

    summary = metrics.summary()
    assert summary["decode_attempts"] == 1
    assert summary["decode_success_rate"] == 1.0
    assert summary["symbols_encoded"] == len(points)
    assert summary["average_symbols_used"] == len(payload)


def test_simulated_channel_success_matches_survivor_count():
    """Decoding succeeds exactly when the channel leaves enough symbols."""
    rng = random.Random(1337)
    payload = generate_terminal_status()
    points = interpolation_points(len(payload) + 16)
    symbols = encode(payload, points, 0x4D)
    metrics = CodingMetrics()

    for _ in range(30):
        erased = burst_erasures(len(points), loss_rate=0.03, burst_len=4, rng=rng)
        survivors = len(points) - len(erased)
        try:
            recovered = decode(symbols, len(payload), points, 0x4D, erased, metrics=metrics)
        except InsufficientSymbols:
            assert survivors < len(payload)
        else:
            assert survivors >= len(payload)
            assert recovered == payload

    assert metrics.decode_attempts == 30
    assert metrics.decode_successes + metrics.failure_reasons["insufficient_symbols"] == 30
