"""
Demo rig checks: frame packing, GIF rendering and decode from captured frames.
"""

from __future__ import annotations

import pytest

pytest.importorskip("qrcode")
pytest.importorskip("PIL")
pytest.importorskip("imageio")
pytest.importorskip("numpy")

from demo.demo_rig import ReedSolomonDemo, frame_value, parse_frame_value  # noqa: E402
from rscode.shared.demo_payloads import generate_terminal_status  # noqa: E402
from rscode.shared.metrics import CodingMetrics  # noqa: E402


def test_frame_value_round_trip():
    assert parse_frame_value(frame_value(16, b"\x00\xab")) == (16, b"\x00\xab")
    with pytest.raises(ValueError):
        parse_frame_value("M:{}")


def test_split_frames_covers_codeword():
    demo = ReedSolomonDemo(symbols_per_frame=4)
    frames = demo.split_frames(bytes(range(10)))
    assert [parse_frame_value(v)[0] for v in frames] == [0, 4, 8]
    assert b"".join(parse_frame_value(v)[1] for v in frames) == bytes(range(10))


def test_missed_frames_are_recovered(tmp_path):
    demo = ReedSolomonDemo(redundancy=24, symbols_per_frame=8)
    payload = generate_terminal_status()
    metrics = CodingMetrics()
    output = tmp_path / "rs.gif"

    points, frames = demo.encode_to_qr_gif(payload, str(output), metrics=metrics)
    assert output.exists()

    # Drop three whole frames, 24 symbols at most
    received = {i: value for i, value in enumerate(frames) if i not in (1, 2, 5)}
    decoded = demo.decode_from_frames(received, len(payload), points, metrics=metrics)
    assert decoded == payload
    assert metrics.decode_successes == 1


def test_too_many_missed_frames_fail_cleanly(tmp_path):
    demo = ReedSolomonDemo(redundancy=8, symbols_per_frame=8)
    payload = generate_terminal_status()
    points, frames = demo.encode_to_qr_gif(payload, str(tmp_path / "rs.gif"))

    received = {i: value for i, value in enumerate(frames) if i not in (0, 3)}
    assert demo.decode_from_frames(received, len(payload), points) is None
