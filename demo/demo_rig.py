#!/usr/bin/env python3
"""
Reed-Solomon Demo Rig: Status Text → QR-GIF → Decoded Text
Demonstrates erasure recovery when whole QR frames are missed by the camera.
"""

from __future__ import annotations

import sys
from pathlib import Path

import imageio.v3 as iio
import numpy as np
import qrcode
from PIL import Image, ImageDraw, ImageFont

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rscode.coding.decoder import decode
from rscode.coding.encoder import encode
from rscode.coding.errors import ReedSolomonError
from rscode.coding.field import DEFAULT_POLYNOMIAL
from rscode.coding.sim import burst_erasures
from rscode.shared.demo_payloads import generate_terminal_status
from rscode.shared.metrics import CodingMetrics
from rscode.shared.utils import InvalidEncoding, bytes_to_text, interpolation_points


def frame_value(start: int, chunk: bytes) -> str:
    """QR payload for a run of symbols beginning at ``start``."""
    return f"R:{start}|{chunk.hex()}"


def parse_frame_value(value: str) -> tuple[int, bytes]:
    """Inverse of :func:`frame_value`."""
    if not value.startswith("R:"):
        raise ValueError(f"not a symbol frame: {value!r}")
    start, payload_hex = value[2:].split("|", 1)
    return int(start), bytes.fromhex(payload_hex)


class ReedSolomonDemo:
    def __init__(
        self,
        redundancy: int = 24,
        symbols_per_frame: int = 8,
        pol: int = DEFAULT_POLYNOMIAL,
    ):
        self.redundancy = redundancy
        self.symbols_per_frame = symbols_per_frame
        self.pol = pol

    def create_qr_frame(self, value: str, frame_id: int, total_frames: int) -> Image.Image:
        """Create a single QR code frame with metadata."""
        qr = qrcode.QRCode(version=1, box_size=4, border=2)
        qr.add_data(value)
        qr.make(fit=True)

        qr_img = qr.make_image(fill_color="black", back_color="white")
        if qr_img.mode != "RGB":
            qr_img = qr_img.convert("RGB")

        width, height = qr_img.size
        canvas = Image.new("RGB", (width, height + 40), "white")
        canvas.paste(qr_img, (0, 0))

        draw = ImageDraw.Draw(canvas)
        font = ImageFont.load_default()
        draw.text((5, height + 5), f"Frame {frame_id}/{total_frames}", fill="black", font=font)
        return canvas

    def split_frames(self, symbols: bytes) -> list[str]:
        """Pack consecutive symbols into QR frame payloads."""
        step = self.symbols_per_frame
        return [frame_value(i, symbols[i : i + step]) for i in range(0, len(symbols), step)]

    def encode_to_qr_gif(
        self,
        data: bytes,
        output_path: str = "demo_output.gif",
        metrics: CodingMetrics | None = None,
    ) -> tuple[bytes, list[str]]:
        """Encode data and render the codeword as a QR-GIF."""
        print(f"Encoding {len(data)} bytes...")
        points = interpolation_points(len(data) + self.redundancy)
        symbols = encode(data, points, self.pol, metrics=metrics)
        frames = self.split_frames(symbols)
        print(f"Generated {len(symbols)} symbols in {len(frames)} frames")

        images = [
            self.create_qr_frame(value, i, len(frames)) for i, value in enumerate(frames)
        ]
        # imageio wants equally sized arrays; pad every frame to the largest one
        width = max(img.width for img in images)
        height = max(img.height for img in images)
        frame_arrays = []
        for img in images:
            padded = Image.new("RGB", (width, height), "white")
            padded.paste(img, (0, 0))
            frame_arrays.append(np.array(padded))
        iio.imwrite(output_path, frame_arrays, duration=500)  # 500ms per frame
        print(f"Created QR-GIF: {output_path}")
        return bytes(points), frames

    def simulate_camera_capture(self, frames: list[str], loss_rate: float = 0.2) -> dict[int, str]:
        """Simulate a camera missing bursts of frames."""
        print(f"Simulating camera capture with {loss_rate * 100}% burst rate...")
        missed = burst_erasures(len(frames), loss_rate=loss_rate, burst_len=2)
        received = {i: value for i, value in enumerate(frames) if i not in missed}
        print(f"Captured {len(received)}/{len(frames)} frames")
        return received

    def decode_from_frames(
        self,
        received: dict[int, str],
        message_len: int,
        points: bytes,
        metrics: CodingMetrics | None = None,
    ) -> bytes | None:
        """Rebuild the codeword from captured frames, erasing the missed ones."""
        codeword = bytearray(len(points))
        erased = set(range(len(points)))
        for value in received.values():
            start, chunk = parse_frame_value(value)
            codeword[start : start + len(chunk)] = chunk
            erased.difference_update(range(start, start + len(chunk)))

        print(f"Received {len(points) - len(erased)} symbols, need {message_len}")
        try:
            result = decode(bytes(codeword), message_len, points, self.pol, erased, metrics=metrics)
        except ReedSolomonError as exc:
            print(f"Decoding failed - {exc}")
            return None
        print(f"Successfully decoded {len(result)} bytes")
        return result

    def run_demo(self, loss_rate: float = 0.2) -> bool:
        """Run the complete demo."""
        print("=== Reed-Solomon Demo: Status Report Transfer ===\n")

        print("1. Generating status report...")
        payload = generate_terminal_status()
        print(f"Generated report: {len(payload)} bytes\n")

        print("2. Encoding to QR-GIF...")
        metrics = CodingMetrics()
        points, frames = self.encode_to_qr_gif(payload, metrics=metrics)
        print()

        print("3. Simulating camera capture...")
        received = self.simulate_camera_capture(frames, loss_rate=loss_rate)
        print()

        print("4. Decoding received frames...")
        decoded = self.decode_from_frames(received, len(payload), points, metrics=metrics)
        print()

        print("5. Verification...")
        if decoded != payload:
            print("❌ FAILED: Decoded data doesn't match original")
            return False
        try:
            text = bytes_to_text(decoded)
        except InvalidEncoding as exc:
            print(f"❌ FAILED: {exc}")
            return False
        print("✅ SUCCESS: Decoded data matches original!")
        print(text)
        summary = metrics.summary()
        print("Metrics Summary:")
        print(f"  • Symbols encoded: {summary['symbols_encoded']}")
        print(f"  • Average erasures: {summary['average_erasures']:.1f}")
        print(
            f"  • Average decode latency: {summary['average_decode_duration'] * 1000:.2f} ms"
        )
        return True


if __name__ == "__main__":
    demo = ReedSolomonDemo()
    raise SystemExit(0 if demo.run_demo() else 1)
