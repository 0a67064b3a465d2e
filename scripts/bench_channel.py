#!/usr/bin/env python3
"""
Channel benchmark for the Reed-Solomon erasure codec.

Runs Monte Carlo trials across a redundancy grid and prints success rate,
the share of trials that ran out of symbols, and decode latency.
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Ensure project root import
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from rscode.coding.decoder import decode
from rscode.coding.encoder import MAX_MESSAGE_LEN, encode
from rscode.coding.errors import ReedSolomonError
from rscode.coding.field import DEFAULT_POLYNOMIAL, is_field_polynomial
from rscode.coding.sim import burst_erasures, gilbert_elliott_erasures
from rscode.shared.metrics import CodingMetrics
from rscode.shared.utils import interpolation_points, parse_polynomial


def make_payload(nbytes: int, seed: int | None = None) -> bytes:
    rnd = random.Random(seed)
    return bytes(rnd.getrandbits(8) for _ in range(nbytes))


def run_trial(
    message_len: int,
    redundancy: int,
    pol: int,
    channel: str,
    channel_kwargs: dict,
    metrics: CodingMetrics,
) -> bool:
    message = make_payload(message_len, seed=random.randrange(1 << 30))
    points = interpolation_points(message_len + redundancy)
    symbols = encode(message, points, pol, metrics=metrics)

    if channel == "burst":
        erased = burst_erasures(len(symbols), **channel_kwargs)
    elif channel == "ge":
        erased = gilbert_elliott_erasures(len(symbols), **channel_kwargs)
    else:
        raise ValueError(f"Unknown channel: {channel}")

    try:
        recovered = decode(symbols, message_len, points, pol, erased, metrics=metrics)
    except ReedSolomonError:
        return False
    return recovered == message


def main() -> int:
    ap = argparse.ArgumentParser(description="Reed-Solomon erasure channel benchmark")
    ap.add_argument("--length", type=int, default=32, help="message symbols")
    ap.add_argument(
        "--redundancy", type=str, default="0,4,8,16", help="comma list of extra symbols"
    )
    ap.add_argument(
        "--pol",
        type=parse_polynomial,
        default=DEFAULT_POLYNOMIAL,
        help="reduction polynomial without the x^8 term (bits or int literal)",
    )
    ap.add_argument("--trials", type=int, default=50, help="trials per config")
    ap.add_argument("--seed", type=int, default=None, help="seed for reproducible runs")
    ap.add_argument("--channel", choices=["burst", "ge"], default="ge")
    ap.add_argument("--ge", type=str, default="p=0.05,r=0.25,good=0.02,bad=0.8")
    ap.add_argument(
        "--burst", type=str, default="loss=0.05,burst=3", help="loss and burst len"
    )
    args = ap.parse_args()

    if not 1 <= args.length <= MAX_MESSAGE_LEN:
        ap.error(f"--length must be in [1, {MAX_MESSAGE_LEN}]")
    if not is_field_polynomial(args.pol):
        ap.error(f"x^8 + 0x{args.pol:02X} is reducible; pick an irreducible polynomial")
    redundancies = [int(x) for x in args.redundancy.split(",")]
    for extra in redundancies:
        if extra < 0 or args.length + extra > 256:
            ap.error(f"redundancy {extra} needs more than 256 interpolation points")

    if args.seed is not None:
        random.seed(args.seed)

    if args.channel == "ge":
        kv = dict(x.split("=") for x in args.ge.split(","))
        channel_kwargs = dict(
            p=float(kv.get("p", 0.05)),
            r=float(kv.get("r", 0.25)),
            good_loss=float(kv.get("good", 0.02)),
            bad_loss=float(kv.get("bad", 0.8)),
        )
    else:
        kv = dict(x.split("=") for x in args.burst.split(","))
        channel_kwargs = dict(
            loss_rate=float(kv.get("loss", 0.05)),
            burst_len=int(kv.get("burst", 3)),
        )

    print(
        f"Length={args.length} pol=0x{args.pol:02X} channel={args.channel} params={channel_kwargs} trials={args.trials}"
    )
    for extra in redundancies:
        metrics = CodingMetrics()
        successes = 0
        for _ in range(args.trials):
            ok = run_trial(
                message_len=args.length,
                redundancy=extra,
                pol=args.pol,
                channel=args.channel,
                channel_kwargs=channel_kwargs,
                metrics=metrics,
            )
            successes += 1 if ok else 0

        summary = metrics.summary()
        rate = successes / args.trials
        starved = summary["failure_reasons"].get("insufficient_symbols", 0) / args.trials
        avg_latency_ms = summary["average_decode_duration"] * 1000.0
        print(
            f"redundancy={extra:3d} -> success={rate * 100:5.1f}% starved={starved * 100:5.1f}% erased≈{summary['average_erasures']:.1f} lat≈{avg_latency_ms:.2f}ms"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
