"""
Metrics collection helpers for Reed-Solomon encoder/decoder instrumentation.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from statistics import fmean
from typing import Dict, List


@dataclass
class CodingMetrics:
    """Track statistics for encode/decode runs."""

    symbols_encoded: int = 0
    encode_calls: int = 0
    erasure_hist: Counter[int] = field(default_factory=Counter)
    decode_durations: List[float] = field(default_factory=list)
    decode_attempts: int = 0
    decode_successes: int = 0
    decode_failures: int = 0
    symbols_used: List[int] = field(default_factory=list)
    symbols_available: List[int] = field(default_factory=list)
    failure_reasons: Counter[str] = field(default_factory=Counter)

    def record_encode(self, symbols: int) -> None:
        """Record one encode call that emitted ``symbols`` symbols."""
        self.encode_calls += 1
        self.symbols_encoded += symbols

    def record_erasures(self, count: int) -> None:
        """Record how many positions were erased ahead of a decode."""
        self.erasure_hist[count] += 1

    def record_decode(
        self,
        duration: float,
        success: bool,
        symbols_used: int,
        total_symbols: int,
    ) -> None:
        """Record a decode attempt with its duration and outcome."""
        self.decode_attempts += 1
        self.decode_durations.append(duration)
        self.symbols_used.append(symbols_used)
        self.symbols_available.append(total_symbols)
        if success:
            self.decode_successes += 1
        else:
            self.decode_failures += 1

    def record_failure(self, reason: str) -> None:
        """Record why a decode attempt failed (e.g. ``singular_system``)."""
        self.failure_reasons[reason] += 1

    def merge(self, other: "CodingMetrics") -> None:
        """Merge another metrics object into this one."""
        self.symbols_encoded += other.symbols_encoded
        self.encode_calls += other.encode_calls
        self.erasure_hist.update(other.erasure_hist)
        self.decode_durations.extend(other.decode_durations)
        self.decode_attempts += other.decode_attempts
        self.decode_successes += other.decode_successes
        self.decode_failures += other.decode_failures
        self.symbols_used.extend(other.symbols_used)
        self.symbols_available.extend(other.symbols_available)
        self.failure_reasons.update(other.failure_reasons)

    def summary(self) -> Dict[str, object]:
        """Return aggregated metrics suitable for printing."""
        total_decodes = sum(self.erasure_hist.values())
        avg_erasures = (
            sum(count * seen for count, seen in self.erasure_hist.items())
            / total_decodes
            if total_decodes
            else 0.0
        )
        avg_duration = fmean(self.decode_durations) if self.decode_durations else 0.0
        success_rate = (
            self.decode_successes / self.decode_attempts
            if self.decode_attempts
            else 0.0
        )
        avg_symbols_used = fmean(self.symbols_used) if self.symbols_used else 0.0

        return {
            "symbols_encoded": self.symbols_encoded,
            "encode_calls": self.encode_calls,
            "erasure_hist": dict(self.erasure_hist),
            "average_erasures": avg_erasures,
            "decode_attempts": self.decode_attempts,
            "decode_success_rate": success_rate,
            "average_decode_duration": avg_duration,
            "average_symbols_used": avg_symbols_used,
            "failure_reasons": dict(self.failure_reasons),
        }


__all__ = ["CodingMetrics"]
