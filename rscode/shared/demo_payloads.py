"""
Deterministic payload generators shared across tests, the bench and the demo.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from ..coding.encoder import MAX_MESSAGE_LEN


def _format_status_entry(entry: Mapping[str, object]) -> str:
    """Render a single status entry as comma-delimited key=value pairs."""
    return ",".join(f"{key}={value}" for key, value in entry.items())


def generate_terminal_status(
    additional_entries: Iterable[Mapping[str, object]] | None = None,
) -> bytes:
    """
    Return a short synthetic terminal status report that fits one codeword.

    Parameters
    ----------
    additional_entries:
        Optional iterable of extra status dictionaries appended to the default
        set. The combined report must stay within one message (255 bytes).
    """

    default_entries: Sequence[Mapping[str, object]] = (
        {"terminal": "RS-POS-01", "event": "sale_ok", "amount": "23.75"},
        {"terminal": "RS-POS-02", "event": "sale_declined", "reason": "issuer"},
        {"gateway": "edge-1", "event": "burst_monitor", "drops": 0},
    )

    entries: list[Mapping[str, object]] = list(default_entries)
    if additional_entries:
        entries.extend(additional_entries)

    payload = "\n".join(_format_status_entry(entry) for entry in entries).encode("utf-8")
    if len(payload) > MAX_MESSAGE_LEN:
        raise ValueError(
            f"status report is {len(payload)} bytes, one message holds {MAX_MESSAGE_LEN}"
        )
    return payload


__all__ = ["generate_terminal_status"]
