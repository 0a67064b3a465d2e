"""
Utility functions for text payloads, reduction polynomials and point sets.
"""

from ..coding.field import FIELD_SIZE


class InvalidEncoding(ValueError):
    """Recovered bytes are not valid UTF-8 text."""


def text_to_bytes(text: str) -> bytes:
    """Encode text as UTF-8 message bytes."""
    return text.encode("utf-8")


def bytes_to_text(data: bytes) -> str:
    """Decode recovered message bytes as UTF-8."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(f"recovered bytes are not valid UTF-8: {exc}") from exc


def parse_bit_string(bits: str) -> int:
    """Parse a bit string such as ``"0b0100_1101"`` into a byte."""
    digits = bits.strip().lower()
    if digits.startswith("0b"):
        digits = digits[2:]
    digits = digits.replace("_", "")
    if not digits or len(digits) > 8 or set(digits) - {"0", "1"}:
        raise ValueError(f"not an 8-bit bit string: {bits!r}")
    value = 0
    for c in digits:
        value = (value << 1) | (c == "1")
    return value


def parse_polynomial(text: str) -> int:
    """
    Parse a reduction polynomial given as a bit string or an integer literal.

    Strings of two or more 0/1 digits are read as bits (``"01001101"``);
    anything else goes through ``int(text, 0)`` (``"0x4D"``, ``"77"``).
    """
    stripped = text.strip()
    if stripped and set(stripped.replace("_", "")) <= {"0", "1"} and len(stripped) > 1:
        value = parse_bit_string(stripped)
    else:
        value = int(stripped, 0)
    if not 0 <= value < FIELD_SIZE:
        raise ValueError(f"reduction polynomial must fit in a byte, got {text!r}")
    return value


def interpolation_points(count: int) -> bytes:
    """Return the field elements ``0..count-1`` as interpolation points."""
    if not 1 <= count <= FIELD_SIZE:
        raise ValueError(f"between 1 and {FIELD_SIZE} points fit in GF(2^8), got {count}")
    return bytes(range(count))
