from __future__ import annotations

from ..constants import BECH32_ALPHABET

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_LOWER = str.maketrans(_ASCII_UPPER, _ASCII_LOWER)
_TO_UPPER = str.maketrans(_ASCII_LOWER, _ASCII_UPPER)

# index is a code point in 0..255, None marks "not in alphabet"
REVERSE_TABLE: tuple[int | None, ...] = tuple(
    BECH32_ALPHABET.index(chr(i)) if chr(i) in BECH32_ALPHABET else None for i in range(256)
)


def symbol_value(char: str) -> int | None:
    code = ord(char)
    if code > 0xFF:
        return None
    return REVERSE_TABLE[code]


def ascii_lower(s: str) -> str:
    return s.translate(_TO_LOWER)


def ascii_upper(s: str) -> str:
    return s.translate(_TO_UPPER)


def is_uniform_case(s: str) -> bool:
    return s == ascii_lower(s) or s == ascii_upper(s)
