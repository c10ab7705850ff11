from __future__ import annotations

from typing import Iterable

from .constants import BECH32_ALPHABET, BECH32_CONST, CHECKSUM_LENGTH, GENERATORS, LABEL_CHAR_MAX, LABEL_CHAR_MIN
from .exceptions import LabelCharError


def polymod_step(chk: int, value: int) -> int:
    """Fold one 5-bit value into the 30-bit checksum state (BIP173 "Checksum")."""
    b = chk >> 25
    chk = ((chk & 0x1FFFFFF) << 5) ^ value
    for i in range(5):
        if (b >> i) & 1:
            chk ^= GENERATORS[i]
    return chk


def polymod(values: Iterable[int], chk: int = 1) -> int:
    for v in values:
        chk = polymod_step(chk, v)
    return chk


def label_checksum(label: str) -> int:
    """Validate ``label`` and return the checksum state seeded with it.

    High bits of every character go in first, then a zero separator, then the
    low 5 bits of every character.
    """
    chk = 1
    for i, c in enumerate(label):
        code = ord(c)
        if code < LABEL_CHAR_MIN or code > LABEL_CHAR_MAX:
            raise LabelCharError(c, i)
        chk = polymod_step(chk, code >> 5)
    chk = polymod_step(chk, 0)
    for c in label:
        chk = polymod_step(chk, ord(c) & 31)
    return chk


def checksum_symbols(chk: int) -> list[int]:
    """Finish a state that has consumed label and data into the 6 checksum values."""
    chk = polymod([0] * CHECKSUM_LENGTH, chk) ^ BECH32_CONST
    return [(chk >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def checksum_chars(chk: int) -> str:
    return "".join(BECH32_ALPHABET[v] for v in checksum_symbols(chk))
