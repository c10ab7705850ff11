from __future__ import annotations

from typing import NamedTuple

from .checksum import checksum_chars, label_checksum, polymod_step
from .constants import BECH32_ALPHABET, BECH32_CONST, CHECKSUM_LENGTH, MAX_LENGTH, SEPARATOR
from .exceptions import (
    Bech32Error,
    ChecksumError,
    ChecksumIncompleteError,
    DataCharError,
    MixedCaseError,
    NoLabelError,
    ShortBufferError,
    StringTooLongError,
)
from .utils.bits import ByteAccumulator, bits_to_symbols
from .utils.charset import ascii_lower, is_uniform_case, symbol_value


class Decoded(NamedTuple):
    label: str
    payload: bytes
    padding: int

    @property
    def bit_length(self) -> int:
        return len(self.payload) * 8 - self.padding


def decode(s: str | bytes) -> Decoded:
    """Parse a Bech32 string into its label, payload and padding.

    ``padding`` is the number of zero bits appended to the last payload byte,
    in the range 0 to 7. Case is folded; the returned label is lowercase.
    """
    # length limit counts encoded bytes, not code points
    if isinstance(s, (bytes, bytearray)):
        size = len(s)
        s = bytes(s).decode("latin-1")
    else:
        size = len(s.encode("utf-8", "surrogatepass"))
    if size > MAX_LENGTH:
        raise StringTooLongError(size, MAX_LENGTH)

    if not is_uniform_case(s):
        raise MixedCaseError()
    s = ascii_lower(s)

    pos = s.rfind(SEPARATOR)
    if pos <= 0:
        raise NoLabelError()
    if len(s) - pos - 1 < CHECKSUM_LENGTH:
        raise ChecksumIncompleteError()

    label = s[:pos]
    chk = label_checksum(label)

    checksum_start = len(s) - CHECKSUM_LENGTH
    acc = ByteAccumulator()
    for i in range(pos + 1, len(s)):
        v = symbol_value(s[i])
        if v is None:
            raise DataCharError(s[i], i)
        chk = polymod_step(chk, v)
        if i < checksum_start:
            acc.push(v)

    if chk != BECH32_CONST:
        raise ChecksumError()

    payload, padding = acc.finish()
    return Decoded(label, payload, padding)


def encode(label: str, payload: bytes, bit_n: int | None = None) -> str:
    """Format ``bit_n`` bits of ``payload`` (all of it when None) as a Bech32 string.

    Bits are read big-endian. Up to four zero bits are appended to fill the
    last 5-bit symbol.
    """
    payload = bytes(payload)
    available = len(payload) * 8
    if bit_n is None:
        bit_n = available
    bit_n = max(bit_n, 0)
    if bit_n > available:
        raise ShortBufferError(bit_n, available)

    length = len(label) + len(SEPARATOR) + (bit_n + 4) // 5 + CHECKSUM_LENGTH
    if length > MAX_LENGTH:
        raise StringTooLongError(length, MAX_LENGTH)
    if not label:
        raise NoLabelError()

    label = ascii_lower(label)
    chk = label_checksum(label)

    out = [label, SEPARATOR]
    for v in bits_to_symbols(payload, bit_n):
        chk = polymod_step(chk, v)
        out.append(BECH32_ALPHABET[v])
    out.append(checksum_chars(chk))
    return "".join(out)


def verify(s: str | bytes) -> bool:
    try:
        decode(s)
    except Bech32Error:
        return False
    return True
