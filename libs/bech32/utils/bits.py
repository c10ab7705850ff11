from __future__ import annotations

from typing import Iterator


def bits_to_symbols(payload: bytes, bit_n: int) -> Iterator[int]:
    """Yield the first ``bit_n`` bits of ``payload`` as 5-bit values, MSB first.

    A trailing group shorter than 5 bits is left-justified and zero-filled.
    """
    acc = 0
    bits = 0
    pending = bit_n
    for byte in payload:
        if pending <= 0:
            break
        take = min(8, pending)
        acc = (acc << take) | (byte >> (8 - take))
        bits += take
        pending -= take
        while bits >= 5:
            bits -= 5
            yield (acc >> bits) & 31
        acc &= (1 << bits) - 1
    if bits:
        yield (acc << (5 - bits)) & 31


class ByteAccumulator:
    """Collects 5-bit values and packs them into bytes, MSB first."""

    __slots__ = ("_acc", "_bits", "_out")

    def __init__(self) -> None:
        self._acc = 0
        self._bits = 0
        self._out = bytearray()

    def push(self, value: int) -> None:
        self._acc = (self._acc << 5) | value
        self._bits += 5
        if self._bits >= 8:
            self._bits -= 8
            self._out.append(self._acc >> self._bits)
            self._acc &= (1 << self._bits) - 1

    def finish(self) -> tuple[bytes, int]:
        """Return the packed bytes and the zero-fill bit count of the last byte."""
        out = bytes(self._out)
        if not self._bits:
            return out, 0
        padding = 8 - self._bits
        return out + bytes([(self._acc << padding) & 0xFF]), padding
