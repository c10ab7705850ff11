from __future__ import annotations


class Bech32Error(ValueError): ...


class StringTooLongError(Bech32Error):
    def __init__(self, length: int, limit: int = 90) -> None:
        super().__init__(f"bech32: serial of {length} characters exceeds {limit}")
        self.length = length
        self.limit = limit


class MixedCaseError(Bech32Error):
    def __init__(self) -> None:
        super().__init__("bech32: mix of upper and lower-case not allowed")


class NoLabelError(Bech32Error):
    def __init__(self) -> None:
        super().__init__("bech32: human-readable part absent")


class ChecksumIncompleteError(Bech32Error):
    def __init__(self) -> None:
        super().__init__("bech32: data part incomplete; need 6 character checksum")


class LabelCharError(Bech32Error):
    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"bech32: illegal character {char!r} in human-readable part at {position}")
        self.char = char
        self.position = position


class DataCharError(Bech32Error):
    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"bech32: illegal character {char!r} in data part at {position}")
        self.char = char
        self.position = position


class ShortBufferError(Bech32Error):
    def __init__(self, bit_n: int, available: int) -> None:
        super().__init__(f"bech32: {bit_n} bits requested from a {available}-bit payload")
        self.bit_n = bit_n
        self.available = available


class ChecksumError(Bech32Error):
    """Data corruption. A positive ``corrected_bits`` would count repaired bits; recovery is not implemented, so it is always 0."""

    def __init__(self, corrected_bits: int = 0) -> None:
        if corrected_bits:
            message = f"bech32: data corruption; {corrected_bits} bits corrected"
        else:
            message = "bech32: data corruption; checksum recovery failed"
        super().__init__(message)
        self.corrected_bits = corrected_bits
