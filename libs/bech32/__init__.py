from .checksum import label_checksum, polymod, polymod_step
from .codec import Decoded, decode, encode, verify
from .constants import BECH32_ALPHABET, MAX_LENGTH
from .exceptions import (
    Bech32Error,
    ChecksumError,
    ChecksumIncompleteError,
    DataCharError,
    LabelCharError,
    MixedCaseError,
    NoLabelError,
    ShortBufferError,
    StringTooLongError,
)

__all__ = [
    "BECH32_ALPHABET",
    "MAX_LENGTH",
    "Bech32Error",
    "ChecksumError",
    "ChecksumIncompleteError",
    "DataCharError",
    "Decoded",
    "LabelCharError",
    "MixedCaseError",
    "NoLabelError",
    "ShortBufferError",
    "StringTooLongError",
    "decode",
    "encode",
    "label_checksum",
    "polymod",
    "polymod_step",
    "verify",
]
