from __future__ import annotations

BECH32_ALPHABET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
SEPARATOR = "1"

MAX_LENGTH = 90
CHECKSUM_LENGTH = 6

# BIP173 generator polynomial, one constant per selector bit
GENERATORS = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
BECH32_CONST = 1

LABEL_CHAR_MIN = 33
LABEL_CHAR_MAX = 126
