from __future__ import annotations

import os
from dataclasses import dataclass

from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey

from . import codec


def _as_bytes(message: bytes | str, hex_message: bool) -> bytes:
    if isinstance(message, str):
        return bytes.fromhex(message) if hex_message else message.encode("utf-8")
    return bytes(message)


@dataclass(slots=True)
class Account:
    private_key: bytes
    public_key: bytes
    address: str

    @classmethod
    def from_private_hex(cls, private_key: str, label: str) -> "Account":
        priv = bytes.fromhex(private_key.strip().removeprefix("0x"))
        if len(priv) != 32:
            raise ValueError("expected 32-byte ed25519 seed hex")
        pub = SigningKey(priv).verify_key.encode()
        addr = codec.encode(label, pub, len(pub) * 8)
        return cls(private_key=priv, public_key=pub, address=addr)

    @classmethod
    def generate(cls, label: str) -> "Account":
        return cls.from_private_hex(os.urandom(32).hex(), label)

    @property
    def label(self) -> str:
        return codec.decode(self.address).label

    def private_key_hex(self) -> str:
        return self.private_key.hex()

    def public_key_hex(self) -> str:
        return self.public_key.hex()

    def sign_message(self, message: bytes | str, *, hex_message: bool = False) -> bytes:
        return SigningKey(self.private_key).sign(_as_bytes(message, hex_message)).signature

    def verify_signature(self, message: bytes | str, signature: bytes | str, *, hex_message: bool = False) -> bool:
        sig = bytes.fromhex(signature) if isinstance(signature, str) else signature
        try:
            VerifyKey(self.public_key).verify(_as_bytes(message, hex_message), sig)
        except BadSignatureError:
            return False
        return True
