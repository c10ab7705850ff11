import pytest

from libs.bech32 import decode
from libs.bech32.account import Account

# RFC 8032 section 7.1, test 1
SEED = "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
PUBLIC = "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"


def test_from_private_hex():
    account = Account.from_private_hex(SEED, "set")
    assert account.public_key_hex() == PUBLIC
    assert account.private_key_hex() == SEED
    assert account.address.startswith("set1")
    assert account.label == "set"


def test_address_carries_public_key():
    account = Account.from_private_hex("0x" + SEED, "set")
    decoded = decode(account.address)
    # 256 bits fill 52 symbols; the 4 fill bits come back as padding of a 33rd byte
    assert decoded.payload[:32] == account.public_key
    assert decoded.payload[32] == 0
    assert decoded.padding == 4


def test_from_private_hex_rejects_bad_seed():
    with pytest.raises(ValueError):
        Account.from_private_hex("00" * 31, "set")
    with pytest.raises(ValueError):
        Account.from_private_hex("zz", "set")


def test_generate():
    a = Account.generate("set")
    b = Account.generate("set")
    assert a.address != b.address
    assert len(a.private_key) == 32


def test_sign_and_verify():
    account = Account.from_private_hex(SEED, "set")
    sig = account.sign_message("hello")
    assert len(sig) == 64
    assert account.verify_signature("hello", sig)
    assert account.verify_signature(b"hello", sig.hex())
    assert not account.verify_signature("other", sig)
    assert account.verify_signature("68656c6c6f", sig, hex_message=True)
