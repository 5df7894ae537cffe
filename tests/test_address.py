import pytest

from bazuka.address import (
    Account,
    Address,
    ContractId,
    ParseAddressError,
    ParseContractIdError,
)
from bazuka.ed25519 import generate_keys
from bazuka.hashing import sha3_hash
from bazuka.money import Money


def test_treasury_display_and_flag():
    treasury = Address.treasury()
    assert str(treasury) == "Treasury"
    assert treasury.is_treasury()
    assert treasury == Address()


def test_public_key_address_round_trip():
    pk, _ = generate_keys(b"ABC")
    addr = Address(pk)
    assert not addr.is_treasury()
    assert str(addr) == str(pk)
    assert Address.parse(str(addr)) == addr


def test_addresses_hash_by_value():
    pk1, _ = generate_keys(b"ABC")
    pk2, _ = generate_keys(b"DEF")
    addrs = {Address(pk1), Address(pk1), Address(pk2), Address.treasury()}
    assert len(addrs) == 3


def test_treasury_text_is_not_parsed():
    with pytest.raises(ParseAddressError):
        Address.parse("Treasury")


@pytest.mark.parametrize("text", ["", "0x12", "hello", "0x" + "zz" * 32])
def test_invalid_address(text):
    with pytest.raises(ParseAddressError):
        Address.parse(text)


def test_account_equality():
    assert Account(Money(1), 2) == Account(Money(1), 2)
    assert Account(Money(1), 2) != Account(Money(1), 3)


def test_contract_id_round_trip():
    digest = sha3_hash(b"contract")
    cid = ContractId(digest)
    assert str(cid) == digest.hex()
    assert ContractId.parse(str(cid)) == cid
    assert ContractId.parse(str(cid).upper()) == cid


@pytest.mark.parametrize(
    "text",
    ["abc", "00" * 31, "00" * 33, "zz" * 32, " " + "00" * 32, ""],
)
def test_invalid_contract_id(text):
    with pytest.raises(ParseContractIdError):
        ContractId.parse(text)


def test_contract_id_length_checked():
    with pytest.raises(ValueError):
        ContractId(b"\x00" * 31)