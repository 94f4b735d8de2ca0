"""Tests for account generation and derivation."""

import pytest

from deploykit import evm
from deploykit.errors import EntropySourceUnavailable

# Default Hardhat/Anvil development mnemonic and its first account
DEV_MNEMONIC = "test test test test test test test test test test test junk"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


def test_derive_known_mnemonic():
    """The standard path yields the well-known development account."""
    credential = evm.derive_from_mnemonic(DEV_MNEMONIC)
    assert credential.address == DEV_ADDRESS
    assert credential.private_key == DEV_PRIVATE_KEY
    assert credential.mnemonic == DEV_MNEMONIC


def test_generated_credential_is_rederivable():
    """Re-deriving from the generated mnemonic gives the same key and address."""
    credential = evm.generate_credentials()
    again = evm.derive_from_mnemonic(credential.mnemonic)
    assert again.address == credential.address
    assert again.private_key == credential.private_key


def test_generated_credentials_are_unique():
    """Independent generations never share a mnemonic or address."""
    first = evm.generate_credentials()
    second = evm.generate_credentials()
    assert first.mnemonic != second.mnemonic
    assert first.address != second.address


@pytest.mark.parametrize("num_words", [12, 24])
def test_generate_word_count(num_words):
    """Mnemonic length follows the requested entropy size."""
    credential = evm.generate_credentials(num_words)
    assert len(credential.mnemonic.split()) == num_words
    assert credential.private_key.startswith("0x")
    assert len(credential.private_key) == 66


def test_generate_rejects_bad_word_count():
    with pytest.raises(ValueError):
        evm.generate_credentials(13)


def test_entropy_failure_is_fatal(monkeypatch):
    """A broken random source aborts generation."""
    calls = []

    def broken_urandom(n):
        calls.append(n)
        raise OSError("no entropy")

    monkeypatch.setattr(evm.os, "urandom", broken_urandom)
    with pytest.raises(EntropySourceUnavailable):
        evm.generate_credentials()
    assert calls == [16]


def test_short_entropy_read_is_fatal(monkeypatch):
    monkeypatch.setattr(evm.os, "urandom", lambda n: b"\x00" * (n - 1))
    with pytest.raises(EntropySourceUnavailable):
        evm.generate_credentials()


def test_derive_address_from_private_key():
    """Private keys with or without 0x map to the same account."""
    with_prefix = evm.derive_address_from_private_key(DEV_PRIVATE_KEY)
    without_prefix = evm.derive_address_from_private_key(DEV_PRIVATE_KEY[2:])
    assert with_prefix == without_prefix
    assert with_prefix["address"] == DEV_ADDRESS
    assert with_prefix["private_key"] == DEV_PRIVATE_KEY


@pytest.mark.parametrize("bad_key", ["0x1234", "not-a-key", "0x" + "zz" * 32])
def test_derive_address_rejects_bad_keys(bad_key):
    with pytest.raises(ValueError):
        evm.derive_address_from_private_key(bad_key)


def test_credential_repr_hides_secrets():
    """Neither the private key nor the mnemonic appears in the repr."""
    credential = evm.derive_from_mnemonic(DEV_MNEMONIC)
    text = repr(credential)
    assert DEV_PRIVATE_KEY not in text
    assert DEV_MNEMONIC not in text
    assert "junk" not in text
    assert DEV_ADDRESS in text


def test_entropy_sizes_follow_word_count():
    assert evm.ENTROPY_BYTES == {12: 16, 15: 20, 18: 24, 21: 28, 24: 32}
