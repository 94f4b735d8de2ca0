"""EVM account generation and derivation."""

import os
from typing import Dict
from eth_account import Account
from eth_account.hdaccount.mnemonic import Mnemonic
from eth_keys import keys
from eth_keys.exceptions import ValidationError
from web3 import Web3

from deploykit import config
from deploykit.errors import EntropySourceUnavailable
from deploykit.models import Credential

# Mnemonic word count -> bytes of entropy (BIP-39)
ENTROPY_BYTES: Dict[int, int] = {
    words: words * 4 // 3 for words in config.MNEMONIC_WORD_CHOICES
}

Account.enable_unaudited_hdwallet_features()


def _read_entropy(num_bytes: int) -> bytes:
    """Read entropy from the OS CSPRNG or raise EntropySourceUnavailable."""
    try:
        entropy = os.urandom(num_bytes)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceUnavailable(f"Secure random source unavailable: {e}") from e

    if len(entropy) != num_bytes:
        raise EntropySourceUnavailable(
            f"Secure random source returned {len(entropy)} bytes, expected {num_bytes}"
        )
    return entropy


def generate_credentials(num_words: int = config.MNEMONIC_WORDS) -> Credential:
    """
    Generate a fresh mnemonic and the account derived from it.

    Args:
        num_words: Mnemonic length (12, 15, 18, 21 or 24)

    Returns:
        Credential with checksummed address, mnemonic and private key

    Raises:
        ValueError: If num_words is not a BIP-39 length
        EntropySourceUnavailable: If the OS random source cannot be read
    """
    if num_words not in ENTROPY_BYTES:
        raise ValueError(
            f"Mnemonic must have one of {sorted(ENTROPY_BYTES)} words, got {num_words}"
        )

    entropy = _read_entropy(ENTROPY_BYTES[num_words])
    mnemonic = Mnemonic().to_mnemonic(entropy)
    return derive_from_mnemonic(mnemonic)


def derive_from_mnemonic(mnemonic: str, account_path: str = config.ACCOUNT_PATH) -> Credential:
    """Derive the account for a mnemonic at the given HD path."""
    account = Account.from_mnemonic(mnemonic, account_path=account_path)

    return Credential(
        address=account.address,
        mnemonic=mnemonic,
        private_key=Web3.to_hex(account.key),
    )


def derive_address_from_private_key(privkey_str: str) -> Dict[str, str]:
    """Derive public key and address from an EVM private key."""
    # Remove 0x prefix if present
    if privkey_str.startswith("0x"):
        privkey_str = privkey_str[2:]

    try:
        private_key_bytes = bytes.fromhex(privkey_str)
    except ValueError:
        raise ValueError("Private key must be hex encoded.")

    if len(private_key_bytes) != 32:
        raise ValueError("Private key must be 32 bytes (64 hex characters).")

    try:
        private_key_obj = keys.PrivateKey(private_key_bytes)
    except ValidationError as e:
        raise ValueError(f"Invalid private key: {e}") from e
    public_key_obj = private_key_obj.public_key
    account = Account.from_key(private_key_bytes)

    return {
        "private_key": "0x" + privkey_str,
        "public_key": public_key_obj.to_hex(),
        "address": account.address,
    }
