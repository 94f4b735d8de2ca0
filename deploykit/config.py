"""
Configuration module for Deploykit.
Output locations for generated credentials and access to deployment secrets.
Supports environment variables with fallback to defaults.
"""

import os
from typing import Dict, Iterable, Tuple
from dotenv import load_dotenv

from deploykit import utils

# Load environment variables from .env file if it exists
load_dotenv()


def get_env(key: str, default: str) -> str:
    """Get environment variable with fallback to default."""
    return os.getenv(key, default)


# Directory where generated credential files are written
OUTPUT_DIR: str = get_env("DEPLOYKIT_OUTPUT_DIR", ".")

# Well-known file holding the most recently generated mnemonic
MNEMONIC_FILENAME: str = "mnemonic.txt"

# BIP-39 mnemonic lengths accepted by `generate`
MNEMONIC_WORD_CHOICES: Tuple[int, ...] = (12, 15, 18, 21, 24)
DEFAULT_MNEMONIC_WORDS: int = 12


def parse_word_count(raw: str) -> int:
    """
    Parse a mnemonic length setting.

    Falls back to DEFAULT_MNEMONIC_WORDS with a warning when the value is not
    one of MNEMONIC_WORD_CHOICES.
    """
    try:
        words = int(raw)
    except ValueError:
        words = None

    if words not in MNEMONIC_WORD_CHOICES:
        utils.warn(
            f"Ignoring DEPLOYKIT_MNEMONIC_WORDS={raw!r}; expected one of "
            f"{list(MNEMONIC_WORD_CHOICES)}. Using {DEFAULT_MNEMONIC_WORDS}."
        )
        return DEFAULT_MNEMONIC_WORDS
    return words


# Mnemonic length used by `generate` (12 words = 128 bits of entropy)
MNEMONIC_WORDS: int = parse_word_count(
    get_env("DEPLOYKIT_MNEMONIC_WORDS", str(DEFAULT_MNEMONIC_WORDS))
)

# Standard Ethereum derivation path for the first account
ACCOUNT_PATH: str = "m/44'/60'/0'/0/0"


def load_secrets(refs: Iterable[str]) -> Dict[str, str]:
    """
    Read the named secrets from the process environment.

    Args:
        refs: Secret references (environment variable names)

    Returns:
        Mapping of reference to value. Unset references are left out so the
        resolver can report them as missing.
    """
    secrets: Dict[str, str] = {}
    for ref in refs:
        value = os.getenv(ref)
        if value is not None:
            secrets[ref] = value
    return secrets
