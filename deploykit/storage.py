"""Plaintext credential files for local deployer provisioning.

Two artifacts are written per generation:

* ``<address>.txt`` holding the address, mnemonic and private key on three lines
* ``mnemonic.txt`` holding only the latest mnemonic, overwritten every time

The writes are independent. If the second one fails the first file is left in
place and the error names the file that could not be written.
"""

from pathlib import Path
from typing import Tuple, Union

from deploykit import config
from deploykit.errors import StorageWriteError
from deploykit.models import Credential


def _write(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise StorageWriteError(path, e) from e


def credential_path(directory: Union[str, Path], address: str) -> Path:
    """Return the per-address record path for an address."""
    return Path(directory) / f"{address}.txt"


def persist_credential(
    credential: Credential,
    directory: Union[str, Path] = config.OUTPUT_DIR,
) -> Tuple[Path, Path]:
    """
    Write the per-address record and the current mnemonic file.

    Args:
        credential: Generated credential
        directory: Target directory, created if missing

    Returns:
        (per-address record path, mnemonic file path)

    Raises:
        StorageWriteError: If the directory or either file cannot be written
    """
    directory = Path(directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageWriteError(directory, e) from e

    record_path = credential_path(directory, credential.address)
    _write(
        record_path,
        f"{credential.address}\n{credential.mnemonic}\n{credential.private_key}",
    )

    mnemonic_path = directory / config.MNEMONIC_FILENAME
    _write(mnemonic_path, credential.mnemonic)

    return record_path, mnemonic_path


def read_credential(path: Union[str, Path]) -> Credential:
    """Read a per-address record back into a Credential."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    if len(lines) != 3:
        raise ValueError(f"Expected 3 lines in {path}, found {len(lines)}")

    address, mnemonic, private_key = (line.strip() for line in lines)
    return Credential(address=address, mnemonic=mnemonic, private_key=private_key)
