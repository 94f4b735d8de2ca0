"""Exceptions raised by Deploykit."""

from pathlib import Path
from typing import Iterable


class DeployKitError(Exception):
    """Base class for all Deploykit errors."""


class EntropySourceUnavailable(DeployKitError):
    """The operating system's secure random source could not be read."""


class StorageWriteError(DeployKitError):
    """Writing a credential artifact failed."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to write {self.path}: {cause}")


class UnknownNetwork(DeployKitError):
    """Requested network is not registered."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = list(available)
        super().__init__(f"Unknown network '{name}'. Available: {self.available}")


class MissingSecret(DeployKitError):
    """A required secret is absent or empty."""

    def __init__(self, ref: str, network: str | None = None):
        self.ref = ref
        self.network = network
        message = f"Missing secret '{ref}'"
        if network:
            message += f" required by network '{network}'"
        super().__init__(message)


class InvalidSecret(DeployKitError):
    """A secret is present but malformed."""

    def __init__(self, ref: str, reason: str):
        self.ref = ref
        self.reason = reason
        super().__init__(f"Invalid secret '{ref}': {reason}")


class RegistryError(DeployKitError):
    """A network table failed validation while building the registry."""
