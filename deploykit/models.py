"""Data models for Deploykit."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credential:
    """Mnemonic-derived EVM account."""
    address: str
    mnemonic: str = field(repr=False)
    private_key: str = field(repr=False)


@dataclass(frozen=True)
class NetworkProfile:
    """Static deployment profile for one network."""
    name: str
    chain_id: int
    rpc_url_template: str
    provider_key_ref: str
    verifier_key_ref: str
    verifier_api_url: str
    verifier_browser_url: str
    account_key_ref: str = "PRIVATE_KEY"


@dataclass(frozen=True)
class ResolvedDeployment:
    """Network profile with its secrets bound in."""
    name: str
    chain_id: int
    rpc_url: str = field(repr=False)
    account_private_key: str = field(repr=False)
    deployer_address: str
    deployer_public_key: str
    verifier_api_key: str = field(repr=False)
    verifier_api_url: str
    verifier_browser_url: str
