"""Bind network profiles to externally supplied secrets."""

from typing import Any, Dict, List, Mapping

from deploykit import evm
from deploykit.errors import InvalidSecret, MissingSecret
from deploykit.models import NetworkProfile, ResolvedDeployment
from deploykit.networks import API_KEY_PLACEHOLDER, DEFAULT_REGISTRY, ChainRegistry


def _require(secrets: Mapping[str, str], ref: str, network: str) -> str:
    """Return a non-empty secret or raise MissingSecret."""
    value = secrets.get(ref)
    if value is None or not value.strip():
        raise MissingSecret(ref, network)
    return value.strip()


def _resolve_profile(profile: NetworkProfile, secrets: Mapping[str, str]) -> ResolvedDeployment:
    provider_key = _require(secrets, profile.provider_key_ref, profile.name)
    rpc_url = profile.rpc_url_template.replace(API_KEY_PLACEHOLDER, provider_key)

    private_key = _require(secrets, profile.account_key_ref, profile.name)
    verifier_key = _require(secrets, profile.verifier_key_ref, profile.name)

    try:
        account = evm.derive_address_from_private_key(private_key)
    except ValueError as e:
        raise InvalidSecret(profile.account_key_ref, str(e)) from e

    return ResolvedDeployment(
        name=profile.name,
        chain_id=profile.chain_id,
        rpc_url=rpc_url,
        account_private_key=account["private_key"],
        deployer_address=account["address"],
        deployer_public_key=account["public_key"],
        verifier_api_key=verifier_key,
        verifier_api_url=profile.verifier_api_url,
        verifier_browser_url=profile.verifier_browser_url,
    )


def resolve(
    network_name: str,
    secrets: Mapping[str, str],
    registry: ChainRegistry = DEFAULT_REGISTRY,
) -> ResolvedDeployment:
    """
    Resolve a network into a deployment profile with secrets attached.

    Args:
        network_name: Registered network name (e.g., "sepolia", "base")
        secrets: Secret reference -> value, typically from config.load_secrets

    Returns:
        Fully populated ResolvedDeployment

    Raises:
        UnknownNetwork: If the network is not registered
        MissingSecret: If the provider, signing or verifier secret is absent or empty
        InvalidSecret: If the signing key is not a valid private key
    """
    return _resolve_profile(registry.get(network_name), secrets)


def verification_settings(
    secrets: Mapping[str, str],
    registry: ChainRegistry = DEFAULT_REGISTRY,
) -> Dict[str, Any]:
    """
    Build verifier settings for every registered network.

    The layout mirrors the ``etherscan`` section of a Hardhat config:
    per-network API keys plus custom chain routing.
    """
    api_keys: Dict[str, str] = {}
    custom_chains: List[Dict[str, Any]] = []

    for profile in registry:
        api_keys[profile.name] = _require(secrets, profile.verifier_key_ref, profile.name)
        custom_chains.append({
            "network": profile.name,
            "chainId": profile.chain_id,
            "urls": {
                "apiURL": profile.verifier_api_url,
                "browserURL": profile.verifier_browser_url,
            },
        })

    return {"apiKey": api_keys, "customChains": custom_chains}
