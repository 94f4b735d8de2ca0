"""Network profiles used for deployment and contract verification."""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from deploykit.errors import RegistryError, UnknownNetwork
from deploykit.models import NetworkProfile

# Placeholder in RPC URL templates replaced by the provider API key
API_KEY_PLACEHOLDER = "{api_key}"


class ChainRegistry:
    """Read-only set of network profiles keyed by name.

    Chain ids and names must be unique.
    """

    def __init__(self, profiles: Iterable[NetworkProfile]):
        by_name: Dict[str, NetworkProfile] = {}
        by_chain_id: Dict[int, str] = {}

        for profile in profiles:
            if isinstance(profile.chain_id, bool) or not isinstance(profile.chain_id, int):
                raise RegistryError(
                    f"Chain id of '{profile.name}' must be an int, got {profile.chain_id!r}"
                )
            if profile.chain_id <= 0:
                raise RegistryError(f"Chain id of '{profile.name}' must be positive")
            if profile.name in by_name:
                raise RegistryError(f"Duplicate network name '{profile.name}'")
            if profile.chain_id in by_chain_id:
                raise RegistryError(
                    f"Chain id {profile.chain_id} of '{profile.name}' is already "
                    f"registered for '{by_chain_id[profile.chain_id]}'"
                )
            if API_KEY_PLACEHOLDER not in profile.rpc_url_template:
                raise RegistryError(
                    f"RPC template for '{profile.name}' has no {API_KEY_PLACEHOLDER} placeholder"
                )
            by_name[profile.name] = profile
            by_chain_id[profile.chain_id] = profile.name

        self._profiles: Mapping[str, NetworkProfile] = MappingProxyType(by_name)

    def profiles(self) -> Mapping[str, NetworkProfile]:
        """Return the read-only name -> profile mapping."""
        return self._profiles

    def get(self, name: str) -> NetworkProfile:
        """Get a profile by name. Raises ``UnknownNetwork`` if not found."""
        try:
            return self._profiles[name]
        except KeyError:
            raise UnknownNetwork(name, self.names()) from None

    def names(self) -> List[str]:
        return list(self._profiles)

    def chain_ids(self) -> Dict[str, int]:
        return {name: profile.chain_id for name, profile in self._profiles.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def __iter__(self) -> Iterator[NetworkProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)


DEFAULT_PROFILES: Tuple[NetworkProfile, ...] = (
    NetworkProfile(
        name="sepolia",
        chain_id=11155111,
        rpc_url_template="https://eth-sepolia.g.alchemy.com/v2/{api_key}",
        provider_key_ref="ALCHEMY_API_KEY",
        verifier_key_ref="ETHERSCAN_API_KEY",
        verifier_api_url="https://api-sepolia.etherscan.io/api",
        verifier_browser_url="https://sepolia.etherscan.io",
    ),
    NetworkProfile(
        name="mainnet",
        chain_id=1,
        rpc_url_template="https://eth-mainnet.g.alchemy.com/v2/{api_key}",
        provider_key_ref="ALCHEMY_API_KEY",
        verifier_key_ref="ETHERSCAN_API_KEY",
        verifier_api_url="https://api.etherscan.io/api",
        verifier_browser_url="https://etherscan.io",
    ),
    NetworkProfile(
        name="base-sepolia",
        chain_id=84532,
        rpc_url_template="https://base-sepolia.g.alchemy.com/v2/{api_key}",
        provider_key_ref="ALCHEMY_API_KEY",
        verifier_key_ref="BASESCAN_API_KEY",
        verifier_api_url="https://api-sepolia.basescan.org/api",
        verifier_browser_url="https://sepolia.basescan.org",
    ),
    NetworkProfile(
        name="base",
        # TODO: confirm with the deploy owners; Base mainnet is usually 8453.
        chain_id=8543,
        rpc_url_template="https://base-mainnet.g.alchemy.com/v2/{api_key}",
        provider_key_ref="ALCHEMY_API_KEY",
        verifier_key_ref="BASESCAN_API_KEY",
        verifier_api_url="https://api.basescan.org/api",
        verifier_browser_url="https://basescan.org",
    ),
)

DEFAULT_REGISTRY = ChainRegistry(DEFAULT_PROFILES)


def secret_refs(registry: ChainRegistry = DEFAULT_REGISTRY) -> List[str]:
    """List every secret reference the registry's networks require."""
    refs = set()
    for profile in registry:
        refs.update((profile.provider_key_ref, profile.verifier_key_ref, profile.account_key_ref))
    return sorted(refs)
