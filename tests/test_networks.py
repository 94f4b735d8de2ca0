"""Tests for the network registry."""

import pytest

from deploykit import networks
from deploykit.errors import RegistryError, UnknownNetwork
from deploykit.models import NetworkProfile


def make_profile(name, chain_id, template="https://rpc.example/{api_key}"):
    return NetworkProfile(
        name=name,
        chain_id=chain_id,
        rpc_url_template=template,
        provider_key_ref="PROVIDER_KEY",
        verifier_key_ref="VERIFIER_KEY",
        verifier_api_url="https://verify.example/api",
        verifier_browser_url="https://explorer.example",
    )


def test_default_chain_ids():
    """The default table carries the configured chain ids."""
    assert networks.DEFAULT_REGISTRY.chain_ids() == {
        "sepolia": 11155111,
        "mainnet": 1,
        "base-sepolia": 84532,
        "base": 8543,
    }


def test_duplicate_chain_id_rejected_at_construction():
    with pytest.raises(RegistryError):
        networks.ChainRegistry([make_profile("a", 10), make_profile("b", 10)])


def test_duplicate_name_rejected():
    with pytest.raises(RegistryError):
        networks.ChainRegistry([make_profile("a", 10), make_profile("a", 11)])


def test_template_without_placeholder_rejected():
    with pytest.raises(RegistryError):
        networks.ChainRegistry([make_profile("a", 10, template="https://rpc.example")])


def test_unknown_network():
    with pytest.raises(UnknownNetwork) as excinfo:
        networks.DEFAULT_REGISTRY.get("nonexistent-network")
    assert "sepolia" in excinfo.value.available


def test_profiles_are_read_only():
    profiles = networks.DEFAULT_REGISTRY.profiles()
    with pytest.raises(TypeError):
        profiles["other"] = make_profile("other", 99)


def test_registry_container_protocol():
    registry = networks.ChainRegistry([make_profile("a", 10), make_profile("b", 11)])
    assert len(registry) == 2
    assert "a" in registry
    assert "c" not in registry
    assert [profile.name for profile in registry] == ["a", "b"]
    assert registry.names() == ["a", "b"]


def test_secret_refs():
    assert networks.secret_refs() == [
        "ALCHEMY_API_KEY",
        "BASESCAN_API_KEY",
        "ETHERSCAN_API_KEY",
        "PRIVATE_KEY",
    ]


@pytest.mark.parametrize("chain_id", ["1", True, 1.0, None, 0, -5])
def test_non_integer_or_non_positive_chain_id_rejected(chain_id):
    """Chain ids must be positive plain integers."""
    with pytest.raises(RegistryError):
        networks.ChainRegistry([make_profile("a", chain_id)])
