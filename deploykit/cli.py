"""Command line entry point for Deploykit."""

from __future__ import annotations

import argparse
import sys
from typing import List

from deploykit import config, evm, networks, resolver, storage, utils
from deploykit.errors import DeployKitError


def generate(out_dir: str, num_words: int) -> int:
    """Generate a deployer account and write its files."""
    utils.print_banner()
    utils.section_header("Generate deployer account")

    credential = evm.generate_credentials(num_words)
    record_path, mnemonic_path = storage.persist_credential(credential, out_dir)

    utils.success(f"Account Generated as {utils.bold_cyan(credential.address)}")
    utils.info(f"Credential record: {record_path}")
    utils.info(f"Current mnemonic:  {mnemonic_path}")
    return 0


def list_networks() -> int:
    """Print registered networks and their chain ids."""
    utils.section_header("Networks")
    for profile in networks.DEFAULT_REGISTRY:
        print(f"{utils.bold(profile.name):<30} chain id {profile.chain_id}")
    return 0


def resolve_network(name: str) -> int:
    """Resolve a network using secrets from the environment."""
    secrets = config.load_secrets(networks.secret_refs())
    deployment = resolver.resolve(name, secrets)

    utils.section_header(f"Deployment profile: {deployment.name}")
    print(f"Chain id:     {deployment.chain_id}")
    print(f"Deployer:     {deployment.deployer_address}")
    print(f"Public key:   {deployment.deployer_public_key}")
    print(f"Verifier API: {deployment.verifier_api_url}")
    print(f"Explorer:     {deployment.verifier_browser_url}")
    utils.result("All required secrets are present.")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deploykit", description="Deploykit CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    p_gen = sub.add_parser("generate", help="Create a wallet for builder deploys")
    p_gen.add_argument("--out", default=config.OUTPUT_DIR, help="Directory for the key files")
    p_gen.add_argument(
        "--words",
        type=int,
        default=config.MNEMONIC_WORDS,
        choices=sorted(evm.ENTROPY_BYTES),
        help="Mnemonic length",
    )

    sub.add_parser("networks", help="List registered networks")

    p_res = sub.add_parser("resolve", help="Check that a network resolves with the current secrets")
    p_res.add_argument("network", help="Network name")

    return parser


def main(argv: List[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        if args.command == "generate":
            return generate(args.out, args.words)
        if args.command == "networks":
            return list_networks()
        return resolve_network(args.network)
    except (DeployKitError, ValueError) as e:
        utils.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
