#!/usr/bin/env python3
"""
Command line entry point: deploy a complete Tribute DAO.

Usage:
    tribute-deploy --network ganache --artifacts-dir build/contracts

Environment Variables:
    TRIBUTE_RPC_URL: JSON-RPC endpoint (default: http://127.0.0.1:8545)
    TRIBUTE_PRIVATE_KEY: key signing the transactions (optional, unlocked
        node accounts are used otherwise)
    TRIBUTE_NETWORK, TRIBUTE_DAO_NAME, TRIBUTE_ARTIFACTS_DIR, ...: defaults
        for the matching options below
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from loguru import logger
from rich.console import Console
from rich.table import Table

from .base.config import DeploymentSettings
from .base.context import DeploymentContext
from .base.descriptor import load_contract_configs, validate_contract_configs
from .chain.client import Web3ChainClient
from .configs.contracts import CONTRACT_CONFIGS
from .deploy.dao import DeploymentResult, deploy_dao
from .exceptions import ConfigurationError, DeploymentError
from .utils.artifacts import load_artifacts

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tribute-deploy",
        description="Deploy a Tribute DAO with its extensions and adapters",
    )
    parser.add_argument("--network", help="Network name (default: ganache)")
    parser.add_argument("--rpc-url", help="JSON-RPC endpoint of the node")
    parser.add_argument("--dao-name", help="Name of the DAO to create (default: test-dao)")
    parser.add_argument("--artifacts-dir", help="Directory of compiled contract artifacts")
    parser.add_argument(
        "--contracts-config",
        help="JSON contract table replacing the bundled one",
    )
    parser.add_argument(
        "--offchain-voting", action="store_true", default=None,
        help="Replace the voting adapter with off-chain voting",
    )
    parser.add_argument(
        "--deploy-test-tokens", action="store_true", default=None,
        help="Also deploy the test token contracts",
    )
    parser.add_argument(
        "--no-finalize", dest="finalize", action="store_false", default=None,
        help="Leave the DAO open for further adapters",
    )
    parser.add_argument("--output", help="Write the deployed addresses to this JSON file")
    parser.add_argument("--log-file", help="Also log to this file (rotated daily)")
    return parser


def settings_from_args(args: argparse.Namespace) -> DeploymentSettings:
    """Environment settings overridden by whatever was given on the command line."""
    overrides: Dict[str, Any] = {
        "network": args.network,
        "rpc_url": args.rpc_url,
        "dao_name": args.dao_name,
        "artifacts_dir": args.artifacts_dir,
        "contracts_config": args.contracts_config,
        "offchain_voting": args.offchain_voting,
        "deploy_test_tokens": args.deploy_test_tokens,
        "finalize": args.finalize,
    }
    return DeploymentSettings.from_env(
        **{k: v for k, v in overrides.items() if v is not None}
    )


def run(settings: DeploymentSettings) -> DeploymentResult:
    # fail on an unknown network before touching the node
    chain_id = settings.chain_id

    client = Web3ChainClient.from_rpc(settings.rpc_url, private_key=settings.private_key)
    if not client.is_connected():
        raise ConfigurationError(f"Cannot connect to {settings.network}: {settings.rpc_url}")

    if settings.contracts_config:
        configs = load_contract_configs(settings.contracts_config)
    else:
        configs = list(CONTRACT_CONFIGS)
        validate_contract_configs(configs)

    artifacts = load_artifacts(settings.artifacts_dir)
    owner = settings.owner or client.sender

    options = {**artifacts, **settings.to_options()}
    if settings.offchain_voting:
        options.setdefault("offchainAdmin", owner)

    logger.info(f"Deploying DAO '{settings.dao_name}' on {settings.network} (chain {chain_id}) as {owner}")
    ctx = DeploymentContext(
        contract_configs=tuple(configs),
        client=client,
        owner=owner,
        options=options,
    )
    return deploy_dao(ctx)


def print_summary(result: DeploymentResult) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Group")
    table.add_column("Alias")
    table.add_column("Address")

    addresses = result.addresses()
    table.add_row("dao", "dao", addresses.pop("dao"))
    for group, handles in addresses.items():
        for alias, address in sorted(handles.items()):
            table.add_row(group, alias, address)

    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.log_file:
        logger.add(
            args.log_file,
            rotation="1 day",
            retention="7 days",
            level="DEBUG",
        )

    try:
        result = run(settings_from_args(args))
    except DeploymentError as e:
        logger.error(f"Deployment failed: {e}")
        console.print(f"[red]Deployment failed: {e}[/red]")
        return 1

    print_summary(result)

    if args.output:
        with open(args.output, "w") as f:
            json.dump(result.addresses(), f, indent=2)
        logger.info(f"Addresses saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
