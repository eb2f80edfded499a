"""
E2E fixtures: a DAO deployed on a development chain.

Requires a node with unlocked accounts (ganache, hardhat or anvil) and the
compiled Tribute contracts:
    TRIBUTE_E2E_RPC_URL=http://127.0.0.1:8545
    TRIBUTE_ARTIFACTS_DIR=build/contracts
    pytest tests/e2e/ -v
"""

import os

import pytest
from web3 import Web3

from tribute_deploy.chain.client import Web3ChainClient
from tribute_deploy.testing import (
    ProposalIdGenerator,
    deploy_default_dao,
    revert_chain_snapshot,
    take_chain_snapshot,
)
from tribute_deploy.utils.artifacts import load_artifacts

RPC_URL = os.environ.get("TRIBUTE_E2E_RPC_URL")
ARTIFACTS_DIR = os.environ.get("TRIBUTE_ARTIFACTS_DIR")


def pytest_collection_modifyitems(config, items):
    if RPC_URL and ARTIFACTS_DIR:
        return
    skip = pytest.mark.skip(reason="TRIBUTE_E2E_RPC_URL and TRIBUTE_ARTIFACTS_DIR are not set")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="session")
def w3() -> Web3:
    w3 = Web3(Web3.HTTPProvider(RPC_URL))
    assert w3.is_connected(), f"Cannot connect to {RPC_URL}"
    return w3


@pytest.fixture(scope="session")
def accounts(w3):
    return w3.eth.accounts


@pytest.fixture(scope="session")
def chain_client(w3) -> Web3ChainClient:
    return Web3ChainClient(w3)


@pytest.fixture(scope="session")
def artifacts():
    return load_artifacts(ARTIFACTS_DIR)


@pytest.fixture(scope="session")
def owner(accounts):
    return accounts[1]


@pytest.fixture(scope="session")
def proposal_ids() -> ProposalIdGenerator:
    return ProposalIdGenerator()


@pytest.fixture(scope="module")
def deployment(w3, chain_client, owner, artifacts):
    return deploy_default_dao(chain_client, owner, artifacts=artifacts, daoName=f"e2e-{os.urandom(4).hex()}")


@pytest.fixture
def snapshot(w3, deployment):
    """Run each test from the state right after the deployment."""
    snapshot_id = take_chain_snapshot(w3)
    yield deployment
    revert_chain_snapshot(w3, snapshot_id)
