"""
Shared fixtures: an in-memory chain client and a deployment context over the
bundled contract table.

The fake client hands out sequential addresses and records every deployment,
call and transaction, so tests can assert what a deployment would send to the
chain without a node.
"""

import itertools
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

import pytest

from tribute_deploy.base.context import DeploymentContext
from tribute_deploy.base.handle import DeployedContract
from tribute_deploy.configs.contracts import CONTRACT_CONFIGS
from tribute_deploy.exceptions import ChainCallError
from tribute_deploy.testing import default_options
from tribute_deploy.utils.artifacts import ContractArtifact

OWNER = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
OFFCHAIN_ADMIN = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class FakeChainClient:
    """Chain client double implementing the deploy / at / call / transact primitives."""

    def __init__(self, fail_on: Optional[Set[Tuple[str, str]]] = None):
        self._addresses = itertools.count(1)
        self.fail_on = fail_on or set()
        self.deployments: List[Tuple[str, List[Any]]] = []
        self.calls: List[Tuple[str, str, Tuple[Any, ...]]] = []
        self.transactions: List[Tuple[str, str, Tuple[Any, ...], Optional[str]]] = []
        self.daos: Dict[str, str] = {}
        self.extensions: Dict[str, str] = {}
        self.adapters: Dict[bytes, str] = {}

    def _next_address(self) -> str:
        return "0x" + format(next(self._addresses), "040x")

    def _check(self, name: str, function: str) -> None:
        if (name, function) in self.fail_on:
            raise ChainCallError(name, function, "execution reverted")

    # ChainClient protocol

    def deploy(
        self,
        artifact: ContractArtifact,
        args: Optional[Sequence[Any]] = None,
        sender: Optional[str] = None,
    ) -> DeployedContract:
        self._check(artifact.name, "constructor")
        resolved = []
        for arg in args or []:
            if isinstance(arg, ContractArtifact):
                arg = self.deploy(arg, sender=sender).address
            elif isinstance(arg, DeployedContract):
                arg = arg.address
            resolved.append(arg)
        self.deployments.append((artifact.name, resolved))
        return self.at(artifact, self._next_address())

    def at(self, artifact: ContractArtifact, address: str) -> DeployedContract:
        return DeployedContract(name=artifact.name, address=address, client=self)

    def call(self, handle: DeployedContract, function: str, *args: Any) -> Any:
        self._check(handle.name, function)
        self.calls.append((handle.name, function, args))
        if function == "getDaoAddress":
            return self.daos.get(args[0], ZERO_ADDRESS)
        if function == "getExtensionAddress":
            return self.extensions.get(handle.address, ZERO_ADDRESS)
        if function == "getAdapterAddress":
            return self.adapters.get(args[0], ZERO_ADDRESS)
        return None

    def transact(
        self,
        handle: DeployedContract,
        function: str,
        *args: Any,
        sender: Optional[str] = None,
        value: int = 0,
    ) -> Any:
        self._check(handle.name, function)
        self.transactions.append((handle.name, function, args, sender))
        if function == "createDao":
            if args[0] in self.daos:
                raise ChainCallError(handle.name, function, "name is already taken")
            self.daos[args[0]] = self._next_address()
        elif function == "create":
            self.extensions[handle.address] = self._next_address()
        elif function in ("addAdapters", "updateAdapter"):
            entries = args[1] if function == "addAdapters" else [args[1]]
            for entry in entries:
                self.adapters[entry.id] = entry.addr
        return {"status": 1}

    # helpers

    def deployed_names(self) -> List[str]:
        return [name for name, _ in self.deployments]

    def transactions_named(self, function: str) -> List[Tuple[str, str, Tuple[Any, ...], Optional[str]]]:
        return [tx for tx in self.transactions if tx[1] == function]


def make_artifacts(names) -> Dict[str, ContractArtifact]:
    return {name: ContractArtifact(name=name, abi=[], bytecode="0x6080") for name in names}


@pytest.fixture
def client() -> FakeChainClient:
    return FakeChainClient()


@pytest.fixture
def artifacts() -> Dict[str, ContractArtifact]:
    return make_artifacts({config.name for config in CONTRACT_CONFIGS})


@pytest.fixture
def ctx(client, artifacts) -> DeploymentContext:
    """Context over the bundled table, before any DAO exists."""
    return DeploymentContext(
        contract_configs=tuple(CONTRACT_CONFIGS),
        client=client,
        owner=OWNER,
        options={**artifacts, **default_options(offchainAdmin=OFFCHAIN_ADMIN)},
    )


@pytest.fixture
def dao(client, artifacts) -> DeployedContract:
    return client.at(artifacts["DaoRegistry"], "0x" + "d" * 40)


@pytest.fixture
def dao_ctx(ctx, dao) -> DeploymentContext:
    """Context of a run whose DAO has been cloned."""
    return ctx.with_options(
        daoAddress=dao.address,
        unitTokenToMint="0x00000000000000000000000000000000000FF1CE",
        lootTokenToMint="0x00000000000000000000000000000000B105F00D",
    )
