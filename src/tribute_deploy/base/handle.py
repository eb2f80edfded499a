"""Handles to deployed contracts and the chain client protocol behind them."""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Protocol, Sequence, runtime_checkable

from .descriptor import ContractConfig
from ..utils.artifacts import ContractArtifact


@runtime_checkable
class ChainClient(Protocol):
    """The chain-facing primitives the deployment needs."""

    def deploy(
        self,
        artifact: ContractArtifact,
        args: Optional[Sequence[Any]] = None,
        sender: Optional[str] = None,
    ) -> "DeployedContract":
        ...

    def at(self, artifact: ContractArtifact, address: str) -> "DeployedContract":
        ...

    def call(self, handle: "DeployedContract", function: str, *args: Any) -> Any:
        ...

    def transact(
        self,
        handle: "DeployedContract",
        function: str,
        *args: Any,
        sender: Optional[str] = None,
        value: int = 0,
    ) -> Any:
        ...


@dataclass(frozen=True)
class DeployedContract:
    """
    A contract instance living at ``address``.

    ``configs`` is the descriptor the instance was deployed from (None for
    contracts the descriptor table does not know). Calls are delegated to the
    chain client that created the handle.
    """

    name: str
    address: str
    configs: Optional[ContractConfig] = None
    contract: Any = field(default=None, repr=False, compare=False)
    client: Optional[ChainClient] = field(default=None, repr=False, compare=False)

    @property
    def alias(self) -> str:
        return self.configs.alias if self.configs else self.name

    def with_configs(self, configs: Optional[ContractConfig]) -> "DeployedContract":
        return replace(self, configs=configs)

    def call(self, function: str, *args: Any) -> Any:
        """Read-only call."""
        return self._client().call(self, function, *args)

    def transact(
        self, function: str, *args: Any, sender: Optional[str] = None, value: int = 0
    ) -> Any:
        """State-changing call, waits for the receipt. ``value`` is sent in wei."""
        return self._client().transact(self, function, *args, sender=sender, value=value)

    def _client(self) -> ChainClient:
        if self.client is None:
            raise RuntimeError(f"{self.name} at {self.address} is not bound to a chain client")
        return self.client
