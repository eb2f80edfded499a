"""
Deployment context shared by every phase of a DAO deployment.

The context is immutable: a phase that learns something new (for example the
address of the freshly cloned DAO) returns a new context through
``with_options`` instead of mutating the one it received.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .descriptor import ContractConfig, ContractType, find_by_id, find_by_name
from .handle import DeployedContract
from ..exceptions import ConfigurationError, MissingArgumentError
from ..utils.artifacts import ContractArtifact


class DeploymentContext(BaseModel):
    """
    Everything a deployment phase may read.

    ``options`` holds, by name, the contract artifacts and the raw values the
    descriptors refer to (``deploymentArgs``, ``daoConfigs``) as well as the
    switches of the run (``offchainVoting``, ``deployTestTokens``, ...).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    contract_configs: Tuple[ContractConfig, ...] = Field(..., description="Descriptor table, in table order")
    client: Any = Field(..., description="ChainClient providing the deploy / at-address primitives")
    owner: str = Field(..., description="Account sending every deployment transaction")
    options: Dict[str, Any] = Field(default_factory=dict)

    def with_options(self, **values: Any) -> "DeploymentContext":
        """Return a copy of this context with ``values`` added to the options."""
        return self.model_copy(update={"options": {**self.options, **values}})

    def option(self, name: str, default: Any = None) -> Any:
        value = self.options.get(name)
        return default if value is None else value

    def artifact(self, name: str) -> ContractArtifact:
        artifact = self.options.get(name)
        if artifact is None:
            raise ConfigurationError(f"Contract {name} not found in environment options")
        if not isinstance(artifact, ContractArtifact):
            raise ConfigurationError(f"Option {name} is not a contract artifact")
        return artifact

    def argument(self, name: str, contract: str, location: Optional[str] = None) -> Any:
        value = self.options.get(name)
        if value is None:
            raise MissingArgumentError(name, contract, location)
        return value

    def resolve_args(
        self, names: Iterable[str], contract: str, location: Optional[str] = None
    ) -> List[Any]:
        """Resolve option names to values, in order."""
        names = list(names)
        args = [self.argument(name, contract, location) for name in names]
        logger.debug(f"Resolved arguments for {location or contract}: {names}")
        return args

    def config_by_id(
        self, contract_id: Optional[str], contract_type: Optional[ContractType] = None
    ) -> Optional[ContractConfig]:
        return find_by_id(self.contract_configs, contract_id, contract_type)

    def config_by_name(self, name: str) -> Optional[ContractConfig]:
        return find_by_name(self.contract_configs, name)

    def deploy(
        self,
        contract: Union[str, ContractArtifact],
        args: Optional[List[Any]] = None,
    ) -> DeployedContract:
        """Deploy an artifact (or the artifact named ``contract``) from the owner account."""
        artifact = self.artifact(contract) if isinstance(contract, str) else contract
        handle = self.client.deploy(artifact, args or None, sender=self.owner)
        return handle.with_configs(self.config_by_name(artifact.name))

    def at(self, contract: Union[str, ContractArtifact], address: str) -> DeployedContract:
        """Bind to an already deployed instance of ``contract``."""
        artifact = self.artifact(contract) if isinstance(contract, str) else contract
        handle = self.client.at(artifact, address)
        return handle.with_configs(self.config_by_name(artifact.name))
