"""Descriptors, handles, context and settings of a deployment."""

from .descriptor import AclSpec, ContractConfig, ContractType, load_contract_configs
from .handle import ChainClient, DeployedContract
from .context import DeploymentContext
from .config import DeploymentSettings

__all__ = [
    "AclSpec",
    "ContractConfig",
    "ContractType",
    "load_contract_configs",
    "ChainClient",
    "DeployedContract",
    "DeploymentContext",
    "DeploymentSettings",
]
