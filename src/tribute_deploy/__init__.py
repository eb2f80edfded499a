"""Tribute DAO deployment package."""

from .base import ContractConfig, ContractType, DeploymentContext, DeploymentSettings
from .chain import Web3ChainClient
from .configs import CONTRACT_CONFIGS, DEFAULT_OPTIONS
from .deploy import DeploymentResult, deploy_dao
from .exceptions import ConfigurationError, DeploymentError
from .networks import get_network_details

__version__ = "0.1.0"
__all__ = [
    "ContractConfig",
    "ContractType",
    "DeploymentContext",
    "DeploymentSettings",
    "Web3ChainClient",
    "CONTRACT_CONFIGS",
    "DEFAULT_OPTIONS",
    "DeploymentResult",
    "deploy_dao",
    "ConfigurationError",
    "DeploymentError",
    "get_network_details",
]
