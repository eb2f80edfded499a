"""Deployment of a single contract from its descriptor."""

from typing import Dict

from loguru import logger

from ..base.context import DeploymentContext
from ..base.descriptor import ContractConfig
from ..base.handle import DeployedContract
from ..exceptions import ConfigurationError


def deploy_contract(config: ContractConfig, ctx: DeploymentContext) -> DeployedContract:
    """
    Deploy the contract ``config`` describes.

    The artifact is looked up by ``config.name`` and every entry of
    ``config.deployment_args`` is resolved from the context options, in order.
    """
    artifact = ctx.artifact(config.name)

    args = None
    if config.deployment_args:
        args = ctx.resolve_args(config.deployment_args, config.name)

    handle = ctx.client.deploy(artifact, args, sender=ctx.owner).with_configs(config)
    logger.info(f"Deployed {config.name} ({config.alias}) at {handle.address}")
    return handle


def register(results: Dict[str, DeployedContract], handle: DeployedContract) -> None:
    """Add ``handle`` to a phase result, refusing to overwrite an alias."""
    alias = handle.alias
    if alias in results:
        raise ConfigurationError(
            f"Duplicate alias <{alias}>: {results[alias].name} and {handle.name}"
        )
    results[alias] = handle
