"""
Deployment phases of a Tribute DAO.

Each phase walks its slice of the descriptor table in table order and deploys
one contract at a time: the chain client submits transactions from a single
account, so the phases never run concurrently. A failure is logged with the
name of the contract that caused it and re-raised; contracts deployed earlier
in the run stay on-chain.
"""

from typing import Dict

from loguru import logger

from .deployer import deploy_contract, register
from ..base.context import DeploymentContext
from ..base.descriptor import ContractConfig, ContractType, select
from ..base.handle import DeployedContract
from ..exceptions import LinkageError
from ..utils.ids import sha3


def _generated_extension(factory: ContractConfig, ctx: DeploymentContext) -> ContractConfig:
    extension = ctx.config_by_id(factory.generates_extension_id, ContractType.EXTENSION)
    if extension is None:
        raise LinkageError(factory.name, factory.generates_extension_id)
    return extension


def create_factories(ctx: DeploymentContext) -> Dict[str, DeployedContract]:
    """
    Deploy every enabled extension factory.

    A factory is constructed with the artifact of the extension it clones; the
    chain client deploys that template first and passes its address on. All
    factory/extension links are checked before the first deployment.
    """
    configs = select(ctx.contract_configs, ContractType.FACTORY)
    for config in configs:
        try:
            _generated_extension(config, ctx)
        except LinkageError as e:
            logger.error(f"Failed factory deployment [{config.name}]: {e}")
            raise

    factories: Dict[str, DeployedContract] = {}
    for config in configs:
        try:
            factory_artifact = ctx.artifact(config.name)
            extension_artifact = ctx.artifact(_generated_extension(config, ctx).name)
            factory = ctx.client.deploy(
                factory_artifact, [extension_artifact], sender=ctx.owner
            ).with_configs(config)
        except Exception as e:
            logger.error(f"Failed factory deployment [{config.name}]: {e}")
            raise
        logger.info(f"Deployed factory {config.name} ({config.alias}) at {factory.address}")
        register(factories, factory)

    return factories


def _create_extension(
    dao: DeployedContract, factory: DeployedContract, ctx: DeploymentContext
) -> DeployedContract:
    factory_config = factory.configs
    extension_config = _generated_extension(factory_config, ctx)

    args = []
    if factory_config.deployment_args:
        args = ctx.resolve_args(
            factory_config.deployment_args,
            factory_config.name,
            location=f"{factory_config.name}.create",
        )
    factory.transact("create", *args, sender=ctx.owner)

    # create() does not hand back the clone, the factory has to be asked for it
    dao_address = ctx.argument("daoAddress", factory_config.name)
    extension_address = factory.call("getExtensionAddress", dao_address)
    extension = ctx.at(extension_config.name, extension_address).with_configs(extension_config)

    dao.transact(
        "addExtension",
        sha3(extension_config.id),
        extension.address,
        ctx.owner,
        sender=ctx.owner,
    )
    logger.info(
        f"Created extension {extension_config.name} ({extension_config.alias}) "
        f"at {extension.address}"
    )
    return extension


def create_extensions(
    dao: DeployedContract,
    factories: Dict[str, DeployedContract],
    ctx: DeploymentContext,
) -> Dict[str, DeployedContract]:
    """Clone one extension per factory and register it with the DAO."""
    extensions: Dict[str, DeployedContract] = {}
    for factory in factories.values():
        try:
            extension = _create_extension(dao, factory, ctx)
        except Exception as e:
            logger.error(f"Failed extension deployment {factory.name}: {e}")
            raise
        register(extensions, extension)
    return extensions


def _deploy_all(
    ctx: DeploymentContext, contract_type: ContractType, label: str
) -> Dict[str, DeployedContract]:
    deployed: Dict[str, DeployedContract] = {}
    for config in select(ctx.contract_configs, contract_type):
        try:
            handle = deploy_contract(config, ctx)
        except Exception as e:
            logger.error(f"Error while creating {label} {config.name}: {e}")
            raise
        register(deployed, handle)
    return deployed


def create_adapters(ctx: DeploymentContext) -> Dict[str, DeployedContract]:
    return _deploy_all(ctx, ContractType.ADAPTER, "adapter")


def create_util_contracts(ctx: DeploymentContext) -> Dict[str, DeployedContract]:
    return _deploy_all(ctx, ContractType.UTIL, "util contract")


def create_test_contracts(ctx: DeploymentContext) -> Dict[str, DeployedContract]:
    """Deploy the test tokens, only when the ``deployTestTokens`` option is set."""
    if not ctx.option("deployTestTokens"):
        return {}
    return _deploy_all(ctx, ContractType.TEST, "test contract")
