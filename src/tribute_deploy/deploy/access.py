"""Access wiring between the DAO, its adapters and its extensions."""

from typing import Any, Dict, Iterable, List

from loguru import logger

from ..base.context import DeploymentContext
from ..base.handle import DeployedContract
from ..exceptions import ConfigurationError
from ..utils.access import AccessEntry, entry_dao
from ..utils.ids import EXTENSION_IDS


def _auto_deployed(contracts: Iterable[DeployedContract]) -> List[DeployedContract]:
    return [c for c in contracts if c.configs is not None and c.configs.auto_deployed]


def _in_table_order(
    contracts: Iterable[DeployedContract], ctx: DeploymentContext
) -> List[DeployedContract]:
    position = {config.name: index for index, config in enumerate(ctx.contract_configs)}
    return sorted(contracts, key=lambda c: position.get(c.name, len(position)))


def configure_adapters_with_dao_access(
    dao: DeployedContract,
    dao_factory: DeployedContract,
    extensions: Dict[str, DeployedContract],
    adapters: Dict[str, DeployedContract],
    ctx: DeploymentContext,
) -> List[AccessEntry]:
    """Register adapters, and extensions that need other extensions, in one batch."""
    entries = [
        entry_dao(a.configs.id, a.address, a.configs.acls)
        for a in _auto_deployed(adapters.values())
        if a.configs.acls.dao is not None
    ]

    # An extension that calls another extension must itself be known to the
    # DAO as an adapter, without any DAO flag.
    entries.extend(
        entry_dao(e.configs.id, e.address, e.configs.acls)
        for e in _auto_deployed(extensions.values())
        if e.configs.acls.extensions
    )

    logger.debug(f"Adding {len(entries)} adapters to DAO {dao.address}")
    dao_factory.transact("addAdapters", dao.address, entries, sender=ctx.owner)
    return entries


def read_config_value(
    name: str,
    contract_name: str,
    extensions: Dict[str, DeployedContract],
    ctx: DeploymentContext,
) -> Any:
    """Resolve a DAO parameter: an extension id gives its address, anything else an option."""
    if name in EXTENSION_IDS:
        extension = next(
            (e for e in extensions.values() if e.configs and e.configs.id == name), None
        )
        if extension is None or not extension.address:
            raise ConfigurationError(
                f"Error while configuring dao parameter [{name}] for {contract_name}"
            )
        return extension.address

    value = ctx.option(name)
    if value is None:
        raise ConfigurationError(
            f"Error while configuring dao parameter [{name}] for {contract_name}"
        )
    return value


def configure_adapters_with_dao_parameters(
    extensions: Dict[str, DeployedContract],
    adapters: Dict[str, DeployedContract],
    ctx: DeploymentContext,
) -> None:
    for adapter in _auto_deployed(adapters.values()):
        configs = adapter.configs
        if not configs.dao_configs:
            continue
        try:
            for group in configs.dao_configs:
                values = [read_config_value(n, configs.name, extensions, ctx) for n in group]
                adapter.transact("configureDao", *values, sender=ctx.owner)
        except Exception as e:
            logger.error(f"Error while configuring dao with contract {configs.name}: {e}")
            raise
        logger.debug(f"Configured {configs.name} with {len(configs.dao_configs)} parameter groups")


def configure_extension_access(
    dao: DeployedContract,
    dao_factory: DeployedContract,
    extension: DeployedContract,
    contracts: Iterable[DeployedContract],
    ctx: DeploymentContext,
) -> List[AccessEntry]:
    """Grant ``contracts`` the flags they declare on ``extension``, if any."""
    entries = [
        extension.configs.build_acl_flag(c.address, c.configs.acls) for c in contracts
    ]
    if entries:
        dao_factory.transact(
            "configureExtension", dao.address, extension.address, entries, sender=ctx.owner
        )
    return entries


def configure_dao(
    dao: DeployedContract,
    dao_factory: DeployedContract,
    extensions: Dict[str, DeployedContract],
    adapters: Dict[str, DeployedContract],
    ctx: DeploymentContext,
) -> None:
    """
    Wire up the access of a freshly deployed DAO.

    1. adapters (and extensions acting as adapters) are added to the DAO
    2. adapters receive their DAO parameters through ``configureDao``
    3. each extension grants access to the adapters, then to the sibling
       extensions, that declare flags on it
    """
    configure_adapters_with_dao_access(dao, dao_factory, extensions, adapters, ctx)
    configure_adapters_with_dao_parameters(extensions, adapters, ctx)

    targets = _in_table_order(_auto_deployed(extensions.values()), ctx)

    for target in targets:
        target_id = target.configs.id
        contracts = [
            a for a in _auto_deployed(adapters.values())
            if a.configs.acls.has_extension_access(target_id)
        ]
        try:
            configure_extension_access(dao, dao_factory, target, contracts, ctx)
        except Exception as e:
            logger.error(
                f"Error while configuring adapters access to extension {target.name}: {e}"
            )
            raise

    for target in targets:
        target_id = target.configs.id
        contracts = [
            e for e in _auto_deployed(extensions.values())
            if e.configs.id != target_id and e.configs.acls.has_extension_access(target_id)
        ]
        try:
            configure_extension_access(dao, dao_factory, target, contracts, ctx)
        except Exception as e:
            logger.error(
                f"Error while configuring extensions access to extension {target.name}: {e}"
            )
            raise
