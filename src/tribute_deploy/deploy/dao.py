"""End to end deployment of a Tribute DAO."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Tuple

from loguru import logger

from .access import configure_dao
from .phases import (
    create_adapters,
    create_extensions,
    create_factories,
    create_test_contracts,
    create_util_contracts,
)
from .voting import VotingHelpers, configure_offchain_voting
from ..base.context import DeploymentContext
from ..base.handle import DeployedContract
from ..utils.ids import LOOT, UNITS

DEFAULT_DAO_NAME = "test-dao"


@dataclass
class DeploymentResult:
    """Contracts produced by ``deploy_dao``, grouped by category and keyed by alias."""

    dao: DeployedContract
    adapters: Dict[str, DeployedContract] = field(default_factory=dict)
    extensions: Dict[str, DeployedContract] = field(default_factory=dict)
    test_contracts: Dict[str, DeployedContract] = field(default_factory=dict)
    util_contracts: Dict[str, DeployedContract] = field(default_factory=dict)
    voting_helpers: VotingHelpers = field(default_factory=VotingHelpers)
    factories: Dict[str, DeployedContract] = field(default_factory=dict)

    def _groups(self) -> Dict[str, Dict[str, DeployedContract]]:
        return {
            "adapters": self.adapters,
            "extensions": self.extensions,
            "testContracts": self.test_contracts,
            "utilContracts": self.util_contracts,
            "factories": self.factories,
            "votingHelpers": {
                f.name: getattr(self.voting_helpers, f.name)
                for f in fields(self.voting_helpers)
                if getattr(self.voting_helpers, f.name) is not None
            },
        }

    def aliases(self) -> Dict[str, Tuple[str, ...]]:
        """Shape of the deployment: sorted aliases per category."""
        return {group: tuple(sorted(handles)) for group, handles in self._groups().items()}

    def addresses(self) -> Dict[str, Any]:
        """JSON friendly view of every deployed address."""
        result: Dict[str, Any] = {"dao": self.dao.address}
        for group, handles in self._groups().items():
            result[group] = {alias: h.address for alias, h in handles.items()}
        return result


def clone_dao(
    ctx: DeploymentContext, name: str, creator: Optional[str] = None
) -> Tuple[DeployedContract, DeployedContract]:
    """Deploy a DaoFactory and create the DAO ``name`` through it."""
    dao_registry = ctx.artifact("DaoRegistry")
    dao_factory = ctx.deploy("DaoFactory", [dao_registry])

    dao_factory.transact("createDao", name, creator or ctx.owner, sender=ctx.owner)
    dao_address = dao_factory.call("getDaoAddress", name)
    dao = ctx.at(dao_registry, dao_address)

    logger.info(f"DAO '{name}' created at {dao.address} (factory {dao_factory.address})")
    return dao, dao_factory


def deploy_dao(ctx: DeploymentContext) -> DeploymentResult:
    """
    Deploy and wire a complete DAO described by ``ctx.contract_configs``.

    Phases run in a fixed order: DAO clone, factories, extensions, adapters,
    access configuration, off-chain voting (optional), util contracts, test
    contracts (optional) and finally ``finalizeDao`` when the ``finalize``
    option is set.
    """
    dao_name = ctx.option("daoName", DEFAULT_DAO_NAME)
    dao, dao_factory = clone_dao(ctx, dao_name, ctx.option("creator"))

    ctx = ctx.with_options(
        daoAddress=dao.address,
        unitTokenToMint=UNITS,
        lootTokenToMint=LOOT,
    )

    factories = create_factories(ctx)
    extensions = create_extensions(dao, factories, ctx)
    adapters = create_adapters(ctx)

    configure_dao(dao, dao_factory, extensions, adapters, ctx)

    voting_helpers = configure_offchain_voting(dao, dao_factory, extensions, ctx)
    if voting_helpers.offchain_voting is not None:
        # the off-chain adapter takes over the alias of the voting adapter it replaces
        adapters[voting_helpers.offchain_voting.alias] = voting_helpers.offchain_voting

    util_contracts = create_util_contracts(ctx)
    test_contracts = create_test_contracts(ctx)

    if ctx.option("finalize"):
        dao.transact("finalizeDao", sender=ctx.owner)
        logger.info(f"DAO '{dao_name}' finalized")

    logger.success(
        f"DAO '{dao_name}' deployed: {len(adapters)} adapters, "
        f"{len(extensions)} extensions, {len(factories)} factories"
    )
    return DeploymentResult(
        dao=dao,
        adapters=adapters,
        extensions=extensions,
        test_contracts=test_contracts,
        util_contracts=util_contracts,
        voting_helpers=voting_helpers,
        factories={**factories, "daoFactory": dao_factory},
    )
