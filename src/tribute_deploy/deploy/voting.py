"""Optional installation of the off-chain (snapshot based) voting adapter."""

from dataclasses import dataclass
from typing import Dict, Optional

from loguru import logger

from ..base.context import DeploymentContext
from ..base.handle import DeployedContract
from ..exceptions import ConfigurationError
from ..utils.access import entry_bank, entry_dao
from ..utils.ids import AdapterId, ExtensionId, sha3

# Fourth argument of OffchainVotingContract.configureDao, passed through as is.
OFFCHAIN_VOTING_CONFIG_CONSTANT = 10


@dataclass(frozen=True)
class VotingHelpers:
    snapshot_proposal_contract: Optional[DeployedContract] = None
    handle_bad_reporter_adapter: Optional[DeployedContract] = None
    offchain_voting: Optional[DeployedContract] = None


def _bank_extension(extensions: Dict[str, DeployedContract]) -> DeployedContract:
    for extension in extensions.values():
        if extension.configs and extension.configs.id == ExtensionId.BANK_EXT:
            return extension
    raise ConfigurationError("Off-chain voting requires the bank extension")


def configure_offchain_voting(
    dao: DeployedContract,
    dao_factory: DeployedContract,
    extensions: Dict[str, DeployedContract],
    ctx: DeploymentContext,
) -> VotingHelpers:
    """
    Replace the DAO voting adapter with the off-chain voting adapter.

    Does nothing, and touches no contract, unless the ``offchainVoting``
    option is set. The adapter being replaced stays reachable from the new one
    as its fallback.
    """
    if not ctx.option("offchainVoting"):
        return VotingHelpers()

    try:
        return _install_offchain_voting(dao, dao_factory, extensions, ctx)
    except Exception as e:
        logger.error(f"Error while installing off-chain voting: {e}")
        raise


def _install_offchain_voting(
    dao: DeployedContract,
    dao_factory: DeployedContract,
    extensions: Dict[str, DeployedContract],
    ctx: DeploymentContext,
) -> VotingHelpers:
    owner = ctx.owner
    bank = _bank_extension(extensions)

    current_voting_address = dao.call("getAdapterAddress", sha3(AdapterId.VOTING_ADAPTER))

    snapshot_proposal = ctx.deploy(
        "SnapshotProposalContract", [ctx.argument("chainId", "SnapshotProposalContract")]
    )
    voting_hash = ctx.deploy("OffchainVotingHashContract", [snapshot_proposal.address])
    bad_reporter = ctx.deploy("KickBadReporterAdapter")
    offchain_voting = ctx.deploy(
        "OffchainVotingContract",
        [
            current_voting_address,
            voting_hash.address,
            snapshot_proposal.address,
            bad_reporter.address,
            ctx.argument("offchainAdmin", "OffchainVotingContract"),
        ],
    )
    configs = offchain_voting.configs
    if configs is None:
        raise ConfigurationError("OffchainVotingContract has no contract config")

    dao_factory.transact(
        "updateAdapter",
        dao.address,
        entry_dao(configs.id, offchain_voting.address, configs.acls),
        sender=owner,
    )
    dao.transact(
        "setAclToExtensionForAdapter",
        bank.address,
        offchain_voting.address,
        entry_bank(offchain_voting.address, configs.acls).flags,
        sender=owner,
    )
    offchain_voting.transact(
        "configureDao",
        dao.address,
        ctx.argument("votingPeriod", "OffchainVotingContract"),
        ctx.argument("gracePeriod", "OffchainVotingContract"),
        OFFCHAIN_VOTING_CONFIG_CONSTANT,
        sender=owner,
    )

    logger.info(
        f"Off-chain voting installed at {offchain_voting.address} "
        f"(previous voting adapter {current_voting_address})"
    )
    return VotingHelpers(
        snapshot_proposal_contract=snapshot_proposal,
        handle_bad_reporter_adapter=bad_reporter,
        offchain_voting=offchain_voting,
    )
