"""
Default contract table of a Tribute DAO.

Order matters: every phase deploys its contracts in the order they appear
here, and extensions grant access in this order too.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..base.descriptor import AclSpec, ContractConfig, ContractType
from ..utils.access import (
    BankFlag,
    DaoAccessFlag,
    ERC1271Flag,
    NFTFlag,
)
from ..utils.ids import AdapterId, ExtensionId


def _flags(*flags: Enum) -> Tuple[str, ...]:
    return tuple(flag.value for flag in flags)


def _acls(dao: Optional[Iterable[Enum]] = None, **extensions: Iterable[Enum]) -> AclSpec:
    return AclSpec(
        dao=None if dao is None else _flags(*dao),
        extensions={ext: _flags(*flags) for ext, flags in extensions.items()},
    )


CORE = [
    ContractConfig(
        id="dao-registry", name="DaoRegistry", alias="daoRegistry",
        type=ContractType.CORE,
    ),
    ContractConfig(
        id="dao-factory", name="DaoFactory", alias="daoFactory",
        type=ContractType.CORE,
    ),
]

FACTORIES = [
    ContractConfig(
        id="bank-factory", name="BankFactory", alias="bankExtFactory",
        type=ContractType.FACTORY,
        generates_extension_id=ExtensionId.BANK_EXT,
        deployment_args=("daoAddress", "maxExternalTokens"),
    ),
    ContractConfig(
        id="erc20-extension-factory", name="ERC20TokenExtensionFactory",
        alias="erc20ExtFactory", type=ContractType.FACTORY,
        generates_extension_id=ExtensionId.ERC20_EXT,
        deployment_args=(
            "daoAddress", "erc20TokenName", "erc20TokenAddress",
            "erc20TokenSymbol", "erc20TokenDecimals",
        ),
    ),
    ContractConfig(
        id="nft-collection-factory", name="NFTCollectionFactory",
        alias="nftCollectionFactory", type=ContractType.FACTORY,
        generates_extension_id=ExtensionId.NFT_EXT,
        deployment_args=("daoAddress",),
    ),
    ContractConfig(
        id="executor-ext-factory", name="ExecutorExtensionFactory",
        alias="executorExtFactory", type=ContractType.FACTORY,
        generates_extension_id=ExtensionId.EXECUTOR_EXT,
        deployment_args=("daoAddress",),
    ),
    ContractConfig(
        id="erc1271-ext-factory", name="ERC1271ExtensionFactory",
        alias="erc1271ExtFactory", type=ContractType.FACTORY,
        generates_extension_id=ExtensionId.ERC1271_EXT,
        deployment_args=("daoAddress",),
    ),
    ContractConfig(
        id="erc1155-collection-factory", name="ERC1155TokenCollectionFactory",
        alias="erc1155CollectionFactory", type=ContractType.FACTORY,
        generates_extension_id=ExtensionId.ERC1155_EXT,
        deployment_args=("daoAddress",),
    ),
    ContractConfig(
        id="vesting-ext-factory", name="InternalTokenVestingExtensionFactory",
        alias="vestingExtFactory", type=ContractType.FACTORY,
        generates_extension_id=ExtensionId.VESTING_EXT,
        deployment_args=("daoAddress",),
    ),
]

EXTENSIONS = [
    ContractConfig(
        id=ExtensionId.BANK_EXT, name="BankExtension", alias="bank",
        type=ContractType.EXTENSION,
    ),
    ContractConfig(
        id=ExtensionId.ERC20_EXT, name="ERC20Extension", alias="erc20Ext",
        type=ContractType.EXTENSION,
        acls=_acls(**{ExtensionId.BANK_EXT: [BankFlag.INTERNAL_TRANSFER]}),
    ),
    ContractConfig(
        id=ExtensionId.NFT_EXT, name="NFTExtension", alias="nftExt",
        type=ContractType.EXTENSION,
    ),
    ContractConfig(
        id=ExtensionId.EXECUTOR_EXT, name="ExecutorExtension", alias="executorExt",
        type=ContractType.EXTENSION,
    ),
    ContractConfig(
        id=ExtensionId.ERC1271_EXT, name="ERC1271Extension", alias="erc1271Ext",
        type=ContractType.EXTENSION,
    ),
    ContractConfig(
        id=ExtensionId.ERC1155_EXT, name="ERC1155TokenExtension", alias="erc1155Ext",
        type=ContractType.EXTENSION,
    ),
    ContractConfig(
        id=ExtensionId.VESTING_EXT, name="InternalTokenVestingExtension",
        alias="vestingExt", type=ContractType.EXTENSION,
    ),
]

ADAPTERS = [
    ContractConfig(
        id=AdapterId.DAO_REGISTRY_ADAPTER, name="DaoRegistryAdapterContract",
        alias="daoRegistryAdapter", type=ContractType.ADAPTER,
        acls=_acls(dao=[DaoAccessFlag.UPDATE_DELEGATE_KEY]),
    ),
    ContractConfig(
        id=AdapterId.BANK_ADAPTER, name="BankAdapterContract", alias="bankAdapter",
        type=ContractType.ADAPTER,
        acls=_acls(dao=[], **{ExtensionId.BANK_EXT: [BankFlag.WITHDRAW, BankFlag.UPDATE_TOKEN]}),
    ),
    ContractConfig(
        id=AdapterId.CONFIGURATION_ADAPTER, name="ConfigurationContract",
        alias="configuration", type=ContractType.ADAPTER,
        acls=_acls(dao=[DaoAccessFlag.SUBMIT_PROPOSAL, DaoAccessFlag.SET_CONFIGURATION]),
    ),
    ContractConfig(
        id=AdapterId.ERC1271_ADAPTER, name="SignaturesContract", alias="signatures",
        type=ContractType.ADAPTER,
        acls=_acls(
            dao=[DaoAccessFlag.SUBMIT_PROPOSAL],
            **{ExtensionId.ERC1271_EXT: [ERC1271Flag.SIGN]},
        ),
    ),
    ContractConfig(
        id=AdapterId.MANAGING_ADAPTER, name="ManagingContract", alias="managing",
        type=ContractType.ADAPTER,
        acls=_acls(dao=[
            DaoAccessFlag.SUBMIT_PROPOSAL,
            DaoAccessFlag.REPLACE_ADAPTER,
            DaoAccessFlag.ADD_EXTENSION,
            DaoAccessFlag.REMOVE_EXTENSION,
            DaoAccessFlag.SET_CONFIGURATION,
        ]),
    ),
    ContractConfig(
        id=AdapterId.VOTING_ADAPTER, name="VotingContract", alias="voting",
        type=ContractType.ADAPTER,
        acls=_acls(dao=[]),
        dao_configs=(("daoAddress", "votingPeriod", "gracePeriod"),),
    ),
    ContractConfig(
        id=AdapterId.VOTING_ADAPTER, name="OffchainVotingContract", alias="voting",
        type=ContractType.ADAPTER, skip_auto_deploy=True,
        acls=_acls(dao=[], **{ExtensionId.BANK_EXT: [
            BankFlag.ADD_TO_BALANCE,
            BankFlag.SUB_FROM_BALANCE,
            BankFlag.INTERNAL_TRANSFER,
        ]}),
    ),
    ContractConfig(
        id=AdapterId.SNAPSHOT_PROPOSAL_ADAPTER, name="SnapshotProposalContract",
        alias="snapshotProposalAdpt", type=ContractType.ADAPTER, skip_auto_deploy=True,
    ),
    ContractConfig(
        id=AdapterId.VOTING_HASH_ADAPTER, name="OffchainVotingHashContract",
        alias="offchainVotingHashAdpt", type=ContractType.ADAPTER, skip_auto_deploy=True,
    ),
    ContractConfig(
        id=AdapterId.KICK_BAD_REPORTER_ADAPTER, name="KickBadReporterAdapter",
        alias="kickBadReporterAdpt", type=ContractType.ADAPTER, skip_auto_deploy=True,
    ),
    ContractConfig(
        id=AdapterId.FINANCING_ADAPTER, name="FinancingContract", alias="financing",
        type=ContractType.ADAPTER,
        acls=_acls(
            dao=[DaoAccessFlag.SUBMIT_PROPOSAL],
            **{ExtensionId.BANK_EXT: [BankFlag.ADD_TO_BALANCE, BankFlag.SUB_FROM_BALANCE]},
        ),
    ),
    ContractConfig(
        id="financing-chainlink", name="FinancingChainlinkContract",
        alias="financingChainlink", type=ContractType.ADAPTER, skip_auto_deploy=True,
        acls=_acls(
            dao=[DaoAccessFlag.SUBMIT_PROPOSAL],
            **{ExtensionId.BANK_EXT: [BankFlag.ADD_TO_BALANCE, BankFlag.SUB_FROM_BALANCE]},
        ),
    ),
    ContractConfig(
        id=AdapterId.ONBOARDING_ADAPTER, name="OnboardingContract", alias="onboarding",
        type=ContractType.ADAPTER,
        acls=_acls(
            dao=[
                DaoAccessFlag.SUBMIT_PROPOSAL,
                DaoAccessFlag.UPDATE_DELEGATE_KEY,
                DaoAccessFlag.NEW_MEMBER,
            ],
            **{ExtensionId.BANK_EXT: [BankFlag.ADD_TO_BALANCE]},
        ),
        dao_configs=(
            ("daoAddress", "unitTokenToMint", "unitPrice", "nbUnits", "maxChunks", "tokenAddr"),
            ("daoAddress", "lootTokenToMint", "unitPrice", "nbUnits", "maxChunks", "tokenAddr"),
        ),
    ),
    ContractConfig(
        id=AdapterId.COUPON_ONBOARDING_ADAPTER, name="CouponOnboardingContract",
        alias="couponOnboarding", type=ContractType.ADAPTER,
        acls=_acls(
            dao=[DaoAccessFlag.NEW_MEMBER],
            **{ExtensionId.BANK_EXT: [BankFlag.ADD_TO_BALANCE]},
        ),
        dao_configs=((
            "daoAddress", "couponCreatorAddress", ExtensionId.ERC20_EXT,
            "unitTokenToMint", "maxAmount",
        ),),
    ),
    ContractConfig(
        id=AdapterId.GUILDKICK_ADAPTER, name="GuildKickContract", alias="guildkick",
        type=ContractType.ADAPTER,
        acls=_acls(
            dao=[DaoAccessFlag.SUBMIT_PROPOSAL],
            **{ExtensionId.BANK_EXT: [
                BankFlag.SUB_FROM_BALANCE,
                BankFlag.ADD_TO_BALANCE,
                BankFlag.INTERNAL_TRANSFER,
            ]},
        ),
    ),
    ContractConfig(
        id=AdapterId.RAGEQUIT_ADAPTER, name="RagequitContract", alias="ragequit",
        type=ContractType.ADAPTER,
        acls=_acls(dao=[], **{ExtensionId.BANK_EXT: [
            BankFlag.SUB_FROM_BALANCE,
            BankFlag.ADD_TO_BALANCE,
            BankFlag.INTERNAL_TRANSFER,
        ]}),
    ),
    ContractConfig(
        id=AdapterId.TRIBUTE_ADAPTER, name="TributeContract", alias="tribute",
        type=ContractType.ADAPTER,
        acls=_acls(
            dao=[DaoAccessFlag.SUBMIT_PROPOSAL, DaoAccessFlag.NEW_MEMBER],
            **{ExtensionId.BANK_EXT: [BankFlag.ADD_TO_BALANCE, BankFlag.REGISTER_NEW_TOKEN]},
        ),
        dao_configs=(("daoAddress", "unitTokenToMint"), ("daoAddress", "lootTokenToMint")),
    ),
    ContractConfig(
        id=AdapterId.TRIBUTE_NFT_ADAPTER, name="TributeNFTContract", alias="tributeNFT",
        type=ContractType.ADAPTER,
        acls=_acls(
            dao=[DaoAccessFlag.SUBMIT_PROPOSAL, DaoAccessFlag.NEW_MEMBER],
            **{
                ExtensionId.BANK_EXT: [BankFlag.ADD_TO_BALANCE],
                ExtensionId.NFT_EXT: [NFTFlag.COLLECT_NFT],
            },
        ),
        dao_configs=(("daoAddress", "unitTokenToMint"),),
    ),
]

UTILS = [
    ContractConfig(id="multicall", name="Multicall", alias="multicall", type=ContractType.UTIL),
]

TEST_CONTRACTS = [
    ContractConfig(
        id="test-token-1", name="TestToken1", alias="testToken1",
        type=ContractType.TEST, deployment_args=("supplyTestToken1",),
    ),
    ContractConfig(
        id="test-token-2", name="TestToken2", alias="testToken2",
        type=ContractType.TEST, deployment_args=("supplyTestToken2",),
    ),
    ContractConfig(
        id="pixel-nft", name="PixelNFT", alias="pixelNFT",
        type=ContractType.TEST, deployment_args=("supplyPixelNFT",),
    ),
    ContractConfig(
        id="ol-token", name="OLToken", alias="olToken",
        type=ContractType.TEST, deployment_args=("supplyOLToken",),
    ),
    ContractConfig(
        id="erc1155-test-token", name="ERC1155TestToken", alias="erc1155TestToken",
        type=ContractType.TEST, deployment_args=("erc1155TestTokenUri",),
    ),
    ContractConfig(
        id="fake-chainlink-price-feed", name="FakeChainlinkPriceFeed",
        alias="fakeChainlinkPriceFeed", type=ContractType.TEST, skip_auto_deploy=True,
    ),
]

CONTRACT_CONFIGS: List[ContractConfig] = (
    CORE + FACTORIES + EXTENSIONS + ADAPTERS + UTILS + TEST_CONTRACTS
)
