"""Adapter/extension identifiers and well-known DAO addresses."""

from eth_utils import keccak


class AdapterId:
    """Logical ids of the adapters registered in a DAO."""
    VOTING_ADAPTER = "voting"
    ONBOARDING_ADAPTER = "onboarding"
    NONVOTING_ONBOARDING_ADAPTER = "nonvoting-onboarding"
    TRIBUTE_ADAPTER = "tribute"
    FINANCING_ADAPTER = "financing"
    GUILDKICK_ADAPTER = "guildkick"
    RAGEQUIT_ADAPTER = "ragequit"
    MANAGING_ADAPTER = "managing"
    BANK_ADAPTER = "bank"
    CONFIGURATION_ADAPTER = "configuration"
    ERC1271_ADAPTER = "signatures"
    SNAPSHOT_PROPOSAL_ADAPTER = "snapshot-proposal-adpt"
    VOTING_HASH_ADAPTER = "voting-hash"
    KICK_BAD_REPORTER_ADAPTER = "kick-bad-reporter-adpt"
    COUPON_ONBOARDING_ADAPTER = "coupon-onboarding"
    TRIBUTE_NFT_ADAPTER = "tribute-nft"
    DAO_REGISTRY_ADAPTER = "daoRegistry"


class ExtensionId:
    """Logical ids of the extensions registered in a DAO."""
    BANK_EXT = "bank"
    ERC1271_EXT = "erc1271"
    NFT_EXT = "nft"
    ERC20_EXT = "erc20-ext"
    VESTING_EXT = "internal-token-vesting-extension"
    EXECUTOR_EXT = "executor-ext"
    ERC1155_EXT = "erc1155-ext"


def _values(namespace: type) -> frozenset:
    return frozenset(
        value for key, value in vars(namespace).items() if key.isupper()
    )


ADAPTER_IDS = _values(AdapterId)
EXTENSION_IDS = _values(ExtensionId)

# Reserved member addresses used by the bank extension
GUILD = "0x000000000000000000000000000000000000dead"
TOTAL = "0x000000000000000000000000000000000000babe"
ESCROW = "0x0000000000000000000000000000000000004bec"
MEMBER_COUNT = "0x00000000000000000000000000000000DECAFBAD"

# Internal tokens
UNITS = "0x00000000000000000000000000000000000FF1CE"
LOOT = "0x00000000000000000000000000000000B105F00D"
ETH_TOKEN = "0x0000000000000000000000000000000000000000"


def sha3(value: str) -> bytes:
    """keccak256 of a utf-8 string, as the contracts derive adapter/extension ids."""
    return keccak(text=value)
