"""
Access control flag encoding for the DAO registry and its extensions.

Every contract declares the flags it needs by name. The DAO and each extension
store them as a bit mask where bit ``i`` is set when the ``i``-th flag of that
target (in declaration order below) is granted.
"""

from enum import Enum
from typing import Any, Dict, Iterable, NamedTuple, Optional, Type

from ..exceptions import ConfigurationError
from .ids import ExtensionId, sha3


class DaoAccessFlag(str, Enum):
    REPLACE_ADAPTER = "REPLACE_ADAPTER"
    SUBMIT_PROPOSAL = "SUBMIT_PROPOSAL"
    UPDATE_DELEGATE_KEY = "UPDATE_DELEGATE_KEY"
    SET_CONFIGURATION = "SET_CONFIGURATION"
    ADD_EXTENSION = "ADD_EXTENSION"
    REMOVE_EXTENSION = "REMOVE_EXTENSION"
    NEW_MEMBER = "NEW_MEMBER"
    JAIL_MEMBER = "JAIL_MEMBER"


class BankFlag(str, Enum):
    ADD_TO_BALANCE = "ADD_TO_BALANCE"
    SUB_FROM_BALANCE = "SUB_FROM_BALANCE"
    INTERNAL_TRANSFER = "INTERNAL_TRANSFER"
    WITHDRAW = "WITHDRAW"
    REGISTER_NEW_TOKEN = "REGISTER_NEW_TOKEN"
    REGISTER_NEW_INTERNAL_TOKEN = "REGISTER_NEW_INTERNAL_TOKEN"
    UPDATE_TOKEN = "UPDATE_TOKEN"


class NFTFlag(str, Enum):
    WITHDRAW_NFT = "WITHDRAW_NFT"
    COLLECT_NFT = "COLLECT_NFT"
    INTERNAL_TRANSFER = "INTERNAL_TRANSFER"


class ERC1155Flag(str, Enum):
    WITHDRAW_NFT = "WITHDRAW_NFT"
    COLLECT_NFT = "COLLECT_NFT"
    INTERNAL_TRANSFER = "INTERNAL_TRANSFER"


class ERC1271Flag(str, Enum):
    SIGN = "SIGN"


class ExecutorFlag(str, Enum):
    EXECUTE = "EXECUTE"


class VestingFlag(str, Enum):
    NEW_VESTING = "NEW_VESTING"
    REMOVE_VESTING = "REMOVE_VESTING"


class ERC20Flag(str, Enum):
    """The ERC20 extension defines no access flags."""


EXTENSION_FLAGS: Dict[str, Type[Enum]] = {
    ExtensionId.BANK_EXT: BankFlag,
    ExtensionId.NFT_EXT: NFTFlag,
    ExtensionId.ERC1155_EXT: ERC1155Flag,
    ExtensionId.ERC1271_EXT: ERC1271Flag,
    ExtensionId.EXECUTOR_EXT: ExecutorFlag,
    ExtensionId.VESTING_EXT: VestingFlag,
    ExtensionId.ERC20_EXT: ERC20Flag,
}

# Extension entries are keyed by address on-chain; the id is a placeholder.
EXTENSION_ENTRY_ID = sha3("n/a")


class AccessEntry(NamedTuple):
    """The (id, addr, flags) struct consumed by DaoFactory and DaoRegistry."""
    id: bytes
    addr: str
    flags: int


def calculate_flag_value(flags: Type[Enum], granted: Optional[Iterable[Any]]) -> int:
    granted = {getattr(flag, "value", flag) for flag in granted or ()}
    return sum(
        1 << index for index, flag in enumerate(flags) if flag.value in granted
    )


def entry_dao(contract_id: str, address: str, acls: Any) -> AccessEntry:
    """DAO-level entry registering ``address`` as adapter ``contract_id``."""
    return AccessEntry(
        id=sha3(contract_id),
        addr=address,
        flags=calculate_flag_value(DaoAccessFlag, acls.dao),
    )


def entry_extension(extension_id: str, address: str, acls: Any) -> AccessEntry:
    """Entry granting ``address`` the flags it declares on ``extension_id``."""
    flags = EXTENSION_FLAGS.get(extension_id)
    if flags is None:
        raise ConfigurationError(f"No access flags defined for extension {extension_id}")
    granted = (acls.extensions or {}).get(extension_id)
    return AccessEntry(
        id=EXTENSION_ENTRY_ID,
        addr=address,
        flags=calculate_flag_value(flags, granted),
    )


def entry_bank(address: str, acls: Any) -> AccessEntry:
    return entry_extension(ExtensionId.BANK_EXT, address, acls)


def entry_nft(address: str, acls: Any) -> AccessEntry:
    return entry_extension(ExtensionId.NFT_EXT, address, acls)


def entry_erc1155(address: str, acls: Any) -> AccessEntry:
    return entry_extension(ExtensionId.ERC1155_EXT, address, acls)


def entry_erc1271(address: str, acls: Any) -> AccessEntry:
    return entry_extension(ExtensionId.ERC1271_EXT, address, acls)


def entry_executor(address: str, acls: Any) -> AccessEntry:
    return entry_extension(ExtensionId.EXECUTOR_EXT, address, acls)
