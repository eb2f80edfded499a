"""Helpers for tests that deploy a DAO."""

from .chain import ProposalIdGenerator, advance_time, revert_chain_snapshot, take_chain_snapshot
from .defaults import default_options, deploy_default_dao
from ..configs.defaults import NUMBER_OF_UNITS, UNIT_PRICE
from ..utils.access import entry_bank, entry_dao
from ..utils.ids import ESCROW, ETH_TOKEN, GUILD, LOOT, MEMBER_COUNT, TOTAL, UNITS, sha3

__all__ = [
    "ProposalIdGenerator",
    "advance_time",
    "revert_chain_snapshot",
    "take_chain_snapshot",
    "default_options",
    "deploy_default_dao",
    "NUMBER_OF_UNITS",
    "UNIT_PRICE",
    "entry_bank",
    "entry_dao",
    "ESCROW",
    "ETH_TOKEN",
    "GUILD",
    "LOOT",
    "MEMBER_COUNT",
    "TOTAL",
    "UNITS",
    "sha3",
]
