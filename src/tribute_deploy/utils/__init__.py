"""Identifiers, access flag encoding and artifact loading."""

from .access import AccessEntry, calculate_flag_value, entry_bank, entry_dao, entry_extension
from .artifacts import ContractArtifact, load_artifact, load_artifacts
from .ids import AdapterId, ExtensionId, sha3

__all__ = [
    "AccessEntry",
    "calculate_flag_value",
    "entry_bank",
    "entry_dao",
    "entry_extension",
    "ContractArtifact",
    "load_artifact",
    "load_artifacts",
    "AdapterId",
    "ExtensionId",
    "sha3",
]
