"""Bundled descriptor table and default DAO parameters."""

from .contracts import CONTRACT_CONFIGS
from .defaults import DEFAULT_OPTIONS

__all__ = ["CONTRACT_CONFIGS", "DEFAULT_OPTIONS"]
