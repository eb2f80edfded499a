"""
Contract descriptors for the Tribute DAO deployment.

A descriptor tells the deployment which contract to deploy, under which alias
it is returned, which options feed its constructor and which access flags it
needs on the DAO and on each extension. The table of descriptors is the only
input that decides what a deployment run produces.
"""

import json
from collections import Counter
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import ConfigurationError
from ..utils.access import AccessEntry, EXTENSION_FLAGS, entry_extension


class ContractType(str, Enum):
    """Deployment category of a contract."""
    CORE = "core"
    FACTORY = "factory"
    EXTENSION = "extension"
    ADAPTER = "adapter"
    UTIL = "util"
    TEST = "test"


class AclSpec(BaseModel):
    """
    Access a contract requires.

    ``dao`` lists DAO-level flags; ``None`` means the contract is never added
    to the DAO as an adapter, while an empty list registers it without flags.
    ``extensions`` maps an extension id to the flags needed on that extension.
    """

    model_config = ConfigDict(frozen=True)

    dao: Optional[Tuple[str, ...]] = None
    extensions: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)

    def has_extension_access(self, extension_id: str) -> bool:
        return extension_id in self.extensions


class ContractConfig(BaseModel):
    """Immutable descriptor of one contract of the DAO."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=False)

    id: str = Field(..., description="Logical id, hashed to derive the on-chain id")
    name: str = Field(..., description="Contract name, also the artifact name")
    alias: str = Field(..., description="Key of the deployed handle in the results")
    type: ContractType
    enabled: bool = True
    skip_auto_deploy: bool = Field(default=False, alias="skipAutoDeploy")
    version: str = "1.0.0"
    deployment_args: Tuple[str, ...] = Field(default=(), alias="deploymentArgs")
    acls: AclSpec = Field(default_factory=AclSpec)
    dao_configs: Tuple[Tuple[str, ...], ...] = Field(default=(), alias="daoConfigs")
    generates_extension_id: Optional[str] = Field(default=None, alias="generatesExtensionId")

    @field_validator("id", "name", "alias")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @property
    def auto_deployed(self) -> bool:
        """Enabled and not excluded from the automatic deployment phases."""
        return self.enabled and not self.skip_auto_deploy

    def build_acl_flag(self, address: str, acls: AclSpec) -> AccessEntry:
        """Encode the access ``acls`` grants ``address`` on this extension."""
        if self.type != ContractType.EXTENSION:
            raise ConfigurationError(f"{self.name} is not an extension")
        if self.id not in EXTENSION_FLAGS:
            raise ConfigurationError(f"No access flags known for extension {self.id}")
        return entry_extension(self.id, address, acls)


def select(
    configs: Iterable[ContractConfig], contract_type: ContractType
) -> List[ContractConfig]:
    """Descriptors of ``contract_type`` that the automatic phases deploy, in table order."""
    return [c for c in configs if c.type == contract_type and c.auto_deployed]


def find_by_id(configs: Iterable[ContractConfig], contract_id: Optional[str], contract_type: Optional[ContractType] = None) -> Optional[ContractConfig]:
    for config in configs:
        if config.id == contract_id and (contract_type is None or config.type == contract_type):
            return config
    return None


def find_by_name(configs: Iterable[ContractConfig], name: str) -> Optional[ContractConfig]:
    for config in configs:
        if config.name == name:
            return config
    return None


def validate_contract_configs(configs: Sequence[ContractConfig]) -> None:
    """
    Reject tables the deployment cannot produce a consistent result for.

    - two auto-deployed descriptors of the same category sharing an alias
    - an enabled factory whose ``generates_extension_id`` names no extension
    """
    for contract_type in ContractType:
        aliases = Counter(c.alias for c in select(configs, contract_type))
        duplicated = sorted(alias for alias, count in aliases.items() if count > 1)
        if duplicated:
            raise ConfigurationError(
                f"Duplicate {contract_type.value} aliases: {', '.join(duplicated)}"
            )

    for factory in select(configs, ContractType.FACTORY):
        if find_by_id(configs, factory.generates_extension_id, ContractType.EXTENSION) is None:
            raise ConfigurationError(
                f"Factory {factory.name} generates unknown extension "
                f"<{factory.generates_extension_id}>"
            )


def load_contract_configs(path: Union[str, Path]) -> List[ContractConfig]:
    """Load and validate a descriptor table from a JSON list."""
    with open(path, "r") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ConfigurationError(f"{path}: expected a list of contract configs")

    try:
        configs = [ContractConfig.model_validate(entry) for entry in raw]
    except ValidationError as e:
        raise ConfigurationError(f"{path}: invalid contract config: {e}") from e

    validate_contract_configs(configs)
    return configs
