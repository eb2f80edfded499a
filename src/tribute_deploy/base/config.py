"""
Settings of a deployment run.

This module defines the DeploymentSettings class that gathers everything an
operator chooses for a run: which chain to talk to, which account pays for the
transactions, where the compiled contracts live and the DAO parameters that
override the defaults. Settings can be built directly, from the command line
or from ``TRIBUTE_*`` environment variables (a ``.env`` file is honoured).
"""

import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..configs.defaults import DEFAULT_OPTIONS
from ..exceptions import ConfigurationError
from ..networks import get_network_details

ENV_PREFIX = "TRIBUTE_"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(ENV_PREFIX + name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_PREFIX + name} must be an integer, got {value!r}") from e


class DeploymentSettings(BaseModel):
    """
    Configuration of one DAO deployment run.

    Only the connection settings are required to reach a chain; every DAO
    parameter left unset falls back to the default options.
    """

    model_config = ConfigDict(validate_assignment=True)

    # Connection
    rpc_url: str = Field(default="http://127.0.0.1:8545", description="JSON-RPC endpoint")
    private_key: Optional[str] = Field(
        default=None,
        description="Key signing the transactions; unlocked node accounts are used when unset"
    )
    owner: Optional[str] = Field(
        default=None,
        description="Account owning the DAO (defaults to the signing account)"
    )
    network: str = Field(default="ganache", description="Name in the network registry")

    # Inputs
    artifacts_dir: str = Field(default="build/contracts", description="Compiled contract artifacts")
    contracts_config: Optional[str] = Field(
        default=None,
        description="JSON descriptor table replacing the bundled one"
    )

    # DAO parameters
    dao_name: str = Field(default="test-dao")
    offchain_voting: bool = False
    offchain_admin: Optional[str] = None
    voting_period: Optional[int] = Field(default=None, gt=0)
    grace_period: Optional[int] = Field(default=None, ge=0)
    deploy_test_tokens: bool = False
    finalize: bool = True
    extra_options: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_env(cls, **overrides: Any) -> "DeploymentSettings":
        """Build settings from ``TRIBUTE_*`` variables; ``overrides`` win."""
        load_dotenv(find_dotenv(usecwd=True))

        values: Dict[str, Any] = {
            "rpc_url": os.getenv(ENV_PREFIX + "RPC_URL"),
            "private_key": os.getenv(ENV_PREFIX + "PRIVATE_KEY"),
            "owner": os.getenv(ENV_PREFIX + "OWNER"),
            "network": os.getenv(ENV_PREFIX + "NETWORK"),
            "artifacts_dir": os.getenv(ENV_PREFIX + "ARTIFACTS_DIR"),
            "contracts_config": os.getenv(ENV_PREFIX + "CONTRACTS_CONFIG"),
            "dao_name": os.getenv(ENV_PREFIX + "DAO_NAME"),
            "offchain_voting": _env_flag("OFFCHAIN_VOTING"),
            "offchain_admin": os.getenv(ENV_PREFIX + "OFFCHAIN_ADMIN"),
            "voting_period": _env_int("VOTING_PERIOD"),
            "grace_period": _env_int("GRACE_PERIOD"),
            "deploy_test_tokens": _env_flag("DEPLOY_TEST_TOKENS"),
            "finalize": _env_flag("FINALIZE", default=True),
        }
        values.update(overrides)
        try:
            return cls(**{k: v for k, v in values.items() if v is not None})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid deployment settings: {e}") from e

    @property
    def chain_id(self) -> int:
        network = get_network_details(self.network)
        if network is None:
            raise ConfigurationError(f"Unknown network: {self.network}")
        return network.chain_id

    def to_options(self) -> Dict[str, Any]:
        """Deployment options: defaults, then these settings, then ``extra_options``."""
        options = dict(DEFAULT_OPTIONS)
        options.update(
            chainId=self.chain_id,
            daoName=self.dao_name,
            offchainVoting=self.offchain_voting,
            deployTestTokens=self.deploy_test_tokens,
            finalize=self.finalize,
        )
        if self.offchain_admin is not None:
            options["offchainAdmin"] = self.offchain_admin
        if self.voting_period is not None:
            options["votingPeriod"] = self.voting_period
        if self.grace_period is not None:
            options["gracePeriod"] = self.grace_period
        options.update(self.extra_options)
        return options
