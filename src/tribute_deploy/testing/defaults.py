"""One-call DAO deployment for tests."""

from typing import Any, Dict, Iterable, Optional

from ..base.context import DeploymentContext
from ..base.descriptor import ContractConfig
from ..base.handle import ChainClient
from ..configs.contracts import CONTRACT_CONFIGS
from ..configs.defaults import DEFAULT_OPTIONS
from ..deploy.dao import DeploymentResult, deploy_dao
from ..utils.artifacts import ContractArtifact


def default_options(**overrides: Any) -> Dict[str, Any]:
    """Default DAO parameters with the test tokens enabled, then ``overrides``."""
    options = dict(DEFAULT_OPTIONS)
    options["deployTestTokens"] = True
    options.update(overrides)
    return options


def deploy_default_dao(
    client: ChainClient,
    owner: str,
    contract_configs: Optional[Iterable[ContractConfig]] = None,
    artifacts: Optional[Dict[str, ContractArtifact]] = None,
    **overrides: Any,
) -> DeploymentResult:
    """
    Deploy the bundled contract table with the default options.

    ``artifacts`` are merged into the options by contract name; ``overrides``
    replace individual options (``finalize=False`` keeps the DAO open for
    extra adapters).
    """
    ctx = DeploymentContext(
        contract_configs=tuple(contract_configs or CONTRACT_CONFIGS),
        client=client,
        owner=owner,
        options={**(artifacts or {}), **default_options(**overrides)},
    )
    return deploy_dao(ctx)
