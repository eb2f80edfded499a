"""Loading compiled contract artifacts (ABI + bytecode) from disk."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

from loguru import logger

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class ContractArtifact:
    """A compiled contract: enough to deploy it or bind to a deployed instance."""
    name: str
    abi: List[Dict[str, Any]]
    bytecode: str

    @property
    def deployable(self) -> bool:
        return len(self.bytecode.replace("0x", "")) > 0


def load_artifact(path: Union[str, Path]) -> ContractArtifact:
    """Read a Truffle or Hardhat artifact JSON file."""
    path = Path(path)
    with open(path, "r") as f:
        data = json.load(f)

    if "abi" not in data:
        raise ConfigurationError(f"Artifact {path} has no ABI")

    bytecode = data.get("bytecode") or "0x"
    if isinstance(bytecode, dict):
        # solc standard-json style: {"object": "..."}
        bytecode = bytecode.get("object", "0x")
    if not bytecode.startswith("0x"):
        bytecode = f"0x{bytecode}"

    return ContractArtifact(
        name=data.get("contractName") or path.stem,
        abi=data["abi"],
        bytecode=bytecode,
    )


def load_artifacts(directory: Union[str, Path]) -> Dict[str, ContractArtifact]:
    """
    Load every artifact under ``directory``, keyed by contract name.

    Works for both the flat Truffle layout (``build/contracts/Name.json``) and
    the nested Hardhat layout (``artifacts/contracts/**/Name.sol/Name.json``).
    Hardhat debug files are ignored.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ConfigurationError(f"Artifacts directory not found: {directory}")

    artifacts: Dict[str, ContractArtifact] = {}
    for path in sorted(directory.rglob("*.json")):
        if path.name.endswith(".dbg.json"):
            continue
        try:
            artifact = load_artifact(path)
        except (ConfigurationError, json.JSONDecodeError) as e:
            logger.debug(f"Skipping {path}: {e}")
            continue
        artifacts[artifact.name] = artifact

    logger.info(f"Loaded {len(artifacts)} contract artifacts from {directory}")
    return artifacts
