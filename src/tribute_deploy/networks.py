"""Known networks and their chain ids."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class Network:
    name: str
    chain_id: int


NETWORKS: Mapping[str, Network] = MappingProxyType({
    network.name: network
    for network in (
        Network("ganache", 1337),
        Network("rinkeby", 4),
        Network("rinkeby-fork", 4),
        Network("goerli", 5),
        Network("test", 1),
        Network("coverage", 1),
        Network("mainnet", 1),
        Network("harmony", 1666600000),
        Network("harmonytest", 1666700000),
    )
})


def get_network_details(name: str) -> Optional[Network]:
    """Exact lookup by network name; None when the name is not registered."""
    return NETWORKS.get(name)
