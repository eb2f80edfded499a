"""
web3.py implementation of the chain client used by the deployment.

Transactions are either signed locally (when a private key is given) or sent
from an account unlocked on the node, which is how development chains such as
ganache and hardhat are usually driven. Every call waits for its receipt
before returning, so the deployment never has two transactions in flight.
"""

from typing import Any, List, Optional, Sequence

from eth_account import Account
from eth_utils import is_hex_address
from loguru import logger
from web3 import Web3
from web3.exceptions import Web3Exception

from ..base.handle import DeployedContract
from ..exceptions import ChainCallError
from ..utils.artifacts import ContractArtifact


class Web3ChainClient:
    """Deploys, binds and calls contracts through a web3 connection."""

    def __init__(
        self,
        w3: Web3,
        private_key: Optional[str] = None,
        default_sender: Optional[str] = None,
        receipt_timeout: int = 120,
    ):
        self.w3 = w3
        self.receipt_timeout = receipt_timeout
        self._account = None

        if private_key:
            if not private_key.startswith("0x"):
                private_key = "0x" + private_key
            self._account = Account.from_key(private_key)

        if default_sender:
            self.default_sender = Web3.to_checksum_address(default_sender)
        elif self._account is not None:
            self.default_sender = self._account.address
        else:
            self.default_sender = None

    @classmethod
    def from_rpc(
        cls,
        rpc_url: str,
        private_key: Optional[str] = None,
        default_sender: Optional[str] = None,
        receipt_timeout: int = 120,
    ) -> "Web3ChainClient":
        w3 = Web3(Web3.HTTPProvider(rpc_url))
        logger.debug(f"Connected to blockchain: {rpc_url}")
        return cls(w3, private_key, default_sender, receipt_timeout)

    def is_connected(self) -> bool:
        return self.w3.is_connected()

    @property
    def sender(self) -> str:
        """Account used when a call does not name one."""
        if self.default_sender is None:
            self.default_sender = self.w3.eth.accounts[0]
        return self.default_sender

    # ------------------------------------------------------------------
    # ChainClient protocol
    # ------------------------------------------------------------------

    def deploy(
        self,
        artifact: ContractArtifact,
        args: Optional[Sequence[Any]] = None,
        sender: Optional[str] = None,
    ) -> DeployedContract:
        """
        Deploy ``artifact`` with constructor ``args``.

        An argument that is itself a ContractArtifact is deployed first and
        replaced by its address (factories are constructed with the template
        they clone); a DeployedContract argument is replaced by its address.
        """
        sender = Web3.to_checksum_address(sender or self.sender)
        resolved = self._resolve_args(args or [], sender)
        if not artifact.deployable:
            raise ChainCallError(artifact.name, "constructor", "artifact has no bytecode")

        try:
            contract = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
            constructor = contract.constructor(*resolved)
        except (Web3Exception, TypeError, ValueError) as e:
            raise ChainCallError(artifact.name, "constructor", str(e)) from e
        receipt = self._submit(artifact.name, "constructor", constructor, sender)

        address = receipt["contractAddress"]
        logger.debug(f"{artifact.name} deployed at {address} (tx {receipt['transactionHash'].hex()})")
        return self.at(artifact, address)

    def at(self, artifact: ContractArtifact, address: str) -> DeployedContract:
        address = Web3.to_checksum_address(address)
        return DeployedContract(
            name=artifact.name,
            address=address,
            contract=self.w3.eth.contract(address=address, abi=artifact.abi),
            client=self,
        )

    def call(self, handle: DeployedContract, function: str, *args: Any) -> Any:
        try:
            fn = getattr(handle.contract.functions, function)
            return fn(*self._resolve_args(args, None)).call()
        except (Web3Exception, TypeError, ValueError) as e:
            raise ChainCallError(handle.name, function, str(e)) from e

    def transact(
        self,
        handle: DeployedContract,
        function: str,
        *args: Any,
        sender: Optional[str] = None,
        value: int = 0,
    ) -> Any:
        sender = Web3.to_checksum_address(sender or self.sender)
        resolved = self._resolve_args(args, sender)
        try:
            fn = getattr(handle.contract.functions, function)
            call = fn(*resolved)
        except (Web3Exception, TypeError, ValueError) as e:
            raise ChainCallError(handle.name, function, str(e)) from e
        return self._submit(handle.name, function, call, sender, value)

    # ------------------------------------------------------------------

    def _resolve_args(self, args: Sequence[Any], sender: Optional[str]) -> List[Any]:
        resolved = []
        for arg in args:
            if isinstance(arg, DeployedContract):
                resolved.append(arg.address)
            elif isinstance(arg, ContractArtifact):
                resolved.append(self.deploy(arg, sender=sender).address)
            elif isinstance(arg, list):
                resolved.append(self._resolve_args(arg, sender))
            elif isinstance(arg, str) and is_hex_address(arg):
                # web3 rejects addresses without an EIP-55 checksum
                resolved.append(Web3.to_checksum_address(arg))
            else:
                resolved.append(arg)
        return resolved

    def _submit(
        self, contract_name: str, function: str, call: Any, sender: str, value: int = 0
    ) -> Any:
        params = {"from": sender}
        if value:
            params["value"] = value
        try:
            if self._account is not None and sender == self._account.address:
                tx = call.build_transaction({
                    **params,
                    "nonce": self.w3.eth.get_transaction_count(sender, "pending"),
                })
                signed = self._account.sign_transaction(tx)
                tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
            else:
                tx_hash = call.transact(params)

            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.receipt_timeout
            )
        except (Web3Exception, ValueError) as e:
            raise ChainCallError(contract_name, function, str(e)) from e

        if receipt["status"] != 1:
            raise ChainCallError(
                contract_name, function, f"transaction {tx_hash.hex()} reverted"
            )
        return receipt
