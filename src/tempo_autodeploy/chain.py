"""Blockchain client for tempo-autodeploy."""

import logging
from typing import Any, Dict, List, Optional

import requests
from eth_account import Account
from web3 import Web3

from .config import BotConfig
from .exceptions import TransactionFailedError
from .types import ContractArtifact, Credential, DeployReceipt

logger = logging.getLogger(__name__)


class ChainClient:
    """Thin wrapper over a web3 connection to the target network."""

    def __init__(self, web3: Web3, chain_id: int, explorer_url: str, receipt_timeout: int = 120):
        """
        Initialize the chain client.

        Args:
            web3: Connected Web3 instance
            chain_id: Chain ID stamped on every transaction
            explorer_url: Block explorer base URL
            receipt_timeout: Seconds to wait for each transaction receipt
        """
        self.web3 = web3
        self.chain_id = chain_id
        self.explorer_url = explorer_url.rstrip("/")
        self.receipt_timeout = receipt_timeout

    @classmethod
    def from_config(cls, config: BotConfig, session: Optional[requests.Session] = None) -> "ChainClient":
        """Create a client with an HTTP provider for the configured RPC URL."""
        if session is None:
            session = requests.Session()
        provider = Web3.HTTPProvider(
            config.rpc_url,
            request_kwargs={"timeout": config.rpc_timeout},
            session=session,
        )
        return cls(
            Web3(provider),
            chain_id=config.chain_id,
            explorer_url=config.explorer_url,
            receipt_timeout=config.receipt_timeout,
        )

    def is_connected(self) -> bool:
        return self.web3.is_connected()

    def get_balance(self, address: str) -> int:
        """Return the account balance in wei."""
        return self.web3.eth.get_balance(Web3.to_checksum_address(address))

    def format_balance(self, wei: int) -> str:
        return f"{self.web3.from_wei(wei, 'ether')} ETH"

    def explorer_address_url(self, address: str) -> str:
        return f"{self.explorer_url}/address/{address}"

    def explorer_tx_url(self, tx_hash: str) -> str:
        return f"{self.explorer_url}/tx/{tx_hash}"

    def _send(self, credential: Credential, tx: Dict[str, Any]) -> Dict[str, Any]:
        """
        Sign, broadcast and wait for a transaction.

        Returns:
            Transaction receipt

        Raises:
            TransactionFailedError: If the transaction reverted
        """
        signed = Account.sign_transaction(tx, credential.private_key)
        tx_hash = self.web3.eth.send_raw_transaction(signed.raw_transaction)
        logger.info("TX hash: %s", self.web3.to_hex(tx_hash))

        receipt = self.web3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)
        if receipt["status"] != 1:
            raise TransactionFailedError(f"Transaction {self.web3.to_hex(tx_hash)} reverted")
        return receipt

    def _base_tx(self, credential: Credential, gas_limit: int) -> Dict[str, Any]:
        return {
            "from": credential.address,
            "nonce": self.web3.eth.get_transaction_count(credential.address),
            "gas": gas_limit,
            "chainId": self.chain_id,
        }

    def deploy(self, credential: Credential, artifact: ContractArtifact, gas_limit: int) -> DeployReceipt:
        """
        Deploy the contract from a credential and wait for confirmation.

        Args:
            credential: Deployer
            artifact: Compiled contract
            gas_limit: Gas limit for the creation transaction

        Returns:
            DeployReceipt with the new contract address

        Raises:
            TransactionFailedError: If the deployment reverted or produced no contract
        """
        factory = self.web3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        tx = factory.constructor().build_transaction(self._base_tx(credential, gas_limit))
        receipt = self._send(credential, tx)

        contract_address = receipt.get("contractAddress")
        if not contract_address:
            raise TransactionFailedError("Deployment receipt has no contract address")

        return DeployReceipt(
            contract_address=contract_address,
            transaction_hash=self.web3.to_hex(receipt["transactionHash"]),
        )

    def read_message(self, contract_address: str, abi: List[Dict[str, Any]]) -> str:
        """Call the contract's message() getter."""
        contract = self.web3.eth.contract(address=Web3.to_checksum_address(contract_address), abi=abi)
        return contract.functions.message().call()

    def set_message(
        self,
        credential: Credential,
        contract_address: str,
        abi: List[Dict[str, Any]],
        message: str,
        gas_limit: int,
    ) -> str:
        """
        Send setMessage(message) and wait for confirmation.

        Returns:
            Transaction hash (0x-prefixed)
        """
        contract = self.web3.eth.contract(address=Web3.to_checksum_address(contract_address), abi=abi)
        tx = contract.functions.setMessage(message).build_transaction(
            self._base_tx(credential, gas_limit)
        )
        receipt = self._send(credential, tx)
        return self.web3.to_hex(receipt["transactionHash"])
