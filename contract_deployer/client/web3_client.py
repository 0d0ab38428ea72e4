"""
Ledger client backed by web3.py and the node's unlocked accounts
"""
import logging
from typing import Any, Dict, List, Optional

from web3 import Web3

from contract_deployer.client.abstract_client import AbstractLedgerClient
from contract_deployer.config import DEFAULT_PROVIDER
from contract_deployer.exceptions import DeploymentError

LOGGER = logging.getLogger("ContractDeployer")

RECEIPT_TIMEOUT = 120


class Web3LedgerClient(AbstractLedgerClient):
    """
    Deploy through an HTTP JSON-RPC node
    """

    NAME = "web3"

    def __init__(
        self,
        provider: str = DEFAULT_PROVIDER,
        receipt_timeout: int = RECEIPT_TIMEOUT,
        w3: Optional[Web3] = None,
    ):
        """Init the client

        Args:
            provider (str): JSON-RPC url. Defaults to DEFAULT_PROVIDER.
            receipt_timeout (int): seconds to wait for a deployment receipt. Defaults to RECEIPT_TIMEOUT.
            w3 (Optional[Web3]): already configured Web3 instance, provider is ignored if set.
                Defaults to None.
        """
        self._provider: str = provider
        self._receipt_timeout: int = receipt_timeout
        self._w3: Web3 = w3 if w3 is not None else Web3(Web3.HTTPProvider(provider))

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def w3(self) -> Web3:
        return self._w3

    def get_latest_block(self) -> Dict[str, Any]:
        return dict(self._w3.eth.get_block("latest"))

    def list_accounts(self) -> List[str]:
        return list(self._w3.eth.accounts)

    def deploy_contract(
        self,
        bytecode: str,
        abi: List[Dict],
        constructor_args: List[Any],
        options: Dict[str, Any],
    ) -> str:
        """Send the deployment transaction and wait for the receipt

        Args:
            bytecode (str): linked init bytecode, with or without 0x
            abi (List[Dict]): contract ABI
            constructor_args (List[Any]): constructor arguments
            options (Dict[str, Any]): transaction options ("from", "gas")

        Raises:
            DeploymentError: if the transaction reverted or created no contract

        Returns:
            str: address of the new contract
        """
        if not bytecode.startswith("0x"):
            bytecode = "0x" + bytecode

        transaction = dict(options)
        if transaction.get("from"):
            transaction["from"] = Web3.to_checksum_address(transaction["from"])

        contract = self._w3.eth.contract(abi=abi, bytecode=bytecode)
        arguments = _checksum_address_arguments(abi, constructor_args)
        tx_hash = contract.constructor(*arguments).transact(transaction)
        LOGGER.debug("Deployment transaction sent: %s", tx_hash.hex())

        receipt = self._w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=self._receipt_timeout
        )
        if receipt.get("status") == 0:
            raise DeploymentError(f"transaction {tx_hash.hex()}", "reverted")
        address = receipt.get("contractAddress")
        if not address:
            raise DeploymentError(
                f"transaction {tx_hash.hex()}", "no contract address in the receipt"
            )
        return address


def _checksum_address_arguments(abi: List[Dict], constructor_args: List[Any]) -> List[Any]:
    """Convert the address arguments of the first constructor to checksum addresses

    Args:
        abi (List[Dict]): contract ABI
        constructor_args (List[Any]): constructor arguments

    Returns:
        List[Any]: arguments accepted by web3
    """
    constructor = next((item for item in abi if item.get("type") == "constructor"), None)
    if constructor is None:
        return list(constructor_args)
    inputs = constructor.get("inputs", [])
    arguments = []
    for index, argument in enumerate(constructor_args):
        if (
            index < len(inputs)
            and inputs[index].get("type") == "address"
            and isinstance(argument, str)
        ):
            argument = Web3.to_checksum_address(argument)
        arguments.append(argument)
    return arguments
