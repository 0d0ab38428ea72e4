"""
Abstract ledger client

This gives the skeleton of the network access used to deploy contracts
"""
import abc
from typing import Any, Dict, List


class AbstractLedgerClient(metaclass=abc.ABCMeta):
    """
    This is the abstract class for the ledger clients
    """

    NAME: str = ""

    @abc.abstractmethod
    def get_latest_block(self) -> Dict[str, Any]:
        """Return the latest block

        Returns:
            Dict[str, Any]: block information, must contain "gasLimit"
        """
        return {}

    @abc.abstractmethod
    def list_accounts(self) -> List[str]:
        """Return the accounts managed by the node

        Returns:
            List[str]: account addresses
        """
        return []

    @abc.abstractmethod
    def deploy_contract(
        self,
        bytecode: str,
        abi: List[Dict],
        constructor_args: List[Any],
        options: Dict[str, Any],
    ) -> str:
        """Deploy a linked contract and wait for its address

        Args:
            bytecode (str): linked init bytecode
            abi (List[Dict]): contract ABI
            constructor_args (List[Any]): constructor arguments
            options (Dict[str, Any]): transaction options ("from", "gas")

        Returns:
            str: address of the new contract
        """
        return ""
