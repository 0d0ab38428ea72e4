"""
Module handling the contract artifacts
"""
import re
from typing import Dict, List, NamedTuple, Optional

# Library references are embedded in the bytecode with the format
#  "__Lib___________________________________", where "Lib" is the library name
PLACEHOLDER_REGEX = re.compile(r"__([^_]*)_*")


class DeployedContract(NamedTuple):
    """Record of a contract that has an address on the network"""

    name: str
    abi: List[Dict]
    address: str


class ContractArtifact:
    """The ContractArtifact class represents a single compiled contract

    Attributes
    ----------
    name: str
        The contract's name
    abi: List[Dict]
        The application binary interface (ABI) of the contract
    bytecode: str
        The init bytecode, without the 0x prefix. May contain library placeholders
    source_path: Optional[str]
        The source file the contract was compiled from, if known
    address: Optional[str]
        The address of the contract, set once it is deployed or reused
    """

    def __init__(
        self, name: str, abi: List[Dict], bytecode: str, source_path: Optional[str] = None
    ):
        """Initialize the ContractArtifact class"""

        self._name: str = name
        self._abi: List[Dict] = abi
        self._bytecode: str = _strip_hex_prefix(bytecode or "")
        self._source_path: Optional[str] = source_path
        self._address: Optional[str] = None

    # region Getters
    ###################################################################################
    ###################################################################################

    @property
    def name(self) -> str:
        """Return the name of the contract

        Returns:
            str: Contract name
        """
        return self._name

    @property
    def abi(self) -> List[Dict]:
        """Return the ABI of the contract

        Returns:
            List[Dict]: ABI
        """
        return self._abi

    @property
    def bytecode(self) -> str:
        """Return the init bytecode of the contract

        Returns:
            str: Init bytecode, possibly with placeholders
        """
        return self._bytecode

    @bytecode.setter
    def bytecode(self, bytecode: str) -> None:
        """Set the bytecode (used by the linker)

        Args:
            bytecode (str): New bytecode
        """
        self._bytecode = _strip_hex_prefix(bytecode)

    @property
    def source_path(self) -> Optional[str]:
        """Return the source file of the contract

        Returns:
            Optional[str]: Source path, None if unknown
        """
        return self._source_path

    @property
    def address(self) -> Optional[str]:
        """Return the address of the contract

        Returns:
            Optional[str]: Address, None if the contract was not deployed yet
        """
        return self._address

    @address.setter
    def address(self, address: str) -> None:
        """Set the address of the contract

        Args:
            address (str): Address on the network
        """
        self._address = address

    @property
    def placeholder_set(self) -> List[str]:
        """Return the library placeholders found in the bytecode, in order of first occurrence

        Returns:
            List[str]: Placeholder tokens (without the surrounding underscores)
        """
        placeholders: List[str] = []
        for token in PLACEHOLDER_REGEX.findall(self._bytecode):
            if token and token not in placeholders:
                placeholders.append(token)
        return placeholders

    @property
    def is_linked(self) -> bool:
        """Return true if no placeholder remains in the bytecode

        Returns:
            bool: True if the bytecode is ready to be deployed
        """
        return not self.placeholder_set

    @property
    def constructor_inputs(self) -> List[Dict]:
        """Return the inputs of the first constructor of the ABI

        Only the first constructor is considered; later constructors are ignored.

        Returns:
            List[Dict]: Constructor inputs, empty if there is no constructor
        """
        for item in self._abi:
            if item.get("type") == "constructor":
                return item.get("inputs", []) or []
        return []

    # endregion
    ###################################################################################
    ###################################################################################

    def to_deployed(self) -> DeployedContract:
        """Build the deployment record of the contract

        Raises:
            ValueError: If the contract has no address

        Returns:
            DeployedContract: Deployment record
        """
        if not self._address:
            raise ValueError(f"{self._name} has no address")
        return DeployedContract(name=self._name, abi=self._abi, address=self._address)

    def __repr__(self) -> str:
        return f"<ContractArtifact {self._name}>"


def _strip_hex_prefix(value: str) -> str:
    if value.startswith("0x") or value.startswith("0X"):
        return value[2:]
    return value
