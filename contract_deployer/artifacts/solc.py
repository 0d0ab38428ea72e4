"""
Solc combined json format (solc --combined-json abi,bin)
"""
import os
from typing import List

from contract_deployer.artifacts.abstract_format import AbstractArtifactFormat
from contract_deployer.artifacts.utils import find_bytecode, load_abi, read_json
from contract_deployer.contract import ContractArtifact
from contract_deployer.exceptions import InvalidArtifact
from contract_deployer.utils.naming import extract_filename, extract_name


class Solc(AbstractArtifactFormat):
    """
    {"contracts": {"path/File.sol:Name": {"abi": ..., "bin": ...}}}
    """

    NAME = "solc"
    PRIORITY = 10

    def load(self) -> List[ContractArtifact]:
        """Load the artifacts, in the order of the json object

        Raises:
            InvalidArtifact: if a contract has no bytecode, or a name is used twice

        Returns:
            List[ContractArtifact]: artifacts
        """
        loaded = read_json(self._target)
        contracts = loaded.get("contracts", {}) if isinstance(loaded, dict) else {}

        artifacts: List[ContractArtifact] = []
        names = set()
        for original_contract_name, info in contracts.items():
            contract_name = extract_name(original_contract_name)
            if contract_name in names:
                raise InvalidArtifact(f"{contract_name} is defined more than once")
            names.add(contract_name)

            bytecode = find_bytecode(info)
            if bytecode is None:
                raise InvalidArtifact(f"{contract_name} has no bytecode")
            source_path = None
            if ":" in original_contract_name:
                source_path = extract_filename(original_contract_name)
            artifacts.append(
                ContractArtifact(
                    contract_name,
                    load_abi(info.get("abi"), contract_name),
                    bytecode,
                    source_path=source_path,
                )
            )
        return artifacts

    @staticmethod
    def is_supported(target: str) -> bool:
        """Check if the target is a solc combined json output

        Args:
            target (str): path to the target

        Returns:
            bool: True if the file has a "contracts" object keyed by "path:Name"
        """
        if not os.path.isfile(target) or not target.endswith(".json"):
            return False
        try:
            loaded = read_json(target)
        except InvalidArtifact:
            return False
        if not isinstance(loaded, dict) or not isinstance(loaded.get("contracts"), dict):
            return False
        return all(":" in key for key in loaded["contracts"])
