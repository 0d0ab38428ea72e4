"""
Standard format: one json object mapping each contract name to its abi and bytecode
"""
import os
from typing import List

from contract_deployer.artifacts.abstract_format import AbstractArtifactFormat
from contract_deployer.artifacts.utils import find_bytecode, load_abi, read_json
from contract_deployer.contract import ContractArtifact
from contract_deployer.exceptions import InvalidArtifact


class Standard(AbstractArtifactFormat):
    """
    {"Name": {"abi": [...], "bytecode": "0x..."}, ...}
    """

    NAME = "standard"
    PRIORITY = 100

    def load(self) -> List[ContractArtifact]:
        """Load the artifacts, in the order of the json object

        Raises:
            InvalidArtifact: if the file is not a json object of contracts

        Returns:
            List[ContractArtifact]: artifacts
        """
        loaded = read_json(self._target)
        if not isinstance(loaded, dict):
            raise InvalidArtifact(f"{self._target} is not a json object")

        artifacts: List[ContractArtifact] = []
        for name, info in loaded.items():
            if not isinstance(info, dict):
                raise InvalidArtifact(f"{name} is not a contract entry")
            bytecode = find_bytecode(info)
            if bytecode is None:
                raise InvalidArtifact(f"{name} has no bytecode")
            artifacts.append(
                ContractArtifact(
                    name,
                    load_abi(info.get("abi"), name),
                    bytecode,
                    source_path=info.get("sourcePath"),
                )
            )
        return artifacts

    @staticmethod
    def is_supported(target: str) -> bool:
        return os.path.isfile(target) and target.endswith(".json")
