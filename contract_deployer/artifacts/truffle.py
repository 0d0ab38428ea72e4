"""
Truffle build directory: one json file per contract
"""
import glob
import os
from typing import List

from contract_deployer.artifacts.abstract_format import AbstractArtifactFormat
from contract_deployer.artifacts.utils import find_bytecode, load_abi, read_json
from contract_deployer.contract import ContractArtifact
from contract_deployer.exceptions import InvalidArtifact

BUILD_DIRECTORY = os.path.join("build", "contracts")


def _build_directory(target: str) -> str:
    if os.path.isdir(os.path.join(target, BUILD_DIRECTORY)):
        return os.path.join(target, BUILD_DIRECTORY)
    return target


class Truffle(AbstractArtifactFormat):
    """
    Truffle (or any tool writing {"contractName", "abi", "bytecode"} files)
    """

    NAME = "truffle"
    PRIORITY = 20

    def load(self) -> List[ContractArtifact]:
        """Load the artifacts, sorted by filename

        Raises:
            InvalidArtifact: if the directory has no contract, or a name is used twice

        Returns:
            List[ContractArtifact]: artifacts
        """
        build_directory = _build_directory(self._target)
        filenames = sorted(glob.glob(os.path.join(build_directory, "*.json")))

        artifacts: List[ContractArtifact] = []
        names = set()
        for filename in filenames:
            target_loaded = read_json(filename)
            if not isinstance(target_loaded, dict) or "abi" not in target_loaded:
                continue
            bytecode = find_bytecode(target_loaded)
            if not bytecode or bytecode == "0x":
                continue

            contract_name = target_loaded.get(
                "contractName", os.path.splitext(os.path.basename(filename))[0]
            )
            if contract_name in names:
                raise InvalidArtifact(f"{contract_name} is defined more than once")
            names.add(contract_name)

            source_path = target_loaded.get("sourcePath")
            if source_path is None and "ast" in target_loaded:
                source_path = target_loaded["ast"].get("absolutePath")
            artifacts.append(
                ContractArtifact(
                    contract_name,
                    load_abi(target_loaded["abi"], contract_name),
                    bytecode,
                    source_path=source_path,
                )
            )

        if not artifacts:
            raise InvalidArtifact(f"No contract artifact found in {build_directory}")
        return artifacts

    @staticmethod
    def is_supported(target: str) -> bool:
        return os.path.isdir(target) and bool(
            glob.glob(os.path.join(_build_directory(target), "*.json"))
        )
