"""
Helpers shared by the artifact formats
"""
import json
from typing import Any, Dict, List, Optional, Union

from contract_deployer.exceptions import InvalidArtifact


def read_json(path: str) -> Any:
    """Load a json file

    Args:
        path (str): path to the file

    Raises:
        InvalidArtifact: if the file can not be read or parsed

    Returns:
        Any: loaded json
    """
    try:
        with open(path, encoding="utf8") as file_desc:
            return json.load(file_desc)
    except OSError as exception:
        raise InvalidArtifact(f"Impossible to read {path}: {exception}") from exception
    except json.decoder.JSONDecodeError as exception:
        raise InvalidArtifact(f"{path} is not a valid json file: {exception}") from exception


def load_abi(abi: Union[str, List[Dict], None], name: str) -> List[Dict]:
    """Return the ABI as a list. Old compilers serialize it as a string

    Args:
        abi (Union[str, List[Dict], None]): ABI as found in the build output
        name (str): contract name, for the error message

    Raises:
        InvalidArtifact: if the ABI is missing or malformed

    Returns:
        List[Dict]: ABI
    """
    if isinstance(abi, str):
        try:
            abi = json.loads(abi)
        except json.decoder.JSONDecodeError as exception:
            raise InvalidArtifact(f"{name} has an invalid abi") from exception
    if not isinstance(abi, list):
        raise InvalidArtifact(f"{name} has no abi")
    return abi


def find_bytecode(info: Dict) -> Optional[str]:
    """Return the init bytecode of a contract entry

    Accepted keys: "bytecode" (string or {"object": ...}), "bin", "evm.bytecode.object"

    Args:
        info (Dict): contract entry

    Returns:
        Optional[str]: bytecode, None if not found
    """
    bytecode = info.get("bytecode", info.get("bin"))
    if bytecode is None and "evm" in info:
        bytecode = info["evm"].get("bytecode")
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object")
    return bytecode
