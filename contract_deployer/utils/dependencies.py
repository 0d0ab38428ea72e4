"""
Extract the dependencies of a contract artifact

Two sources are merged: the library placeholders embedded in the bytecode,
and the address parameters of the constructor named with the injection prefix.
"""
from typing import TYPE_CHECKING, Dict, List, Optional

from contract_deployer.utils.naming import placeholder_to_name

if TYPE_CHECKING:
    from contract_deployer.contract import ContractArtifact

INJECT_PREFIX = "inject_"


def _unique(values: List[str]) -> List[str]:
    unique: List[str] = []
    for value in values:
        if value not in unique:
            unique.append(value)
    return unique


def dependencies_from_bytecode(
    artifact: "ContractArtifact", placeholder_names: Optional[Dict[str, str]] = None
) -> List[str]:
    """Return the libraries referenced by placeholders in the bytecode

    Args:
        artifact (ContractArtifact): contract artifact
        placeholder_names (Optional[Dict[str, str]]): hashed placeholder -> contract name.
            Defaults to None.

    Returns:
        List[str]: library names, in order of first occurrence
    """
    return _unique(
        [placeholder_to_name(token, placeholder_names) for token in artifact.placeholder_set]
    )


def dependencies_from_constructor(artifact: "ContractArtifact") -> List[str]:
    """Return the contracts injected through the constructor

    Only the first constructor of the ABI is used. Its address parameters named
    "inject_<Name>" are dependencies on <Name>.

    Args:
        artifact (ContractArtifact): contract artifact

    Returns:
        List[str]: injected contract names, in parameter order
    """
    dependencies = [
        constructor_input["name"][len(INJECT_PREFIX) :]
        for constructor_input in artifact.constructor_inputs
        if constructor_input.get("type") == "address"
        and constructor_input.get("name", "").startswith(INJECT_PREFIX)
    ]
    return _unique(dependencies)


def extract_dependencies(
    artifact: "ContractArtifact", placeholder_names: Optional[Dict[str, str]] = None
) -> List[str]:
    """Return all the dependencies of a contract

    Bytecode dependencies are listed before constructor dependencies.

    Args:
        artifact (ContractArtifact): contract artifact
        placeholder_names (Optional[Dict[str, str]]): hashed placeholder -> contract name.
            Defaults to None.

    Returns:
        List[str]: dependency names, without duplicates
    """
    return _unique(
        dependencies_from_bytecode(artifact, placeholder_names)
        + dependencies_from_constructor(artifact)
    )
