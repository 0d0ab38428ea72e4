"""
Library utilities for placeholder resolution and bytecode linking
"""
import logging
import re
from typing import TYPE_CHECKING, Dict, Iterable, Optional

from Crypto.Hash import keccak

from contract_deployer.exceptions import UnresolvedDependencyError
from contract_deployer.utils.naming import combine_filename_name, placeholder_to_name

if TYPE_CHECKING:
    from contract_deployer.contract import ContractArtifact

LOGGER = logging.getLogger("ContractDeployer")

HEX_ADDRESS_REGEX = re.compile(r"^(0x)?[0-9a-fA-F]+$")


def hashed_placeholder(key: str) -> str:
    """Return the solc >= 0.5 placeholder token of a library key

    The token is "$" + the first 34 hex digits of keccak256(key) + "$".

    Args:
        key (str): library name, or "path:LibraryName"

    Returns:
        str: placeholder token, without the surrounding underscores
    """
    sha3_result = keccak.new(digest_bits=256)
    sha3_result.update(key.encode("utf-8"))
    return "$" + sha3_result.hexdigest()[:34] + "$"


def library_placeholders(artifacts: Iterable["ContractArtifact"]) -> Dict[str, str]:
    """Map every possible hashed placeholder to its contract name

    For each contract both the bare name and, if known, "source_path:name" are hashed.

    Args:
        artifacts (Iterable[ContractArtifact]): contract artifacts

    Returns:
        Dict[str, str]: hashed placeholder token -> contract name
    """
    placeholder_names: Dict[str, str] = {}
    for artifact in artifacts:
        placeholder_names[hashed_placeholder(artifact.name)] = artifact.name
        if artifact.source_path:
            qualified = combine_filename_name(artifact.source_path, artifact.name)
            placeholder_names[hashed_placeholder(qualified)] = artifact.name
    return placeholder_names


def link_dependency(bytecode: str, token: str, address: str) -> str:
    """Replace every placeholder of a library by its address

    This is a literal substitution: the placeholder length is not checked.

    Args:
        bytecode (str): bytecode to link
        token (str): placeholder token, without the surrounding underscores
        address (str): library address, with or without 0x

    Returns:
        str: linked bytecode
    """
    bin_address = address.replace("0x", "", 1)
    # "Lib" must not match the placeholder of "LibB"
    regex = re.compile("__" + re.escape(token) + "(?![^_])_*")
    return regex.sub(lambda _match: bin_address, bytecode)


def link_bytecode(
    artifact: "ContractArtifact",
    addresses: Dict[str, str],
    placeholder_names: Optional[Dict[str, str]] = None,
    debug: bool = False,
) -> "ContractArtifact":
    """Link the artifact's bytecode against the known library addresses

    The artifact is updated in place. Linking an already linked artifact does nothing.

    Args:
        artifact (ContractArtifact): contract to link
        addresses (Dict[str, str]): contract name -> address
        placeholder_names (Optional[Dict[str, str]]): hashed placeholder -> contract name.
            Defaults to None.
        debug (bool): log each link action at info level. Defaults to False.

    Raises:
        UnresolvedDependencyError: if a library has no valid address

    Returns:
        ContractArtifact: the linked artifact
    """
    bytecode = artifact.bytecode
    for token in artifact.placeholder_set:
        library_name = placeholder_to_name(token, placeholder_names)
        address = addresses.get(library_name)
        if not address or not HEX_ADDRESS_REGEX.match(address):
            raise UnresolvedDependencyError(library_name, artifact.name)

        LOGGER.log(
            logging.INFO if debug else logging.DEBUG,
            "Linking library '%s' at %s",
            library_name,
            address,
        )
        bytecode = link_dependency(bytecode, token, address)

    artifact.bytecode = bytecode
    return artifact
