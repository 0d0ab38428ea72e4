"""
Load the build artifacts
"""
import inspect
import logging
from typing import List, Optional, Type

from contract_deployer.artifacts import all_formats
from contract_deployer.artifacts.abstract_format import AbstractArtifactFormat
from contract_deployer.contract import ContractArtifact
from contract_deployer.exceptions import InvalidArtifact

LOGGER = logging.getLogger("ContractDeployer")


def get_formats() -> List[Type[AbstractArtifactFormat]]:
    """Return the available artifact formats classes

    Returns:
        List[Type[AbstractArtifactFormat]]: Available formats
    """
    formats = [getattr(all_formats, name) for name in dir(all_formats)]
    formats = [
        d for d in formats if inspect.isclass(d) and issubclass(d, AbstractArtifactFormat)
    ]
    return sorted(formats, key=lambda artifact_format: artifact_format.PRIORITY)


def load_artifacts(target: str, artifact_format: Optional[str] = None) -> List[ContractArtifact]:
    """Load the contract artifacts of a build output

    Args:
        target (str): path to the build output
        artifact_format (Optional[str]): force a format (solc, truffle, standard). Defaults to None.

    Raises:
        InvalidArtifact: if the format is unknown or the target is not supported

    Returns:
        List[ContractArtifact]: artifacts, in a deterministic order
    """
    formats = get_formats()
    if artifact_format:
        selected = next(
            (f for f in formats if f.NAME.lower() == artifact_format.lower()), None
        )
        if selected is None:
            raise InvalidArtifact(f"Unknown artifact format: {artifact_format}")
    else:
        selected = next((f for f in formats if f.is_supported(target)), None)
        if selected is None:
            raise InvalidArtifact(f"Unsupported target: {target}")

    LOGGER.info("Loading %s as %s artifacts", target, selected.NAME)
    return selected(target).load()
