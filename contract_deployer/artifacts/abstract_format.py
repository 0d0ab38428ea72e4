"""
Abstract artifact format

This gives the skeleton for any build output supported by contract-deployer
"""
import abc
from typing import List

from contract_deployer.contract import ContractArtifact


class IncorrectFormatInitialization(Exception):
    """
    Exception raises if an artifact format was not properly defined
    """

    # pylint: disable=unnecessary-pass
    pass


class AbstractArtifactFormat(metaclass=abc.ABCMeta):
    """
    This is the abstract class for the artifact formats
    """

    NAME: str = ""
    PRIORITY: int = 0  # Lower values are tried first

    def __init__(self, target: str):
        """Init the object

        Args:
            target (str): path to the build output

        Raises:
            IncorrectFormatInitialization: If the format was not correctly designed
        """
        if not self.NAME:
            raise IncorrectFormatInitialization(
                f"NAME is not initialized {self.__class__.__name__}"
            )
        self._target: str = target

    @property
    def target(self) -> str:
        """Return the target

        Returns:
            str: path to the build output
        """
        return self._target

    @abc.abstractmethod
    def load(self) -> List[ContractArtifact]:
        """Load the artifacts

        Returns:
            List[ContractArtifact]: artifacts, in a deterministic order
        """
        return []

    @staticmethod
    @abc.abstractmethod
    def is_supported(target: str) -> bool:
        """Check if the target is a build output of this format

        Args:
            target (str): path to the target

        Returns:
            bool: True if the target is supported
        """
        return False
