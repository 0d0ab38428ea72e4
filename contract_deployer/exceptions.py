"""
Exceptions raised while resolving and deploying contracts
"""
from typing import Optional


class DeployerException(Exception):
    """
    Base exception of contract-deployer
    """

    # pylint: disable=unnecessary-pass
    pass


class CycleError(DeployerException):
    """
    Raised when a dependency edge would introduce a cycle in the dependency graph
    """

    def __init__(self, source: str, target: str):
        """Init the error

        Args:
            source (str): dependent contract
            target (str): dependency that closes the cycle
        """
        super().__init__(f"Dependency {source} -> {target} introduces cycle")
        self.source: str = source
        self.target: str = target


class UnresolvedDependencyError(DeployerException):
    """
    Raised when the address of a dependency is not known when it is needed
    """

    def __init__(self, name: str, contract: Optional[str] = None):
        """Init the error

        Args:
            name (str): name of the dependency without address
            contract (Optional[str]): contract that requires the dependency. Defaults to None.
        """
        if contract:
            message = f"Contract {name} required by {contract} has no address"
        else:
            message = f"Contract {name} has no address"
        super().__init__(message)
        self.name: str = name
        self.contract: Optional[str] = contract


class DeploymentError(DeployerException):
    """
    Raised when the ledger client failed to deploy a contract
    """

    def __init__(self, name: str, reason: str = ""):
        """Init the error

        Args:
            name (str): contract that failed to deploy
            reason (str): description of the failure. Defaults to "".
        """
        message = f"Deployment of {name} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.name: str = name


class InvalidArtifact(DeployerException):
    """
    Raised when the build artifacts can not be loaded
    """

    # pylint: disable=unnecessary-pass
    pass


class InvalidConfiguration(DeployerException):
    """
    Raised when the run configuration can not be completed
    """

    # pylint: disable=unnecessary-pass
    pass
