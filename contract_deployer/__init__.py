"""
Init module
"""

from .contract import ContractArtifact, DeployedContract
from .contract_deployer import ContractDeployer, DeployContext, deploy_all
from .dependency_graph import DependencyGraph, build_dependency_graph, plan_order
from .exceptions import (
    CycleError,
    DeployerException,
    DeploymentError,
    InvalidArtifact,
    InvalidConfiguration,
    UnresolvedDependencyError,
)
from .utils.dependencies import extract_dependencies
from .utils.libraries import link_bytecode
