"""
ContractDeployer main module. Handle the ordered deployment.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from contract_deployer.artifacts import load_artifacts
from contract_deployer.client.abstract_client import AbstractLedgerClient
from contract_deployer.config import DeployConfig, merge_config
from contract_deployer.contract import ContractArtifact, DeployedContract
from contract_deployer.dependency_graph import (
    DependencyGraph,
    build_dependency_graph,
    plan_order,
)
from contract_deployer.exceptions import (
    DeployerException,
    DeploymentError,
    UnresolvedDependencyError,
)
from contract_deployer.export import export_deployed
from contract_deployer.utils.dependencies import dependencies_from_constructor
from contract_deployer.utils.libraries import library_placeholders, link_bytecode

LOGGER = logging.getLogger("ContractDeployer")
logging.basicConfig()


# pylint: disable=too-few-public-methods
class DeployContext:
    """
    Everything a deployment run needs: the ledger client, the configuration and the debug flag
    """

    def __init__(
        self,
        client: AbstractLedgerClient,
        config: DeployConfig,
        debug: bool = False,
        placeholder_names: Optional[Dict[str, str]] = None,
    ):
        """Init the context

        Args:
            client (AbstractLedgerClient): ledger client used to deploy
            config (DeployConfig): merged configuration
            debug (bool): log the deployment order and the link actions. Defaults to False.
            placeholder_names (Optional[Dict[str, str]]): hashed placeholder -> contract name.
                Defaults to None.
        """
        self.client: AbstractLedgerClient = client
        self.config: DeployConfig = config
        self.debug: bool = debug
        self.placeholder_names: Dict[str, str] = placeholder_names or {}

    def log_debug(self, msg: str, *args: Any) -> None:
        LOGGER.log(logging.INFO if self.debug else logging.DEBUG, msg, *args)


def resolve_constructor_params(
    context: DeployContext, artifact: ContractArtifact, addresses: Dict[str, str]
) -> List[Any]:
    """Return the constructor arguments: the configured ones followed by the injected addresses

    Args:
        context (DeployContext): deployment context
        artifact (ContractArtifact): contract to deploy
        addresses (Dict[str, str]): contract name -> address, for the contracts already processed

    Raises:
        UnresolvedDependencyError: if an injected contract has no address

    Returns:
        List[Any]: constructor arguments
    """
    params = list(context.config.constructor_params.get(artifact.name, []))
    for dependency in dependencies_from_constructor(artifact):
        address = addresses.get(dependency)
        if not address:
            raise UnresolvedDependencyError(dependency, artifact.name)
        params.append(address)
    return params


def deploy_contract(
    context: DeployContext, artifact: ContractArtifact, addresses: Dict[str, str]
) -> DeployedContract:
    """Link and deploy a single contract, or reuse its configured address

    Args:
        context (DeployContext): deployment context
        artifact (ContractArtifact): contract to deploy
        addresses (Dict[str, str]): contract name -> address, for the contracts already processed

    Raises:
        UnresolvedDependencyError: if a library or an injected contract has no address,
            or if the configured address of a reused contract is empty
        DeploymentError: if the ledger client failed

    Returns:
        DeployedContract: deployment record
    """
    deployed_contracts = context.config.deployed_contracts
    if artifact.name in deployed_contracts:
        if not deployed_contracts[artifact.name]:
            raise UnresolvedDependencyError(artifact.name)
        artifact.address = deployed_contracts[artifact.name]
        LOGGER.info("Reusing %s at %s", artifact.name, artifact.address)
        return artifact.to_deployed()

    link_bytecode(artifact, addresses, context.placeholder_names, debug=context.debug)
    params = resolve_constructor_params(context, artifact, addresses)

    try:
        address = context.client.deploy_contract(
            artifact.bytecode, artifact.abi, params, context.config.deploy_options
        )
    # pylint: disable=broad-except
    except Exception as exception:
        raise DeploymentError(artifact.name, str(exception)) from exception

    if not address:
        raise DeploymentError(artifact.name, "the client returned no address")

    artifact.address = address
    LOGGER.info("%s deployed at %s", artifact.name, address)
    return artifact.to_deployed()


def deploy_all(
    context: DeployContext,
    planned_order: List[str],
    artifacts_by_name: Dict[str, ContractArtifact],
) -> Dict[str, DeployedContract]:
    """Deploy the contracts one after the other, following the planned order

    A contract listed in the order without artifact must be reused from the
    configuration; its address is then used for linking but it is not returned.

    Args:
        context (DeployContext): deployment context
        planned_order (List[str]): deployment order, dependencies first
        artifacts_by_name (Dict[str, ContractArtifact]): contract name -> artifact

    Raises:
        UnresolvedDependencyError: if a dependency has no artifact and no configured address

    Returns:
        Dict[str, DeployedContract]: contract name -> deployment record, in deployment order
    """
    context.log_debug("Deployment order: %s", planned_order)

    addresses: Dict[str, str] = {}
    deployed: Dict[str, DeployedContract] = {}
    for name in planned_order:
        artifact = artifacts_by_name.get(name)
        if artifact is None:
            if not context.config.deployed_contracts.get(name):
                raise UnresolvedDependencyError(name)
            addresses[name] = context.config.deployed_contracts[name]
            LOGGER.info("Reusing %s at %s", name, addresses[name])
            continue

        record = deploy_contract(context, artifact, addresses)
        addresses[name] = record.address
        deployed[name] = record
    return deployed


# pylint: disable=too-many-instance-attributes
class ContractDeployer:
    """
    Main class.
    """

    def __init__(
        self,
        target: Union[str, List[ContractArtifact]],
        client: Optional[AbstractLedgerClient] = None,
        debug: bool = False,
        **kwargs: Any,
    ):
        """Target is a build output (file or directory) or an already loaded list of artifacts

        Args:
            target (Union[str, List[ContractArtifact]]): Target
            client (Optional[AbstractLedgerClient]): ledger client, only needed to deploy.
                Defaults to None.
            debug (bool): log the deployment order and the link actions. Defaults to False.
            **kwargs: additional arguments. Used: "artifact_format", and the configuration keys
        """
        if isinstance(target, str):
            self._artifacts: List[ContractArtifact] = load_artifacts(
                target, kwargs.get("artifact_format", None)
            )
        else:
            self._artifacts = list(target)

        self._client: Optional[AbstractLedgerClient] = client
        self._debug: bool = debug
        self._user_config: Dict[str, Any] = {
            key: value for key, value in kwargs.items() if key != "artifact_format"
        }
        self._config: Optional[DeployConfig] = None

        self._placeholder_names: Dict[str, str] = library_placeholders(self._artifacts)
        self._graph: DependencyGraph = build_dependency_graph(
            self._artifacts, self._placeholder_names
        )
        self._deployment_order: List[str] = plan_order(self._graph)
        self._deployed_contracts: Dict[str, DeployedContract] = {}

    # region Getters
    ###################################################################################
    ###################################################################################

    @property
    def artifacts(self) -> List[ContractArtifact]:
        """Return the contract artifacts, in processing order

        Returns:
            List[ContractArtifact]: artifacts
        """
        return self._artifacts

    @property
    def artifacts_by_name(self) -> Dict[str, ContractArtifact]:
        return {artifact.name: artifact for artifact in self._artifacts}

    @property
    def graph(self) -> DependencyGraph:
        return self._graph

    @property
    def deployment_order(self) -> List[str]:
        """Return the deployment order

        Returns:
            List[str]: contract names, the first one is deployed first
        """
        return self._deployment_order

    @property
    def config(self) -> DeployConfig:
        """Return the configuration, merged with the client defaults on first access

        Raises:
            DeployerException: if no client was provided

        Returns:
            DeployConfig: merged configuration
        """
        if self._config is None:
            if self._client is None:
                raise DeployerException("A ledger client is required to deploy")
            self._config = merge_config(self._user_config, self._client)
        return self._config

    @property
    def deployed_contracts(self) -> Dict[str, DeployedContract]:
        """Return the deployed contracts

        Returns:
            Dict[str, DeployedContract]: contract name -> deployment record
        """
        return self._deployed_contracts

    # endregion
    ###################################################################################
    ###################################################################################
    # region Deploy
    ###################################################################################
    ###################################################################################

    def deploy(self) -> Dict[str, DeployedContract]:
        """Deploy every contract following the deployment order

        Returns:
            Dict[str, DeployedContract]: contract name -> deployment record
        """
        if self._deployed_contracts:
            return self._deployed_contracts

        context = DeployContext(
            self._client, self.config, debug=self._debug, placeholder_names=self._placeholder_names
        )
        self._deployed_contracts = deploy_all(
            context, self._deployment_order, self.artifacts_by_name
        )
        return self._deployed_contracts

    def export(self, **kwargs: str) -> List[str]:
        """Export the deployed contracts.
        The format is selected with "export_format" (json or web3js)

        Args:
            **kwargs: optional arguments. Used: "export_format", "export_dir"

        Raises:
            DeployerException: if nothing was deployed yet

        Returns:
            List[str]: List of the filenames generated
        """
        if not self._deployed_contracts:
            raise DeployerException("Nothing to export, run deploy() first")
        kwargs.setdefault("provider", self.config.provider)
        return export_deployed(self._deployed_contracts, **kwargs)

    # endregion
    ###################################################################################
    ###################################################################################
