"""
Test the ordered deployment
"""
import logging

import pytest

from contract_deployer.config import DeployConfig
from contract_deployer.contract import ContractArtifact
from contract_deployer.contract_deployer import ContractDeployer, DeployContext, deploy_all
from contract_deployer.exceptions import (
    DeployerException,
    DeploymentError,
    UnresolvedDependencyError,
)

from .conftest import ACCOUNT, GAS_LIMIT, FakeLedgerClient, constructor

B_ADDRESS = "0" * 39 + "1"


def _context(client, **kwargs) -> DeployContext:
    return DeployContext(client, DeployConfig(ACCOUNT, GAS_LIMIT, **kwargs))


def test_library_is_linked_before_deployment(client, library_artifacts) -> None:
    """B is deployed first and its address is substituted in A"""
    deployer = ContractDeployer(library_artifacts, client=client)
    assert deployer.deployment_order == ["B", "A"]

    deployed = deployer.deploy()

    assert [d["bytecode"] for d in client.deployments] == [
        "60016002",
        "6001" + B_ADDRESS + "6002",
    ]
    assert list(deployed) == ["B", "A"]
    assert deployed["B"].address == "0x" + B_ADDRESS
    assert deployed["A"].address == client.deployments[1]["address"]
    assert all(d["options"] == {"from": ACCOUNT, "gas": GAS_LIMIT} for d in client.deployments)


def test_reuse_deployed_contract(client, library_artifacts) -> None:
    """A configured address is used as is and the contract is not deployed"""
    address = "0xABC" + "0" * 37
    deployer = ContractDeployer(library_artifacts, client=client, deployedContracts={"B": address})
    deployed = deployer.deploy()

    assert len(client.deployments) == 1
    assert deployed["B"].address == address
    assert client.deployments[0]["bytecode"] == "6001" + address[2:] + "6002"


def test_constructor_injection(client) -> None:
    """Configured parameters come first, then the injected addresses"""
    artifacts = [
        ContractArtifact(
            "Token",
            [constructor(("name", "string"), ("inject_Registry", "address"))],
            "6080",
        ),
        ContractArtifact("Registry", [], "6040"),
    ]
    context = _context(client, constructor_params={"Token": ["MyToken"]})

    deployed = deploy_all(context, ["Registry", "Token"], {a.name: a for a in artifacts})

    assert client.deployments[1]["args"] == ["MyToken", deployed["Registry"].address]
    assert context.config.constructor_params == {"Token": ["MyToken"]}


def test_unresolved_constructor_dependency(client) -> None:
    """No deployment is sent when an injected contract has no address"""
    token = ContractArtifact("Token", [constructor(("inject_Registry", "address"))], "6080")
    with pytest.raises(UnresolvedDependencyError) as error:
        deploy_all(_context(client), ["Token"], {"Token": token})
    assert error.value.name == "Registry"
    assert client.deployments == []


def test_missing_artifact_without_address(client) -> None:
    artifact = ContractArtifact("A", [], "60__External____")
    with pytest.raises(UnresolvedDependencyError) as error:
        deploy_all(_context(client), ["External", "A"], {"A": artifact})
    assert error.value.name == "External"
    assert client.deployments == []


def test_missing_artifact_with_address(client) -> None:
    """A dependency outside of the artifacts can be provided by the configuration"""
    artifact = ContractArtifact("A", [], "60__External____61")
    context = _context(client, deployed_contracts={"External": "0x1234"})
    deployed = deploy_all(context, ["External", "A"], {"A": artifact})
    assert list(deployed) == ["A"]
    assert client.deployments[0]["bytecode"] == "60123461"


def test_deployment_failure_aborts_the_run(library_artifacts) -> None:
    """The failure is reported with the contract name, nothing else is deployed"""
    client = FakeLedgerClient(fail_on="6001" + B_ADDRESS)
    artifacts = library_artifacts + [ContractArtifact("C", [], "6099")]
    deployer = ContractDeployer(artifacts, client=client)
    assert deployer.deployment_order == ["B", "A", "C"]

    with pytest.raises(DeploymentError) as error:
        deployer.deploy()

    assert error.value.name == "A"
    assert isinstance(error.value.__cause__, RuntimeError)
    assert [d["bytecode"] for d in client.deployments] == ["60016002"]
    assert deployer.deployed_contracts == {}


def test_artifact_address_is_stamped(client, library_artifacts) -> None:
    ContractDeployer(library_artifacts, client=client).deploy()
    assert library_artifacts[1].address == "0x" + B_ADDRESS
    assert library_artifacts[0].is_linked


def test_export_requires_deploy(client, library_artifacts, tmp_path) -> None:
    deployer = ContractDeployer(library_artifacts, client=client)
    with pytest.raises(DeployerException):
        deployer.export(export_dir=str(tmp_path))
    deployer.deploy()
    files = deployer.export(export_dir=str(tmp_path))
    assert len(files) == 1


@pytest.mark.parametrize("debug, level", [(True, logging.INFO), (False, logging.DEBUG)])
def test_debug_flag_log_level(client, library_artifacts, caplog, debug, level) -> None:
    """The debug flag logs the deployment order and the link actions at info level"""
    caplog.set_level(logging.DEBUG, logger="ContractDeployer")
    ContractDeployer(library_artifacts, client=client, debug=debug).deploy()

    messages = [(record.levelno, record.getMessage()) for record in caplog.records]
    assert (level, "Deployment order: ['B', 'A']") in messages
    assert (level, f"Linking library 'B' at 0x{B_ADDRESS}") in messages
    if not debug:
        assert all(
            levelno == logging.DEBUG
            for levelno, message in messages
            if message.startswith(("Deployment order", "Linking library"))
        )


def test_reused_contract_without_address(client, library_artifacts) -> None:
    """An empty configured address is not a valid reuse"""
    deployer = ContractDeployer(library_artifacts, client=client, deployed_contracts={"B": ""})
    with pytest.raises(UnresolvedDependencyError) as error:
        deployer.deploy()
    assert error.value.name == "B"
    assert client.deployments == []


def test_missing_artifact_with_empty_address(client) -> None:
    artifact = ContractArtifact("A", [], "60__External____")
    context = _context(client, deployed_contracts={"External": ""})
    with pytest.raises(UnresolvedDependencyError) as error:
        deploy_all(context, ["External", "A"], {"A": artifact})
    assert error.value.name == "External"
    assert client.deployments == []
