"""
Test the configuration merging
"""
import pytest

from contract_deployer.config import DEFAULT_PROVIDER, merge_config
from contract_deployer.exceptions import InvalidConfiguration

from .conftest import ACCOUNT, GAS_LIMIT, FakeLedgerClient


def test_defaults(client: FakeLedgerClient) -> None:
    """Missing values are taken from the node"""
    config = merge_config({}, client)
    assert config.from_address == ACCOUNT
    assert config.gas_limit == GAS_LIMIT
    assert config.constructor_params == {}
    assert config.deployed_contracts == {}
    assert config.provider == DEFAULT_PROVIDER
    assert config.deploy_options == {"from": ACCOUNT, "gas": GAS_LIMIT}


def test_user_values_are_kept(client: FakeLedgerClient) -> None:
    """The node is not queried for the values set by the user"""
    config = merge_config({"from_address": "0x01", "gas_limit": 100}, client)
    assert config.from_address == "0x01"
    assert config.gas_limit == 100
    assert client.account_queries == 0
    assert client.block_queries == 0


def test_loader_aliases(client: FakeLedgerClient) -> None:
    """The camelCase keys of the web3 loader configuration are accepted"""
    config = merge_config(
        {
            "from": "0x02",
            "gasLimit": 200,
            "constructorParams": {"Token": ["Name", 18]},
            "deployedContracts": {"Lib": "0xabc"},
        },
        client,
    )
    assert config.from_address == "0x02"
    assert config.gas_limit == 200
    assert config.constructor_params == {"Token": ["Name", 18]}
    assert config.deployed_contracts == {"Lib": "0xabc"}


def test_unknown_keys_are_ignored(client: FakeLedgerClient) -> None:
    config = merge_config({"unknown": 1}, client)
    assert not hasattr(config, "unknown")


def test_no_account() -> None:
    with pytest.raises(InvalidConfiguration):
        merge_config({}, FakeLedgerClient(accounts=[]))
