from typing import Any, Dict, List

import pytest

from contract_deployer.client.abstract_client import AbstractLedgerClient
from contract_deployer.contract import ContractArtifact

ACCOUNT = "0x00000000000000000000000000000000000000aa"
GAS_LIMIT = 6721975


class FakeLedgerClient(AbstractLedgerClient):
    """In memory client: every deployment gets the next sequential address"""

    NAME = "fake"

    def __init__(self, accounts=None, fail_on=None):
        self.accounts: List[str] = [ACCOUNT] if accounts is None else accounts
        self.fail_on = fail_on
        self.deployments: List[Dict[str, Any]] = []
        self.block_queries = 0
        self.account_queries = 0

    def get_latest_block(self) -> Dict[str, Any]:
        self.block_queries += 1
        return {"number": 42, "gasLimit": GAS_LIMIT}

    def list_accounts(self) -> List[str]:
        self.account_queries += 1
        return list(self.accounts)

    def deploy_contract(self, bytecode, abi, constructor_args, options) -> str:
        if self.fail_on is not None and self.fail_on in bytecode:
            raise RuntimeError("execution reverted")
        address = "0x" + format(len(self.deployments) + 1, "040x")
        self.deployments.append(
            {
                "bytecode": bytecode,
                "abi": abi,
                "args": list(constructor_args),
                "options": dict(options),
                "address": address,
            }
        )
        return address


def constructor(*inputs):
    """ABI constructor entry with (name, type) inputs"""
    return {
        "type": "constructor",
        "inputs": [{"name": name, "type": input_type} for name, input_type in inputs],
        "stateMutability": "nonpayable",
    }


@pytest.fixture
def client():
    return FakeLedgerClient()


@pytest.fixture
def library_artifacts():
    """A uses the library B, B has no dependency"""
    return [
        ContractArtifact("A", [], "6001__B_____________________________________6002"),
        ContractArtifact("B", [], "0x60016002"),
    ]
