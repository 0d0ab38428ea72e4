"""
Test the export of the deployed contracts
"""
import json
from pathlib import Path

import pytest

from contract_deployer.contract import DeployedContract
from contract_deployer.export import export_deployed
from contract_deployer.export.web3js import generate_web3js_export

ABI = [{"type": "function", "name": "f", "inputs": [], "outputs": []}]
DEPLOYED = {
    "B": DeployedContract("B", [], "0x01"),
    "A": DeployedContract("A", ABI, "0x02"),
}


def test_export_json(tmp_path: Path) -> None:
    files = export_deployed(DEPLOYED, export_dir=str(tmp_path / "out"))
    assert len(files) == 1
    with open(files[0], encoding="utf8") as file_desc:
        exported = json.load(file_desc)
    assert exported == {"B": {"abi": [], "address": "0x01"}, "A": {"abi": ABI, "address": "0x02"}}


def test_export_web3js(tmp_path: Path) -> None:
    files = export_deployed(
        DEPLOYED, export_format="web3js", export_dir=str(tmp_path), provider="http://node:8545"
    )
    source = Path(files[0]).read_text(encoding="utf8")
    assert source == generate_web3js_export(DEPLOYED, "http://node:8545")
    assert 'new Web3.providers.HttpProvider("http://node:8545")' in source
    assert '"A": new web3.eth.Contract(' + json.dumps(ABI) + ', "0x02"),' in source
    assert source.endswith("web3: web3\n};\n")


def test_unknown_format(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        export_deployed(DEPLOYED, export_format="xml", export_dir=str(tmp_path))
