"""
Export the deployed contracts as a CommonJS module exposing web3.eth.Contract instances
"""
import json
import os
from typing import Dict, List

from contract_deployer.config import DEFAULT_PROVIDER
from contract_deployer.contract import DeployedContract

EXPORT_FILENAME = "contracts.js"

WEB3_HELPER = """var Web3 = require('web3');

var web3 = new Web3(new Web3.providers.HttpProvider({provider}));
"""


def generate_web3js_export(deployed_contracts: Dict[str, DeployedContract], provider: str) -> str:
    """Generate the javascript module

    Args:
        deployed_contracts (Dict[str, DeployedContract]): contract name -> deployment record
        provider (str): url of the provider used by the generated module

    Returns:
        str: javascript source
    """
    output = WEB3_HELPER.format(provider=json.dumps(provider)) + "\n"
    output += "module.exports = {\n"
    for name, deployed in deployed_contracts.items():
        output += json.dumps(name) + ": new web3.eth.Contract("
        output += json.dumps(deployed.abi) + ", "
        output += json.dumps(deployed.address) + "),\n"
    output += "web3: web3\n};\n"
    return output


def export_to_web3js(deployed_contracts: Dict[str, DeployedContract], **kwargs: str) -> List[str]:
    """Export the deployed contracts to a javascript module

    Args:
        deployed_contracts (Dict[str, DeployedContract]): contract name -> deployment record
        **kwargs: optional arguments. Used: "export_dir", "provider"

    Returns:
        List[str]: List of files generated
    """
    export_dir = kwargs.get("export_dir", "deploy-export")
    if not os.path.exists(export_dir):
        os.makedirs(export_dir)

    provider = kwargs.get("provider") or DEFAULT_PROVIDER
    path = os.path.join(export_dir, EXPORT_FILENAME)
    with open(path, "w", encoding="utf8") as file_desc:
        file_desc.write(generate_web3js_export(deployed_contracts, provider))

    return [path]
