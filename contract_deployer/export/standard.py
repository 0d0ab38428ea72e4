"""
Standard contract-deployer export: name -> {abi, address}
"""
import json
import os
from typing import Dict, List

from contract_deployer.contract import DeployedContract

EXPORT_FILENAME = "deployed_contracts.json"


def generate_standard_export(deployed_contracts: Dict[str, DeployedContract]) -> Dict:
    """Build the json object of the deployed contracts

    Args:
        deployed_contracts (Dict[str, DeployedContract]): contract name -> deployment record

    Returns:
        Dict: name -> {"abi": ..., "address": ...}
    """
    return {
        name: {"abi": deployed.abi, "address": deployed.address}
        for name, deployed in deployed_contracts.items()
    }


def export_to_standard(deployed_contracts: Dict[str, DeployedContract], **kwargs: str) -> List[str]:
    """Export the deployed contracts to a json file

    Args:
        deployed_contracts (Dict[str, DeployedContract]): contract name -> deployment record
        **kwargs: optional arguments. Used: "export_dir"

    Returns:
        List[str]: List of files generated
    """
    export_dir = kwargs.get("export_dir", "deploy-export")
    if not os.path.exists(export_dir):
        os.makedirs(export_dir)

    path = os.path.join(export_dir, EXPORT_FILENAME)
    with open(path, "w", encoding="utf8") as file_desc:
        json.dump(generate_standard_export(deployed_contracts), file_desc, indent=2)

    return [path]
