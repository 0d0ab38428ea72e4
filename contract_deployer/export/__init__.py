"""
Module containing all the supported export functions
"""
from typing import Dict, List

from contract_deployer.contract import DeployedContract
from contract_deployer.export.standard import export_to_standard
from contract_deployer.export.web3js import export_to_web3js

EXPORT_FORMATS = {
    "standard": export_to_standard,
    "json": export_to_standard,
    "web3js": export_to_web3js,
}


def export_deployed(deployed_contracts: Dict[str, DeployedContract], **kwargs: str) -> List[str]:
    """Export the deployed contracts.
    The type is specified in the kwargs with "export_format" (default: json)

    Args:
        deployed_contracts (Dict[str, DeployedContract]): contract name -> deployment record
        **kwargs: optional arguments. Used: "export_format", "export_dir", "provider"

    Raises:
        ValueError: Incorrect type

    Returns:
        List[str]: List of the filenames generated
    """
    export_format = kwargs.get("export_format", None) or "json"
    if export_format not in EXPORT_FORMATS:
        raise ValueError("Export format unknown")
    return EXPORT_FORMATS[export_format](deployed_contracts, **kwargs)
