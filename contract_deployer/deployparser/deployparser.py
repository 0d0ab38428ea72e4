"""
Module handling the cli arguments
"""
import json
from argparse import ArgumentParser, ArgumentTypeError
from typing import Any, Dict

from contract_deployer.deployparser.defaults import DEFAULTS_FLAG_IN_CONFIG


def json_object(value: str) -> Dict[str, Any]:
    """Parse a json object given on the command line

    Args:
        value (str): json text

    Raises:
        ArgumentTypeError: if the value is not a json object

    Returns:
        Dict[str, Any]: parsed object
    """
    try:
        loaded = json.loads(value)
    except json.decoder.JSONDecodeError as exception:
        raise ArgumentTypeError(f"Invalid json: {exception}") from exception
    if not isinstance(loaded, dict):
        raise ArgumentTypeError("A json object is expected")
    return loaded


def init(parser: ArgumentParser) -> None:
    """
    Add contract-deployer arguments to the parser

    :param parser:
    :return:
    """
    _init_artifacts(parser)
    _init_network(parser)
    _init_export(parser)


def _init_artifacts(parser: ArgumentParser) -> None:
    group_artifacts = parser.add_argument_group("Artifact options")
    group_artifacts.add_argument(
        "--artifact-format",
        help="Force the build output format (solc, truffle, standard)",
        action="store",
        dest="artifact_format",
        default=DEFAULTS_FLAG_IN_CONFIG["artifact_format"],
    )


def _init_network(parser: ArgumentParser) -> None:
    group_network = parser.add_argument_group("Deployment options")
    group_network.add_argument(
        "--provider",
        help=f"JSON-RPC url (default {DEFAULTS_FLAG_IN_CONFIG['provider']})",
        action="store",
        dest="provider",
        default=DEFAULTS_FLAG_IN_CONFIG["provider"],
    )

    group_network.add_argument(
        "--from",
        help="Deploying account (default: first account of the node)",
        action="store",
        dest="from_address",
        default=DEFAULTS_FLAG_IN_CONFIG["from_address"],
    )

    group_network.add_argument(
        "--gas-limit",
        help="Gas sent with every deployment (default: gas limit of the latest block)",
        action="store",
        type=int,
        dest="gas_limit",
        default=DEFAULTS_FLAG_IN_CONFIG["gas_limit"],
    )

    group_network.add_argument(
        "--constructor-params",
        help='Constructor arguments, as json. Example: \'{"Token": ["Name", 18]}\'',
        action="store",
        type=json_object,
        dest="constructor_params",
        default=DEFAULTS_FLAG_IN_CONFIG["constructor_params"],
    )

    group_network.add_argument(
        "--deployed-contracts",
        help='Addresses of contracts to reuse, as json. Example: \'{"Lib": "0x..."}\'',
        action="store",
        type=json_object,
        dest="deployed_contracts",
        default=DEFAULTS_FLAG_IN_CONFIG["deployed_contracts"],
    )


def _init_export(parser: ArgumentParser) -> None:
    group_export = parser.add_argument_group("Export options")
    group_export.add_argument(
        "--export-format",
        help="Output format (default json. Accepted: json, web3js)",
        action="store",
        dest="export_format",
        default=DEFAULTS_FLAG_IN_CONFIG["export_format"],
    )

    group_export.add_argument(
        "--export-dir",
        help=f"Export directory (default: {DEFAULTS_FLAG_IN_CONFIG['export_dir']})",
        action="store",
        dest="export_dir",
        default=DEFAULTS_FLAG_IN_CONFIG["export_dir"],
    )
