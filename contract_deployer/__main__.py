"""
This is the contract-deployer cli script
"""
import argparse
import json
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict

from contract_deployer.client.web3_client import Web3LedgerClient
from contract_deployer.config import CONFIG_ALIASES
from contract_deployer.contract_deployer import ContractDeployer
from contract_deployer.deployparser import DEFAULTS_FLAG_IN_CONFIG, deployparser
from contract_deployer.exceptions import DeployerException

logging.basicConfig()
LOGGER = logging.getLogger("ContractDeployer")
LOGGER.setLevel(logging.INFO)


def _version() -> str:
    try:
        return version("contract-deployer")
    except PackageNotFoundError:
        return "unknown"


def load_config_file(args: argparse.Namespace) -> None:
    """Update the arguments left to their default with the values of the config file

    Args:
        args (argparse.Namespace): parsed arguments, updated in place
    """
    if not os.path.isfile(args.config_file):
        return
    try:
        with open(args.config_file, encoding="utf8") as f_config:
            config = json.load(f_config)
    except json.decoder.JSONDecodeError as exception:
        LOGGER.error("Impossible to read %s, please check the file %s", args.config_file, exception)
        return

    for key, elem in config.items():
        key = CONFIG_ALIASES.get(key, key)
        if key not in DEFAULTS_FLAG_IN_CONFIG:
            LOGGER.info("%s has an unknown key: %s : %s", args.config_file, key, elem)
            continue
        if getattr(args, key) == DEFAULTS_FLAG_IN_CONFIG[key]:
            setattr(args, key, elem)


def parse_args() -> argparse.Namespace:
    """Create a argparse object and parse the arguments

    Returns:
        argparse.Namespace: parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="contract-deployer. Link and deploy compiled contracts in dependency order",
        usage="contract-deployer build/contracts [flag]",
    )

    parser.add_argument("target", help="build output (truffle directory, solc or standard json)")

    parser.add_argument(
        "--config-file",
        help="Provide a config file (default: contract_deployer.config.json)",
        action="store",
        dest="config_file",
        default="contract_deployer.config.json",
    )

    parser.add_argument(
        "--print-order",
        help="Print the deployment order and exit, without deploying",
        action="store_true",
        dest="print_order",
        default=False,
    )

    parser.add_argument(
        "--debug",
        help="Log the deployment order and each link action",
        action="store_true",
        dest="debug",
        default=DEFAULTS_FLAG_IN_CONFIG["debug"],
    )

    parser.add_argument(
        "--version",
        help="displays the current version",
        version=_version(),
        action="version",
    )

    deployparser.init(parser)
    if len(sys.argv) == 1:
        parser.print_help(sys.stderr)
        sys.exit(1)

    args = parser.parse_args()
    load_config_file(args)
    return args


def _user_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Return the configuration options explicitly set

    Args:
        args (argparse.Namespace): parsed arguments

    Returns:
        Dict[str, Any]: configuration keys that have a value
    """
    keys = ["provider", "from_address", "gas_limit", "constructor_params", "deployed_contracts"]
    return {key: getattr(args, key) for key in keys if getattr(args, key) is not None}


def main() -> None:
    """Main function run from the cli"""
    args = parse_args()
    try:
        if args.print_order:
            deployer = ContractDeployer(args.target, artifact_format=args.artifact_format)
            for index, name in enumerate(deployer.deployment_order):
                print(f"{index}: {name}")
            return

        client = Web3LedgerClient(args.provider)
        deployer = ContractDeployer(
            args.target,
            client=client,
            debug=args.debug,
            artifact_format=args.artifact_format,
            **_user_config(args),
        )
        deployer.deploy()
        for filename in deployer.export(
            export_format=args.export_format, export_dir=args.export_dir
        ):
            LOGGER.info("Export %s", filename)

    except DeployerException as exception:
        LOGGER.error(exception)
        sys.exit(-1)


if __name__ == "__main__":
    main()
