"""
Run configuration: user options merged with defaults queried from the ledger client
"""
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from contract_deployer.exceptions import InvalidConfiguration

if TYPE_CHECKING:
    from contract_deployer.client.abstract_client import AbstractLedgerClient

LOGGER = logging.getLogger("ContractDeployer")

DEFAULT_PROVIDER = "http://localhost:8545"

CONFIG_KEYS = [
    "provider",
    "from_address",
    "gas_limit",
    "constructor_params",
    "deployed_contracts",
]

# Keys used by the web3 loader configuration
CONFIG_ALIASES = {
    "from": "from_address",
    "gasLimit": "gas_limit",
    "constructorParams": "constructor_params",
    "deployedContracts": "deployed_contracts",
}


# pylint: disable=too-few-public-methods
class DeployConfig:
    """
    Class representing the options of a deployment run
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        from_address: str,
        gas_limit: int,
        constructor_params: Optional[Dict[str, List[Any]]] = None,
        deployed_contracts: Optional[Dict[str, str]] = None,
        provider: str = DEFAULT_PROVIDER,
    ) -> None:
        """
        Initialize a deployment configuration

        Args:
            from_address (str): account used to deploy
            gas_limit (int): gas sent with every deployment
            constructor_params (Optional[Dict[str, List[Any]]]): contract name -> constructor
                arguments. Defaults to None.
            deployed_contracts (Optional[Dict[str, str]]): contract name -> address of an
                existing deployment to reuse. Defaults to None.
            provider (str): provider url. Defaults to DEFAULT_PROVIDER.
        """
        self.from_address: str = from_address
        self.gas_limit: int = gas_limit
        self.constructor_params: Dict[str, List[Any]] = constructor_params or {}
        self.deployed_contracts: Dict[str, str] = deployed_contracts or {}
        self.provider: str = provider

    @property
    def deploy_options(self) -> Dict[str, Any]:
        """Return the transaction options sent with every deployment

        Returns:
            Dict[str, Any]: {"from": account, "gas": gas limit}
        """
        return {"from": self.from_address, "gas": self.gas_limit}


def normalize_config(user_config: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Rename the aliased keys and drop the unknown ones

    Args:
        user_config (Optional[Dict[str, Any]]): configuration given by the user

    Returns:
        Dict[str, Any]: configuration with known keys only
    """
    normalized: Dict[str, Any] = {}
    for key, value in (user_config or {}).items():
        key = CONFIG_ALIASES.get(key, key)
        if key not in CONFIG_KEYS:
            LOGGER.info("Unknown configuration key: %s : %s", key, value)
            continue
        normalized[key] = value
    return normalized


def merge_config(
    user_config: Optional[Dict[str, Any]], client: "AbstractLedgerClient"
) -> DeployConfig:
    """Merge the user configuration with the defaults

    The client is only queried for the values the user did not set:
    the account defaults to the first account, the gas limit to the latest
    block's gas limit.

    Args:
        user_config (Optional[Dict[str, Any]]): configuration given by the user
        client (AbstractLedgerClient): ledger client

    Raises:
        InvalidConfiguration: if no account is available

    Returns:
        DeployConfig: merged configuration
    """
    config = normalize_config(user_config)

    from_address = config.get("from_address")
    if from_address is None:
        accounts = client.list_accounts()
        if not accounts:
            raise InvalidConfiguration("No account available to deploy, set from_address")
        from_address = accounts[0]

    gas_limit = config.get("gas_limit")
    if gas_limit is None:
        gas_limit = client.get_latest_block()["gasLimit"]

    return DeployConfig(
        from_address=from_address,
        gas_limit=int(gas_limit),
        constructor_params=config.get("constructor_params"),
        deployed_contracts=config.get("deployed_contracts"),
        provider=config.get("provider") or DEFAULT_PROVIDER,
    )
