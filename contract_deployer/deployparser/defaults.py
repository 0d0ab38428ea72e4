"""
Default value for options
"""

# Those are the flags shared by the command line and the config file
DEFAULTS_FLAG_IN_CONFIG = {
    "artifact_format": None,
    "provider": "http://localhost:8545",
    "from_address": None,
    "gas_limit": None,
    "constructor_params": None,
    "deployed_contracts": None,
    "export_format": "json",
    "export_dir": "deploy-export",
    "debug": False,
}
