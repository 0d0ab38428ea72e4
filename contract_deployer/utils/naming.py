"""
Module handling the contract naming operations (placeholder -> name, etc)
"""
from typing import Dict, Optional


def extract_name(name: str) -> str:
    """Convert '/path:Contract' to Contract

    Args:
        name (str): name to convert

    Returns:
        str: extracted contract name
    """
    return name[name.rfind(":") + 1 :]


def extract_filename(name: str) -> str:
    """Convert '/path:Contract' to /path

    Args:
        name (str): name to convert

    Returns:
        str: extracted filename
    """
    if not ":" in name:
        return name
    return name[: name.rfind(":")]


def combine_filename_name(filename: str, name: str) -> str:
    """Combine the filename with the contract name

    Args:
        filename (str): filename
        name (str): contract name

    Returns:
        str: Combined names
    """
    return filename + ":" + name


def is_hashed_placeholder(token: str) -> bool:
    """Check if a placeholder token is a solc >= 0.5 hashed placeholder ("$<hash>$")

    Args:
        token (str): placeholder token, without the surrounding underscores

    Returns:
        bool: True if the token is hashed
    """
    return len(token) > 2 and token.startswith("$") and token.endswith("$")


def placeholder_to_name(token: str, placeholder_names: Optional[Dict[str, str]] = None) -> str:
    """Return the contract name referenced by a placeholder token

    Hashed tokens are looked up in placeholder_names and kept verbatim when unknown.
    Legacy tokens may be prefixed by the source path ("path/Lib.sol:Lib").

    Args:
        token (str): placeholder token, without the surrounding underscores
        placeholder_names (Optional[Dict[str, str]]): hashed token -> contract name.
            Defaults to None.

    Returns:
        str: contract name
    """
    if is_hashed_placeholder(token):
        if placeholder_names and token in placeholder_names:
            return placeholder_names[token]
        return token
    return extract_name(token)
