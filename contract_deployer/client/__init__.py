"""
Init module
"""

__all__ = ["AbstractLedgerClient"]

from .abstract_client import AbstractLedgerClient
