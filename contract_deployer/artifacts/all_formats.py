"""
Module containing all the artifact formats
"""
from .solc import Solc
from .standard import Standard
from .truffle import Truffle
