"""
Framework Support Classes
"""

from novasanic.support.storage import Storage
from novasanic.support.env_helper import EnvHelper
from novasanic.support.config import Config
from novasanic.support.crypto import Crypto
from novasanic.support.class_loader import ClassLoader
from novasanic.support.str import Str

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
    'Crypto',
    'ClassLoader',
    'Str',
]
