"""MikroID: short, unique, cryptographically secure IDs."""

from mikroid.config import DEFAULTS, GeneratorDefaults, normalize_config
from mikroid.core.errors import (
    ConfigurationNotFoundError,
    InvalidLengthError,
    InvalidStyleError,
    MikroIDError,
    MissingNameError,
)
from mikroid.core.id_generator import IdGenerator, SecureIdGenerator
from mikroid.core.types import IdConfiguration, IdConfigurationOptions, IdStyle
from mikroid.generator import MikroID

__all__ = [
    "MikroID",
    "IdConfiguration",
    "IdConfigurationOptions",
    "IdStyle",
    "IdGenerator",
    "SecureIdGenerator",
    "GeneratorDefaults",
    "DEFAULTS",
    "normalize_config",
    "MikroIDError",
    "MissingNameError",
    "ConfigurationNotFoundError",
    "InvalidLengthError",
    "InvalidStyleError",
]
