"""Registry module: named ID configuration storage."""

from mikroid.registry.base import ConfigurationRegistry
from mikroid.registry.memory import InMemoryConfigurationRegistry

__all__ = ["ConfigurationRegistry", "InMemoryConfigurationRegistry"]
