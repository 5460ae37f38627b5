"""MikroID: the public entry point."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping

from mikroid.config import (
    DEFAULTS,
    ConfigInput,
    GeneratorDefaults,
    config_name,
    normalize_config,
)
from mikroid.core.errors import ConfigurationNotFoundError, MissingNameError
from mikroid.core.id_generator import IdGenerator, SecureIdGenerator
from mikroid.core.types import IdConfiguration, IdStyle
from mikroid.registry.base import ConfigurationRegistry
from mikroid.registry.memory import InMemoryConfigurationRegistry


class MikroID:
    """Generates short, unique IDs from cryptographically secure randomness.

    IDs can be created ad hoc with :meth:`create`, or from named profiles
    registered with :meth:`add` and used through :meth:`custom`::

        ids = MikroID({"api-key": {"length": 32, "style": "alphanumeric"}})
        ids.create(8)          # 8-character extended ID
        ids.create(16, "hex")  # 16-character hex ID
        ids.custom("api-key")  # 32-character alphanumeric ID
    """

    def __init__(
        self,
        options: Mapping[str, ConfigInput] | None = None,
        *,
        registry: ConfigurationRegistry | None = None,
        id_generator: IdGenerator | None = None,
        defaults: GeneratorDefaults = DEFAULTS,
    ) -> None:
        if registry is None:
            registry = InMemoryConfigurationRegistry()
        self._registry = registry
        self._id_gen = id_generator or SecureIdGenerator()
        self._defaults = defaults

        for name, entry in (options or {}).items():
            config = normalize_config(entry, self._defaults)
            self._registry.put(dataclasses.replace(config, name=name))

    def add(self, config: ConfigInput) -> None:
        """Register a named configuration, replacing any with the same name."""
        if not config_name(config):
            raise MissingNameError()
        self._registry.put(normalize_config(config, self._defaults))

    def remove(self, config: ConfigInput) -> None:
        """Deregister a named configuration. Unknown names are ignored."""
        name = config_name(config)
        if not name:
            raise MissingNameError()
        self._registry.delete(name)

    def create(
        self,
        length: int | None = None,
        style: IdStyle | str | None = None,
        only_lower_case: bool | None = None,
        url_safe: bool | None = None,
    ) -> str:
        """Create an ID from ad-hoc settings.

        Args:
            length: number of characters; ``None`` or ``0`` uses the default (16).
            style: ``"extended"`` (default) adds ``-._~`` to letters and digits,
                ``"alphanumeric"`` uses letters and digits only, ``"hex"`` uses
                ``0-9`` and ``a-f``/``A-F``.
            only_lower_case: drop upper-case letters.
            url_safe: for the extended style, exclude ``!$()*+,;=:``.
        """
        config = normalize_config(
            {
                "length": length,
                "style": style,
                "only_lower_case": only_lower_case,
                "url_safe": url_safe,
            },
            self._defaults,
        )
        return self._id_gen.generate(config)

    def custom(self, name: str) -> str:
        """Create an ID using the configuration registered as ``name``."""
        config = self._registry.get(name)
        if config is None:
            raise ConfigurationNotFoundError(name)
        return self._id_gen.generate(config)

    def get(self, name: str) -> IdConfiguration | None:
        return self._registry.get(name)

    def names(self) -> list[str]:
        return self._registry.names()
