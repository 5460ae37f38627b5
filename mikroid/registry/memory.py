"""In-memory, lock-protected configuration registry."""

from __future__ import annotations

import copy
import logging
import threading

from mikroid.core.types import IdConfiguration

logger = logging.getLogger(__name__)


class InMemoryConfigurationRegistry:
    """Name -> configuration map shared safely between threads.

    Entries are copied in and out so callers never hold a reference to the
    stored configuration. Concurrent writes to the same name resolve as
    last-writer-wins.
    """

    def __init__(self) -> None:
        self._configs: dict[str, IdConfiguration] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> IdConfiguration | None:
        with self._lock:
            config = self._configs.get(name)
        if config is None:
            return None
        return copy.copy(config)

    def put(self, config: IdConfiguration) -> None:
        with self._lock:
            replaced = config.name in self._configs
            self._configs[config.name] = copy.copy(config)
        logger.debug(
            "%s ID configuration %r", "Replaced" if replaced else "Added", config.name
        )

    def delete(self, name: str) -> bool:
        with self._lock:
            removed = self._configs.pop(name, None) is not None
        if removed:
            logger.debug("Removed ID configuration %r", name)
        return removed

    def names(self) -> list[str]:
        with self._lock:
            return list(self._configs)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._configs

    def __len__(self) -> int:
        with self._lock:
            return len(self._configs)
