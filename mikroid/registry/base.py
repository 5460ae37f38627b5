"""Registry protocol for named ID configurations."""

from __future__ import annotations

from typing import Protocol

from mikroid.core.types import IdConfiguration


class ConfigurationRegistry(Protocol):
    def get(self, name: str) -> IdConfiguration | None: ...

    def put(self, config: IdConfiguration) -> None: ...

    def delete(self, name: str) -> bool: ...

    def names(self) -> list[str]: ...

    def __contains__(self, name: object) -> bool: ...

    def __len__(self) -> int: ...
