"""Random byte source abstraction."""

from __future__ import annotations

import secrets
from typing import Protocol


class RandomSource(Protocol):
    def token_bytes(self, n: int) -> bytes: ...


class SecureRandomSource:
    """Default implementation: the OS CSPRNG via ``secrets``."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)
