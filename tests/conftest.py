"""Shared test fixtures."""

from __future__ import annotations

import pytest

from mikroid.core.id_generator import SecureIdGenerator
from mikroid.generator import MikroID
from mikroid.registry.memory import InMemoryConfigurationRegistry


class SequenceRandomSource:
    """Random source that replays a fixed byte stream."""

    def __init__(self, data: bytes | list[int]):
        self._data = bytes(data)
        self._pos = 0
        self.requests: list[int] = []

    def token_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        chunk = self._data[self._pos:self._pos + n]
        if len(chunk) < n:
            raise AssertionError(f"byte stream exhausted after {self._pos} bytes")
        self._pos += n
        return chunk


@pytest.fixture
def ids():
    return MikroID()


@pytest.fixture
def registry():
    return InMemoryConfigurationRegistry()


@pytest.fixture
def sequence_source():
    def _make(data: bytes | list[int]) -> SequenceRandomSource:
        return SequenceRandomSource(data)

    return _make


@pytest.fixture
def secure_generator():
    return SecureIdGenerator()
