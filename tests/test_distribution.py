"""Statistical checks on generated IDs."""

from __future__ import annotations

from collections import Counter

from mikroid.core.alphabet import resolve_alphabet
from mikroid.core.types import IdStyle


def test_unique_ids(ids):
    generated = {ids.create(16) for _ in range(1000)}
    assert len(generated) == 1000


def test_uniform_distribution(ids):
    sample = ids.create(10000, IdStyle.ALPHANUMERIC)
    counts = Counter(sample)
    assert set(counts) == set(resolve_alphabet(IdStyle.ALPHANUMERIC, False, True))
    assert max(counts.values()) / min(counts.values()) < 2


def test_uppercase_appears(ids):
    ids.add({"name": "mixed", "only_lower_case": False})
    assert any(
        any(c.isupper() for c in ids.custom("mixed")) for _ in range(10)
    )
