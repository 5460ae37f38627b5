"""ID generation utilities."""

from __future__ import annotations

import logging
import math
from typing import Protocol

from mikroid.core.alphabet import resolve_alphabet
from mikroid.core.errors import InvalidLengthError
from mikroid.core.random_source import RandomSource, SecureRandomSource
from mikroid.core.types import IdConfiguration

logger = logging.getLogger(__name__)

# Over-draw factor on top of the expected mask/n rejection ratio, so that
# one batch of bytes is almost always enough.
BATCH_MARGIN = 1.6


class IdGenerator(Protocol):
    def generate(self, config: IdConfiguration) -> str: ...


def sampling_mask(alphabet_size: int) -> int:
    """Smallest ``2**k - 1`` covering every index in ``[0, alphabet_size)``."""
    return (1 << (alphabet_size - 1).bit_length()) - 1


def batch_size(mask: int, length: int, alphabet_size: int) -> int:
    return max(1, math.ceil(BATCH_MARGIN * mask * length / alphabet_size))


class SecureIdGenerator:
    """Default implementation: unbiased rejection sampling over secure bytes.

    Each random byte is masked down to the nearest power-of-two range that
    covers the alphabet. Masked values that fall outside the alphabet are
    discarded instead of being wrapped with a modulo, which keeps every
    character equally likely.
    """

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self._random = random_source or SecureRandomSource()

    def generate(self, config: IdConfiguration) -> str:
        length = config.length
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise InvalidLengthError(length)

        alphabet = resolve_alphabet(
            config.style, config.only_lower_case, config.url_safe
        )
        size = len(alphabet)
        mask = sampling_mask(size)
        step = batch_size(mask, length, size)

        chars: list[str] = []
        batches = 0
        while len(chars) < length:
            batches += 1
            if batches > 1:
                logger.debug(
                    "Drawing extra batch %d (%d/%d chars accepted)",
                    batches, len(chars), length,
                )
            for byte in self._random.token_bytes(step):
                index = byte & mask
                if index < size:
                    chars.append(alphabet[index])
                    if len(chars) == length:
                        break

        return "".join(chars)
