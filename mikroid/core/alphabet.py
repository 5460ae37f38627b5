"""Character sets sampled by the ID generator."""

from __future__ import annotations

import string

from mikroid.core.errors import InvalidStyleError
from mikroid.core.types import IdStyle

HEX_UPPER = "0123456789ABCDEFabcdef"
HEX_LOWER = "0123456789abcdef"

URL_SAFE_SYMBOLS = "-._~"
RESERVED_SYMBOLS = "!$()*+,;=:"


def coerce_style(style: IdStyle | str) -> IdStyle:
    try:
        return IdStyle(style)
    except ValueError:
        raise InvalidStyleError(style) from None


def resolve_alphabet(
    style: IdStyle | str, only_lower_case: bool, url_safe: bool
) -> str:
    """Return the ordered alphabet for a style.

    Letters come first (upper then lower), then digits, then symbols.
    ``url_safe`` only affects the extended style; hex and alphanumeric
    contain nothing that needs percent-encoding.
    """
    style = coerce_style(style)

    if style is IdStyle.HEX:
        return HEX_LOWER if only_lower_case else HEX_UPPER

    letters = string.ascii_lowercase
    if not only_lower_case:
        letters = string.ascii_uppercase + letters
    chars = letters + string.digits

    if style is IdStyle.ALPHANUMERIC:
        return chars

    chars += URL_SAFE_SYMBOLS
    if not url_safe:
        chars += RESERVED_SYMBOLS
    return chars
