"""Core data types for ID generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IdStyle(str, Enum):
    ALPHANUMERIC = "alphanumeric"
    EXTENDED = "extended"
    HEX = "hex"


@dataclass
class IdConfiguration:
    """Fully resolved generation profile; every field is populated."""

    name: str
    length: int
    only_lower_case: bool
    style: IdStyle | str
    url_safe: bool


@dataclass
class IdConfigurationOptions:
    """Partial profile. ``None`` means "use the default"."""

    name: str | None = None
    length: int | None = None
    only_lower_case: bool | None = None
    style: IdStyle | str | None = None
    url_safe: bool | None = None
