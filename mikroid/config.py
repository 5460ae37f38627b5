"""Generation defaults and configuration normalisation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any, Union

from mikroid.core.types import IdConfiguration, IdConfigurationOptions, IdStyle

ConfigInput = Union[IdConfiguration, IdConfigurationOptions, Mapping[str, Any], None]

_OPTION_KEYS = frozenset(f.name for f in fields(IdConfigurationOptions))


@dataclass(frozen=True)
class GeneratorDefaults:
    length: int = 16
    only_lower_case: bool = False
    style: IdStyle = IdStyle.EXTENDED
    url_safe: bool = True


DEFAULTS = GeneratorDefaults()


def options_to_dict(options: ConfigInput) -> dict[str, Any]:
    """Flatten any accepted config shape into a dict of known keys."""
    if options is None:
        return {}
    if isinstance(options, (IdConfiguration, IdConfigurationOptions)):
        return asdict(options)
    if isinstance(options, Mapping):
        return {k: v for k, v in options.items() if k in _OPTION_KEYS}
    raise TypeError(
        f"Expected a mapping or IdConfigurationOptions, got {type(options).__name__}"
    )


def config_name(options: ConfigInput) -> str:
    return options_to_dict(options).get("name") or ""


def _style(value: Any, default: IdStyle) -> IdStyle | str:
    if not value:
        return default
    try:
        return IdStyle(value)
    except ValueError:
        # Left as-is; the alphabet resolver reports it at generation time.
        return value


def normalize_config(
    options: ConfigInput, defaults: GeneratorDefaults = DEFAULTS
) -> IdConfiguration:
    """Merge caller-supplied fields over ``defaults``.

    A missing or zero ``length`` falls back to the default length. Negative
    lengths are kept so that generation rejects them.
    """
    raw = options_to_dict(options)

    length = raw.get("length")
    if length is None or length == 0:
        length = defaults.length

    only_lower_case = raw.get("only_lower_case")
    url_safe = raw.get("url_safe")

    return IdConfiguration(
        name=raw.get("name") or "",
        length=length,
        only_lower_case=(
            defaults.only_lower_case if only_lower_case is None else bool(only_lower_case)
        ),
        style=_style(raw.get("style"), defaults.style),
        url_safe=defaults.url_safe if url_safe is None else bool(url_safe),
    )
