"""Exception hierarchy for MikroID."""


class MikroIDError(Exception):
    """Package base exception."""


class MissingNameError(MikroIDError):
    """add/remove called without a non-empty configuration name."""

    def __init__(self) -> None:
        super().__init__("Missing name for the ID configuration")


class ConfigurationNotFoundError(MikroIDError, LookupError):
    """No configuration is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No configuration found with name: {name}")
        self.name = name


class InvalidLengthError(MikroIDError, ValueError):
    """Requested ID length is zero or negative."""

    def __init__(self, length: object) -> None:
        super().__init__(f"ID length must be a positive integer, got {length!r}")
        self.length = length


class InvalidStyleError(MikroIDError, ValueError):
    """Style value is not one of the known ID styles."""

    def __init__(self, style: object) -> None:
        super().__init__(
            f'Unknown ID style "{style}" provided. Must be one of '
            '"extended" (default), "alphanumeric", or "hex".'
        )
        self.style = style
