"""
Core exception types for zcash_parser.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "AmountDomainError",
    "MalformedAmountError",
    "MalformedInteger",
    "MalformedFloat",
    "MalformedScientific",
    "MalformedMessage",
    "ConfigError",
]


class AmountDomainError(Exception):
    """Raised when inputs violate basic preconditions (e.g. a negative decimal point)."""
    pass


class MalformedAmountError(ValueError):
    """Base class for numeric fields or amount strings that fail to parse.

    Attributes
    ----------
    field : str | None
        Name of the transaction field the value came from, if any.
    raw : str
        The raw text that failed to parse.
    """

    def __init__(self, message, *, field=None, raw=""):
        super().__init__(message)
        self.field = field
        self.raw = raw


class MalformedInteger(MalformedAmountError):
    """Raised when a field expected to hold a base-10 integer does not."""

    def __init__(self, field, raw):
        super().__init__(f"failed to parse {field}: {raw!r} is not a base-10 integer", field=field, raw=raw)


class MalformedFloat(MalformedAmountError):
    """Raised when the legacy decimal `valueBalance` field is not a finite number."""

    def __init__(self, field, raw):
        super().__init__(f"failed to parse {field} as float: {raw!r}", field=field, raw=raw)


class MalformedScientific(MalformedAmountError):
    """Raised when an amount string has invalid mantissa or exponent syntax."""

    def __init__(self, raw, field=None):
        super().__init__(f"invalid amount string: {raw!r}", field=field, raw=raw)


class MalformedMessage(ValueError):
    """Raised when a raw transaction message is not a JSON object."""
    pass


class ConfigError(ValueError):
    """Raised when a configuration value is missing or invalid."""
    pass
