class DomainError(Exception):
    """Base class for domain-specific errors."""


class DataProviderError(DomainError):
    """Raised when a data provider fails to deliver valid data."""


class UnsupportedTimeframeError(DomainError):
    """Raised when a timeframe is outside the supported enumeration."""


class BarNotFoundError(DomainError, LookupError):
    """Raised when no bar of a series matches the requested time."""


class ConfigurationError(DomainError):
    """Raised when the swing configuration cannot be applied to the chart series."""
