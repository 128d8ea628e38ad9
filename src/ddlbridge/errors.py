"""
Error taxonomy shared by dialects and the catalog executor.
"""


class DDLError(Exception):
    """Base error for dialect failures."""


class UnsupportedFeatureError(DDLError, NotImplementedError):
    """Raised when the engine has no mapping for the requested capability."""


class CatalogConnectionError(DDLError, ConnectionError):
    """Raised when a catalog query cannot be executed."""


class DialectConfigurationError(DDLError, ValueError):
    """Raised when a dialect cannot be selected from the supplied configuration."""
