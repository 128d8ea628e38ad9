"""Security helpers for ddlbridge."""

from .dsns import DSNConfig, parse_dsn
from .redaction import redact_params

__all__ = ["DSNConfig", "parse_dsn", "redact_params"]
