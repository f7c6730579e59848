"""Security helpers for fluentsql."""

from .dsns import DSNConfig, parse_dsn
from .redaction import redact_mapping, redact_params

__all__ = ["DSNConfig", "parse_dsn", "redact_params", "redact_mapping"]
