"""
Adapter protocol definitions and connection configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence

from ..dialects import get_dialect
from ..dialects.base import Dialect, DialectName, count_placeholders
from ..errors import ConnectionFailedError, DatabaseError, MissingConfigKeyError
from ..security.dsns import DSNConfig, parse_dsn


class AdapterError(DatabaseError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration or required dependencies are invalid."""


class AdapterConnectionError(AdapterError, ConnectionFailedError):
    """Raised when establishing or using a connection fails."""


class AdapterExecutionError(AdapterError):
    """Raised when SQL execution or parameter validation fails."""


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

_FIELD_KEYS = ("host", "port", "database", "user", "password", "autocommit", "timeout")


def _parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise AdapterConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_number(value: Any, *, key: str, kind: type) -> Any:
    try:
        return kind(value)
    except (TypeError, ValueError) as exc:
        raise AdapterConfigurationError(
            f"Invalid {kind.__name__} value for '{key}': {value!r}"
        ) from exc


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for adapters.
    """

    driver: DialectName
    database: str
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    autocommit: bool = False
    timeout: float | None = None
    options: dict[str, Any] | None = None
    dsn: DSNConfig | None = None
    source: str | None = None

    @classmethod
    def from_mapping(
        cls, driver: "str | DialectName", params: Mapping[str, Any], **kwargs: Any
    ) -> "ConnectionConfig":
        """
        Validate ``params`` against the keys ``driver`` requires and build a config.

        Raises ``UnsupportedDialectError`` or ``MissingConfigKeyError`` before
        anything touches the network.
        """

        dialect = get_dialect(driver)
        for key in dialect.required_config_keys:
            if params.get(key) is None:
                raise MissingConfigKeyError(key, dialect.name.value)

        options = {key: value for key, value in params.items() if key not in _FIELD_KEYS}
        options.update(kwargs.pop("options", None) or {})

        port = params.get("port")
        timeout = params.get("timeout")
        autocommit = params.get("autocommit")
        values: dict[str, Any] = {
            "driver": dialect.name,
            "database": str(params["database"]) if "database" in params else "",
            "host": params.get("host"),
            "port": _parse_number(port, key="port", kind=int) if port is not None else None,
            "user": params.get("user"),
            "password": params.get("password"),
            "autocommit": _parse_bool(autocommit, key="autocommit") if autocommit is not None else False,
            "timeout": _parse_number(timeout, key="timeout", kind=float) if timeout is not None else None,
            "options": options or None,
        }
        values.update(kwargs)
        return cls(**values)

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a connection config by parsing the DSN string.
        """

        parsed = parse_dsn(dsn)
        params: dict[str, Any] = dict(parsed.query)
        if "connect_timeout" in params:
            params["connect_timeout"] = _parse_number(
                params["connect_timeout"], key="connect_timeout", kind=int
            )
        params.update(parsed.connection_params())
        kwargs.setdefault("dsn", parsed)
        return cls.from_mapping(parsed.driver, params, **kwargs)

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from an environment variable containing a DSN.
        """

        value = os.getenv(env_var)
        if not value:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        return cls.from_dsn(value, source=env_var, **kwargs)

    def redacted_dsn(self) -> str:
        """
        Return a DSN safe for logging (credentials removed).
        """

        if self.dsn:
            return self.dsn.redacted()
        if self.driver is DialectName.SQLITE:
            return f"sqlite:///{self.database}"
        credentials = f"{self.user}:***@" if self.user else ""
        port = f":{self.port}" if self.port else ""
        return f"{self.driver.value}://{credentials}{self.host}{port}/{self.database}"

    def descriptive_label(self) -> str:
        """
        Describe the config source for diagnostics.
        """

        redacted = self.redacted_dsn()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted


class DatabaseAdapter(Protocol):
    """
    Driver contract consumed by ``Database``.
    """

    dialect: Dialect

    def connect(self, config: ConnectionConfig) -> Any:
        """
        Establish a connection handle using the supplied configuration.
        """

    def close(self) -> None:
        """
        Close underlying resources. Implementations should be idempotent.
        """

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        """
        Prepare and execute a single SQL statement returning a cursor-like object.
        """

    def begin(self) -> None:
        """
        Start a transaction.
        """

    def commit(self) -> None:
        """
        Commit the current transaction.
        """

    def rollback(self) -> None:
        """
        Roll back the current transaction.
        """


def validate_params(sql: str, params: Sequence[Any], placeholder: str) -> None:
    """
    Check that ``params`` lines up with the placeholders in ``sql``.
    """

    placeholder_count = count_placeholders(sql, placeholder)
    if placeholder_count == 0:
        if params:
            raise AdapterExecutionError(
                "Parameters provided but SQL statement has no placeholders."
            )
        return
    if placeholder_count != len(params):
        raise AdapterExecutionError(
            f"Parameter count mismatch: expected {placeholder_count}, received {len(params)}."
        )
