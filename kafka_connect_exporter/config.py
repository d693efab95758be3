"""
Exporter configuration.

Values come from command-line flags, then environment variables, then
built-in defaults. Everything is resolved and validated once at startup.
"""

import math
import os
from dataclasses import dataclass
from urllib.parse import urlsplit

from .const import (
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SCRAPE_URI,
    DEFAULT_TELEMETRY_PATH,
    DEFAULT_TIMEOUT,
    SUPPORTED_SCHEMES,
)

# Environment variable for each config field
ENV_VARS = {
    "scrape_uri": "KAFKA_CONNECT_URL",
    "listen_address": "LISTEN_ADDRESS",
    "telemetry_path": "TELEMETRY_PATH",
    "timeout": "SCRAPE_TIMEOUT",
    "log_level": "LOG_LEVEL",
    "log_file": "LOG_FILE",
}


class ConfigError(Exception):
    """Invalid exporter configuration."""


def parse_listen_address(address: str) -> tuple[str, int]:
    """
    Split a listen address into host and port.

    Accepts ":8080", "0.0.0.0:8080", "localhost:8080" and "[::1]:8080".
    An empty host means all interfaces.
    """
    host, sep, port_str = address.rpartition(":")
    if not sep:
        raise ConfigError(f"listen address {address!r} has no port")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ConfigError(f"IPv6 listen address {address!r} must be bracketed")

    try:
        port = int(port_str)
    except ValueError:
        raise ConfigError(f"invalid port in listen address {address!r}") from None
    if not 0 <= port <= 65535:
        raise ConfigError(f"port out of range in listen address {address!r}")

    return host, port


@dataclass
class ExporterConfig:
    """Exporter settings."""

    scrape_uri: str = DEFAULT_SCRAPE_URI
    listen_address: str = DEFAULT_LISTEN_ADDRESS
    telemetry_path: str = DEFAULT_TELEMETRY_PATH
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **overrides) -> "ExporterConfig":
        """
        Build config from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)
            **overrides: Explicit values (e.g. from CLI flags); None is ignored

        Raises:
            ConfigError: If a numeric value can't be parsed
        """
        if environ is None:
            environ = dict(os.environ)

        values: dict[str, object] = {}
        for field_name, env_name in ENV_VARS.items():
            if environ.get(env_name):
                values[field_name] = environ[env_name]

        values.update({key: value for key, value in overrides.items() if value is not None})

        if "timeout" in values:
            try:
                values["timeout"] = float(values["timeout"])
            except (TypeError, ValueError):
                raise ConfigError(f"invalid timeout: {values['timeout']!r}") from None

        return cls(**values)

    def __post_init__(self) -> None:
        self.scrape_uri = self.scrape_uri.rstrip("/")

    @property
    def listen_host(self) -> str:
        return parse_listen_address(self.listen_address)[0]

    @property
    def listen_port(self) -> int:
        return parse_listen_address(self.listen_address)[1]

    def validate(self) -> None:
        """
        Check the config, raising ConfigError on the first problem found.
        """
        try:
            uri = urlsplit(self.scrape_uri)
        except ValueError as e:
            raise ConfigError(f"invalid scrape URI {self.scrape_uri!r}: {e}") from e

        if uri.scheme not in SUPPORTED_SCHEMES:
            raise ConfigError(f"schema not supported: {uri.scheme!r} (use http or https)")
        if not uri.hostname:
            raise ConfigError(f"scrape URI {self.scrape_uri!r} has no host")

        try:
            uri.port
        except ValueError as e:
            raise ConfigError(f"invalid scrape URI {self.scrape_uri!r}: {e}") from e

        parse_listen_address(self.listen_address)

        if not self.telemetry_path.startswith("/") or self.telemetry_path == "/":
            raise ConfigError(
                f"telemetry path must start with '/' and not be the root: {self.telemetry_path!r}"
            )

        if not math.isfinite(self.timeout) or self.timeout <= 0:
            raise ConfigError(f"timeout must be a positive number, got {self.timeout}")
