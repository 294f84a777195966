"""
Host inventory loader with priority: env > CLI > TOML
"""
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional, List

from ...core.constants import ENV_PREFIX
from ...core.exceptions import ConfigError
from ...core.logging import get_logger
from ...domain.host.models import LOCAL, HostDescriptor

logger = get_logger(__name__)

LOCAL_ENTRY = "local"


class ConfigLoader:
    """
    Load host descriptors from a TOML inventory and the environment.

    Inventory format:

        [defaults]
        user = "deploy"

        [[hosts]]
        address = "web1:2222"

        [[hosts]]
        hostname = "db"
        keys = ["~/.ssh/db"]
        properties = { roles = ["db"] }

        [[hosts]]
        docker = { image = "python:3.12" }

    Entries may also be plain strings ("user@host:22") or "local".
    """

    def __init__(self):
        self._env_prefix = ENV_PREFIX

    def load_toml(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file"""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            return tomllib.loads(path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse TOML configuration {path}: {e}") from e

    def load_env(self) -> Dict[str, Any]:
        """Load a single host entry from environment variables"""
        entry: Dict[str, Any] = {}

        env_mappings = {
            f"{self._env_prefix}HOST": "address",
            f"{self._env_prefix}USER": "user",
            f"{self._env_prefix}PORT": "port",
            f"{self._env_prefix}KEY": "key",
            f"{self._env_prefix}PASSWORD": "password",
        }

        for env_key, field_name in env_mappings.items():
            value = os.getenv(env_key)
            if value:
                entry[field_name] = self._convert_value(field_name, value)

        if entry and "address" not in entry:
            raise ConfigError(
                f"{self._env_prefix}HOST is required when other {self._env_prefix}* variables are set"
            )

        return entry

    def _convert_value(self, field_name: str, value: str) -> Any:
        """Convert string value to the field's type"""
        if field_name != "port":
            return value
        try:
            return int(value)
        except ValueError as e:
            raise ConfigError(f"Invalid {self._env_prefix}PORT: {value}") from e

    def build_host(self, entry: Any, defaults: Optional[Dict[str, Any]] = None) -> HostDescriptor:
        """
        Build one host descriptor from an inventory entry.

        String entries are parsed as host strings. Table entries may carry an
        "address" host string whose parts are overridden by the remaining
        fields; "properties" goes to the descriptor's metadata.
        """
        if isinstance(entry, str):
            entry = {"address": entry}
        if not isinstance(entry, dict):
            raise ConfigError(f"Invalid host entry: {entry!r}")

        entry = dict(entry)
        address = entry.pop("address", None)
        properties = entry.pop("properties", None) or {}

        if address == LOCAL_ENTRY:
            host = HostDescriptor(LOCAL)
            host.update(entry)
        else:
            fields = dict(defaults or {})
            if address is not None:
                parsed = HostDescriptor(address)
                fields.update(
                    (name, value)
                    for name, value in zip(("user", "hostname", "port"), parsed.identity)
                    if value is not None
                )
            fields.update(entry)
            host = HostDescriptor(fields)

        host.properties.update(properties)
        return host

    def load(
        self,
        toml_path: Optional[Path] = None,
        cli_hosts: Optional[List[Any]] = None,
        use_env: bool = True,
    ) -> List[HostDescriptor]:
        """
        Load host inventory with priority: env > CLI > TOML

        Hosts are returned in priority order; callers that key work by host
        identity keep the first occurrence.

        Args:
            toml_path: Path to TOML inventory file
            cli_hosts: Host entries given on the command line
            use_env: Whether to load a host from environment variables

        Returns:
            List of host descriptors
        """
        entries: List[Any] = []
        defaults: Dict[str, Any] = {}

        if use_env:
            env_entry = self.load_env()
            if env_entry:
                logger.debug("Host from environment: %s", sorted(env_entry))
                entries.append(env_entry)

        if cli_hosts:
            entries.extend(cli_hosts)

        if toml_path:
            config = self.load_toml(toml_path)
            defaults = config.get("defaults", {})
            toml_hosts = config.get("hosts", [])
            if not isinstance(toml_hosts, list):
                raise ConfigError(f"'hosts' must be an array in {toml_path}")
            logger.info("Loaded %d host entries from %s", len(toml_hosts), toml_path)
            entries.extend(toml_hosts)

        return [self.build_host(entry, defaults) for entry in entries]


def distinct_hosts(hosts: List[HostDescriptor]) -> List[HostDescriptor]:
    """Drop hosts whose (user, hostname, port) was already seen"""
    seen = set()
    result = []
    for host in hosts:
        if host in seen:
            continue
        seen.add(host)
        result.append(host)
    return result
