"""
Core utility functions
"""
import paramiko
from pathlib import Path
from typing import Dict, Any, Optional

from .constants import SSH_CONFIG_PATH
from .exceptions import ConfigError
from .logging import get_logger

logger = get_logger(__name__)


# ============================================================
# SSH Config Management
# ============================================================

def load_ssh_config(alias: str, path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration for specified Host from ~/.ssh/config.

    The result is a structured host source, e.g.
    HostDescriptor(load_ssh_config("web")).

    Args:
        alias: Host name in SSH configuration
        path: Config file to read instead of ~/.ssh/config

    Returns:
        Dictionary containing hostname and, when configured, user, port, keys

    Raises:
        ConfigError: If the config file doesn't exist or has an invalid port
    """
    config_path = (path or Path(SSH_CONFIG_PATH)).expanduser()
    if not config_path.exists():
        raise ConfigError(f"{config_path} does not exist")

    ssh_config = paramiko.SSHConfig.from_path(str(config_path))
    entry = ssh_config.lookup(alias)
    logger.debug("ssh config entry for %s: %s", alias, dict(entry))

    fields: Dict[str, Any] = {"hostname": entry.get("hostname", alias)}
    if "user" in entry:
        fields["user"] = entry["user"]
    if "port" in entry:
        try:
            fields["port"] = int(entry["port"])
        except ValueError as e:
            raise ConfigError(f"Invalid port for {alias}: {entry['port']}") from e
    if entry.get("identityfile"):
        fields["keys"] = list(entry["identityfile"])
    return fields
