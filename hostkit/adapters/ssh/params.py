"""
paramiko connection parameters built from a host descriptor
"""
from pathlib import Path
from typing import Any, Dict

from ...core.constants import DEFAULT_SSH_PORT
from ...core.exceptions import HostKindError
from ...domain.host.models import HostDescriptor


def connect_kwargs(host: HostDescriptor) -> Dict[str, Any]:
    """
    Build keyword arguments for paramiko.SSHClient.connect().

    forward_agent is not a connect() argument: agent forwarding is set up
    per session by the caller. Agent authentication follows the
    allow_agent ssh option and is on by default. Key paths are expanded.

    Args:
        host: Remote (non-local, non-container) host descriptor

    Returns:
        Dictionary usable as client.connect(**kwargs)

    Raises:
        HostKindError: If the host is local or container-backed
    """
    if host.is_local:
        raise HostKindError(f"{host} is the local machine, not an SSH host")
    if host.is_container_backed:
        raise HostKindError(f"{host} is container-backed, not an SSH host")

    params = host.connection_params()
    keys = [str(Path(key).expanduser()) for key in params.get("keys") or []]

    kwargs: Dict[str, Any] = {
        "hostname": params.get("hostname", host.hostname),
        "port": params.get("port") or DEFAULT_SSH_PORT,
        "username": params.get("user"),
        "password": params.get("password"),
        "key_filename": keys or None,
        "look_for_keys": not keys,
        "allow_agent": bool(params.get("allow_agent", True)),
    }
    if "timeout" in params:
        kwargs["timeout"] = params["timeout"]
    return kwargs
