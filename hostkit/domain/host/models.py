"""
Host domain models
"""
import os
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from ...core.constants import (
    DEFAULT_CONTAINER_USER,
    DEFAULT_FORWARD_AGENT,
    LOCAL_HOSTNAME,
    LOCAL_USER_ENV_VARS,
)
from ...core.exceptions import MissingContainerTarget, UnknownHostProperty
from .grammar import resolve_host_string


class _LocalHost:
    """Sentinel type for the machine running this process"""

    def __repr__(self) -> str:
        return "LOCAL"


LOCAL = _LocalHost()

HostSource = Union[_LocalHost, str, Mapping[str, Any]]


def local_user() -> Optional[str]:
    """Current process user from the environment, if any"""
    for name in LOCAL_USER_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


class HostDescriptor:
    """
    Normalized description of where and how to connect.

    Accepts one of:
    - LOCAL: the machine running this process
    - a host string: "host", "host:22", "user@host:22", "[::1]:22", "user@host"
    - a mapping of field names, e.g. {"hostname": "web", "port": 2222}

    Two descriptors are equal when (user, hostname, port) match; credentials
    and options are not part of identity.
    """

    def __init__(self, source: HostSource):
        self.user: Optional[str] = None
        self.hostname: Optional[str] = None
        self.port: Optional[int] = None
        self.password: Optional[str] = None
        self._ssh_options: Dict[str, Any] = {}
        self.docker_options: Dict[str, Any] = {}
        self._keys: List[str] = []
        self._local = False
        self._docker = False
        self._properties: Optional[Dict[str, Any]] = None

        if source is LOCAL:
            self._local = True
            self.hostname = LOCAL_HOSTNAME
            self.user = local_user()
        elif isinstance(source, str):
            self.user, self.hostname, self.port = resolve_host_string(source)
        elif isinstance(source, Mapping):
            self.update(source)
        else:
            raise TypeError(f"Cannot build host from {type(source).__name__}")

    def update(self, fields: Mapping[str, Any]) -> None:
        """
        Assign structured fields in mapping order.

        Raises:
            UnknownHostProperty: On the first unrecognized field name, before
                any field is assigned
        """
        for name in fields:
            if name not in FIELD_SETTERS:
                raise UnknownHostProperty(name)
        for name, value in fields.items():
            FIELD_SETTERS[name](self, value)

    # ============================================================
    # Fields
    # ============================================================

    @property
    def username(self) -> Optional[str]:
        return self.user

    @property
    def keys(self) -> List[str]:
        return self._keys

    @keys.setter
    def keys(self, new_keys) -> None:
        if isinstance(new_keys, str):
            new_keys = [new_keys]
        self._keys = list(new_keys or [])

    @property
    def key(self) -> Optional[str]:
        return self._keys[0] if self._keys else None

    @key.setter
    def key(self, new_key: str) -> None:
        self._keys = [new_key]

    @property
    def ssh_options(self) -> Dict[str, Any]:
        return self._ssh_options

    @ssh_options.setter
    def ssh_options(self, options: Optional[Mapping[str, Any]]) -> None:
        self._ssh_options = dict(options or {})

    connection_options = ssh_options

    @property
    def container_options(self) -> Dict[str, Any]:
        return self.docker_options

    @property
    def properties(self) -> Dict[str, Any]:
        """Caller-defined metadata, created on first access"""
        if self._properties is None:
            self._properties = {}
        return self._properties

    @property
    def is_local(self) -> bool:
        return self._local

    @property
    def is_container_backed(self) -> bool:
        return self._docker

    @property
    def docker(self) -> bool:
        return self._docker

    @docker.setter
    def docker(self, options: Optional[Mapping[str, Any]]) -> None:
        """Back this host with a docker image or container"""
        if options is not None and not isinstance(options, Mapping):
            raise TypeError(f"docker options must be a mapping, got {type(options).__name__}")

        merged = dict(self.docker_options)
        merged.update({str(k): v for k, v in (options or {}).items()})

        if "image" in merged:
            hostname = f"(docker image: {merged['image']})"
        elif "container" in merged:
            hostname = f"(docker container: {merged['container']})"
        else:
            raise MissingContainerTarget(merged)

        self._docker = True
        self.docker_options = merged
        self.hostname = hostname
        if self.user is None:
            self.user = DEFAULT_CONTAINER_USER

    # ============================================================
    # Derived views
    # ============================================================

    @property
    def identity(self) -> Tuple[Optional[str], Optional[str], Optional[int]]:
        return self.user, self.hostname, self.port

    def connection_params(self) -> Dict[str, Any]:
        """
        Effective connection options for the transport.

        Derived values (keys, port, user, password, forward_agent) are
        overridden by ssh_options of the same name.
        """
        params: Dict[str, Any] = {}
        if self._keys:
            params["keys"] = list(self._keys)
        if self.port is not None:
            params["port"] = self.port
        if self.user is not None:
            params["user"] = self.user
        if self.password is not None:
            params["password"] = self.password
        params["forward_agent"] = DEFAULT_FORWARD_AGENT
        params.update(self._ssh_options)
        return params

    netssh_options = connection_params

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "user": self.user,
            "hostname": self.hostname,
            "port": self.port,
            "password": self.password,
            "keys": list(self._keys),
            "ssh_options": dict(self.ssh_options),
            "docker_options": dict(self.docker_options),
            "is_local": self._local,
            "is_container_backed": self._docker,
            "properties": dict(self._properties or {}),
        }

    # ============================================================
    # Identity
    # ============================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HostDescriptor):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __str__(self) -> str:
        return self.hostname or ""

    def __repr__(self) -> str:
        return (
            f"HostDescriptor(user={self.user!r}, hostname={self.hostname!r}, "
            f"port={self.port!r})"
        )


def _set_attr(name: str) -> Callable[[HostDescriptor, Any], None]:
    def setter(host: HostDescriptor, value: Any) -> None:
        setattr(host, name, value)
    return setter


def _set_docker_options(host: HostDescriptor, value: Optional[Mapping[str, Any]]) -> None:
    host.docker_options = {str(k): v for k, v in (value or {}).items()}


FIELD_SETTERS: Dict[str, Callable[[HostDescriptor, Any], None]] = {
    "user": _set_attr("user"),
    "hostname": _set_attr("hostname"),
    "port": _set_attr("port"),
    "password": _set_attr("password"),
    "key": _set_attr("key"),
    "keys": _set_attr("keys"),
    "ssh_options": _set_attr("ssh_options"),
    "connection_options": _set_attr("ssh_options"),
    "docker": _set_attr("docker"),
    "docker_options": _set_docker_options,
    "container_options": _set_docker_options,
}
