"""
hostkit - host descriptors for remote execution

Turns the many ways of naming a host into one connection descriptor:
- Host strings (host, host:port, user@host:port, [ipv6]:port, user@host)
- Structured field mappings, including docker-backed hosts
- The local machine
"""

__version__ = "0.1.0"

from .core.exceptions import (
    HostkitError,
    ConfigError,
    HostError,
    UnparsableHostDescriptor,
    UnknownHostProperty,
    MissingContainerTarget,
    HostKindError,
)

from .domain.host import (
    LOCAL,
    HostDescriptor,
    StringGrammarResolver,
    resolve_host_string,
)

__all__ = [
    # Version
    "__version__",
    # Hosts
    "LOCAL",
    "HostDescriptor",
    "StringGrammarResolver",
    "resolve_host_string",
    # Errors
    "HostkitError",
    "ConfigError",
    "HostError",
    "UnparsableHostDescriptor",
    "UnknownHostProperty",
    "MissingContainerTarget",
    "HostKindError",
]
