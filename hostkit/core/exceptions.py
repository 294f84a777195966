"""
Unified exception definitions
"""
from typing import Any, Dict


class HostkitError(Exception):
    """Base exception class"""
    pass


class ConfigError(HostkitError):
    """Configuration error"""
    pass


class HostError(HostkitError):
    """Host descriptor error"""
    pass


class UnparsableHostDescriptor(HostError):
    """Host string matched none of the known grammars"""

    def __init__(self, host_string: str):
        self.host_string = host_string
        super().__init__(f"Cannot parse host string {host_string}")


class UnknownHostProperty(HostError):
    """Structured host field has no settable attribute"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown host property {name}")


class MissingContainerTarget(HostError):
    """Docker directive names neither an image nor a container"""

    def __init__(self, options: Dict[str, Any]):
        self.options = options
        super().__init__(
            "Please specify image or container for docker! (e.g. docker = {image = 'python:3.12'})"
        )


class HostKindError(HostError):
    """Host cannot be used by the requested transport"""
    pass
