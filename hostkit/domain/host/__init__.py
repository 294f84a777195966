"""
Host descriptor domain
"""
from .grammar import (
    GRAMMARS,
    Grammar,
    StringGrammarResolver,
    parse_port,
    resolve_host_string,
)
from .models import LOCAL, HostDescriptor, local_user

__all__ = [
    "GRAMMARS",
    "Grammar",
    "StringGrammarResolver",
    "parse_port",
    "resolve_host_string",
    "LOCAL",
    "HostDescriptor",
    "local_user",
]
