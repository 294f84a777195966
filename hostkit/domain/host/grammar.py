"""
Host string grammars

A raw host string is matched against an ordered table of grammars. The first
grammar whose predicate claims the string extracts (user, hostname, port):

- hostname
- hostname:port
- user@hostname:port
- [ipv6]:port / ipv6:port
- user@hostname
"""
import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ...core.exceptions import UnparsableHostDescriptor


HostParts = Tuple[Optional[str], str, Optional[int]]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_USER_HOST_PORT = re.compile(r"@.*:\d+")
_IPV6_HOST_PORT = re.compile(r"[a-fA-F0-9:]+:\d+")
_USER_OR_PORT_SEPARATOR = re.compile(r"[:@]")


def parse_port(text: str) -> int:
    """
    Parse the leading integer of a port token.

    Never raises: text without a leading integer yields 0.

    Examples:
        parse_port("2222") -> 2222
        parse_port("22abc") -> 22
        parse_port("notanumber") -> 0
    """
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return int(match.group(1))


@dataclass(frozen=True)
class Grammar:
    """Lexical shape of a host string"""
    name: str
    suitable: Callable[[str], bool]
    extract: Callable[[str], HostParts]


# ============================================================
# Suitability predicates
# ============================================================

def _is_plain(raw: str) -> bool:
    return ":" not in raw and "@" not in raw


def _is_host_with_port(raw: str) -> bool:
    return not any(ch in raw for ch in "@[]")


def _is_user_host_port(raw: str) -> bool:
    return _USER_HOST_PORT.search(raw) is not None


def _is_ipv6_host_port(raw: str) -> bool:
    return _IPV6_HOST_PORT.search(raw) is not None


def _is_user_host(raw: str) -> bool:
    return "@" in raw and ":" not in raw


# ============================================================
# Extractors
# ============================================================

def _extract_plain(raw: str) -> HostParts:
    return None, raw, None


def _extract_host_with_port(raw: str) -> HostParts:
    hostname, _, port = raw.rpartition(":")
    return None, hostname, parse_port(port)


def _extract_user_host_port(raw: str) -> HostParts:
    tokens = _USER_OR_PORT_SEPARATOR.split(raw)
    return tokens[0], tokens[1], parse_port(tokens[2])


def _extract_ipv6_host_port(raw: str) -> HostParts:
    # Brackets are optional: "[::1]:22" and "::1:22" are the same host
    unbracketed = raw.replace("[", "").replace("]", "")
    segments = unbracketed.split(":")
    return None, ":".join(segments[:-1]), parse_port(segments[-1])


def _extract_user_host(raw: str) -> HostParts:
    parts = raw.split("@")
    return parts[0], parts[-1], None


GRAMMARS: Tuple[Grammar, ...] = (
    Grammar("plain", _is_plain, _extract_plain),
    Grammar("host:port", _is_host_with_port, _extract_host_with_port),
    Grammar("user@host:port", _is_user_host_port, _extract_user_host_port),
    Grammar("ipv6:port", _is_ipv6_host_port, _extract_ipv6_host_port),
    Grammar("user@host", _is_user_host, _extract_user_host),
)


class StringGrammarResolver:
    """Resolve raw host strings with a first-match grammar table"""

    def __init__(self, grammars: Sequence[Grammar] = GRAMMARS):
        self._grammars = tuple(grammars)

    @property
    def grammars(self) -> Tuple[Grammar, ...]:
        return self._grammars

    def match(self, raw: str) -> Optional[Grammar]:
        """Return the first grammar claiming raw, or None"""
        for grammar in self._grammars:
            if grammar.suitable(raw):
                return grammar
        return None

    def resolve(self, raw: str) -> HostParts:
        """
        Split a host string into its components.

        Args:
            raw: Host string, e.g. "deploy@example.com:2222"

        Returns:
            Tuple of (user, hostname, port); absent parts are None

        Raises:
            UnparsableHostDescriptor: If no grammar claims the string
        """
        grammar = self.match(raw)
        if grammar is None:
            raise UnparsableHostDescriptor(raw)
        return grammar.extract(raw)


_default_resolver = StringGrammarResolver()


def resolve_host_string(raw: str) -> HostParts:
    """Resolve raw with the default grammar table"""
    return _default_resolver.resolve(raw)
