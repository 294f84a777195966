import pytest

from hostkit.core.exceptions import UnparsableHostDescriptor
from hostkit.domain.host.grammar import (
    GRAMMARS,
    StringGrammarResolver,
    parse_port,
    resolve_host_string,
)


@pytest.mark.parametrize("raw", ["example.com", "10.0.0.1", "web-01", ""])
def test_plain_host(raw):
    assert resolve_host_string(raw) == (None, raw, None)


def test_host_with_port():
    assert resolve_host_string("host:2222") == (None, "host", 2222)


def test_host_with_bad_port_coerces_to_zero():
    assert resolve_host_string("host:notanumber") == (None, "host", 0)


def test_port_keeps_leading_digits():
    assert resolve_host_string("host:22abc") == (None, "host", 22)


def test_user_host_port():
    assert resolve_host_string("user@host:2222") == ("user", "host", 2222)


def test_user_host():
    assert resolve_host_string("user@host") == ("user", "host", None)


@pytest.mark.parametrize("raw", ["[::1]:2222", "::1:2222"])
def test_ipv6_with_and_without_brackets(raw):
    assert resolve_host_string(raw) == (None, "::1", 2222)


def test_bracketed_ipv6_keeps_inner_colons():
    assert resolve_host_string("[2001:db8::1]:8080") == (None, "2001:db8::1", 8080)


def test_unparsable_string_reports_input():
    with pytest.raises(UnparsableHostDescriptor) as excinfo:
        resolve_host_string("user@host:abc")
    assert excinfo.value.host_string == "user@host:abc"
    assert "user@host:abc" in str(excinfo.value)


def test_first_matching_grammar_wins():
    resolver = StringGrammarResolver()
    assert resolver.match("host").name == "plain"
    assert resolver.match("host:22").name == "host:port"
    assert resolver.match("u@host:22").name == "user@host:port"
    assert resolver.match("[::1]:22").name == "ipv6:port"
    assert resolver.match("u@host").name == "user@host"
    assert resolver.match("u@host:x") is None


def test_grammar_table_order():
    assert [g.name for g in GRAMMARS] == [
        "plain",
        "host:port",
        "user@host:port",
        "ipv6:port",
        "user@host",
    ]


def test_custom_grammar_table():
    resolver = StringGrammarResolver(GRAMMARS[:1])
    assert resolver.resolve("host") == (None, "host", None)
    with pytest.raises(UnparsableHostDescriptor):
        resolver.resolve("host:22")


def test_ipv6_extraction_leaves_input_untouched():
    raw = "[::1]:2222"
    resolve_host_string(raw)
    assert raw == "[::1]:2222"


@pytest.mark.parametrize(
    "text,expected",
    [("2222", 2222), ("", 0), ("abc", 0), ("8080/tcp", 8080), ("-1", -1)],
)
def test_parse_port(text, expected):
    assert parse_port(text) == expected
