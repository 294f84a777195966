import pytest

from hostkit.adapters.ssh import connect_kwargs
from hostkit.core.exceptions import ConfigError, HostKindError
from hostkit.core.utils import load_ssh_config
from hostkit.domain.host.models import LOCAL, HostDescriptor

SSH_CONFIG = """\
Host web
    HostName web.example.com
    User deploy
    Port 2222
    IdentityFile /keys/id_web

Host bad
    Port twenty
"""


@pytest.fixture
def ssh_config(tmp_path):
    path = tmp_path / "config"
    path.write_text(SSH_CONFIG)
    return path


def test_load_ssh_config_alias(ssh_config):
    fields = load_ssh_config("web", ssh_config)
    assert fields == {
        "hostname": "web.example.com",
        "user": "deploy",
        "port": 2222,
        "keys": ["/keys/id_web"],
    }
    host = HostDescriptor(fields)
    assert host == HostDescriptor("deploy@web.example.com:2222")


def test_load_ssh_config_unknown_alias(ssh_config):
    assert load_ssh_config("other", ssh_config) == {"hostname": "other"}


def test_load_ssh_config_invalid_port(ssh_config):
    with pytest.raises(ConfigError):
        load_ssh_config("bad", ssh_config)


def test_load_ssh_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_ssh_config("web", tmp_path / "missing")


def test_connect_kwargs_defaults():
    assert connect_kwargs(HostDescriptor("example.com")) == {
        "hostname": "example.com",
        "port": 22,
        "username": None,
        "password": None,
        "key_filename": None,
        "look_for_keys": True,
        "allow_agent": True,
    }


def test_connect_kwargs_from_options():
    host = HostDescriptor({
        "user": "deploy",
        "hostname": "example.com",
        "port": 2222,
        "keys": ["/k1", "/k2"],
        "ssh_options": {"allow_agent": False, "timeout": 10},
    })
    kwargs = connect_kwargs(host)
    assert kwargs["port"] == 2222
    assert kwargs["username"] == "deploy"
    assert kwargs["key_filename"] == ["/k1", "/k2"]
    assert kwargs["look_for_keys"] is False
    assert kwargs["allow_agent"] is False
    assert kwargs["timeout"] == 10


@pytest.mark.parametrize("source", [LOCAL, {"docker": {"image": "x"}}])
def test_connect_kwargs_rejects_non_ssh_hosts(source):
    with pytest.raises(HostKindError):
        connect_kwargs(HostDescriptor(source))


def test_connect_kwargs_forward_agent_keeps_agent_auth():
    host = HostDescriptor({"hostname": "example.com", "ssh_options": {"forward_agent": False}})
    assert connect_kwargs(host)["allow_agent"] is True


def test_connect_kwargs_expands_key_paths(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    host = HostDescriptor({"hostname": "db", "keys": ["~/.ssh/db", "/abs/key"]})
    assert connect_kwargs(host)["key_filename"] == [str(tmp_path / ".ssh" / "db"), "/abs/key"]
