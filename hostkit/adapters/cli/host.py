"""
Host inspection CLI commands
"""
import json
import typer
from pathlib import Path
from typing import List, Optional

from rich.table import Table

from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...core.exceptions import HostkitError
from ...core.utils import load_ssh_config
from ...domain.host.models import LOCAL, HostDescriptor
from ..config.loader import ConfigLoader, distinct_hosts, LOCAL_ENTRY

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()

SSH_CONFIG_PREFIX = "ssh:"


def register_host_commands(app: typer.Typer) -> None:
    """Register host commands directly on the main app"""
    app.command(name="show")(host_show)
    app.command(name="options")(host_options)
    app.command(name="inventory")(host_inventory)


def build_host(host: str, ssh_config: Optional[Path] = None) -> HostDescriptor:
    """
    Build a descriptor from a CLI host argument.

    "local" is the local machine, "ssh:<alias>" is looked up in the SSH
    config, anything else is parsed as a host string.
    """
    if host == LOCAL_ENTRY:
        return HostDescriptor(LOCAL)
    if host.startswith(SSH_CONFIG_PREFIX):
        alias = host[len(SSH_CONFIG_PREFIX):]
        logger.debug("Resolving %s through ssh config", alias)
        return HostDescriptor(load_ssh_config(alias, ssh_config))
    return HostDescriptor(host)


def _fail(error: HostkitError) -> None:
    stderr_console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)


def _print_json(data) -> None:
    stdout_console.print_json(json.dumps(data, default=str))


def host_show(
    host: str = typer.Argument(..., help="Host string, 'local' or 'ssh:<alias>'"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
    ssh_config: Optional[Path] = typer.Option(None, "--ssh-config", help="SSH config file"),
):
    """
    Show the parsed host descriptor

    Examples:
        hostkit show deploy@example.com:2222
        hostkit show "[::1]:2222" --json
        hostkit show ssh:web
    """
    try:
        descriptor = build_host(host, ssh_config)
    except HostkitError as e:
        _fail(e)

    data = descriptor.to_dict()
    data.pop("password")
    if as_json:
        _print_json(data)
        return

    table = Table(title=str(descriptor), show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for name, value in data.items():
        table.add_row(name, "" if value is None else str(value))
    stdout_console.print(table)


def host_options(
    host: str = typer.Argument(..., help="Host string, 'local' or 'ssh:<alias>'"),
    ssh_config: Optional[Path] = typer.Option(None, "--ssh-config", help="SSH config file"),
):
    """Print the effective connection options as JSON"""
    try:
        descriptor = build_host(host, ssh_config)
    except HostkitError as e:
        _fail(e)

    _print_json(descriptor.connection_params())


def host_inventory(
    config_path: Path = typer.Argument(..., help="Inventory file (TOML)"),
    extra: Optional[List[str]] = typer.Option(None, "--host", "-H", help="Additional host string"),
    use_env: bool = typer.Option(True, "--env/--no-env", help="Read HOSTKIT_* variables"),
):
    """
    List the distinct hosts of an inventory

    Examples:
        hostkit inventory hosts.toml
        hostkit inventory hosts.toml -H deploy@extra:22 --no-env
    """
    try:
        hosts = ConfigLoader().load(toml_path=config_path.expanduser(), cli_hosts=extra, use_env=use_env)
    except HostkitError as e:
        _fail(e)

    unique = distinct_hosts(hosts)
    logger.info("%d hosts, %d distinct", len(hosts), len(unique))

    table = Table(title=f"Hosts ({len(unique)})")
    table.add_column("Host", style="cyan")
    table.add_column("User")
    table.add_column("Port")
    table.add_column("Kind")
    for descriptor in unique:
        if descriptor.is_local:
            kind = "local"
        elif descriptor.is_container_backed:
            kind = "docker"
        else:
            kind = "ssh"
        table.add_row(
            str(descriptor),
            descriptor.user or "",
            "" if descriptor.port is None else str(descriptor.port),
            kind,
        )
    stdout_console.print(table)
