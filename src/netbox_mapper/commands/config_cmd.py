"""Config commands — manage connection profiles."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from netbox_mapper.client.errors import error_handler
from netbox_mapper.client.gateway import NetboxClient
from netbox_mapper.config.constants import STATUS_PATH
from netbox_mapper.config.manager import ConfigManager
from netbox_mapper.config.models import ServiceProfile
from netbox_mapper.output.formatter import output

app = typer.Typer(name="config", help="Manage connection profiles and CLI configuration.")
console = Console()


def _get_manager() -> ConfigManager:
    return ConfigManager()


def _mask(secret: str) -> str:
    return secret[:4] + "..." if len(secret) > 8 else "***"


@app.command()
@error_handler
def init() -> None:
    """Interactive setup wizard — create your first connection profile."""
    mgr = _get_manager()
    console.print("[bold]netbox-mapper setup[/]\n")

    name = Prompt.ask("Profile name", default="default")
    url = Prompt.ask("API base URL (e.g. https://netbox.example.com/api)")
    key = Prompt.ask("Token key")
    token = Prompt.ask("Token secret", password=True)
    verify_ssl = Confirm.ask("Verify SSL certificates?", default=True)

    profile = ServiceProfile(
        name=name, url=url, key=key, token=token, verify_ssl=verify_ssl,
    )
    mgr.add_profile(profile)
    console.print(f"\n[green]Profile '{name}' saved.[/]")
    console.print(f"Config file: {mgr.config_path}")


@app.command()
@error_handler
def add(
    name: Annotated[str, typer.Argument(help="Profile name")],
    url: Annotated[str, typer.Option("--url", "-u", help="API base URL")],
    key: Annotated[str, typer.Option("--key", "-k", help="Token key")],
    token: Annotated[str, typer.Option("--token", "-t", help="Token secret")],
    no_verify_ssl: Annotated[bool, typer.Option("--no-verify-ssl", help="Disable SSL verification")] = False,
    timeout: Annotated[Optional[float], typer.Option("--timeout", help="Request timeout in seconds")] = None,
    set_default: Annotated[bool, typer.Option("--default", help="Set as default profile")] = False,
) -> None:
    """Add a connection profile."""
    mgr = _get_manager()
    extra = {"timeout": timeout} if timeout is not None else {}
    profile = ServiceProfile(
        name=name,
        url=url,
        key=key,
        token=token,
        verify_ssl=not no_verify_ssl,
        **extra,
    )
    mgr.add_profile(profile)
    if set_default:
        mgr.set_default(name)
    console.print(f"[green]Profile '{name}' added.[/]")


@app.command("list")
@error_handler
def list_profiles(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """List all configured profiles."""
    mgr = _get_manager()
    profiles = mgr.config.profiles
    if not profiles:
        console.print("[yellow]No profiles configured. Run 'netbox-mapper config init' to get started.[/]")
        return

    default = mgr.config.default_profile
    columns = ["Name", "URL", "Verify SSL", "Default"]
    rows = [
        [name, p.url, "yes" if p.verify_ssl else "no", "*" if name == default else ""]
        for name, p in profiles.items()
    ]
    output(
        {"profiles": [p.model_dump(exclude={"key", "token"}) for p in profiles.values()]},
        fmt,
        columns=columns,
        rows=rows,
        title="Connection Profiles",
    )


@app.command()
@error_handler
def show(
    name: Annotated[str, typer.Argument(help="Profile name")],
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show profile details (credentials masked)."""
    mgr = _get_manager()
    profile = mgr.get_profile(name)
    if not profile:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    data = profile.model_dump()
    data["key"] = _mask(data["key"])
    data["token"] = "***"
    output(data, fmt, kv=True, title=f"Profile: {name}")


@app.command("set-default")
@error_handler
def set_default(
    name: Annotated[str, typer.Argument(help="Profile name to set as default")],
) -> None:
    """Set the default connection profile."""
    mgr = _get_manager()
    if mgr.set_default(name):
        console.print(f"[green]Default profile set to '{name}'.[/]")
    else:
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)


@app.command()
@error_handler
def test(
    name: Annotated[Optional[str], typer.Argument(help="Profile name (uses default if omitted)")] = None,
) -> None:
    """Test connectivity and credentials against the status endpoint."""
    mgr = _get_manager()
    profile = mgr.resolve_profile(profile_name=name)
    console.print(f"Testing connection to [bold]{profile.url}[/]...")

    with NetboxClient(profile) as client:
        info = client.get(STATUS_PATH)
        version = info.get("netbox-version", "?") if isinstance(info, dict) else "?"
        console.print(f"[green]Connected![/] NetBox v{version}")


@app.command()
@error_handler
def remove(
    name: Annotated[str, typer.Argument(help="Profile name to remove")],
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """Remove a connection profile."""
    mgr = _get_manager()
    if not mgr.get_profile(name):
        console.print(f"[red]Profile '{name}' not found.[/]")
        raise typer.Exit(1)

    if not force and not Confirm.ask(f"Remove profile '{name}'?"):
        console.print("Cancelled.")
        return

    mgr.remove_profile(name)
    console.print(f"[green]Profile '{name}' removed.[/]")
