"""Display utilities for detected profiles."""

import json

from rich.console import Console
from rich.table import Table

from termprofiles import __version__
from termprofiles.domain import TerminalProfile

console = Console()
err_console = Console(stderr=True)


def format_args(profile: TerminalProfile) -> str:
    """Render profile args the way they would be typed."""
    if profile.args is None:
        return ""
    if isinstance(profile.args, str):
        return profile.args
    return " ".join(profile.args)


def build_profiles_table(profiles: list[TerminalProfile], platform: str) -> Table:
    """Build a table of detected profiles."""
    table = Table(
        title=f"[bold cyan]Terminal profiles[/bold cyan] [dim]({platform}, v{__version__})[/dim]",
        title_justify="left",
    )
    table.add_column("Profile", style="bold")
    table.add_column("Path", style="cyan")
    table.add_column("Args", style="dim")
    for profile in profiles:
        table.add_row(profile.profile_name, profile.path, format_args(profile))
    return table


def display_profiles(profiles: list[TerminalProfile], platform: str) -> None:
    """Print detected profiles as a table."""
    if not profiles:
        console.print("[yellow]●[/yellow] No terminal profiles detected")
        return
    console.print(build_profiles_table(profiles, platform))


def display_profiles_json(profiles: list[TerminalProfile]) -> None:
    """Print detected profiles as JSON."""
    console.print_json(json.dumps([p.to_dict() for p in profiles]))


def display_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {message}")
