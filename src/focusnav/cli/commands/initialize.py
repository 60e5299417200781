"""
Init Command - Project bootstrap.

This module handles the `focusnav init` command, which writes a
configuration file holding the navigation defaults and the key map so
they can be tuned per project.
"""

from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import NavigatorConfig, get_config_path
from ...keymap import DEFAULT_KEY_MAP

console = Console()


def build_default_config() -> dict:
    """Defaults with the built-in key map spelled out for editing."""
    config = NavigatorConfig(key_map=dict(DEFAULT_KEY_MAP))
    return config.to_yaml_dict()


def _init_project(root_dir: Path) -> Path:
    config_file = get_config_path(root_dir)
    config_file.parent.mkdir(exist_ok=True)
    with open(config_file, "w") as f:
        yaml.safe_dump(build_default_config(), f, sort_keys=False, default_flow_style=False)
    return config_file


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """
    Initialize focusnav in the current directory.
    """
    console.print(Panel.fit("🚀 [bold blue]focusnav Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = get_config_path(root_dir)

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    config_file = _init_project(root_dir)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")
