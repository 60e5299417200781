"""
Focus Commands - Resolve default and directional focus for a layout.
"""

from typing import Optional

import click

from ...core.types import Direction
from ..utils import echo_decision, emit_json, load_navigator, run_guarded

DIRECTION_CHOICE = click.Choice([d.value for d in Direction], case_sensitive=False)


@click.command("default")
@click.argument("layout", type=click.Path(exists=True, dir_okay=False))
@click.option("-s", "--scope", help="Id of the node to search within (default: whole layout)")
@click.option("-d", "--direction", type=DIRECTION_CHOICE,
              help="Direction used to enter an autofocus container")
@click.option("-c", "--config", "config_file", type=click.Path(dir_okay=False),
              help="Config file (default: .focusnav/config.yaml)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def default_focus(
    layout: str,
    scope: Optional[str],
    direction: Optional[str],
    config_file: Optional[str],
    as_json: bool,
) -> None:
    """
    Show which element receives focus first.
    """
    def action():
        navigator = load_navigator(layout, config_file)
        return navigator.get_default_focus(scope, direction)

    decision = run_guarded("default", as_json, action)

    if as_json:
        emit_json("default", decision.to_dict())
    else:
        echo_decision(decision)


@click.command("next")
@click.argument("layout", type=click.Path(exists=True, dir_okay=False))
@click.option("-f", "--from", "origin", required=True, help="Id of the focused element")
@click.option("-d", "--direction", required=True, type=DIRECTION_CHOICE, help="Direction to move")
@click.option("-s", "--scope", help="Id of the node to search within (default: whole layout)")
@click.option("-c", "--config", "config_file", type=click.Path(dir_okay=False),
              help="Config file (default: .focusnav/config.yaml)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def next_focus(
    layout: str,
    origin: str,
    direction: str,
    scope: Optional[str],
    config_file: Optional[str],
    as_json: bool,
) -> None:
    """
    Show where focus goes when moving DIRECTION from an element.
    """
    def action():
        navigator = load_navigator(layout, config_file)
        return navigator.get_next_focus(origin, direction, scope)

    decision = run_guarded("next", as_json, action)

    if as_json:
        emit_json("next", {"from": origin, "direction": direction.lower(), **decision.to_dict()})
        return

    click.echo(f"{click.style(origin, fg='white')} --{direction.lower()}-->")
    echo_decision(decision)
