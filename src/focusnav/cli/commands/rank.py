"""
Rank Command - Explain how candidates were ordered for a move.
"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ..utils import emit_json, load_navigator, run_guarded
from .focus import DIRECTION_CHOICE

console = Console()


@click.command()
@click.argument("layout", type=click.Path(exists=True, dir_okay=False))
@click.option("-f", "--from", "origin", help="Id of the focused element (default: no focus)")
@click.option("-d", "--direction", required=True, type=DIRECTION_CHOICE, help="Direction to move")
@click.option("-s", "--scope", help="Id of the node to search within (default: whole layout)")
@click.option("-c", "--config", "config_file", type=click.Path(dir_okay=False),
              help="Config file (default: .focusnav/config.yaml)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def rank(
    layout: str,
    origin: Optional[str],
    direction: str,
    scope: Optional[str],
    config_file: Optional[str],
    as_json: bool,
) -> None:
    """
    List valid candidates for a move, best first.

    Candidates are ordered by alignment delta, then distance, then
    document order. Candidates behind the origin or without area are
    not listed.
    """
    def action():
        navigator = load_navigator(layout, config_file)
        scored = navigator.candidates(origin, direction, scope)
        decision = (
            navigator.get_next_focus(origin, direction, scope)
            if origin is not None
            else navigator.get_default_focus(scope, direction)
        )
        return scored, decision

    scored, decision = run_guarded("rank", as_json, action)

    if as_json:
        emit_json("rank", {
            "from": origin,
            "direction": direction.lower(),
            "candidates": [s.to_dict() for s in scored],
            "decision": decision.to_dict(),
        })
        return

    table = Table(title=f"Moving {direction.lower()} from {origin or '<no focus>'}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Candidate", style="cyan")
    table.add_column("Alignment", justify="right")
    table.add_column("Distance", justify="right")
    table.add_column("Nearest point", justify="right")
    table.add_column("Doc order", justify="right", style="dim")

    for position, candidate in enumerate(scored, 1):
        table.add_row(
            str(position),
            candidate.node.id,
            f"{candidate.alignment_delta:.1f}",
            f"{candidate.distance:.1f}",
            f"({candidate.nearest.x:g}, {candidate.nearest.y:g})",
            str(candidate.order),
        )

    if scored:
        console.print(table)
    else:
        console.print("[yellow]No valid candidates[/yellow]")

    target = decision.node_id or "no focus change"
    console.print(f"Decision: [bold]{target}[/bold] [dim]({decision.reason.value})[/dim]")
