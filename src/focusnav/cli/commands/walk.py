"""
Walk Command - Replay a sequence of key presses against a layout.

Simulates a device key handler: every key is mapped to a direction,
focus moves when the navigator finds a target, and autofocus containers
remember what was focused inside them along the way.
"""

from typing import Optional, Tuple

import click

from ...core.exceptions import UnknownDirectionError
from ...core.types import Direction, FocusDecision
from ...keymap import KeyMap
from ...session import FocusSession
from ..utils import echo_info, echo_warning, emit_json, load_navigator, run_guarded

Step = Tuple[str, Optional[Direction], Optional[FocusDecision]]


def _press(session: FocusSession, key: str) -> Step:
    """Feed one key to the session, accepting direction names as well as key codes."""
    if key in session.keymap:
        return key, session.keymap.lookup(key), session.handle_key(key)
    try:
        direction = Direction.parse(key)
    except UnknownDirectionError:
        return key, None, None
    return key, direction, session.move(direction)


@click.command()
@click.argument("layout", type=click.Path(exists=True, dir_okay=False))
@click.argument("keys", nargs=-1, required=True)
@click.option("--start", "start_id", help="Id to focus first (default: the layout's default focus)")
@click.option("-s", "--scope", help="Id of the node to confine navigation to")
@click.option("-c", "--config", "config_file", type=click.Path(dir_okay=False),
              help="Config file (default: .focusnav/config.yaml)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def walk(
    layout: str,
    keys: Tuple[str, ...],
    start_id: Optional[str],
    scope: Optional[str],
    config_file: Optional[str],
    as_json: bool,
) -> None:
    """
    Press KEYS in order and show where focus ends up.

    KEYS are key codes from the key map (37, ArrowLeft, 29460, ...) or
    direction names (up, down, left, right).

    \b
    Examples:
      focusnav walk home.yaml right right down
      focusnav walk home.yaml 39 39 40 --start btn-1
    """
    def action():
        navigator = load_navigator(layout, config_file)
        session = FocusSession(navigator, KeyMap(navigator.config.key_map), scope=scope)
        session.start(start_id)
        steps = [_press(session, key) for key in keys]
        return navigator, session, steps

    navigator, session, steps = run_guarded("walk", as_json, action)
    memory = {
        node.id: node.last_focused_child_id
        for node in navigator.tree.iter_nodes()
        if node.is_container and node.autofocus and node.last_focused_child_id
    }

    if as_json:
        emit_json("walk", {
            "start": session.history[0] if session.history else None,
            "steps": [_step_dict(step) for step in steps],
            "focused": session.current.id if session.current else None,
            "history": session.history,
            "memory": memory,
        })
        return

    start = session.history[0] if session.history else None
    click.echo(f"Start: {click.style(start or '<nothing focusable>', fg='cyan')}")

    for key, direction, decision in steps:
        if direction is None:
            echo_warning(f"{key}: not a navigation key, ignored")
            continue
        if decision is None or not decision.matched:
            reason = decision.reason.value if decision else "no focus"
            click.echo(f"  {key} ({direction.value}) -> {click.style('stay', fg='yellow')} [{reason}]")
            continue
        click.echo(f"  {key} ({direction.value}) -> {click.style(decision.node_id, fg='cyan')}")

    focused = session.current.id if session.current else "<nothing>"
    click.echo(f"Focused: {click.style(focused, fg='green', bold=True)}")

    for container_id, child_id in sorted(memory.items()):
        echo_info(f"{container_id} remembers {child_id}")


def _step_dict(step: Step) -> dict:
    key, direction, decision = step
    return {
        "key": key,
        "direction": direction.value if direction else None,
        "decision": decision.to_dict() if decision else None,
    }
