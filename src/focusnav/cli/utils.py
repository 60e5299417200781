"""
CLI Utilities - Shared helper functions for command line operations.

This module provides common functionality used across the CLI commands,
including formatted printing, layout/config loading and JSON envelopes.
"""

import json
import sys
from pathlib import Path
from typing import Any, Callable, Optional, TypeVar

import click

from ..config import load_config
from ..core.exceptions import FocusNavError
from ..core.navigator import SpatialNavigator
from ..core.types import FocusDecision
from ..layout import load_layout

T = TypeVar("T")


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def load_navigator(layout_file: str, config_file: Optional[str] = None) -> SpatialNavigator:
    """
    Build a navigator for a layout file.

    Args:
        layout_file (str): Path to a YAML/JSON layout.
        config_file (Optional[str]): Explicit config file; the project
            default (.focusnav/config.yaml) is used otherwise.

    Raises:
        FocusNavError: If the config or layout cannot be loaded.
    """
    config = load_config(Path(config_file) if config_file else None)
    tree = load_layout(layout_file)
    return SpatialNavigator(tree, config)


def run_guarded(command: str, as_json: bool, action: Callable[[], T]) -> T:
    """
    Run ``action``, turning engine errors into a printed message and exit 1.

    Args:
        command (str): Command name used in the JSON envelope.
        as_json (bool): Report errors as a JSON envelope instead of text.
        action (Callable): The work to perform.
    """
    try:
        return action()
    except FocusNavError as e:
        if as_json:
            emit_json(command, error=str(e))
        else:
            echo_error(str(e))
        sys.exit(1)


def emit_json(command: str, data: Any = None, error: Optional[str] = None) -> None:
    """
    Print the standard JSON envelope.

    Args:
        command (str): Name of the command producing the output.
        data (Any): Payload on success.
        error (Optional[str]): Error message on failure.
    """
    envelope = {
        "command": command,
        "status": "error" if error else "success",
        "data": data,
        "error": error,
    }
    click.echo(json.dumps(envelope, indent=2))


def echo_decision(decision: FocusDecision) -> None:
    """
    Print a focus decision for humans.

    Args:
        decision (FocusDecision): The decision to show.
    """
    if not decision.matched:
        click.echo(
            click.style("No focus change", fg="yellow")
            + click.style(f" ({decision.reason.value})", dim=True)
        )
        return

    click.echo(f"🎯 {click.style(decision.node_id, fg='cyan', bold=True)}")
    echo_info(f"reason: {decision.reason.value}")
    if decision.via_autofocus_parent:
        echo_info("parent container remembers focus (autofocus)")
