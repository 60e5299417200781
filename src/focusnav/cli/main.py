"""
focusnav CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging

import click

from .commands import focus, initialize, rank, walk


@click.group()
@click.version_option(package_name="focusnav")
@click.option("-v", "--verbose", is_flag=True, help="Log engine decisions to stderr")
def main(verbose: bool):
    """focusnav: Spatial navigation for remote-controlled UIs.

    Answers "where does focus go when the user presses a direction key?"
    for a layout snapshot.

    \b
    Quick Start:
      focusnav default home.yaml
      focusnav next home.yaml --from btn-1 --direction right
      focusnav rank home.yaml --from btn-1 --direction down
      focusnav walk home.yaml right right down
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register commands
main.add_command(focus.default_focus)
main.add_command(focus.next_focus)
main.add_command(rank.rank)
main.add_command(walk.walk)
main.add_command(initialize.init)

if __name__ == "__main__":
    main()
