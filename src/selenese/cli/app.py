"""selenese: CLI entry point for inspecting the command catalog and checking scripts."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from selenese.cli.formatter import format_command_list, output, output_error
from selenese.command.catalog import get_default_catalog
from selenese.errors import UnknownCommandError
from selenese.script import JsonScriptLoader


@click.group()
@click.option("--json", "output_json", is_flag=True, help="JSON output mode")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, output_json: bool, verbose: bool):
    """selenese: command-table interpreter for Selenese scripts.

    Typical workflow:
        selenese commands --filter Title   # which commands exist
        selenese check login.json          # does every row resolve
    """
    ctx.ensure_object(dict)
    ctx.obj["json"] = output_json
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.option("--filter", "name_filter", default=None, help="Only names containing this text")
@click.pass_context
def commands(ctx, name_filter: Optional[str]):
    """List the commands scripts may use."""
    names = get_default_catalog().command_names
    if name_filter:
        names = [name for name in names if name_filter.lower() in name.lower()]
    as_json = ctx.obj["json"]
    output(format_command_list(names, as_json=as_json), as_json=as_json)


@cli.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def check(ctx, script: str):
    """Resolve every row of a JSON SCRIPT without executing it."""
    as_json = ctx.obj["json"]
    try:
        rows = JsonScriptLoader(script).load_rows()
        steps = get_default_catalog().resolve(rows)
    except UnknownCommandError as e:
        output_error(str(e), as_json)
        sys.exit(1)
    except (KeyError, ValueError) as e:
        output_error(f"{script}: {e}", as_json)
        sys.exit(1)

    if as_json:
        output({"script": script, "steps": [step.to_string() for step in steps]}, True)
    else:
        output(f"{script}: {len(steps)} steps resolved")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
