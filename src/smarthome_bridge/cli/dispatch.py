"""CLI: bridge dispatch FILE"""

import json

import click
from rich.console import Console

console = Console(stderr=True)


def _get_bridge():
    from smarthome_bridge.cli.main import _get_bridge
    return _get_bridge()


def _print_json(data, raw=False):
    from smarthome_bridge.cli.main import _print_json
    _print_json(data, raw)


@click.command("dispatch")
@click.argument("request_file", type=click.File("r"))
@click.option("--raw", is_flag=True, help="Compact JSON output")
def dispatch_cmd(request_file, raw):
    """Dispatch a directive JSON file ('-' for stdin) and print the response."""
    try:
        request = json.load(request_file)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON: {e}[/red]")
        raise SystemExit(1)

    bridge = _get_bridge()
    try:
        with console.status("Dispatching directive..."):
            response = bridge.handle(request)
    finally:
        bridge.close()

    if response is None:
        console.print("[red]No response produced (see log for the failure).[/red]")
        raise SystemExit(1)
    _print_json(response, raw)
