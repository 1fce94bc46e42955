"""
Bridge CLI: `bridge` command.

Commands:
  bridge dispatch FILE     Run a directive JSON file against the backend
  bridge config            Show the effective backend configuration
"""

import json
from typing import Any

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install alexa-smarthome-bridge[cli]")

from smarthome_bridge.client import SmartHomeBridge
from smarthome_bridge.config import BridgeConfig
from smarthome_bridge.errors import ConfigError
from smarthome_bridge.logs import configure_logging

console = Console()


def _load_config() -> BridgeConfig:
    try:
        return BridgeConfig.from_env()
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def _get_bridge() -> SmartHomeBridge:
    return SmartHomeBridge(config=_load_config())


def _print_json(data: Any, raw: bool = False) -> None:
    if raw:
        click.echo(json.dumps(data, separators=(",", ":")))
    else:
        console.print_json(json.dumps(data))


@click.group()
@click.version_option("0.1.0")
@click.option("--log-level", default=None, help="Logging level (default: $BRIDGE_LOG_LEVEL or INFO)")
def main(log_level):
    """Smart-home bridge CLI: replay directives against the home cloud."""
    configure_logging(log_level)


@main.command("config")
def config_cmd():
    """Show the backend configuration read from the environment."""
    _print_json(_load_config().model_dump())


# Register subcommands from separate modules
from smarthome_bridge.cli.dispatch import dispatch_cmd

main.add_command(dispatch_cmd)


if __name__ == "__main__":
    main()
