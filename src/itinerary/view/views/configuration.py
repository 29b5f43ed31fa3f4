# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.table import Table

from itinerary import configuration


def configuration_view(config: configuration.Configuration) -> None:
    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("api_url", config["api_url"])
    table.add_row("locale", config["locale"])
    table.add_row("clock_format", config["clock_format"])
    table.add_row("request_timeout_seconds", str(config["request_timeout_seconds"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("data_path", str(configuration.DATA_PATH))

    console.print(table)
