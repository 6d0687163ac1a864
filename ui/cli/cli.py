"""CLI entrypoint for stepwise."""

from __future__ import annotations

import typer

from ui.cli import commands

app = typer.Typer(help="Dependency-ordered task scheduler")
config_app = typer.Typer(help="Configuration commands")

_PATH_HELP = "Dependency statements file, '-' for stdin"


@app.command("order")
def order_cmd(path: str = typer.Argument("-", help=_PATH_HELP)) -> None:
    """Print the one-at-a-time execution order."""
    commands.order(path=path)


@app.command("simulate")
def simulate_cmd(
    path: str = typer.Argument("-", help=_PATH_HELP),
    workers: int | None = typer.Option(None, "--workers", "-w", min=1, help="Worker count"),
    base_cost: int | None = typer.Option(None, "--base-cost", min=0, help="Base ticks per task"),
) -> None:
    """Simulate a worker pool and print completion order and ticks."""
    commands.simulate(path=path, workers=workers, base_cost=base_cost)


@app.command("run")
def run_cmd(
    path: str = typer.Argument("-", help=_PATH_HELP),
    workers: int | None = typer.Option(None, "--workers", "-w", min=1, help="Worker count"),
    base_cost: int | None = typer.Option(None, "--base-cost", min=0, help="Base ticks per task"),
    as_json: bool = typer.Option(False, "--json", help="Emit the plan as JSON"),
) -> None:
    """Print both the execution order and the simulation result."""
    commands.run(path=path, workers=workers, base_cost=base_cost, as_json=as_json)


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
