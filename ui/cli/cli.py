"""CLI entrypoint for the supply chain system."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Dynamic Supply Chain System")
config_app = typer.Typer(help="Configuration commands")

ROOT_OPTION = typer.Option(None, "--root", help="Directory holding config/ and logs/")


@app.command("shell")
def shell_cmd(root: Path | None = ROOT_OPTION) -> None:
    """Interactive supply chain menu."""
    commands.shell(root=root)


@config_app.command("show")
def config_show_cmd(root: Path | None = ROOT_OPTION) -> None:
    """Show effective configuration."""
    commands.config_show(root=root)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
