"""Typer CLI application."""
from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="text-adventure",
    help="A small text adventure: find the legendary treasure.",
    no_args_is_help=False,
)


def _bootstrap(config_path: Optional[Path], log_level: Optional[str]) -> dict:
    from text_adventure.app import _load_config, setup_logging

    try:
        config = _load_config(config_path)
    except tomllib.TOMLDecodeError as e:
        typer.echo(f"Invalid config file: {e}", err=True)
        raise typer.Exit(code=2)
    setup_logging(log_level or config.get("logging", {}).get("level", "WARNING"))
    return config


@app.command()
def play(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Your adventurer's name"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a config.toml"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
) -> None:
    """Start your adventure."""
    from text_adventure.app import GameApp

    config = _bootstrap(config_path, log_level)
    GameApp(config=config, player_name=name).play()


@app.command()
def demo(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a config.toml"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
) -> None:
    """Watch a scripted playthrough from the forest to the treasure."""
    from text_adventure.app import GameApp

    config = _bootstrap(config_path, log_level)
    GameApp(config=config, player_name="Demo Adventurer").demo()


if __name__ == "__main__":
    app()
