"""Main application bootstrap — wires config, logging, display and session together."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from text_adventure.engine.session import GameSession, SessionState

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


def _load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config.toml; a missing file means defaults everywhere."""
    import tomllib

    config_path = path or DEFAULT_CONFIG_PATH
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    return {}


def setup_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


class GameApp:
    """Console front-end: prompt, submit, render, repeat."""

    def __init__(self, config: dict[str, Any] | None = None, player_name: str | None = None, console: Any = None):
        self.config = config if config is not None else _load_config()
        game_cfg = self.config.get("game", {})
        self.player_name = player_name or game_cfg.get("player_name", "Adventurer")
        self.offer_restart = game_cfg.get("offer_restart", True)
        self._console = console

        # Lazy-initialized components
        self._display = None
        self._status_bar = None
        self._session = None

    # -- Component initialization (lazy) --

    @property
    def display(self):
        if self._display is None:
            from text_adventure.cli.display import Display

            width = self.config.get("display", {}).get("width", 80)
            self._display = Display(console=self._console, width=width)
        return self._display

    @property
    def status_bar(self):
        if self._status_bar is None:
            from text_adventure.cli.status_bar import StatusBar

            self._status_bar = StatusBar(console=self.display.console)
        return self._status_bar

    @property
    def session(self) -> GameSession:
        if self._session is None:
            self._session = GameSession(player_name=self.player_name)
        return self._session

    # -- Entry points --

    def play(self) -> SessionState:
        self.display.show_title_screen()
        self.display.show_help()
        self.display.show_events(self.session.start_session())

        while True:
            state = self._run_game_loop()
            self.display.show_game_end(state.value)
            if state is SessionState.QUIT or not self.offer_restart or not self._ask_play_again():
                return state
            self.display.show_events(self.session.restart())

    def demo(self) -> SessionState:
        from text_adventure.cli.demo import run_demo

        run_demo(self.session, self.display)
        return self.session.state

    # -- Game loop --

    def _run_game_loop(self) -> SessionState:
        show_status = self.config.get("display", {}).get("show_status_bar", True)
        session = self.session
        while not session.is_over:
            if show_status:
                self.status_bar.render(
                    session.health, session.max_health, session.location_name, session.inventory_listing,
                )
            try:
                raw_input = self.display.get_input("\n> ")
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed; quitting")
                raw_input = "quit"
            self.display.show_events(session.submit(raw_input))
        return session.state

    def _ask_play_again(self) -> bool:
        try:
            answer = self.display.get_input("Play again? (y/n) > ")
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.lower() in ("y", "yes")
