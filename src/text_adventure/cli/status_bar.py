"""Persistent status bar — rendered before each prompt."""
from __future__ import annotations

from rich.console import Console
from rich.text import Text


class StatusBar:
    """Compact one-line status header shown before each game prompt."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def build(self, health: int, max_health: int, location_name: str, items: tuple[str, ...] = ()) -> Text:
        """HP | Location | Items."""
        line = Text()

        hp_pct = health / max(max_health, 1)
        hp_color = "green" if hp_pct > 0.5 else ("yellow" if hp_pct > 0.25 else "red")
        bar_w = 8
        filled = int(hp_pct * bar_w)
        hp_bar = f"{'█' * filled}{'░' * (bar_w - filled)}"
        line.append("HP ", style="bold")
        line.append(f"[{hp_bar}]", style=hp_color)
        line.append(f" {health}/{max_health}", style=hp_color)

        if location_name:
            line.append(" | ", style="dim")
            line.append(location_name, style="bold white")

        line.append(" | ", style="dim")
        count = len(items)
        line.append(f"{count} item{'s' if count != 1 else ''}", style="cyan")
        return line

    def render(self, health: int, max_health: int, location_name: str, items: tuple[str, ...] = ()) -> None:
        self.console.print(self.build(health, max_health, location_name, items))
