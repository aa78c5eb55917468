"""Rich terminal display manager."""
from __future__ import annotations

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from text_adventure.models.action import EventCategory, OutputEvent

CATEGORY_STYLES: dict[EventCategory, str] = {
    EventCategory.NARRATIVE: "italic yellow",
    EventCategory.SUCCESS: "bold green",
    EventCategory.ERROR: "bold red",
    EventCategory.INFO: "",
}

RULE = "═" * 43


class Display:
    def __init__(self, console: Console | None = None, width: int = 80):
        self.console = console or Console()
        self.width = width

    def show_title_screen(self) -> None:
        title = Text()
        title.append("Welcome to the Text-Based Adventure!\n", style="bold cyan")
        title.append(
            "\nYou are an adventurer seeking the legendary treasure hidden\n"
            "somewhere in these mystical lands. Your quest will take you\n"
            "through forests, villages, caves, and ancient towers.",
            style="dim",
        )
        self.console.print(Panel(title, border_style="cyan", box=box.DOUBLE, width=self.width))

    def show_help(self) -> None:
        actions = Table(title="Commands", box=box.SIMPLE, border_style="blue", show_edge=False)
        actions.add_column("Command", style="cyan bold", width=18)
        actions.add_column("Description")
        actions.add_row("go <direction>", "Move (north, south, east, west, in, out)")
        actions.add_row("look [item]", "Examine your location or a specific item")
        actions.add_row("take <item>", "Pick up an item")
        actions.add_row("drop <item>", "Drop an item from your inventory")
        actions.add_row("use <item>", "Use an item from your inventory")
        actions.add_row("inventory", "Check your inventory")
        actions.add_row("status", "Check your health and inventory")
        actions.add_row("help", "Display the command list")
        actions.add_row("quit", "Exit the game")
        self.console.print(actions)
        self.console.print("[dim]Your adventure begins now...[/dim]\n")

    def show_events(self, events: list[OutputEvent]) -> None:
        for event in events:
            self.console.print(Text(event.text, style=CATEGORY_STYLES.get(event.category, "")))

    def show_step(self, title: str) -> None:
        self.console.print()
        self.console.print(Text(f"─── {title} ───", style="bold magenta"))
        self.console.print()

    def show_command(self, command: str) -> None:
        self.console.print(Text(f"Command: {command}", style="dim"))

    def show_game_end(self, state: str) -> None:
        body = Text()
        if state == "won":
            body.append("★ VICTORY! ★\n", style="bold yellow")
            body.append("You have successfully completed your quest!\nThe legendary treasure is yours!")
            border = "yellow"
        elif state == "lost":
            body.append("☠ GAME OVER ☠\n", style="bold red")
            body.append("Your adventure has come to an unfortunate end.\nBetter luck next time, brave adventurer!")
            border = "red"
        else:
            body.append("Thanks for playing!")
            border = "cyan"
        self.console.print()
        self.console.print(Panel(body, border_style=border, box=box.DOUBLE, width=self.width))

    def get_input(self, prompt: str = "> ") -> str:
        return self.console.input(f"[bold cyan]{prompt}[/bold cyan]").strip()
