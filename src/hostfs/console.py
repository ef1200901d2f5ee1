"""Terminal output for the hostfs CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hostfs.types import EntryType, FileInfo, WalkEntry

_TYPE_STYLES = {
    EntryType.DIR: "bold blue",
    EntryType.SYMLINK: "cyan",
    EntryType.FILE: "",
    EntryType.OTHER: "magenta",
}


class Output:
    """Formats results and messages for the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. A new stdout console if omitted.
        """
        self.console = console or Console()

    def show_info_table(self, info: FileInfo) -> None:
        """Display metadata of a single entry.

        Args:
            info: Metadata to display.
        """
        table = Table(title=escape(info.path), show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value")

        table.add_row("Name", escape(info.name))
        table.add_row("Type", info.entry_type.value)
        table.add_row("Size", str(info.size))
        table.add_row("Mode", f"{info.mode:04o}")
        table.add_row("Modified", info.mod_time.isoformat())

        self.console.print(table)

    def show_entry(self, entry: WalkEntry, depth: int) -> None:
        """Print one walked entry, indented by depth."""
        style = _TYPE_STYLES[entry.entry_type]
        name = escape(entry.name)
        if style:
            name = f"[{style}]{name}[/{style}]"
        suffix = "/" if entry.is_dir() else ""
        self.console.print(f"{'  ' * depth}{name}{suffix}")

    def show_text(self, text: str) -> None:
        """Print raw text without markup or highlighting."""
        self.console.print(text, markup=False, highlight=False, end="")

    def show_lines(self, lines: list[str], numbered: bool = False) -> None:
        """Print lines, optionally prefixed with line numbers."""
        width = len(str(len(lines)))
        for number, line in enumerate(lines, start=1):
            prefix = f"{number:>{width}}  " if numbered else ""
            self.console.print(f"{prefix}{line}", markup=False, highlight=False)

    def show_value(self, value: str) -> None:
        """Print a single plain value."""
        self.console.print(value, markup=False, highlight=False)

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {escape(message)}")
