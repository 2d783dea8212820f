import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = ("plain", "json", "rich")

_console = Console()

def set_output_mode(mode: str) -> bool:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
        return True
    return False

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_book_list(books: List[Any]) -> None:
    """Print the book catalog in the current output mode.
    - plain: 'Title: t, Author: a, ISBN: i, Available: Yes|No' lines, or 'No books available!'
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books available!")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Available", justify="center")
        for b in books:
            status = "[green]Yes[/]" if b.available else "[red]No[/]"
            table.add_row(escape(b.title), escape(b.author), escape(b.isbn), status)
        _console.print(table)
    else:
        for b in books:
            print(str(b))

def print_user_list(users: List[Any]) -> None:
    """Print library members in the current output mode."""
    mode = get_output_mode()

    if not users:
        print("No users available!")
        return

    if mode == "json":
        print(json.dumps([u.to_dict() for u in users], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👥 Users", show_lines=True, header_style="bold cyan")
        table.add_column("UserID", style="magenta", justify="right")
        table.add_column("Name", style="white")
        table.add_column("Role", style="cyan")
        for u in users:
            table.add_row(str(u.user_id), escape(u.name), u.role.label)
        _console.print(table)
    else:
        for u in users:
            print(str(u))

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics in the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {stats.get('total_books', 0)}\n"
            f"[bold]Checked Out:[/] {stats.get('checked_out_books', 0)}\n"
            f"[bold]Unique Authors:[/] {stats.get('unique_authors', 0)}\n"
            f"[bold]Users:[/] {stats.get('total_users', 0)} "
            f"({stats.get('students', 0)} students, {stats.get('faculty', 0)} faculty)"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {stats.get('total_books', 0)}")
        print(f"Checked Out: {stats.get('checked_out_books', 0)}")
        print(f"Unique Authors: {stats.get('unique_authors', 0)}")
        print(f"Total Users: {stats.get('total_users', 0)}")
