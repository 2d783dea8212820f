from typing import Callable, Dict, Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from catalog import InvalidUserTypeError, Library
from config import configure_logging, settings
from utils.ui_helpers import (
    OUTPUT_MODES,
    print_book_list,
    print_stats_result,
    print_user_list,
    set_output_mode,
)

APP_NAME = settings.app_name

console = Console(highlight=False)

app = typer.Typer(help="Library Management System CLI", add_completion=False)


def _ask(label: str) -> str:
    return Prompt.ask(label, console=console).strip()


def _read_choice(label: str = "Enter your choice") -> Optional[int]:
    """Read a menu number; report and return None on anything non-numeric."""
    raw = _ask(label)
    try:
        return int(raw)
    except ValueError:
        console.print("[yellow]Invalid input, try again.[/]")
        return None


def _ask_book_fields() -> tuple:
    title = _ask("Enter Title")
    author = _ask("Enter Author")
    isbn = _ask("Enter ISBN")
    return title, author, isbn


def _render_submenu(items) -> None:
    console.print()
    for key, label in items:
        console.print(f"{key}. {label}")


def _submenu(items, actions: Dict[int, Callable[[], None]]) -> None:
    """Loop over a sub-menu until its 'Back' entry (always 3) is chosen."""
    while True:
        _render_submenu(items)
        choice = _read_choice()
        if choice is None:
            continue
        if choice == 3:
            return
        action = actions.get(choice)
        if action:
            action()
        else:
            console.print("[yellow]Invalid option. Try again![/]")


# --- Book actions ---
def add_book(lib: Library) -> None:
    title, author, isbn = _ask_book_fields()
    lib.add_book(title, author, isbn)
    console.print("[green]Book added successfully![/]")


def list_books(lib: Library) -> None:
    print_book_list(lib.list_books())


# --- User actions ---
def add_user(lib: Library) -> None:
    selector = _ask("Enter 1 for Student, 2 for Faculty")
    name = _ask("Enter Name")
    try:
        user = lib.add_user(selector, name)
    except InvalidUserTypeError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        return
    console.print(f"[green]User added successfully! UserID: {user.user_id}[/]")


def list_users(lib: Library) -> None:
    print_user_list(lib.list_users())


# --- Transactions ---
def check_out(lib: Library) -> None:
    result = lib.check_out_book(*_ask_book_fields())
    console.print(escape(result.message), style="green" if result.ok else "yellow")


def check_in(lib: Library) -> None:
    result = lib.check_in_book(*_ask_book_fields())
    console.print(escape(result.message), style="green" if result.ok else "yellow")


def render_menu() -> None:
    menu_items = [
        ("1", "Manage Books"),
        ("2", "Manage Users"),
        ("3", "Manage Transactions"),
        ("4", "Exit"),
    ]

    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label in menu_items:
        table.add_row(f"{key}.", label)

    console.print(Panel(table, title=APP_NAME, border_style="cyan", box=box.HEAVY, padding=(0, 2)))


def run_menu(lib: Library) -> None:
    """Interactive menu for the library catalog."""
    while True:
        render_menu()
        choice = _read_choice()
        if choice is None:
            continue

        if choice == 1:
            _submenu(
                [(1, "Add Book"), (2, "List Books"), (3, "Back")],
                {1: lambda: add_book(lib), 2: lambda: list_books(lib)},
            )
        elif choice == 2:
            _submenu(
                [(1, "Add User"), (2, "List Users"), (3, "Back")],
                {1: lambda: add_user(lib), 2: lambda: list_users(lib)},
            )
        elif choice == 3:
            _submenu(
                [(1, "Check Out Book"), (2, "Check In Book"), (3, "Back")],
                {1: lambda: check_out(lib), 2: lambda: check_in(lib)},
            )
        elif choice == 4:
            console.print("Exiting program...")
            print_stats_result(lib.get_statistics())
            return
        else:
            console.print("[yellow]Invalid option. Try again![/]")


@app.command()
def main(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    version: bool = typer.Option(False, "--version", help="Show the version and exit."),
):
    """Run the interactive library menu."""
    if version:
        print(f"{APP_NAME} {settings.app_version}")
        raise typer.Exit()

    mode = output or settings.output_mode
    if not set_output_mode(mode):
        raise typer.BadParameter(f"must be one of: {', '.join(OUTPUT_MODES)}", param_hint="--output")

    configure_logging()
    lib = Library()
    try:
        run_menu(lib)
    except (EOFError, KeyboardInterrupt):
        console.print("\nExiting program...")
    finally:
        lib.close()


if __name__ == "__main__":
    app()
