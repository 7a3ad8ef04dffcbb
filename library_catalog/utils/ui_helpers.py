import json
import os
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

STATUS_AVAILABLE = "Доступна"
STATUS_BORROWED = "Выдана"

TITLE_WIDTH = 26
AUTHOR_WIDTH = 20
NAME_WIDTH = 37

NO_BOOKS_MESSAGE = "В библиотеке пока нет книг."
NO_READERS_MESSAGE = "Нет зарегистрированных читателей."

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"


def truncate(text: str, max_len: int) -> str:
    """Cut ``text`` to ``max_len`` characters, ending with '...' when shortened."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def book_status(book: Any) -> str:
    return STATUS_AVAILABLE if book.available else STATUS_BORROWED


def build_books_table(books: List[Any]) -> Table:
    table = Table(title="📚 Каталог книг", show_lines=True, header_style="bold cyan")
    table.add_column("ID", style="magenta", justify="right", no_wrap=True)
    table.add_column("Название", style="white", max_width=TITLE_WIDTH)
    table.add_column("Автор", style="white", max_width=AUTHOR_WIDTH)
    table.add_column("Статус", no_wrap=True)
    for book in books:
        status_style = "green" if book.available else "red"
        table.add_row(
            str(book.id),
            escape(truncate(book.title, TITLE_WIDTH)),
            escape(truncate(book.author, AUTHOR_WIDTH)),
            f"[{status_style}]{book_status(book)}[/]",
        )
    return table


def build_readers_table(readers: List[Any]) -> Table:
    table = Table(title="👥 Регистр читателей", show_lines=True, header_style="bold cyan")
    table.add_column("ID", style="magenta", justify="right", no_wrap=True)
    table.add_column("Имя", style="white", max_width=NAME_WIDTH)
    for reader in readers:
        table.add_row(str(reader.id), escape(truncate(reader.name, NAME_WIDTH)))
    return table


def print_books_result(books: List[Any], console: Optional[Console] = None) -> None:
    """Print books according to the current output mode.
    - plain: 'ID - Title by Author [status]' lines, or the empty-catalog message
    - json: JSON array in the on-disk book layout
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print(NO_BOOKS_MESSAGE)
        return

    if mode == "json":
        payload = [book.to_dict() for book in books]
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        (console or _console).print(build_books_table(books))
    else:
        for book in books:
            print(f"{book.id} - {book.title} by {book.author} [{book_status(book)}]")


def print_readers_result(readers: List[Any], console: Optional[Console] = None) -> None:
    """Print readers according to the current output mode."""
    mode = get_output_mode()

    if not readers:
        print(NO_READERS_MESSAGE)
        return

    if mode == "json":
        payload: List[Dict[str, Any]] = [reader.to_dict() for reader in readers]
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        (console or _console).print(build_readers_table(readers))
    else:
        for reader in readers:
            print(f"{reader.id} - {reader.name}")
