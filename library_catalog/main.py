import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from library_catalog import storage
from library_catalog.config import settings
from library_catalog.errors import CatalogFileError, LibraryError
from library_catalog.library import Library
from library_catalog.utils.ui_helpers import (
    NO_BOOKS_MESSAGE,
    NO_READERS_MESSAGE,
    build_books_table,
    build_readers_table,
    print_books_result,
    print_readers_result,
    set_output_mode,
)
from library_catalog.utils.validators import IdValidator, TextValidator

logger = logging.getLogger(__name__)

console = Console()

EXIT_CHOICE = "7"

MENU_ITEMS = [
    ("1", "Добавить новую книгу", "➕"),
    ("2", "Добавить нового читателя", "👤"),
    ("3", "Выдать книгу читателю", "📤"),
    ("4", "Вернуть книгу", "📥"),
    ("5", "Показать все книги", "📚"),
    ("6", "Показать всех читателей", "👥"),
    (EXIT_CHOICE, "Выйти из программы", "🚪"),
]


def configure_logging() -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.ERROR)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def load_library(path: str) -> Library:
    """Load the catalog from ``path``, falling back to an empty one.

    A missing file and a damaged file both start a new catalog, but the user
    is told which of the two happened.
    """
    try:
        library = storage.load(path)
    except FileNotFoundError:
        console.print("[yellow]Файл данных не найден. Создана новая библиотека.[/]")
        return Library()
    except (CatalogFileError, OSError) as e:
        console.print(f"[bold yellow]⚠️ Не удалось загрузить данные:[/] {escape(str(e))}")
        console.print("[yellow]Создана новая библиотека.[/]")
        return Library()
    console.print("[green]Данные библиотеки загружены.[/]")
    return library


def save_library(library: Library, path: str) -> bool:
    try:
        storage.save(library, path)
    except OSError as e:
        console.print(f"[bold red]Ошибка при сохранении данных:[/] {escape(str(e))}")
        return False
    console.print(f"[green]Данные успешно сохранены в '{escape(path)}'.[/]")
    return True


def ask(label: str) -> str:
    return Prompt.ask(label, console=console, default="", show_default=False).strip()


def print_error(message: str) -> None:
    console.print(f"[bold red]Ошибка:[/] {escape(message)}")


# --- Menu commands ---
def add_book(library: Library) -> None:
    """Prompt for title and author and add the book."""
    console.print("\n[bold]--- ДОБАВЛЕНИЕ НОВОЙ КНИГИ ---[/]")
    title = ask("Название книги")
    author = ask("Автор книги")

    if not (TextValidator.validate_title(title) and TextValidator.validate_author(author)):
        print_error("название и автор не могут быть пустыми.")
        return

    book = library.add_book(title, author)
    console.print(
        f"[green]Книга '{escape(book.title)}' (автор: {escape(book.author)}) добавлена. ID: {book.id}[/]"
    )


def register_reader(library: Library) -> None:
    console.print("\n[bold]--- РЕГИСТРАЦИЯ НОВОГО ЧИТАТЕЛЯ ---[/]")
    name = ask("Имя читателя")

    if not TextValidator.validate_name(name):
        print_error("имя не может быть пустым.")
        return

    reader = library.register_reader(name)
    console.print(f"[green]Читатель '{escape(reader.name)}' зарегистрирован. ID: {reader.id}[/]")


def borrow_book(library: Library) -> None:
    console.print("\n[bold]--- ВЫДАЧА КНИГИ ---[/]")
    try:
        book_id = IdValidator.parse_id(ask("ID книги"), "некорректный ID книги.")
        reader_id = IdValidator.parse_id(ask("ID читателя"), "некорректный ID читателя.")
        library.borrow_book(book_id, reader_id)
    except LibraryError as e:
        print_error(str(e))
        return
    console.print("[green]Книга успешно выдана.[/]")


def return_book(library: Library) -> None:
    console.print("\n[bold]--- ВОЗВРАТ КНИГИ ---[/]")
    try:
        book_id = IdValidator.parse_id(ask("ID книги"), "некорректный ID книги.")
        library.return_book(book_id)
    except LibraryError as e:
        print_error(str(e))
        return
    console.print("[green]Книга успешно возвращена.[/]")


def list_books(library: Library) -> None:
    books = library.list_books()
    if not books:
        console.print(f"[yellow]{NO_BOOKS_MESSAGE}[/]")
        return
    console.print(build_books_table(books))
    console.print(f"[dim]📊 Всего книг: {len(books)}[/]")


def list_readers(library: Library) -> None:
    readers = library.list_readers()
    if not readers:
        console.print(f"[yellow]{NO_READERS_MESSAGE}[/]")
        return
    console.print(build_readers_table(readers))
    console.print(f"[dim]👥 Всего читателей: {len(readers)}[/]")


COMMANDS = {
    "1": add_book,
    "2": register_reader,
    "3": borrow_book,
    "4": return_book,
    "5": list_books,
    "6": list_readers,
}


def render_menu() -> None:
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="bold cyan", width=4)
    table.add_column(justify="left", style="white")
    for key, label, icon in MENU_ITEMS:
        table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

    console.print(Panel(
        table,
        title="ОСНОВНОЕ МЕНЮ",
        border_style="cyan",
        box=box.HEAVY,
        padding=(1, 2),
    ))


def run_menu(data_file: Optional[str] = None) -> None:
    """Interactive menu: load the catalog, run commands, save on exit."""
    path = data_file or settings.data_file
    logger.debug("Starting menu with data file %s", path)
    library = load_library(path)

    console.print(Panel.fit(
        f"[bold]{escape(settings.app_name)}[/]\nСистема управления книжным фондом",
        border_style="cyan",
    ))

    try:
        while True:
            render_menu()
            try:
                choice = ask("Выберите действие")
                if choice == EXIT_CHOICE:
                    break
                command = COMMANDS.get(choice)
                if command is None:
                    console.print("[yellow]Неверный выбор. Пожалуйста, выберите пункт от 1 до 7.[/]")
                    continue
                command(library)
            except (EOFError, KeyboardInterrupt):
                # input closed or interrupted: leave the loop and still save
                break
    finally:
        console.print("\n[bold]Завершение работы...[/]")
        save_library(library, path)
        console.print("[green]До свидания![/]")


# --- Typer CLI application ---
app = typer.Typer(help="Библиотека: учёт книг и читателей", add_completion=False)


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Формат вывода: plain | json | rich (по умолчанию: plain)",
    ),
):
    """Без подкоманды запускает интерактивное меню."""
    configure_logging()
    if output:
        set_output_mode(output)
    if ctx.invoked_subcommand is None:
        run_menu()


def _load_for_listing() -> Library:
    try:
        return storage.load(settings.data_file)
    except FileNotFoundError:
        return Library()
    except (CatalogFileError, OSError) as e:
        print(f"Ошибка: {e}")
        raise typer.Exit(code=1)


@app.command("books")
def cli_books():
    """Показать все книги (только чтение)."""
    print_books_result(_load_for_listing().list_books())


@app.command("readers")
def cli_readers():
    """Показать всех читателей (только чтение)."""
    print_readers_result(_load_for_listing().list_readers())


if __name__ == "__main__":
    app()
