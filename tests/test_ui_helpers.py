import pytest

from library_catalog.errors import InvalidInput
from library_catalog.library import Library
from library_catalog.utils.ui_helpers import (
    get_output_mode,
    print_books_result,
    print_readers_result,
    set_output_mode,
    truncate,
)
from library_catalog.utils.validators import IdValidator, TextValidator


def test_truncate_short_text_unchanged():
    assert truncate("Dune", 26) == "Dune"
    assert truncate("x" * 26, 26) == "x" * 26


def test_truncate_long_text():
    result = truncate("Приключения Шерлока Холмса и доктора Ватсона", 20)
    assert len(result) == 20
    assert result.endswith("...")


def test_set_output_mode_ignores_unknown_values():
    set_output_mode("json")
    assert get_output_mode() == "json"
    set_output_mode("yaml")
    assert get_output_mode() == "json"


def test_print_books_plain(capsys):
    lib = Library()
    lib.add_book("Dune", "Frank Herbert")
    print_books_result(lib.list_books())
    assert capsys.readouterr().out == "1 - Dune by Frank Herbert [Доступна]\n"


def test_print_books_empty(capsys):
    print_books_result([])
    assert "В библиотеке пока нет книг." in capsys.readouterr().out


@pytest.mark.parametrize("raw, expected", [("1", 1), (" 42 ", 42), ("007", 7), ("+1", 1), ("4294967295", 4294967295)])
def test_parse_id(raw, expected):
    assert IdValidator.parse_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "-1", "+", "++1", "1.0", "4294967296", "١٢", None])
def test_parse_id_rejects(raw):
    with pytest.raises(InvalidInput):
        IdValidator.parse_id(raw, "некорректный ID книги.")


def test_parse_id_uses_given_message():
    with pytest.raises(InvalidInput, match="некорректный ID читателя."):
        IdValidator.parse_id("x", "некорректный ID читателя.")


def test_text_validator():
    assert TextValidator.validate_title("Dune")
    assert not TextValidator.validate_title("   ")
    assert not TextValidator.validate_author(None)
    assert TextValidator.validate_name(" Иван ")


def test_rich_tables_show_markup_characters_literally(capsys):
    set_output_mode("rich")
    lib = Library()
    lib.add_book("[bold]Dune", "x [/]")
    lib.register_reader("[red]Anna")

    print_books_result(lib.list_books())
    print_readers_result(lib.list_readers())

    out = capsys.readouterr().out
    assert "[bold]Dune" in out
    assert "x [/]" in out
    assert "[red]Anna" in out
