import json

from utils.ui_helpers import (
    get_output_mode,
    print_book_list,
    print_stats_result,
    print_user_list,
    set_output_mode,
)


def test_set_output_mode_rejects_unknown():
    assert set_output_mode("rich") is True
    assert get_output_mode() == "rich"
    assert set_output_mode("xml") is False
    assert get_output_mode() == "rich"


def test_plain_book_list(lib, capsys):
    lib.add_book("Dune", "Frank Herbert", "1")
    lib.add_book("Emma", "Jane Austen", "2")
    lib.check_out_book("Emma", "Jane Austen", "2")

    print_book_list(lib.list_books())

    assert capsys.readouterr().out.splitlines() == [
        "Title: Dune, Author: Frank Herbert, ISBN: 1, Available: Yes",
        "Title: Emma, Author: Jane Austen, ISBN: 2, Available: No",
    ]


def test_empty_lists_in_every_mode(capsys):
    for mode in ("plain", "json", "rich"):
        set_output_mode(mode)
        print_book_list([])
        print_user_list([])
        out = capsys.readouterr().out
        assert "No books available!" in out
        assert "No users available!" in out


def test_json_user_list(lib, capsys):
    lib.add_user(1, "Alice")
    lib.add_user(2, "Bob")
    set_output_mode("json")

    print_user_list(lib.list_users())

    assert json.loads(capsys.readouterr().out) == [
        {"user_id": 1, "name": "Alice", "role": "Student"},
        {"user_id": 2, "name": "Bob", "role": "Faculty"},
    ]


def test_rich_book_table(lib, capsys):
    lib.add_book("Dune", "Frank Herbert", "9780441013593")
    set_output_mode("rich")

    print_book_list(lib.list_books())

    out = capsys.readouterr().out
    assert "Dune" in out
    assert "9780441013593" in out


def test_plain_stats(lib, capsys):
    lib.add_book("Dune", "Frank Herbert", "1")
    lib.add_user(1, "Alice")

    print_stats_result(lib.get_statistics())

    out = capsys.readouterr().out
    assert "Total Books: 1" in out
    assert "Total Users: 1" in out
