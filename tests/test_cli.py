"""Tests for the console command loop. Sessions are scripted through StringIO."""

import io
import sys

from cli.__main__ import main, run
from cli.menu import load_menu
from contactbook.application import ContactService
from contactbook.infrastructure import FlatFileContactStorage, InMemoryContactRepository


def _service(path) -> ContactService:
    return ContactService(
        repository=InMemoryContactRepository(),
        storage=FlatFileContactStorage(path),
    )


def _session(service: ContactService, *lines: str) -> tuple[int, str]:
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    code = run(service, load_menu(), stdin, stdout)
    return code, stdout.getvalue()


def test_menu_shown_and_exit_saves(tmp_path) -> None:
    path = tmp_path / "contacts.txt"
    code, out = _session(_service(path), "4")
    assert code == 0
    assert "Contact Manager\n1. Add Contact\n2. Search Contact\n3. List Contacts\n4. Save and Exit\n" in out
    assert "Choose option: " in out
    assert out.rstrip().endswith("Contacts saved. Goodbye!")
    assert path.exists()
    assert path.read_text(encoding="utf-8") == ""


def test_add_then_search_other_casing(tmp_path) -> None:
    code, out = _session(
        _service(tmp_path / "contacts.txt"),
        "1", "Ana", "555-1234", "ana@x.com",
        "2", "ANA",
        "4",
    )
    assert code == 0
    assert "Enter name: Enter phone: Enter email: Contact added." in out
    assert "Enter name to search: Name: Ana, Phone: 555-1234, Email: ana@x.com" in out


def test_add_with_empty_field_is_rejected(tmp_path) -> None:
    service = _service(tmp_path / "contacts.txt")
    _, out = _session(service, "1", "Ana", "   ", "ana@x.com", "3", "4")
    assert "All fields are required." in out
    assert "No contacts." in out
    assert service.list_contacts() == []


def test_search_not_found(tmp_path) -> None:
    _, out = _session(_service(tmp_path / "contacts.txt"), "2", "Nobody", "4")
    assert "Contact not found." in out


def test_list_contacts(tmp_path) -> None:
    _, out = _session(
        _service(tmp_path / "contacts.txt"),
        "3",
        "1", "Ana", "1", "a@x.com",
        "1", "Bob", "2", "b@x.com",
        "3",
        "4",
    )
    assert "No contacts." in out
    assert "Contacts:\n" in out
    assert "Name: Ana, Phone: 1, Email: a@x.com\n" in out
    assert "Name: Bob, Phone: 2, Email: b@x.com\n" in out


def test_invalid_option_returns_to_menu(tmp_path) -> None:
    _, out = _session(_service(tmp_path / "contacts.txt"), "9", "", "add", "4")
    assert out.count("Invalid option, try again.") == 3
    assert out.count("Choose option: ") == 4


def test_option_surrounding_whitespace_ignored(tmp_path) -> None:
    _, out = _session(_service(tmp_path / "contacts.txt"), " 3 ", "4")
    assert "No contacts." in out
    assert "Invalid option" not in out


def test_exit_writes_contacts_file(tmp_path) -> None:
    path = tmp_path / "contacts.txt"
    _session(_service(path), "1", "Ana", "555-1234", "ana@x.com", "4")
    assert path.read_text(encoding="utf-8") == "Ana,555-1234,ana@x.com\n"


def test_save_failure_reported_and_still_exits(tmp_path) -> None:
    code, out = _session(_service(tmp_path), "1", "Ana", "1", "a@x.com", "4")
    assert code == 0
    assert "Error saving contacts: " in out
    assert out.rstrip().endswith("Contacts saved. Goodbye!")


def test_end_of_input_saves_and_exits(tmp_path) -> None:
    path = tmp_path / "contacts.txt"
    code, out = _session(_service(path), "1", "Ana", "1", "a@x.com")
    assert code == 0
    assert "Contacts saved. Goodbye!" in out
    assert path.read_text(encoding="utf-8") == "Ana,1,a@x.com\n"


def test_end_of_input_mid_add_discards_partial_contact(tmp_path) -> None:
    path = tmp_path / "contacts.txt"
    code, _ = _session(_service(path), "1", "Ana")
    assert code == 0
    assert path.read_text(encoding="utf-8") == ""


def test_main_loads_existing_file_and_saves_back(tmp_path, monkeypatch) -> None:
    path = tmp_path / "contacts.txt"
    path.write_text("Ana,555-1234,ana@x.com\nnot a contact\n", encoding="utf-8")
    stdout = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\nana\n4\n"))
    monkeypatch.setattr(sys, "stdout", stdout)

    assert main(path) == 0

    out = stdout.getvalue()
    assert "Name: Ana, Phone: 555-1234, Email: ana@x.com" in out
    assert path.read_text(encoding="utf-8") == "Ana,555-1234,ana@x.com\n"


def test_main_starts_with_non_utf8_file(tmp_path, monkeypatch) -> None:
    path = tmp_path / "contacts.txt"
    path.write_bytes(b"Jos\xe9,1,j@x.com\nAna,2,a@x.com\n")
    stdout = io.StringIO()
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n4\n"))
    monkeypatch.setattr(sys, "stdout", stdout)

    assert main(path) == 0

    out = stdout.getvalue()
    assert "Name: Ana, Phone: 2, Email: a@x.com" in out
    assert "Phone: 1, Email: j@x.com" in out


def test_required_fields_message_comes_from_menu(tmp_path) -> None:
    menu = load_menu()
    menu["messages"]["required_fields"] = "Name, phone and email please."
    stdin = io.StringIO("1\nAna\n\nana@x.com\n4\n")
    stdout = io.StringIO()
    run(_service(tmp_path / "contacts.txt"), menu, stdin, stdout)
    out = stdout.getvalue()
    assert "Name, phone and email please." in out
    assert "All fields are required." not in out
