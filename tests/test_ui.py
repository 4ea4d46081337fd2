"""Tests for the rich console presentation layer."""

import io
from unittest.mock import patch

from rich.console import Console

from aurwalk.modules.aur import PackageRecord
from aurwalk.modules.ui import ConsoleUI


def make_ui():
    buf = io.StringIO()
    return ConsoleUI(Console(file=buf, color_system=None, width=120)), buf


RECORDS = [PackageRecord("foo", "Foo tool", "1.0-1", 3.5, 40), PackageRecord("foo-git", "Foo devel", "r10.abc-1", 0.2, 3)]


class TestConsoleUI:

    def test_confirm_assume_yes_does_not_prompt(self):
        ui, buf = make_ui()
        with patch("aurwalk.modules.ui.Confirm.ask") as ask:
            assert ui.confirm("Build foo?", assume_yes=True) is True
        ask.assert_not_called()
        assert "auto-confirmed" in buf.getvalue()

    def test_confirm_asks(self):
        ui, _ = make_ui()
        with patch("aurwalk.modules.ui.Confirm.ask", return_value=False):
            assert ui.confirm("Build foo?") is False

    def test_choose_valid_number(self):
        ui, buf = make_ui()
        with patch("aurwalk.modules.ui.Prompt.ask", return_value="2"):
            assert ui.choose(RECORDS).name == "foo-git"
        assert "Foo devel" in buf.getvalue()

    def test_choose_out_of_range(self):
        ui, buf = make_ui()
        with patch("aurwalk.modules.ui.Prompt.ask", return_value="7"):
            assert ui.choose(RECORDS) is None
        assert "Invalid selection: 7" in buf.getvalue()

    def test_choose_not_a_number(self):
        ui, _ = make_ui()
        with patch("aurwalk.modules.ui.Prompt.ask", return_value="foo"):
            assert ui.choose(RECORDS) is None

    def test_choose_empty_answer(self):
        ui, _ = make_ui()
        with patch("aurwalk.modules.ui.Prompt.ask", return_value=""):
            assert ui.choose(RECORDS) is None

    def test_cache_entries_with_total(self):
        ui, buf = make_ui()
        ui.show_cache_entries(["old-pkg"], "1.5 MiB")
        out = buf.getvalue()
        assert "old-pkg" in out
        assert "1.5 MiB" in out
