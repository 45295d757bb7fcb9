# tests/unit/cutlog_io/test_console.py
# Unit tests for console module functionality

from rich.console import Console

from cutlog.cutlog_io.console import configure_console, console, get_console, reset_console


class TestConsoleModule:

    # * Test global console proxy exists & forwards Console methods
    def test_console_instance_exists(self):
        assert hasattr(console, "print")
        assert callable(console.print)

    # * Test get_console returns underlying Console instance
    def test_get_console_returns_console_instance(self):
        result = get_console()
        assert isinstance(result, Console)
        assert result is console._get_console()

    def test_reset_console_creates_new_instance(self):
        original = console._get_console()
        new_console = reset_console()
        assert new_console is not original
        assert console._get_console() is new_console

    # * Recording console captures themed output as plain text
    def test_configure_console_record(self):
        configure_console(width=120, record=True)
        console.print("[cutlog.warn]Careful[/]")
        assert "Careful" in get_console().export_text()
        reset_console()

    def test_configure_without_args_keeps_console(self):
        current = console._get_console()
        assert configure_console() is current
