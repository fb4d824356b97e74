"""Tests for Rich Console factory and theme."""

from io import StringIO

from baconctl.output.console import BACON_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bacon.actor]Kevin Bacon[/bacon.actor]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "Kevin Bacon" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_highlight_disabled(self) -> None:
        console = create_console()
        console.print("separation=42")
        assert "\x1b" not in get_output(console)


class TestGetOutput:
    def test_extracts_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("hello world")
        assert "hello world" in get_output(console)

    def test_empty_console(self) -> None:
        assert get_output(create_console()) == ""


class TestTheme:
    def test_defines_game_styles(self) -> None:
        for name in ("bacon.ok", "bacon.error", "bacon.actor", "bacon.center", "bacon.movie"):
            assert name in BACON_THEME.styles
