from io import StringIO

from rich.console import Console as RichTerminal

from buildreport.console import BufferConsole, ConsoleColor, ConsoleLine, RichConsole


def _terminal(out: StringIO) -> RichTerminal:
    return RichTerminal(
        file=out, force_terminal=True, color_system="standard", width=20
    )


def test_buffer_console_records_color_per_line():
    console = BufferConsole()
    console.foreground_color = ConsoleColor.CYAN
    console.write_line("setup")
    console.write_line()
    console.reset_color()
    console.write_line("after")

    assert console.lines == [
        ConsoleLine(ConsoleColor.CYAN, "setup"),
        ConsoleLine(ConsoleColor.CYAN, ""),
        ConsoleLine(ConsoleColor.DEFAULT, "after"),
    ]
    assert console.resets == 1
    assert console.text() == "setup\n\nafter"


def test_rich_console_colors_lines():
    out = StringIO()
    console = RichConsole(_terminal(out))
    console.foreground_color = ConsoleColor.GREEN
    console.write_line("ok")

    # ANSI green foreground
    assert "\x1b[32m" in out.getvalue()
    assert "ok" in out.getvalue()


def test_rich_console_no_color():
    out = StringIO()
    console = RichConsole(_terminal(out), no_color=True)
    console.foreground_color = ConsoleColor.CYAN
    console.write_line("plain")

    assert out.getvalue() == "plain\n"


def test_rich_console_prints_text_literally():
    out = StringIO()
    console = RichConsole(RichTerminal(file=out, force_terminal=False, width=10))
    console.write_line("[red]:smile: https://example.com/a/very/long/path")

    assert out.getvalue() == "[red]:smile: https://example.com/a/very/long/path\n"


def test_rich_console_reset_color():
    console = RichConsole(RichTerminal(file=StringIO()))
    console.foreground_color = ConsoleColor.GRAY
    console.reset_color()

    assert console.foreground_color == ConsoleColor.DEFAULT
