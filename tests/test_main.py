import subprocess
import sys

import pytest

from domdump.main import Reporter, main
from tests import TEST_FILES

TABLE_OUTPUT = (
    "<table>\n"
    '  <tr data-test="header-row">\n'
    "    <th>\n"
    "      Name\n"
    "    </th>\n"
    "  </tr>\n"
    '  <tr data-test="data-row">\n'
    "    <td>\n"
    "      Hans\n"
    "    </td>\n"
    "  </tr>\n"
    "</table>\n"
)

FORM_OUTPUT = (
    '<form action="/search" method="get">\n'
    '  <label for="q">\n'
    "    Search\n"
    "  </label>\n"
    '  <input id="q" type="text" name="q" />\n'
    "  <br />\n"
    '  <button type="submit"></button>\n'
    "</form>\n"
)


def test_call():
    result = subprocess.run(
        [sys.executable, "-m", "domdump", "-q", "--no-color", str(TEST_FILES / "table.xhtml")],
        capture_output=True,
        universal_newlines=True,
    )
    assert result.returncode == 0
    assert result.stdout == TABLE_OUTPUT


@pytest.mark.parametrize(
    "file,expected",
    [("tests/test_files/table.xhtml", TABLE_OUTPUT), ("tests/test_files/form.xhtml", FORM_OUTPUT)],
)
def test_dump_xml(runner, file, expected):
    result = runner.invoke(main, args=["-q", "--no-color", file])
    assert result.exit_code == 0
    assert result.output == expected


def test_multiple_files(runner):
    args = ["-q", "tests/test_files/table.xhtml", "tests/test_files/form.xhtml"]
    result = runner.invoke(main, args=args)
    assert result.exit_code == 0
    assert result.output == f"{TABLE_OUTPUT}\n{FORM_OUTPUT}"


def test_summary(runner):
    result = runner.invoke(main, args=["-v", "tests/test_files/table.xhtml"])
    assert result.exit_code == 0
    assert "1 file dumped." in result.output


def test_stdin(runner):
    result = runner.invoke(main, args=["-q", "-"], input="<p><br/></p>")
    assert result.exit_code == 0
    assert result.output == "<p>\n  <br />\n</p>\n"


def test_stdin_by_default(runner):
    result = runner.invoke(main, args=["-q"], input="<span/>")
    assert result.exit_code == 0
    assert result.output == "<span></span>\n"


def test_parse_error(runner):
    result = runner.invoke(main, args=["tests/test_files/broken.xml"])
    assert result.exit_code == 1
    assert 'File "tests/test_files/broken.xml"' in result.output
    assert "mismatched tag" in result.output
    assert "Done, but 1 error occurred (0 of 1 file dumped)." in result.output


def test_parse_error_continues(runner):
    args = ["tests/test_files/broken.xml", "tests/test_files/table.xhtml"]
    result = runner.invoke(main, args=args)
    assert result.exit_code == 1
    assert TABLE_OUTPUT in result.output
    assert "1 of 2 files dumped" in result.output


def test_missing_file(runner):
    result = runner.invoke(main, args=["tests/test_files/missing.xml"])
    assert result.exit_code == 1
    assert "missing.xml" in result.output


def test_errors_shown_when_quiet(runner):
    result = runner.invoke(main, args=["-q", "tests/test_files/broken.xml"])
    assert result.exit_code == 1
    assert "mismatched tag" in result.output
    assert "Done" not in result.output


def test_dump_rst(runner):
    result = runner.invoke(main, args=["-q", "-t", "rst", "tests/test_files/sample.rst"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].startswith("<document ")
    assert lines[1:] == [
        '  <section ids="title" names="title">',
        "    <title>",
        "      Title",
        "    </title>",
        "    <paragraph>",
        "      <emphasis>",
        "        text",
        "      </emphasis>",
        "      Some  .",
        "    </paragraph>",
        "  </section>",
        "</document>",
    ]


def test_color_unavailable(runner, monkeypatch):
    monkeypatch.setitem(sys.modules, "yachalk", None)
    result = runner.invoke(main, args=["-v", "--color", "tests/test_files/table.xhtml"])
    assert result.exit_code == 0
    assert "output will not be colored" in result.output
    assert TABLE_OUTPUT in result.output


def test_version(runner):
    from domdump import __version__

    result = runner.invoke(main, args=["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_forced_color(runner):
    result = runner.invoke(main, args=["-q", "--color", "tests/test_files/form.xhtml"])
    assert result.exit_code == 0
    assert "<\x1b[38;2;86;156;214mform" in result.output
    assert "\x1b[38;2;156;220;254maction" in result.output


def test_no_color(runner):
    result = runner.invoke(main, args=["-q", "--no-color", "tests/test_files/form.xhtml"])
    assert result.exit_code == 0
    assert "\x1b[" not in result.output


@pytest.mark.parametrize(
    "dumped,errors,total,exit_code,message",
    [
        (2, 0, 2, 0, "2 files dumped.\n"),
        (1, 0, 1, 0, "1 file dumped.\n"),
        (1, 1, 2, 1, "Done, but 1 error occurred (1 of 2 files dumped).\n"),
        (0, 3, 3, 1, "Done, but 3 errors occurred (0 of 3 files dumped).\n"),
    ],
)
def test_reporter_summary(capsys, dumped, errors, total, exit_code, message):
    reporter = Reporter(1)
    reporter.dumped_count = dumped
    reporter.error_count = errors
    assert reporter.summary(total) == exit_code
    assert capsys.readouterr().err == message


def test_reporter_failures_shown_when_quiet(capsys):
    reporter = Reporter(-1)
    reporter.dumping("a.xml")
    reporter.failed(OSError("a.xml: no such file"))
    assert reporter.error_count == 1
    assert capsys.readouterr().err == "a.xml: no such file\n"
