"""Main entrypoint for domdump."""

from __future__ import annotations

import asyncio
import sys
from contextlib import nullcontext
from functools import partial
from typing import TYPE_CHECKING, Any
from xml.dom import minidom
from xml.parsers.expat import ExpatError

import click
from docutils import utils
from docutils.frontend import get_default_settings
from docutils.parsers import rst

from . import __version__
from .adapters import from_docutils
from .colors import reset_colors, try_init_colors
from .exceptions import DomdumpError, InputParseError
from .printer import print_html

if TYPE_CHECKING:
    from click import Context

    from .nodes import Node

echo = partial(click.secho, err=True)


def _count(value: int, noun: str) -> str:
    return f"{value:,} {noun}" if value == 1 else f"{value:,} {noun}s"


class Reporter:
    """Reports dump progress and failures on stderr.

    Failures are always shown. Everything else depends on the verbosity level: the
    summary of a clean run at 1, each file as it is read at 2 and each parsed tree at 3.

    """

    def __init__(self, level: int = 0):
        """Initialize the reporter.

        :param level: Verbosity level, -1 for quiet.

        """
        self.level = level
        self.dumped_count = 0
        self.error_count = 0

    def _echo(self, message: str, level: int, **style: Any):
        if self.level >= level:
            echo(message, **style)
            sys.stderr.flush()
            sys.stdout.flush()

    def colors_unavailable(self):
        """Report that the color backend could not be loaded."""
        self._echo("Colors are unavailable, output will not be colored.", 1)

    def dumping(self, file: str):
        """Report that a file is being read.

        :param file: Path to the file, or ``-``.

        """
        self._echo(f"Dumping {file}", 2)

    def parsed(self, file: str, input_type: str, node: Node):
        """Report the root node a file parsed to.

        :param file: Path to the file, or ``-``.
        :param input_type: The parser used.
        :param node: The root node that will be printed.

        """
        self._echo(f"Parsed {file} as {input_type}: {node!r}", 3, fg="blue")

    def dumped(self):
        """Count a file that was printed."""
        self.dumped_count += 1

    def failed(self, error: Exception):
        """Report a file that could not be read or parsed.

        :param error: The error raised while reading or parsing.

        """
        self.error_count += 1
        self._echo(str(error), -1, fg="red")

    def summary(self, total: int) -> int:
        """Report the outcome of the run.

        :param total: Number of files the run was asked to dump.

        :returns: The exit code, 1 if any file failed.

        """
        if self.error_count:
            self._echo(
                f"Done, but {_count(self.error_count, 'error')} occurred"
                f" ({self.dumped_count} of {_count(total, 'file')} dumped).",
                0,
                bold=True,
            )
            return 1
        self._echo(f"{_count(self.dumped_count, 'file')} dumped.", 1)
        return 0


def _normalize_whitespace(node: minidom.Node) -> None:
    """Collapse whitespace in text nodes and drop the ones left empty.

    :param node: The minidom node to normalize in place.

    """
    for child in list(node.childNodes):
        if child.nodeType == child.TEXT_NODE:
            text = " ".join(child.data.split())
            if text:
                child.data = text
            else:
                node.removeChild(child)
        else:
            _normalize_whitespace(child)


def _parse_xml(file: str, text: str) -> Node:
    """Parse XML or XHTML into a DOM tree.

    :param file: Name of the file being parsed.
    :param text: Text content to parse.

    :returns: The document element.

    :raises InputParseError: If the text is not well-formed.

    """
    try:
        document = minidom.parseString(text)
    except ExpatError as error:
        raise InputParseError(file, str(error)) from None
    _normalize_whitespace(document)
    return document.documentElement


def _parse_rst(file: str, text: str) -> Node:
    """Parse reStructuredText into a docutils doctree.

    :param file: Name of the file being parsed.
    :param text: Text content to parse.

    :returns: The wrapped document node.

    :raises InputParseError: If docutils reports a severe error.

    """
    settings = get_default_settings(rst.Parser)
    settings.report_level = 5
    settings.halt_level = utils.Reporter.SEVERE_LEVEL
    settings.file_insertion_enabled = False
    document = utils.new_document(file, settings)
    try:
        rst.Parser().parse(text, document)
    except utils.SystemMessage as error:
        raise InputParseError(file, str(error)) from None
    return from_docutils(document)


PARSERS = {"rst": _parse_rst, "xml": _parse_xml}


def _dump_file(file: str, input_type: str) -> str:
    """Read, parse and print a single file.

    :param file: Path to the file, or ``-`` for standard input.
    :param input_type: Key into :data:`PARSERS`.

    :returns: The printed tree.

    """
    reporter.dumping(file)
    with (
        nullcontext(sys.stdin) if file == "-" else open(file, encoding="utf-8")
    ) as f:
        text = f.read()
    node = PARSERS[input_type](file, text)
    reporter.parsed(file, input_type, node)
    return print_html(node) or ""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--color/--no-color",
    default=None,
    help="Color tag and attribute names. Defaults to coloring when stdout is a tty.",
)
@click.option(
    "-t",
    "--input-type",
    default="xml",
    show_default=True,
    type=click.Choice(list(PARSERS)),
    help="How to parse the input files.",
)
@click.option(
    "-q",
    "--quiet",
    help=(
        "Don't emit non-error messages to stderr. Errors are still emitted; silence"
        " those with 2>/dev/null. Overrides --verbose."
    ),
    is_flag=True,
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help=(
        "Log information about each file being dumped. Can be specified multiple"
        " times for different levels of verbosity."
    ),
)
@click.version_option(version=__version__)
@click.argument("files", nargs=-1, type=str)
@click.pass_context
def main(
    context: Context,
    color: bool | None,
    input_type: str,
    quiet: bool,
    verbose: int,
    files: tuple[str, ...],
) -> None:
    """Print XML, XHTML or reStructuredText files as indented node trees.

    :param context: Click context containing command parameters.
    :param color: Whether to color the output.
    :param input_type: How to parse the input files ('xml' or 'rst').
    :param quiet: Whether to suppress non-error messages.
    :param verbose: Verbosity level.
    :param files: List of files to dump.

    """
    reporter.level = -1 if quiet else verbose
    reporter.dumped_count = reporter.error_count = 0
    files = files or ("-",)
    if color is None:
        color = sys.stdout.isatty()
        forced = False
    else:
        forced = color
    if color:
        if not asyncio.run(try_init_colors(force=forced)):
            reporter.colors_unavailable()
    else:
        reset_colors()

    for file in files:
        try:
            output = _dump_file(file, input_type)
        except (DomdumpError, OSError, UnicodeDecodeError) as error:
            reporter.failed(error)
            continue
        if reporter.dumped_count:
            click.echo()
        click.echo(output, color=color)
        reporter.dumped()

    context.exit(reporter.summary(len(files)))


reporter = Reporter(0)

if __name__ == "__main__":  # pragma: no cover
    main()
