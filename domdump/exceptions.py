"""Exceptions for domdump."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class DomdumpError(Exception):
    """Base exception class for domdump."""


class TreeDepthError(DomdumpError, RecursionError):
    """The tree is nested deeper than the printer allows.

    This almost always means the tree contains a cycle.

    """

    def __init__(self, max_depth: int, node_name: str) -> None:
        """Initialize the error.

        :param max_depth: The depth limit that was exceeded.
        :param node_name: Name of the node that was being printed.

        """
        self.max_depth = max_depth
        self.node_name = node_name
        super().__init__(str(self))

    def __str__(self) -> str:
        """Return a string representation of the error."""
        return (
            f"Tree is nested deeper than {self.max_depth} levels at <{self.node_name}>;"
            " the tree may contain a cycle."
        )


class InputParseError(DomdumpError, ValueError):
    """An error that occurred while parsing an input file."""

    @property
    def error_message(self) -> str:
        """Return a formatted error message."""
        return f'Error: File "{self.file}":\n{self.message}'

    def __init__(self, file: Path | str, message: str) -> None:
        """Initialize an input parse error.

        :param file: The file that failed to parse.
        :param message: The error message.

        """
        self.file = file
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """Return a string representation of the error."""
        return self.error_message
