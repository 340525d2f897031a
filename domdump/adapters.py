"""Adapters turning the values users hold into printable nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from docutils import nodes

from .const import COMMENT_NODE_NAME, TEXT_NODE_NAME

if TYPE_CHECKING:
    from collections.abc import Callable

    from .nodes import Node


class ElementHandle:
    """A lazily resolved reference to a node.

    Test harness queries hand these out; the node they point at may not exist, in
    which case :meth:`unwrap` returns ``None``.

    """

    @classmethod
    def of(cls, node: Node | None) -> ElementHandle:
        """Return a handle that always resolves to ``node``.

        :param node: The node to wrap, or ``None`` for a handle to nothing.

        :returns: A new handle.

        """
        return cls(lambda: node)

    def __init__(self, resolve: Callable[[], Node | None]) -> None:
        """Initialize the handle.

        :param resolve: Zero-argument callable returning the node or ``None``.

        """
        self._resolve = resolve

    def unwrap(self) -> Node | None:
        """Resolve the handle."""
        return self._resolve()


def is_node(value: Any) -> bool:
    """Return whether the value can be printed as a node directly."""
    return hasattr(value, "nodeName") and hasattr(value, "childNodes")


def is_handle(value: Any) -> bool:
    """Return whether the value is a handle that must be unwrapped first.

    Anything with an ``unwrap()`` method or a ``nativeElement`` attribute counts.

    """
    return callable(getattr(value, "unwrap", None)) or hasattr(value, "nativeElement")


def unwrap(target: Any) -> Node | None:
    """Return the node behind a node or handle.

    :param target: A node, a handle or ``None``.

    :returns: The node, or ``None`` if the handle resolves to nothing.

    :raises TypeError: If ``target`` is neither a node nor a handle.

    """
    if target is None or is_node(target):
        return target
    if is_handle(target):
        unwrap_method = getattr(target, "unwrap", None)
        if callable(unwrap_method):
            return unwrap_method()
        return target.nativeElement
    msg = f"Cannot print {type(target).__name__!r}; expected a node or an element handle"
    raise TypeError(msg)


def _attribute_value(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


class DocutilsNode:
    """A docutils node viewed through the DOM node interface."""

    def __init__(self, node: nodes.Node) -> None:
        """Initialize the adapter.

        :param node: The docutils node to wrap.

        """
        self.node = node

    def __repr__(self) -> str:
        """Return a representation of the wrapped node."""
        return f"<DocutilsNode {self.nodeName!r}>"

    @property
    def nodeName(self) -> str:  # noqa: N802
        """Return ``#text``, ``#comment`` or the docutils tag name."""
        if isinstance(self.node, nodes.Text):
            return TEXT_NODE_NAME
        if isinstance(self.node, nodes.comment):
            return COMMENT_NODE_NAME
        return self.node.tagname

    @property
    def nodeValue(self) -> str | None:  # noqa: N802
        """Return the text of text and comment nodes."""
        if isinstance(self.node, (nodes.Text, nodes.comment)):
            return self.node.astext()
        return None

    @property
    def childNodes(self) -> list[DocutilsNode]:  # noqa: N802
        """Return the wrapped children; text and comment nodes have none."""
        if isinstance(self.node, (nodes.Text, nodes.comment)):
            return []
        return [DocutilsNode(child) for child in self.node.children]  # type: ignore[attr-defined]

    def getAttribute(self, name: str) -> str | None:  # noqa: N802
        """Return an attribute rendered as a string."""
        value = self.node.attributes.get(name)  # type: ignore[attr-defined]
        return None if value is None else _attribute_value(value)

    def getAttributeNames(self) -> list[str]:  # noqa: N802
        """Return the names of the non-empty attributes, sorted."""
        if isinstance(self.node, nodes.Text):
            return []
        return sorted(k for k, v in self.node.attributes.items() if v)  # type: ignore[attr-defined]


def from_docutils(node: nodes.Node) -> DocutilsNode:
    """Wrap a docutils node so it can be printed.

    :param node: The docutils node, usually a ``nodes.document``.

    :returns: The wrapped node.

    """
    return DocutilsNode(node)
