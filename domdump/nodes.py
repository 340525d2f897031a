"""Node classification and the tree types domdump prints.

Anything exposing the W3C DOM names ``nodeName``, ``childNodes`` and ``nodeValue``
can be printed. Element attributes are read either through ``getAttributeNames`` and
``getAttribute`` (DOM Level 4) or through an ``attributes`` mapping with ``items()``
(``xml.dom.minidom``).

"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from .const import COMMENT_NODE_NAME, TEXT_NODE_NAME

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


class Node(Protocol):
    """The shape of a printable tree node."""

    nodeName: str  # noqa: N815
    nodeValue: str | None  # noqa: N815

    @property
    def childNodes(self) -> Sequence[Node]:  # noqa: N802
        """Return the children in document order."""


class NodeKind(Enum):
    """The three kinds of node the printer distinguishes."""

    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


def classify(node: Node) -> NodeKind:
    """Classify a node by its name marker.

    Unknown markers are treated as elements.

    :param node: The node to classify.

    :returns: The kind of the node.

    """
    if node.nodeName == TEXT_NODE_NAME:
        return NodeKind.TEXT
    if node.nodeName == COMMENT_NODE_NAME:
        return NodeKind.COMMENT
    return NodeKind.ELEMENT


def is_element(node: Node) -> bool:
    """Return whether the node is an element."""
    return classify(node) is NodeKind.ELEMENT


def is_text(node: Node) -> bool:
    """Return whether the node is a text node."""
    return classify(node) is NodeKind.TEXT


def attribute_items(node: Node) -> list[tuple[str, str]]:
    """Return an element's attributes as ``(name, value)`` pairs in attribute order.

    :param node: The node to read attributes from.

    :returns: List of attribute pairs, empty for text and comment nodes.

    """
    if not is_element(node):
        return []
    get_names = getattr(node, "getAttributeNames", None)
    if get_names is not None:
        return [(name, node.getAttribute(name)) for name in get_names()]  # type: ignore[attr-defined]
    attributes = getattr(node, "attributes", None)
    if attributes is None:
        return []
    return list(attributes.items())


class Element:
    """An element node."""

    nodeValue = None  # noqa: N815

    def __init__(
        self,
        tag_name: str,
        attributes: dict[str, str] | Iterable[tuple[str, str]] | None = None,
        children: Iterable[Element | Text | Comment] | None = None,
    ) -> None:
        """Initialize the element.

        :param tag_name: The element's tag name.
        :param attributes: Attributes in the order they should be printed.
        :param children: Child nodes in document order.

        """
        self.tag_name = tag_name
        self.attributes: dict[str, str] = dict(attributes or {})
        self.children: list[Element | Text | Comment] = list(children or [])

    def __repr__(self) -> str:
        """Return a representation of the element."""
        return f"<Element {self.tag_name!r} ({len(self.children)} children)>"

    @property
    def nodeName(self) -> str:  # noqa: N802
        """Return the tag name."""
        return self.tag_name

    @property
    def childNodes(self) -> list[Element | Text | Comment]:  # noqa: N802
        """Return the children."""
        return self.children

    def append(self, child: Element | Text | Comment) -> Element:
        """Append a child node.

        :param child: The node to append.

        :returns: This element, to allow chaining.

        """
        self.children.append(child)
        return self

    def getAttribute(self, name: str) -> str | None:  # noqa: N802
        """Return the value of an attribute or ``None`` if it is not set."""
        return self.attributes.get(name)

    def getAttributeNames(self) -> list[str]:  # noqa: N802
        """Return the attribute names in order."""
        return list(self.attributes)


class _CharacterData:
    """A leaf node carrying a string, the base of text and comment nodes."""

    node_name: str

    def __init__(self, value: str) -> None:
        """Initialize the node.

        :param value: The text or comment data.

        """
        self.value = value

    def __repr__(self) -> str:
        """Return a representation of the node."""
        return f"<{self.__class__.__name__} {self.value!r}>"

    @property
    def nodeName(self) -> str:  # noqa: N802
        """Return the ``#text`` or ``#comment`` marker."""
        return self.node_name

    @property
    def nodeValue(self) -> str:  # noqa: N802
        """Return the data."""
        return self.value

    @property
    def childNodes(self) -> list[Any]:  # noqa: N802
        """Return no children; character data is always a leaf."""
        return []


class Text(_CharacterData):
    """A text node."""

    node_name = TEXT_NODE_NAME


class Comment(_CharacterData):
    """A comment node."""

    node_name = COMMENT_NODE_NAME
