"""Print node trees as indented, optionally colored, HTML-like text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from .adapters import unwrap
from .colors import ColorScheme, get_scheme
from .const import DEFAULT_MAX_DEPTH, INDENT, VOID_TAGS
from .exceptions import TreeDepthError
from .nodes import NodeKind, attribute_items, classify, is_element, is_text

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .nodes import Node


class PrintContext(NamedTuple):
    """Context for printing one level of the tree."""

    scheme: ColorScheme
    indentation: str = ""
    depth: int = 0
    nesting: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH

    @property
    def indent(self) -> str:
        """Return the leading whitespace for lines at this depth."""
        return self.indentation + INDENT * self.depth

    def nested(self) -> PrintContext:
        """Return the context for the children of the current node.

        :returns: New PrintContext one level deeper.

        """
        return self._replace(depth=self.depth + 1, nesting=self.nesting + 1)


def _render_attribute(name: str, value: str, scheme: ColorScheme) -> str:
    quoted = f'"{value}"'
    return f"{scheme.attr_name(name)}={scheme.attr_value(quoted)}"


def render_attributes(node: Node, scheme: ColorScheme | None = None) -> str:
    """Render the attributes of an element for its opening tag.

    Values are quoted but not escaped.

    :param node: The node whose attributes to render.
    :param scheme: Color scheme to use. Defaults to the active scheme.

    :returns: An empty string, or a leading space followed by ``name="value"`` pairs.

    """
    scheme = scheme or get_scheme()
    attributes = [
        _render_attribute(name, value, scheme) for name, value in attribute_items(node)
    ]
    return f" {' '.join(attributes)}" if attributes else ""


def _print_lines(node: Node, context: PrintContext) -> Iterator[str]:
    """Yield the lines of a node and its subtree.

    :param node: The node to print.
    :param context: Printing context.

    :returns: Iterator of printed lines.

    :raises TreeDepthError: If the tree is nested deeper than ``context.max_depth``.

    """
    if not is_element(node):
        return
    if context.nesting > context.max_depth:
        raise TreeDepthError(context.max_depth, node.nodeName)
    name = node.nodeName.lower()
    tag = context.scheme.tag(name)
    open_tag = f"{context.indent}<{tag}{render_attributes(node, context.scheme)}>"
    children = list(node.childNodes)
    if not children:
        if name in VOID_TAGS:
            yield f"{open_tag[:-1]} />"
        else:
            yield f"{open_tag}</{tag}>"
        return

    yield open_tag
    child_context = context.nested()
    for child in children:
        yield from _print_lines(child, child_context)
    text = [child.nodeValue or "" for child in children if is_text(child)]
    if text:
        yield f"{child_context.indent}{' '.join(text)}"
    yield f"{context.indent}</{tag}>"


def serialize(
    node: Node,
    level: int = 0,
    scheme: ColorScheme | None = None,
    *,
    indentation: str = "",
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[str]:
    """Print a node and its subtree as a list of lines.

    Text and comment nodes produce no lines of their own; the text of an element's
    direct text children is printed as one line after its child elements.

    :param node: The node to print.
    :param level: Nesting level of ``node``; each level indents by two spaces.
    :param scheme: Color scheme to use. Defaults to the active scheme.
    :param indentation: Prefix added before the indentation of every line.
    :param max_depth: Levels below ``node`` at which :class:`.TreeDepthError` is raised.

    :returns: List of printed lines.

    """
    context = PrintContext(
        scheme=scheme or get_scheme(),
        indentation=indentation,
        depth=level,
        max_depth=max_depth,
    )
    return list(_print_lines(node, context))


def print_html(
    target: Any,
    indentation: str = "",
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> str | None:
    """Print a node, or the node behind an element handle, as text.

    :param target: A node or an element handle.
    :param indentation: Prefix added before every line.
    :param max_depth: Nesting level at which :class:`.TreeDepthError` is raised.

    :returns: The printed tree, or ``None`` if the handle resolves to nothing.

    """
    node = unwrap(target)
    if node is None:
        return None
    lines = serialize(node, indentation=indentation, max_depth=max_depth)
    return "\n".join(line for line in lines if line)


def _iter_text(node: Node) -> Iterator[str]:
    kind = classify(node)
    if kind is NodeKind.TEXT:
        yield node.nodeValue or ""
    elif kind is NodeKind.ELEMENT:
        for child in node.childNodes:
            yield from _iter_text(child)


def text_content(target: Any) -> str | None:
    """Return the text of a node and its descendants, like DOM ``textContent``.

    A comment passed in directly returns its own data; comments below it are skipped.

    :param target: A node or an element handle.

    :returns: The concatenated text, or ``None`` if the handle resolves to nothing.

    """
    node = unwrap(target)
    if node is None:
        return None
    if classify(node) is NodeKind.COMMENT:
        return node.nodeValue or ""
    return "".join(_iter_text(node))
