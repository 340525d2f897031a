"""domdump: Print HTML-like node trees for test failure diagnostics."""

from .adapters import ElementHandle, from_docutils, is_handle, is_node
from .colors import ColorScheme, get_scheme, reset_colors, try_init_colors
from .const import __version__
from .exceptions import DomdumpError, InputParseError, TreeDepthError
from .nodes import Comment, Element, NodeKind, Text, classify
from .printer import print_html, render_attributes, serialize, text_content
