"""Constants for domdump."""

__version__ = "1.0.0"

TEXT_NODE_NAME = "#text"
COMMENT_NODE_NAME = "#comment"
# Elements that can't have children and are printed self-closed when empty.
VOID_TAGS = frozenset({"input", "br"})
INDENT = "  "
DEFAULT_MAX_DEPTH = 500
# Hex color ids per role, matching the VS Code dark theme HTML colors.
TAG_COLOR = "#569CD6"
ATTRIBUTE_NAME_COLOR = "#9CDCFE"
ATTRIBUTE_VALUE_COLOR = "#CE9178"
