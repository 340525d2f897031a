"""domdump Test Suite."""

from pathlib import Path

from domdump import ColorScheme

TEST_FILES = Path(__file__).parent / "test_files"


def fake_hex(color):
    """Return a colorizer marking text with ``color`` so tests can see it."""
    return lambda text: f"[{color}]{text}[/]"


FAKE_SCHEME = ColorScheme.from_hex(fake_hex)


def nested(tag, depth):
    """Return a chain of ``depth`` elements, each the only child of the previous."""
    from domdump import Element

    node = Element(tag)
    for _ in range(depth - 1):
        node = Element(tag, children=[node])
    return node
