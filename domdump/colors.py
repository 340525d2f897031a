"""Color functions used to decorate printed trees.

The active :class:`ColorScheme` starts out as the identity scheme, so printing never
depends on a terminal color library being importable. :func:`try_init_colors` swaps
in a ``yachalk`` backed scheme when it can. The scheme is replaced as a whole, so a
print call sees either every fallback or every color function, never a mix.

"""

from __future__ import annotations

import asyncio
import importlib
import logging
from functools import partial
from typing import TYPE_CHECKING, NamedTuple

from .const import ATTRIBUTE_NAME_COLOR, ATTRIBUTE_VALUE_COLOR, TAG_COLOR

if TYPE_CHECKING:
    from collections.abc import Callable

    Colorizer = Callable[[str], str]
    HexFactory = Callable[[str], Colorizer]

log = logging.getLogger(__name__)


def _identity(value: str) -> str:
    return value


class ColorScheme(NamedTuple):
    """The color function for each part of a printed tag."""

    tag: Colorizer
    attr_name: Colorizer
    attr_value: Colorizer

    @classmethod
    def from_hex(cls, hex_factory: HexFactory) -> ColorScheme:
        """Build a scheme from a factory mapping a hex color id to a colorizer.

        :param hex_factory: Callable such as ``yachalk.chalk.hex``.

        :returns: A scheme with one colorizer per role.

        """
        return cls(
            tag=hex_factory(TAG_COLOR),
            attr_name=hex_factory(ATTRIBUTE_NAME_COLOR),
            attr_value=hex_factory(ATTRIBUTE_VALUE_COLOR),
        )


IDENTITY_SCHEME = ColorScheme(_identity, _identity, _identity)

_scheme = IDENTITY_SCHEME
_colors_loaded = False
_colors_forced = False


def _load_chalk_hex(force: bool = False) -> HexFactory:
    yachalk = importlib.import_module("yachalk")
    if force:
        # The shared chalk turns itself off when stdout is not a terminal.
        return yachalk.ChalkFactory(yachalk.ColorMode.FullTrueColor).hex
    return yachalk.chalk.hex


def colors_enabled() -> bool:
    """Return whether a color scheme has been loaded."""
    return _colors_loaded


def get_scheme() -> ColorScheme:
    """Return the active color scheme."""
    return _scheme


def reset_colors() -> None:
    """Restore the identity scheme."""
    global _scheme, _colors_loaded, _colors_forced  # noqa: PLW0603
    _scheme = IDENTITY_SCHEME
    _colors_loaded = False
    _colors_forced = False


async def try_init_colors(
    loader: Callable[[], HexFactory] | None = None, *, force: bool = False
) -> bool:
    """Try to load the color backend and activate its scheme.

    Calling this again after a successful load does nothing, unless ``force`` asks for
    colors the earlier load did not force. A failed load is logged and leaves the
    identity scheme active, so later prints are simply uncolored.

    :param loader: Callable returning a hex color factory. Defaults to importing
        ``yachalk`` and using ``chalk.hex``. It is run in the loop's default executor.
    :param force: Emit true color codes even when stdout is not a terminal. Only used
        by the default loader.

    :returns: ``True`` if colors are active afterwards.

    """
    global _scheme, _colors_loaded, _colors_forced  # noqa: PLW0603
    if _colors_loaded and (_colors_forced or not force):
        return True
    loop = asyncio.get_running_loop()
    try:
        hex_factory = await loop.run_in_executor(
            None, loader or partial(_load_chalk_hex, force)
        )
        scheme = ColorScheme.from_hex(hex_factory)
    except Exception as error:  # noqa: BLE001
        log.warning(
            "Could not load the color backend in the current environment. domdump"
            " will work, but printed trees will not be colored. Internal error: %r",
            error,
        )
        return False
    _scheme = scheme
    _colors_loaded = True
    _colors_forced = force
    log.debug("Color scheme loaded: %s", scheme)
    return True
