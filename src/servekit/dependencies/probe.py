"""Probes that decide whether an optional library is installed.

Probes never raise: anything that goes wrong while resolving a marker means
the library is treated as absent.
"""

import importlib
import importlib.util
import logging

logger = logging.getLogger(__name__)


def _split_marker(marker: str) -> tuple[str, str | None]:
    if ":" in marker:
        module, attribute = marker.split(":", 1)
        return module, attribute
    return marker, None


def marker_exists(marker: str) -> bool:
    """Return True if *marker* resolves in the running interpreter.

    Args:
        marker: A dotted module path (``"markdown"``), or a module and an
            attribute separated by a colon (``"jinja2:Environment"``).

    Returns:
        bool: True if the module can be found (and holds the attribute, when
        one is named); False otherwise.
    """
    module_name, attribute = _split_marker(marker)
    try:
        if attribute is None:
            return importlib.util.find_spec(module_name) is not None
        module = importlib.import_module(module_name)
        return hasattr(module, attribute)
    except Exception:  # pylint: disable=broad-except
        logger.debug("Probe for marker %s failed", marker, exc_info=True)
        return False
