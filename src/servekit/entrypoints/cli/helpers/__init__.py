"""CLI helpers for servekit.

OSC-8 terminal hyperlinks when supported, message emitters that write to
stderr with emoji→ASCII fallbacks, and the NAME=LEVEL logger option parser.
"""

from .hyperlinks import hyperlink
from .messages import error, success, warn

__all__ = ["error", "hyperlink", "success", "warn"]
