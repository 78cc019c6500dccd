"""SERVEKIT

Support routines for a web-serving framework: context-path normalization,
optional-dependency presence checks, exception handler lookup by type
hierarchy, startup banner/version logging and small buffer/resource helpers.
"""

__all__ = ["__version__", "__released__"]
__version__ = "0.3.0"
__released__ = "2026-09-14T09:30:00Z"
