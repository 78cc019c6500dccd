"""Support namespace for small, dependency-light helpers.

Scope:
- Small, stateless helpers used by the HTTP layer (context-path handling,
  body checksums, resource/file URL lookup, bind-error parsing).
- No orchestration, no logging configuration, no wiring.
- Organized by single-purpose modules (``paths.py``, ``checksum.py``,
  ``resources.py``, ``ports.py``) rather than one catch-all file.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
