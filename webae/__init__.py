"""webae Application Package — Metadata REST API and form schema catalog.

Invariants:
    - Package root defines only __version__ and SERVICE_NAME (import side-effects prohibited)

Design Decisions:
    - Minimal __init__.py: explicit imports only, no star exports
"""

__version__ = "1.0.0"
SERVICE_NAME = "webae-api"
