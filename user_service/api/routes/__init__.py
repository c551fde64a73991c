"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain store queries (delegate to the repository)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
