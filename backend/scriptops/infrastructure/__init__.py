"""Infrastructure Layer — Google API clients, local files, console, logging.

Invariants:
    - Infrastructure never imports from services/
    - Each adapter satisfies one Protocol from core.boundary_protocols
"""
