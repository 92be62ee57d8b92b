"""Services Layer — async orchestration around the pure core.

Invariants:
    - Collaborators arrive through core.boundary_protocols, never imported concretely
    - Remote calls awaited strictly in sequence; no concurrent overlap per operation
"""
