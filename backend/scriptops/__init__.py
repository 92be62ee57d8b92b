"""scriptops — Apps Script project tooling: function discovery and advanced-service toggles.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
