"""Employee Facade Package — id-keyed employee API over a name-keyed upstream store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
