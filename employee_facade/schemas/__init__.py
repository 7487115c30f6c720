"""Pydantic Schemas — employee values, create payload, and upstream envelope.

Invariants:
    - Schemas validate at system boundaries (inbound request, upstream response)
    - Employee values are frozen once decoded

Design Decisions:
    - Upstream field names (employee_name, ...) kept as aliases: the facade
      speaks the same JSON shape as the store it wraps
"""
