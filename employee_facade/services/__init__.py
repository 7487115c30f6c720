"""Services Layer — facade operations over the upstream employee store.

Invariants:
    - Services depend on the EmployeeStore protocol, never on httpx
    - Typed errors raised only where a silent empty result would mislead

Design Decisions:
    - One service class for the whole facade (seven operations, one collaborator)
"""
