"""Infrastructure Layer — upstream HTTP client and cross-cutting concerns.

Invariants:
    - Every upstream call wrapped with timeout and failure normalization
    - Nothing in this layer raises transport exceptions to callers

Design Decisions:
    - Resilient wrapper over raw httpx client (single responsibility)
"""
