"""Domain Types — employee bounds and upstream failure kinds.

Invariants:
    - Employee ids are opaque: assigned upstream, never parsed or generated here
    - Salary >= MIN_SALARY; MIN_AGE <= age <= MAX_AGE (enforced at the boundary)
    - All upstream failure modes encoded as an Enum — no raw string matching

Design Decisions:
    - Bounds as module constants: one source for schema validation and query defaults
    - str Enums: serialize to JSON log fields without custom encoders
"""

from enum import Enum


# ─── Bounds ──────────────────────────────────────────────────────

MIN_SALARY = 1
MIN_AGE = 16
MAX_AGE = 75

DEFAULT_TOP_EARNERS = 10


# ─── Enums ───────────────────────────────────────────────────────

class UpstreamFailure(str, Enum):
    """Why an upstream exchange produced no value."""
    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    MALFORMED = "malformed"
    UNEXPECTED = "unexpected"
