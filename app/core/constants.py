"""
app/core/constants.py

Application-wide fixed constants.

These are business rules that are part of the system's contract and are
NOT configurable via environment variables.
"""

# ── Scoring ────────────────────────────────────────────────────────────────────

#: Relevance scores are rounded to this many decimals for display.
RELEVANCE_SCORE_DECIMALS: int = 2

# ── User-facing messages ───────────────────────────────────────────────────────

#: Returned instead of internal error detail when ranking cannot complete.
SEARCH_UNAVAILABLE_MESSAGE: str = "Search is currently unavailable."

#: Returned when the caller omits the query or sends only whitespace.
QUERY_REQUIRED_MESSAGE: str = "Query parameter 'q' is required."
