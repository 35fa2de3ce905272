"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- No env var reads here (config-only).
- A failed connection stops the page; it never falls through to partial output.
"""
