# src/changelog_kit/observability/names.py

"""Standard metric names for changelog-kit observability.

Use these constants instead of hardcoded strings so every backend sees
the same series.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
PARSE_DURATION = "changelog_parse_duration"

# Counters
PARSE_REQUESTS_TOTAL = "changelog_parse_requests_total"
PARSE_ERRORS_TOTAL = "changelog_parse_errors_total"


# ============================================================================
# Content Metrics
# ============================================================================

# Gauges (size of the last parsed document)
TOKENS_EMITTED = "changelog_tokens_emitted"
RELEASES_PARSED = "changelog_releases_parsed"
