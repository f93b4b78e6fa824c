# src/mdterm/observability/names.py

"""Standard metric names for mdterm observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "markdown_parse_duration"

# Counters
PARSE_TOTAL = "markdown_parse_total"
PARSE_LINES_RENDERED = "markdown_lines_rendered"

# Gauges
PARSE_HEADINGS_FOUND = "markdown_headings_found"


# ============================================================================
# Search Metrics
# ============================================================================

# Duration
SEARCH_DURATION = "markdown_search_duration"

# Counters
SEARCH_MATCHES = "markdown_search_matches"


# ============================================================================
# Loader Metrics
# ============================================================================

# Counters
FILES_LOADED_TOTAL = "markdown_files_loaded_total"
FILES_MISSING_TOTAL = "markdown_files_missing_total"
