"""Snapshot and assistant tuning constants.

Centralizes magic numbers and fixed strings used across the package.
"""

# Snapshot deadlines (seconds)
SNAPSHOT_DEADLINE_SECONDS = 2.0  # Outer budget for the whole snapshot
FETCHER_DEADLINE_SECONDS = 1.0  # Budget for each individual fetcher

# Cache configuration
SNAPSHOT_CACHE_TTL_SECONDS = 120.0
CACHE_MAX_ENTRIES = 1024  # In-memory store size before least recently used eviction

# Snapshot limits
TOP_ACCOUNTS_LIMIT = 5
TOP_CATEGORIES_LIMIT = 8
RECENT_TRANSACTIONS_LIMIT = 10

# Snapshot rendering
SNAPSHOT_SEPARATOR = " | "
SNAPSHOT_UNAVAILABLE = "Unavailable"

# Period used when the user's default period key cannot be resolved
FALLBACK_PERIOD_KEY = "current_month"

# Provider HTTP timeout (seconds)
PROVIDER_TIMEOUT_SECONDS = 60.0
