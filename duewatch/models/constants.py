"""Constants for duewatch.

This module centralizes the fixed thresholds and defaults used throughout the application.
"""

# Overdue severity
SEVERE_OVERDUE_DAYS = 30  # Inclusive: 30 days overdue is severe

# Remote time authority
DEFAULT_TIME_AUTHORITY_TIMEOUT_SEC = 5
TIME_AUTHORITY_FIELD = "now"  # Epoch milliseconds
# 9999-12-31T00:00:00Z. One day short of datetime's limit so that reading the
# instant on any host's local calendar stays within year 9999.
MAX_EPOCH_MS = 253402214400000
