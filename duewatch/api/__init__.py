"""HTTP API for duewatch."""
