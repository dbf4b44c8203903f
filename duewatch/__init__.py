"""duewatch: overdue status and severity for personal task lists."""

__version__ = "0.1.0"
