"""HTTP interface for the task list service."""
