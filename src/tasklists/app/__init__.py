"""FastAPI application for the task list service."""
