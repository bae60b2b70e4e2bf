"""Kanban-style task tracking API."""

__version__ = "0.1.0"
