"""Shared utilities: typed errors and logging helpers."""
