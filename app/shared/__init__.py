"""Shared helpers used across layers (request context)."""
