"""Shared helpers for tasklist."""
