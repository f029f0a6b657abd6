"""Terminal rendering helpers."""
