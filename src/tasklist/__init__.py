"""tasklist - a local, single-user task list."""

__version__ = "1.0.0"
