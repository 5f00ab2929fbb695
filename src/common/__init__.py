"""Shared helpers used across lockdiff modules."""
