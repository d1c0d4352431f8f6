"""Parallel render backends."""
