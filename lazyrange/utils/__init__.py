"""Shared helpers: generalized invoke and timing utilities."""
