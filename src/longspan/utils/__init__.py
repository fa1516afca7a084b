"""Shared helpers: overflow checks, error types, logging and formatting."""
