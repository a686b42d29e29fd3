"""Shared helpers: profile field access, rounding, logging."""
