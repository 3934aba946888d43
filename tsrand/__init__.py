"""Secure random integers, ranges, strings and UUIDs, with demo and benchmark commands."""

__version__ = "1.0.0"