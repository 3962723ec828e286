"""Adapters around logging and external Unicode libraries."""
