"""Supplier Directory API."""
