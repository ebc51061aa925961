"""Shared infrastructure: dependency helpers and common schemas."""
