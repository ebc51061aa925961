"""Vocabulary persistence, backup files and HTTP routes."""
