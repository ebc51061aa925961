"""wordvault - personal vocabulary store with spaced-repetition review."""

__version__ = "0.1.0"
