"""
Infrastructure layer.

Adapters behind the application protocols: the SQLAlchemy record store,
the on-disk backup file and the FastAPI routes that expose the vocabulary
facade to the local UI.
"""
