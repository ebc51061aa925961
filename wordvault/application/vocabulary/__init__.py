"""
Vocabulary bounded context - Application layer.

Use cases and services that keep the in-memory record set, the view cache
and the external backup consistent with the record store.
"""
