"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Records and the review session
- Value Objects: Strongly-typed identifiers
- Domain Services: Normalization, scheduling and deduplication
"""
