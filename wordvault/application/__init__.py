"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to the UI collaborator.

This layer contains:
- Use Cases: Save, delete, review, import/export and backup linking
- Services: View cache and backup synchronizer
- Ports: Protocols for the record store and backup target
"""
