"""
Vocabulary bounded context - Domain layer.

This context handles vocabulary memorization:
- Word/meaning/example records
- Repair of legacy scheduling fields
- Spaced-repetition scheduling and review sessions

Entities:
- Record: A single vocabulary entry
- ReviewSession: The in-progress drill over due records
"""
