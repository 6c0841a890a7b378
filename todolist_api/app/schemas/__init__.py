"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the dataclass entities in ``models`` so
that the API representation is decoupled from persistence.
"""
