"""
Pydantic schema definitions for API payloads.

Schemas are separated from the repositories to decouple the API
representation from persistence.
"""
