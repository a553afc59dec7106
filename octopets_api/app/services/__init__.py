"""
Service layer.

Helpers with behaviour of their own that endpoints call into, kept
apart from the HTTP handlers.
"""
