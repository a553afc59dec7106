"""
API package containing the HTTP routes.

``router`` aggregates the domain routers and is mounted by the
application under the ``/api`` prefix.  Shared FastAPI dependencies
live in ``deps``.
"""
