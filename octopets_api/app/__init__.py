"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, errors, database),
``schemas`` (Pydantic payloads), ``repositories`` (storage backends
behind the ``ListingRepository`` protocol), ``services`` and ``api``
(routers).
"""

from .main import app, create_app  # noqa: F401
