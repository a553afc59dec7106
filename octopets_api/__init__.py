"""
Top‑level package for the Octopets listings API.

This file makes ``octopets_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``octopets_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
