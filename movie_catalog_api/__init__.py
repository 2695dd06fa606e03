"""
Top‑level package for the Movie Catalog API.

This file makes ``movie_catalog_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``movie_catalog_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app`` and in the ``migrate`` command.
"""

__all__ = []
